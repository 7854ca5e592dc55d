"""
Tests for numpy state snapshots.
"""

import numpy as np
import pytest

from shambo.arena_core.config_loader import ArenaConfig
from shambo.arena_core.generation import generate_objects_from_seed
from shambo.arena_core.objects import ObjectType
from shambo.arena_core.state_snapshot import SnapshotBuilder


@pytest.fixture
def arena():
    return ArenaConfig(width=800, height=600, object_radius=15, objects_per_type=5)


@pytest.fixture
def builder(arena):
    return SnapshotBuilder(arena)


class TestSnapshot:
    """Test snapshot contents."""

    def test_array_shapes_and_dtypes(self, builder, arena):
        objects = generate_objects_from_seed(42, arena)
        snapshot = builder.build(objects, elapsed_time=1.5, status="running")

        assert snapshot.object_count == 15
        assert snapshot.obj_type_id.dtype == np.int8
        assert snapshot.obj_x.dtype == np.float32
        for array in (snapshot.obj_type_id, snapshot.obj_x, snapshot.obj_y,
                      snapshot.obj_vx, snapshot.obj_vy, snapshot.obj_radius):
            assert array.shape == (15,)

    def test_values_follow_population(self, builder, arena):
        objects = generate_objects_from_seed(42, arena)
        snapshot = builder.build(objects)

        assert snapshot.obj_type_id.tolist() == [0] * 5 + [1] * 5 + [2] * 5
        np.testing.assert_allclose(snapshot.obj_x, [o.x for o in objects], rtol=1e-6)
        np.testing.assert_allclose(snapshot.obj_vy, [o.vy for o in objects], rtol=1e-5)
        assert snapshot.counts[ObjectType.PAPER] == 5

    def test_empty_population(self, builder):
        snapshot = builder.build([])

        assert snapshot.object_count == 0
        assert snapshot.obj_x.shape == (0,)
        assert snapshot.counts == {t: 0 for t in ObjectType}

    def test_to_dict(self, builder, arena):
        snapshot = builder.build(generate_objects_from_seed(1, arena), 2.0, "timeout")
        data = snapshot.to_dict()

        assert data["status"] == "timeout"
        assert data["arena_width"] == 800
        assert data["counts"] == {"rock": 5, "paper": 5, "scissors": 5}
        assert len(data["objects"]["x"]) == 15
        assert isinstance(data["objects"]["type_id"][0], int)
