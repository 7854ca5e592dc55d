"""
Tests for the physics engine population container.
"""

import pytest

from shambo.arena_core.config_loader import ArenaConfig
from shambo.arena_core.engine import PhysicsEngine
from shambo.arena_core.generation import generate_objects_from_seed
from shambo.arena_core.objects import GameObject, ObjectType


@pytest.fixture
def arena():
    return ArenaConfig(width=800, height=600, object_radius=15, objects_per_type=5)


@pytest.fixture
def engine(arena):
    return PhysicsEngine(arena)


def make_object(index, object_type, x, y, vx=0.0, vy=0.0):
    return GameObject(f"obj-{index}", object_type, x, y, vx, vy, 15.0)


class TestInitialization:
    """Test population ownership."""

    def test_empty_engine(self, engine):
        """A fresh engine has no objects and counts as complete."""
        assert engine.object_count == 0
        assert engine.is_complete()
        assert engine.get_winner() is None

    def test_initialize_copies(self, engine):
        """Mutating the caller's list does not affect the engine."""
        source = [make_object(0, ObjectType.ROCK, 100.0, 100.0, 10.0, 0.0)]
        engine.initialize(source)
        source[0].x = 500.0

        assert engine.objects[0].x == 100.0

    def test_objects_returns_copies(self, engine):
        """Mutating returned objects does not affect the engine."""
        engine.initialize([make_object(0, ObjectType.ROCK, 100.0, 100.0)])
        engine.objects[0].x = 500.0

        assert engine.objects[0].x == 100.0


class TestStep:
    """Test stepping the whole population."""

    def test_step_moves_all(self, engine):
        engine.initialize([
            make_object(0, ObjectType.ROCK, 100.0, 100.0, 60.0, 0.0),
            make_object(1, ObjectType.PAPER, 300.0, 300.0, 0.0, -60.0),
        ])
        engine.step(0.5)
        a, b = engine.objects

        assert (a.x, a.y) == (130.0, 100.0)
        assert (b.x, b.y) == (300.0, 270.0)

    def test_step_bounces(self, engine):
        """Walls are resolved after integration."""
        engine.initialize([make_object(0, ObjectType.ROCK, 20.0, 300.0, -100.0, 0.0)])
        engine.step(0.1)
        obj = engine.objects[0]

        assert (obj.x, obj.vx) == (15.0, 100.0)

    def test_generated_population_stays_in_bounds(self, engine, arena):
        engine.initialize(generate_objects_from_seed(2024, arena))
        for _ in range(600):
            engine.step(1 / 60)
            for obj in engine.objects:
                assert obj.radius <= obj.x <= arena.width - obj.radius
                assert obj.radius <= obj.y <= arena.height - obj.radius

    def test_population_size_constant(self, engine, arena):
        engine.initialize(generate_objects_from_seed(7, arena))
        for _ in range(100):
            engine.step(1 / 60)

        assert engine.object_count == arena.total_objects
        assert engine.get_counts() == {
            ObjectType.ROCK: 5, ObjectType.PAPER: 5, ObjectType.SCISSORS: 5
        }


class TestInteractionHandler:
    """Test the object-to-object hook."""

    def test_handler_called_after_walls(self, engine, arena):
        """Handler sees the live, wall-resolved population."""
        seen = []

        def handler(objects, handler_arena):
            seen.append(([o.x for o in objects], handler_arena))

        engine.initialize([make_object(0, ObjectType.ROCK, 20.0, 300.0, -100.0, 0.0)])
        engine.set_interaction_handler(handler)
        engine.step(0.1)

        assert seen == [([15.0], arena)]

    def test_handler_mutations_persist(self, engine):
        """Changes made by the handler are kept by the engine."""
        def convert_all(objects, _arena):
            for obj in objects:
                obj.type = ObjectType.PAPER

        engine.initialize([
            make_object(0, ObjectType.ROCK, 100.0, 100.0),
            make_object(1, ObjectType.SCISSORS, 300.0, 300.0),
        ])
        assert not engine.is_complete()

        engine.set_interaction_handler(convert_all)
        engine.step(1 / 60)

        assert engine.is_complete()
        assert engine.get_winner() == ObjectType.PAPER

    def test_clear_handler(self, engine):
        calls = []
        engine.initialize([make_object(0, ObjectType.ROCK, 100.0, 100.0)])
        engine.set_interaction_handler(lambda objects, arena: calls.append(1))
        engine.set_interaction_handler(None)
        engine.step(1 / 60)

        assert calls == []


class TestCompletion:
    """Test completion queries."""

    def test_mixed_has_no_winner(self, engine):
        engine.initialize([
            make_object(0, ObjectType.ROCK, 100.0, 100.0),
            make_object(1, ObjectType.PAPER, 300.0, 300.0),
        ])

        assert not engine.is_complete()
        assert engine.get_winner() is None

    def test_single_type_winner(self, engine):
        engine.initialize([
            make_object(0, ObjectType.SCISSORS, 100.0, 100.0),
            make_object(1, ObjectType.SCISSORS, 300.0, 300.0),
        ])

        assert engine.is_complete()
        assert engine.get_winner() == ObjectType.SCISSORS

    def test_arena_setter(self, engine):
        small = ArenaConfig(width=200, height=200, object_radius=15, objects_per_type=1)
        engine.arena = small
        engine.initialize([make_object(0, ObjectType.ROCK, 190.0, 100.0, 10.0, 0.0)])
        engine.step(0.1)

        assert engine.arena == small
        assert engine.objects[0].x == 185.0
