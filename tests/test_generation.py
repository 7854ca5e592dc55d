"""
Tests for deterministic object placement.
"""

import itertools
import math

import pytest

from shambo.arena_core.config_loader import ArenaConfig, GenerationConfig
from shambo.arena_core.generation import (
    PlacementError,
    generate_objects_from_seed,
    generate_valid_position,
    generate_velocity,
    has_overlap
)
from shambo.arena_core.objects import GameObject, ObjectType
from shambo.arena_core.rng import MODULUS, SeededRandom


@pytest.fixture
def arena():
    return ArenaConfig(width=800, height=600, object_radius=15, objects_per_type=5)


@pytest.fixture
def generation():
    return GenerationConfig(min_speed=50.0, max_speed=150.0, max_placement_attempts=100)


@pytest.fixture
def objects(arena, generation):
    return generate_objects_from_seed(123456789, arena, generation)


class TestDeterminism:
    """Test reproducibility of layouts."""

    def test_same_seed_same_layout(self, arena, generation):
        """Two calls with the same seed are field-for-field equal."""
        a = generate_objects_from_seed(42, arena, generation)
        b = generate_objects_from_seed(42, arena, generation)

        assert a == b

    def test_string_seed_matches_int(self, arena, generation):
        """Decimal string seeds give the same layout as ints."""
        a = generate_objects_from_seed("987654321", arena, generation)
        b = generate_objects_from_seed(987654321, arena, generation)

        assert a == b

    def test_different_seeds_differ(self, arena, generation):
        """Different seeds should give different positions."""
        a = generate_objects_from_seed(42, arena, generation)
        b = generate_objects_from_seed(43, arena, generation)

        assert [(o.x, o.y) for o in a] != [(o.x, o.y) for o in b]

    def test_zero_seed_same_as_one(self, arena, generation):
        """Seed 0 falls back to state 1."""
        assert (
            generate_objects_from_seed(0, arena, generation)
            == generate_objects_from_seed(1, arena, generation)
        )

    def test_first_object_draw_order(self, arena, generation):
        """First object uses draws 1-2 for position, 3-4 for velocity."""
        first = generate_objects_from_seed(1, arena, generation)[0]

        states = [48271, 182605794, 1291394886, 1914720637]
        x = 15 + (states[0] / MODULUS) * (800 - 30)
        y = 15 + (states[1] / MODULUS) * (600 - 30)
        angle = 0.0 + (states[2] / MODULUS) * (2.0 * math.pi)
        speed = 50.0 + (states[3] / MODULUS) * 100.0

        assert first.x == x
        assert first.y == y
        assert first.vx == math.cos(angle) * speed
        assert first.vy == math.sin(angle) * speed

    def test_malformed_seed_rejected(self, arena, generation):
        """Non-numeric seeds fail before any placement."""
        with pytest.raises(ValueError):
            generate_objects_from_seed("not-a-seed", arena, generation)


class TestPopulation:
    """Test population shape."""

    def test_total_count(self, objects, arena):
        """3 * objects_per_type objects are generated."""
        assert len(objects) == arena.objects_per_type * 3

    def test_count_per_type(self, objects, arena):
        """Each type appears objects_per_type times."""
        for object_type in ObjectType:
            assert sum(1 for o in objects if o.type == object_type) == arena.objects_per_type

    def test_type_order(self, objects):
        """Rocks, then papers, then scissors."""
        types = [o.type for o in objects]
        assert types == (
            [ObjectType.ROCK] * 5 + [ObjectType.PAPER] * 5 + [ObjectType.SCISSORS] * 5
        )

    def test_sequential_unique_ids(self, objects):
        """Ids run obj-0 .. obj-N-1 across types."""
        assert [o.id for o in objects] == [f"obj-{i}" for i in range(len(objects))]
        assert len({o.id for o in objects}) == len(objects)

    def test_radius_from_arena(self, objects, arena):
        """Every object uses the arena radius."""
        assert all(o.radius == arena.object_radius for o in objects)


class TestInvariants:
    """Test geometric invariants across many seeds."""

    @pytest.mark.parametrize("seed", [1, 42, 2 ** 64 + 3, -999, 2 ** 255])
    def test_within_bounds(self, seed, arena, generation):
        """Every object lies fully inside the arena."""
        for o in generate_objects_from_seed(seed, arena, generation):
            assert o.radius <= o.x <= arena.width - o.radius
            assert o.radius <= o.y <= arena.height - o.radius

    @pytest.mark.parametrize("seed", [1, 42, 2 ** 64 + 3, -999, 2 ** 255])
    def test_no_overlap(self, seed, arena, generation):
        """No two objects intersect."""
        objects = generate_objects_from_seed(seed, arena, generation)
        for a, b in itertools.combinations(objects, 2):
            assert math.hypot(a.x - b.x, a.y - b.y) >= a.radius + b.radius - 1e-9

    @pytest.mark.parametrize("seed", [1, 42, 2 ** 64 + 3, -999, 2 ** 255])
    def test_speed_bounds(self, seed, arena, generation):
        """Speeds stay within the configured range."""
        for o in generate_objects_from_seed(seed, arena, generation):
            speed = math.hypot(o.vx, o.vy)
            assert speed > 0
            assert generation.min_speed - 1e-9 <= speed <= generation.max_speed + 1e-9


class TestPlacementSearch:
    """Test the bounded position search."""

    def test_overlap_detection(self):
        """Touching circles do not overlap; intersecting ones do."""
        other = GameObject("obj-0", ObjectType.ROCK, 100.0, 100.0, 0.0, 0.0, 10.0)

        assert not has_overlap(120.0, 100.0, 10.0, [other])
        assert has_overlap(119.0, 100.0, 10.0, [other])
        assert not has_overlap(0.0, 0.0, 10.0, [])

    def test_exhausted_search_returns_none(self):
        """A full arena yields None after consuming every attempt."""
        arena = ArenaConfig(width=40, height=40, object_radius=15, objects_per_type=2)
        blocker = GameObject("obj-0", ObjectType.ROCK, 20.0, 20.0, 0.0, 0.0, 15.0)
        rng = SeededRandom(5)

        assert generate_valid_position(rng, arena, 15.0, [blocker], max_attempts=100) is None

        # Two draws per attempt
        reference = SeededRandom(5)
        for _ in range(200):
            reference.next()
        assert rng.state == reference.state

    def test_velocity_polar_draw(self):
        """Velocity is cos/sin of the angle draw scaled by the speed draw."""
        a = SeededRandom(77)
        b = SeededRandom(77)

        vx, vy = generate_velocity(a, 50.0, 150.0)
        angle = b.next_range(0.0, 2.0 * math.pi)
        speed = b.next_range(50.0, 150.0)

        assert (vx, vy) == (math.cos(angle) * speed, math.sin(angle) * speed)


class TestPlacementFailure:
    """Test fatal placement exhaustion."""

    def test_overcrowded_arena_raises(self, generation):
        """The whole call fails when an object cannot be placed."""
        arena = ArenaConfig(width=40, height=40, object_radius=15, objects_per_type=2)

        with pytest.raises(PlacementError) as exc_info:
            generate_objects_from_seed(42, arena, generation)

        assert exc_info.value.object_index == 1
        assert exc_info.value.total_objects == 6
        assert exc_info.value.attempts == 100
        assert "2 of 6" in str(exc_info.value)
