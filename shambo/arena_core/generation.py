"""
Object Placement
================

Deterministic initial layout: every position and velocity is drawn from a
single SeededRandom in a fixed order, so the population is a pure function
of (seed, arena, generation config).

Draw order per object:
- x, y candidate pairs until one does not overlap (bounded attempts)
- angle, then speed
"""

from __future__ import annotations

import logging
import math
from typing import List, Optional, Sequence, Tuple

from shambo.arena_core.config_loader import (
    ArenaConfig,
    GenerationConfig,
    get_config
)
from shambo.arena_core.objects import GameObject, TIEBREAKER_PRIORITY, object_id
from shambo.arena_core.rng import SeededRandom, SeedLike

logger = logging.getLogger(__name__)


class PlacementError(RuntimeError):
    """Raised when an object cannot be placed without overlap."""

    def __init__(self, object_index: int, total_objects: int, attempts: int):
        self.object_index = object_index
        self.total_objects = total_objects
        self.attempts = attempts
        super().__init__(
            f"Unable to place object {object_index + 1} of {total_objects} "
            f"without overlap after {attempts} attempts. "
            f"Arena may be too small for the number of objects."
        )


def get_distance(x1: float, y1: float, x2: float, y2: float) -> float:
    """Euclidean distance between two points."""
    dx = x1 - x2
    dy = y1 - y2
    return math.sqrt(dx * dx + dy * dy)


def has_overlap(
    x: float,
    y: float,
    radius: float,
    existing: Sequence[GameObject]
) -> bool:
    """True if a circle at (x, y) intersects any existing object."""
    for obj in existing:
        if get_distance(x, y, obj.x, obj.y) < radius + obj.radius:
            return True
    return False


def generate_valid_position(
    rng: SeededRandom,
    arena: ArenaConfig,
    radius: float,
    existing: Sequence[GameObject],
    max_attempts: int = 100
) -> Optional[Tuple[float, float]]:
    """
    Search for a non-overlapping position inside the arena.

    Args:
        rng: Shared generator (consumed two draws per attempt).
        arena: Arena bounds.
        radius: Radius of the object being placed.
        existing: Objects already placed.
        max_attempts: Attempt bound.

    Returns:
        (x, y) of the first accepted candidate, or None if exhausted.
    """
    min_x = radius
    max_x = arena.width - radius
    min_y = radius
    max_y = arena.height - radius

    for _ in range(max_attempts):
        x = rng.next_range(min_x, max_x)
        y = rng.next_range(min_y, max_y)
        if not has_overlap(x, y, radius, existing):
            return (x, y)

    return None


def generate_velocity(
    rng: SeededRandom,
    min_speed: float,
    max_speed: float
) -> Tuple[float, float]:
    """Random direction and speed, returned as (vx, vy)."""
    angle = rng.next_range(0.0, 2.0 * math.pi)
    speed = rng.next_range(min_speed, max_speed)
    return (math.cos(angle) * speed, math.sin(angle) * speed)


def generate_objects_from_seed(
    seed: SeedLike,
    arena: Optional[ArenaConfig] = None,
    generation: Optional[GenerationConfig] = None
) -> List[GameObject]:
    """
    Generate the initial population for a game.

    Rocks first, then papers, then scissors; ids run obj-0, obj-1, ...
    across all types.

    Args:
        seed: Integer seed or its decimal string form.
        arena: Arena configuration. Uses default if None.
        generation: Speed range and attempt bound. Uses default if None.

    Returns:
        3 * objects_per_type objects in creation order.

    Raises:
        ValueError: If a string seed is not a decimal integer.
        PlacementError: If any object cannot be placed. No partial
            population is returned.
    """
    if arena is None:
        arena = get_config().arena
    if generation is None:
        generation = get_config().generation

    rng = SeededRandom(seed)
    objects: List[GameObject] = []
    total = arena.total_objects
    radius = arena.object_radius

    for object_type in TIEBREAKER_PRIORITY:
        for _ in range(arena.objects_per_type):
            index = len(objects)
            position = generate_valid_position(
                rng,
                arena,
                radius,
                objects,
                generation.max_placement_attempts
            )
            if position is None:
                logger.warning(
                    "Placement exhausted for %s (seed=%s, arena=%sx%s, radius=%s)",
                    object_id(index), rng.seed, arena.width, arena.height, radius
                )
                raise PlacementError(index, total, generation.max_placement_attempts)

            vx, vy = generate_velocity(rng, generation.min_speed, generation.max_speed)
            objects.append(GameObject(
                id=object_id(index),
                type=object_type,
                x=position[0],
                y=position[1],
                vx=vx,
                vy=vy,
                radius=radius
            ))

    logger.debug("Generated %d objects from seed %s", len(objects), rng.seed)
    return objects
