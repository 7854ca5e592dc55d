"""
Contract Layout
===============

Reproduces the layout routine run on-chain, so the ObjectInit records a
reveal transaction emits can be recomputed from the revealed seed alone.

This routine is fixed by the deployed contract and intentionally differs
from generation.py: the seed itself is the generator state, fractions come
from the low six decimal digits, velocity signs come from parity, and a
position is kept after the attempt bound even if it overlaps.
"""

from __future__ import annotations

from typing import List, Tuple

from shambo.arena_core.objects import ObjectInit, TIEBREAKER_PRIORITY
from shambo.arena_core.rng import MODULUS, MULTIPLIER, SeedLike, parse_seed

# Must match the contract
OBJECTS_PER_TYPE = 5
ARENA_WIDTH = 800.0
ARENA_HEIGHT = 600.0
OBJECT_RADIUS = 20.0
MIN_VELOCITY = 50.0
MAX_VELOCITY = 150.0
MAX_ATTEMPTS = 100

FRACTION_SCALE = 1000000


def next_random(seed: int) -> int:
    """One LCG step on an unsigned seed."""
    return (MULTIPLIER * (seed % MODULUS)) % MODULUS


def random_in_range(seed: int, min_value: float, max_value: float) -> float:
    """Map the low six decimal digits of seed onto [min_value, max_value)."""
    fraction = (seed % FRACTION_SCALE) / float(FRACTION_SCALE)
    return min_value + (max_value - min_value) * fraction


def random_velocity(seed: int) -> float:
    """Signed velocity component; odd seeds move in the negative direction."""
    magnitude = random_in_range(seed, MIN_VELOCITY, MAX_VELOCITY)
    return -magnitude if seed % 2 == 1 else magnitude


def generate_contract_objects(seed: SeedLike) -> List[ObjectInit]:
    """
    Generate the contract's ObjectInit records for a revealed seed.

    Args:
        seed: The revealed seed (unsigned), as int or decimal string.

    Returns:
        3 * OBJECTS_PER_TYPE records, rocks first.

    Raises:
        ValueError: If the seed is negative or not a decimal integer.
    """
    current = parse_seed(seed)
    if current < 0:
        raise ValueError(f"Contract seeds are unsigned, got {current}")

    objects: List[ObjectInit] = []
    positions: List[Tuple[float, float]] = []
    min_dist_sq = (OBJECT_RADIUS * 2.0) ** 2

    for object_type in TIEBREAKER_PRIORITY:
        for _ in range(OBJECTS_PER_TYPE):
            x = 0.0
            y = 0.0
            valid = False
            attempts = 0

            while not valid and attempts < MAX_ATTEMPTS:
                current = next_random(current)
                x = random_in_range(current, OBJECT_RADIUS, ARENA_WIDTH - OBJECT_RADIUS)

                current = next_random(current)
                y = random_in_range(current, OBJECT_RADIUS, ARENA_HEIGHT - OBJECT_RADIUS)

                valid = True
                for px, py in positions:
                    dx = x - px
                    dy = y - py
                    if dx * dx + dy * dy < min_dist_sq:
                        valid = False
                        break
                attempts += 1

            positions.append((x, y))

            current = next_random(current)
            vx = random_velocity(current)

            current = next_random(current)
            vy = random_velocity(current)

            objects.append(ObjectInit(
                object_type=object_type.type_id,
                x=x,
                y=y,
                vx=vx,
                vy=vy
            ))

    return objects
