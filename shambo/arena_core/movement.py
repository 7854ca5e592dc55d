"""
Movement
========

Per-object physics step: Euler integration and wall bounce.

Both functions mutate the object in place. Wall bounces are perfectly
elastic: the reflected velocity component keeps its exact magnitude.
"""

from __future__ import annotations

from shambo.arena_core.config_loader import ArenaConfig
from shambo.arena_core.objects import GameObject


def update_position(obj: GameObject, dt: float) -> None:
    """
    Advance position by velocity * dt. Velocity is untouched.

    Args:
        obj: Object to move.
        dt: Elapsed time in seconds (non-negative).
    """
    obj.x = obj.x + obj.vx * dt
    obj.y = obj.y + obj.vy * dt


def handle_wall_collision(obj: GameObject, arena: ArenaConfig) -> bool:
    """
    Clamp an out-of-bounds object back inside the arena and reflect it.

    Each axis is resolved independently, so a corner overshoot is fixed in
    one call. An object resting exactly on a boundary is in bounds.

    Args:
        obj: Object to check.
        arena: Arena bounds.

    Returns:
        True if any axis was out of bounds.
    """
    radius = obj.radius
    bounced = False

    if obj.x - radius < 0:
        obj.x = radius
        obj.vx = -obj.vx
        bounced = True
    elif obj.x + radius > arena.width:
        obj.x = arena.width - radius
        obj.vx = -obj.vx
        bounced = True

    if obj.y - radius < 0:
        obj.y = radius
        obj.vy = -obj.vy
        bounced = True
    elif obj.y + radius > arena.height:
        obj.y = arena.height - radius
        obj.vy = -obj.vy
        bounced = True

    return bounced
