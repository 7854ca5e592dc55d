"""
Physics Engine
==============

Owns the live population for one game and advances it tick by tick.
"""

from __future__ import annotations

import logging
from typing import Callable, List, Optional, Sequence

from shambo.arena_core.completion import (
    check_game_complete,
    get_object_counts
)
from shambo.arena_core.config_loader import ArenaConfig, get_config
from shambo.arena_core.movement import handle_wall_collision, update_position
from shambo.arena_core.objects import GameObject, ObjectCounts, ObjectType

logger = logging.getLogger(__name__)

# handler(objects, arena), called after wall resolution each step
InteractionHandler = Callable[[List[GameObject], ArenaConfig], None]


class PhysicsEngine:
    """
    Manages the arena simulation.

    Handles:
    - Population ownership (copied in, copied out)
    - Euler integration of every object
    - Wall bounce
    - Optional object-to-object interaction hook

    Object-to-object rules are not part of the engine; a handler registered
    with set_interaction_handler() runs after boundary resolution.
    """

    def __init__(self, arena: Optional[ArenaConfig] = None):
        """
        Initialize engine.

        Args:
            arena: Arena configuration. Uses default if None.
        """
        if arena is None:
            arena = get_config().arena

        self._arena = arena
        self._objects: List[GameObject] = []

        # Interaction handler placeholder (set by the caller)
        self._interaction_handler: Optional[InteractionHandler] = None

    def initialize(self, objects: Sequence[GameObject]) -> None:
        """
        Load a population. The engine keeps its own copies.

        Args:
            objects: Initial population.
        """
        self._objects = [obj.copy() for obj in objects]
        logger.debug("Engine initialized with %d objects", len(self._objects))

    def set_interaction_handler(self, handler: Optional[InteractionHandler]) -> None:
        """
        Set the object-to-object interaction handler.

        Args:
            handler: Callback (objects, arena), or None to clear.
        """
        self._interaction_handler = handler

    def step(self, dt: float) -> None:
        """
        Advance every object by dt seconds.

        Positions are all integrated before any wall is resolved.
        """
        for obj in self._objects:
            update_position(obj, dt)

        for obj in self._objects:
            handle_wall_collision(obj, self._arena)

        if self._interaction_handler is not None:
            self._interaction_handler(self._objects, self._arena)

    @property
    def objects(self) -> List[GameObject]:
        """Copies of the current population."""
        return [obj.copy() for obj in self._objects]

    @property
    def object_count(self) -> int:
        """Number of objects currently in the arena."""
        return len(self._objects)

    @property
    def arena(self) -> ArenaConfig:
        """Arena configuration."""
        return self._arena

    @arena.setter
    def arena(self, arena: ArenaConfig) -> None:
        self._arena = arena

    def get_counts(self) -> ObjectCounts:
        """Count of each object type."""
        return get_object_counts(self._objects)

    def is_complete(self) -> bool:
        """True if only one type remains (or none)."""
        return check_game_complete(self._objects)

    def get_winner(self) -> Optional[ObjectType]:
        """The remaining type once complete, otherwise None."""
        if not self._objects or not self.is_complete():
            return None
        return self._objects[0].type
