"""
Completion Rules
================

Decides whether a game has ended and which type won.

- Natural completion: at most one type left in the arena
- Timeout: majority count, ties broken Rock > Paper > Scissors

Natural completion always takes precedence over timeout.
"""

from __future__ import annotations

from typing import Iterable, Optional, Sequence

from shambo.arena_core.objects import (
    GameObject,
    ObjectCounts,
    ObjectType,
    TIEBREAKER_PRIORITY,
    empty_counts
)


def get_object_counts(objects: Iterable[GameObject]) -> ObjectCounts:
    """Tally objects per type. All three types are always present."""
    counts = empty_counts()
    for obj in objects:
        counts[obj.type] += 1
    return counts


def check_game_complete(objects: Sequence[GameObject]) -> bool:
    """True if no objects remain or all remaining share one type."""
    if not objects:
        return True
    return len({obj.type for obj in objects}) <= 1


def get_winner_by_majority(counts: ObjectCounts) -> ObjectType:
    """
    Type with the highest count.

    Only a strictly greater count replaces the running leader, so on ties
    the earlier type in priority order keeps the win (all-zero -> rock).
    """
    max_count = -1
    winner = TIEBREAKER_PRIORITY[0]
    for object_type in TIEBREAKER_PRIORITY:
        count = counts.get(object_type, 0)
        if count > max_count:
            max_count = count
            winner = object_type
    return winner


def determine_winner(
    objects: Sequence[GameObject],
    is_timeout: bool
) -> Optional[ObjectType]:
    """
    Winner of the game in its current state.

    Args:
        objects: Current population.
        is_timeout: True once the game has run out of time.

    Returns:
        The winning type, or None if the arena is empty or the game
        is still in progress.
    """
    if not objects:
        return None

    if check_game_complete(objects):
        return objects[0].type

    if is_timeout:
        return get_winner_by_majority(get_object_counts(objects))

    return None
