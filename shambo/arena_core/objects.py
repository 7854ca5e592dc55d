"""
Arena Objects
=============

Object types, the mutable GameObject body, and the plain-data records
exchanged with the contract layer.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Sequence, Tuple


class ObjectType(str, Enum):
    """The three object types. Declaration order is the tiebreak priority."""
    ROCK = "rock"
    PAPER = "paper"
    SCISSORS = "scissors"

    @property
    def type_id(self) -> int:
        """Contract-side numeric id (0=rock, 1=paper, 2=scissors)."""
        return TIEBREAKER_PRIORITY.index(self)

    @classmethod
    def from_index(cls, index: int) -> "ObjectType":
        """
        Map a contract-side numeric id to its type.

        Raises:
            ValueError: If index is not 0, 1 or 2.
        """
        if 0 <= index < len(TIEBREAKER_PRIORITY):
            return TIEBREAKER_PRIORITY[index]
        raise ValueError(f"Invalid object type index: {index}")

    def __str__(self) -> str:
        return self.value


# Rock > Paper > Scissors. Also the generation order.
TIEBREAKER_PRIORITY: Tuple[ObjectType, ...] = (
    ObjectType.ROCK,
    ObjectType.PAPER,
    ObjectType.SCISSORS,
)

ObjectCounts = Dict[ObjectType, int]


def empty_counts() -> ObjectCounts:
    """Counts with all three types present and zero."""
    return {object_type: 0 for object_type in TIEBREAKER_PRIORITY}


@dataclass
class GameObject:
    """
    One moving body in the arena.

    Position and velocity are mutated in place by the physics step;
    id and radius never change after creation.
    """
    id: str
    type: ObjectType
    x: float
    y: float
    vx: float
    vy: float
    radius: float

    def copy(self) -> "GameObject":
        return GameObject(
            id=self.id,
            type=self.type,
            x=self.x,
            y=self.y,
            vx=self.vx,
            vy=self.vy,
            radius=self.radius
        )

    def __repr__(self) -> str:
        return (
            f"GameObject({self.id}: {self.type.value} at "
            f"({self.x:.2f}, {self.y:.2f}) v=({self.vx:.2f}, {self.vy:.2f}))"
        )


@dataclass(frozen=True)
class ObjectInit:
    """Initial object record as revealed by the contract."""
    object_type: int   # 0=rock, 1=paper, 2=scissors
    x: float
    y: float
    vx: float
    vy: float


@dataclass(frozen=True)
class GameInitData:
    """Seed plus the initial object records for one game."""
    seed: str
    objects: Tuple[ObjectInit, ...] = field(default_factory=tuple)


def object_id(index: int) -> str:
    """Stable id for the index-th created object."""
    return f"obj-{index}"


def object_from_init(init: ObjectInit, index: int, radius: float) -> GameObject:
    """
    Convert a contract record into a GameObject.

    Raises:
        ValueError: If the record carries an unknown type index.
    """
    return GameObject(
        id=object_id(index),
        type=ObjectType.from_index(init.object_type),
        x=init.x,
        y=init.y,
        vx=init.vx,
        vy=init.vy,
        radius=radius
    )


def objects_from_init_data(init_data: GameInitData, radius: float) -> List[GameObject]:
    """Convert every record of a GameInitData, ids assigned in order."""
    return [
        object_from_init(init, index, radius)
        for index, init in enumerate(init_data.objects)
    ]


def to_init_records(objects: Sequence[GameObject]) -> Tuple[ObjectInit, ...]:
    """Project GameObjects back onto contract records."""
    return tuple(
        ObjectInit(
            object_type=obj.type.type_id,
            x=obj.x,
            y=obj.y,
            vx=obj.vx,
            vy=obj.vy
        )
        for obj in objects
    )
