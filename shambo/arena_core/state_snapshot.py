"""
State Snapshot
==============

Packs the arena population into numpy arrays for renderers and replays.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional, Sequence

import numpy as np

from shambo.arena_core.completion import get_object_counts
from shambo.arena_core.config_loader import ArenaConfig, get_config
from shambo.arena_core.objects import GameObject, ObjectCounts


@dataclass
class ArenaSnapshot:
    """
    Read-only view of one frame.

    Arrays are parallel and ordered like the population.
    """
    elapsed_time: float
    status: str
    object_count: int
    arena_width: float
    arena_height: float
    counts: ObjectCounts

    obj_type_id: np.ndarray   # (N,) int8, 0=rock 1=paper 2=scissors
    obj_x: np.ndarray         # (N,) float32
    obj_y: np.ndarray         # (N,) float32
    obj_vx: np.ndarray        # (N,) float32
    obj_vy: np.ndarray        # (N,) float32
    obj_radius: np.ndarray    # (N,) float32

    def to_dict(self) -> Dict[str, Any]:
        """Plain-python dict (lists instead of arrays)."""
        return {
            "elapsed_time": self.elapsed_time,
            "status": self.status,
            "object_count": self.object_count,
            "arena_width": self.arena_width,
            "arena_height": self.arena_height,
            "counts": {t.value: n for t, n in self.counts.items()},
            "objects": {
                "type_id": self.obj_type_id.tolist(),
                "x": self.obj_x.tolist(),
                "y": self.obj_y.tolist(),
                "vx": self.obj_vx.tolist(),
                "vy": self.obj_vy.tolist(),
                "radius": self.obj_radius.tolist(),
            },
        }


class SnapshotBuilder:
    """Builds ArenaSnapshot instances for a fixed arena."""

    def __init__(self, arena: Optional[ArenaConfig] = None):
        if arena is None:
            arena = get_config().arena
        self._arena = arena

    def build(
        self,
        objects: Sequence[GameObject],
        elapsed_time: float = 0.0,
        status: str = "idle"
    ) -> ArenaSnapshot:
        n = len(objects)
        obj_type_id = np.zeros(n, dtype=np.int8)
        obj_x = np.zeros(n, dtype=np.float32)
        obj_y = np.zeros(n, dtype=np.float32)
        obj_vx = np.zeros(n, dtype=np.float32)
        obj_vy = np.zeros(n, dtype=np.float32)
        obj_radius = np.zeros(n, dtype=np.float32)

        for i, obj in enumerate(objects):
            obj_type_id[i] = obj.type.type_id
            obj_x[i] = obj.x
            obj_y[i] = obj.y
            obj_vx[i] = obj.vx
            obj_vy[i] = obj.vy
            obj_radius[i] = obj.radius

        return ArenaSnapshot(
            elapsed_time=elapsed_time,
            status=status,
            object_count=n,
            arena_width=self._arena.width,
            arena_height=self._arena.height,
            counts=get_object_counts(objects),
            obj_type_id=obj_type_id,
            obj_x=obj_x,
            obj_y=obj_y,
            obj_vx=obj_vx,
            obj_vy=obj_vy,
            obj_radius=obj_radius
        )
