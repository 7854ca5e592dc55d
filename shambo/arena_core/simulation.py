"""
Simulation Driver
=================

Runs one game from its initial population to a winner.

The driver is advanced with explicit dt values. Driving it with a fixed
timestep (run(), or tick(config.simulation.frame_duration)) makes the
whole trajectory reproducible from the seed; wall-clock deltas only keep
the initial layout reproducible.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional

from shambo.arena_core.config_loader import ArenaConfig, ShamboConfig, get_config
from shambo.arena_core.completion import determine_winner
from shambo.arena_core.engine import InteractionHandler, PhysicsEngine
from shambo.arena_core.generation import generate_objects_from_seed
from shambo.arena_core.objects import (
    GameInitData,
    GameObject,
    ObjectCounts,
    ObjectType,
    objects_from_init_data
)
from shambo.arena_core.rng import SeedLike
from shambo.arena_core.state_snapshot import ArenaSnapshot, SnapshotBuilder

logger = logging.getLogger(__name__)


class SimulationStatus(str, Enum):
    IDLE = "idle"
    RUNNING = "running"
    COMPLETED = "completed"
    TIMEOUT = "timeout"


@dataclass
class TickResult:
    """Result of a single tick."""
    status: SimulationStatus
    winner: Optional[ObjectType]
    elapsed_time: float


@dataclass
class SimulationResult:
    """Outcome of a full run."""
    winner: Optional[ObjectType]
    status: SimulationStatus
    is_timeout: bool
    elapsed_time: float
    ticks: int
    counts: ObjectCounts


class Simulation:
    """
    Main simulation class.

    Orchestrates:
    - Initial population (from contract records or a seed)
    - Physics engine stepping with a capped dt
    - Timeout tracking in simulated time
    - Winner determination

    One tick = one engine step followed by a completion check.
    """

    def __init__(self, config: Optional[ShamboConfig] = None):
        """
        Initialize simulation.

        Args:
            config: Configuration. Uses default if None.
        """
        if config is None:
            config = get_config()

        self._config = config
        self._engine = PhysicsEngine(config.arena)
        self._snapshot_builder = SnapshotBuilder(config.arena)

        self._status = SimulationStatus.IDLE
        self._winner: Optional[ObjectType] = None
        self._elapsed_time: float = 0.0
        self._ticks: int = 0

    @property
    def config(self) -> ShamboConfig:
        return self._config

    @property
    def engine(self) -> PhysicsEngine:
        """Physics engine instance."""
        return self._engine

    @property
    def status(self) -> SimulationStatus:
        return self._status

    @property
    def winner(self) -> Optional[ObjectType]:
        """Winning type once the game has ended, else None."""
        return self._winner

    @property
    def is_timeout(self) -> bool:
        return self._status == SimulationStatus.TIMEOUT

    @property
    def is_running(self) -> bool:
        return self._status == SimulationStatus.RUNNING

    @property
    def elapsed_time(self) -> float:
        """Simulated seconds since start."""
        return self._elapsed_time

    @property
    def ticks(self) -> int:
        return self._ticks

    def set_interaction_handler(self, handler: Optional[InteractionHandler]) -> None:
        """Forward an object-to-object handler to the engine."""
        self._engine.set_interaction_handler(handler)

    def start(
        self,
        init_data: GameInitData,
        arena: Optional[ArenaConfig] = None
    ) -> None:
        """
        Start a game from contract records.

        Args:
            init_data: Seed and initial object records.
            arena: Arena to simulate in. Uses the configured arena if None.

        Raises:
            ValueError: If a record carries an unknown type index.
        """
        if arena is None:
            arena = self._config.arena

        objects = objects_from_init_data(init_data, arena.object_radius)
        self._begin(objects, arena)
        logger.info(
            "Simulation started from init data (seed=%s, objects=%d)",
            init_data.seed, len(objects)
        )

    def start_from_seed(
        self,
        seed: SeedLike,
        arena: Optional[ArenaConfig] = None
    ) -> None:
        """
        Start a game from a locally generated layout.

        Raises:
            ValueError: If a string seed is not a decimal integer.
            PlacementError: If the layout cannot be placed.
        """
        if arena is None:
            arena = self._config.arena

        objects = generate_objects_from_seed(seed, arena, self._config.generation)
        self._begin(objects, arena)
        logger.info("Simulation started from seed %s (objects=%d)", seed, len(objects))

    def _begin(self, objects: List[GameObject], arena: ArenaConfig) -> None:
        self._engine.arena = arena
        self._engine.initialize(objects)
        self._snapshot_builder = SnapshotBuilder(arena)
        self._status = SimulationStatus.RUNNING
        self._winner = None
        self._elapsed_time = 0.0
        self._ticks = 0

    def tick(self, dt: float) -> TickResult:
        """
        Advance the game by dt seconds.

        Once the game is not running this is a no-op that reports the
        current state.

        Args:
            dt: Elapsed seconds since the previous tick.

        Returns:
            TickResult with status, winner and elapsed time.

        Raises:
            ValueError: If dt is negative.
        """
        if dt < 0:
            raise ValueError(f"dt must be non-negative, got {dt}")

        if not self.is_running:
            return self._tick_result()

        self._elapsed_time += dt
        self._ticks += 1

        if self._elapsed_time >= self._config.simulation.timeout_seconds:
            self._winner = determine_winner(self._engine.objects, is_timeout=True)
            self._status = SimulationStatus.TIMEOUT
            logger.info(
                "Simulation timed out after %.2fs, winner=%s",
                self._elapsed_time, self._winner
            )
            return self._tick_result()

        # At most max_frame_multiplier frames per step
        capped_dt = min(dt, self._config.simulation.max_dt)
        self._engine.step(capped_dt)

        if self._engine.is_complete():
            self._winner = determine_winner(self._engine.objects, is_timeout=False)
            self._status = SimulationStatus.COMPLETED
            logger.info(
                "Simulation completed after %.2fs, winner=%s",
                self._elapsed_time, self._winner
            )

        return self._tick_result()

    def run(
        self,
        dt: Optional[float] = None,
        max_ticks: Optional[int] = None
    ) -> SimulationResult:
        """
        Tick with a fixed timestep until the game ends.

        Args:
            dt: Timestep. Uses one frame at target_fps if None.
            max_ticks: Optional cap on ticks for this call.

        Returns:
            SimulationResult (status stays RUNNING if max_ticks stopped it).
        """
        if dt is None:
            dt = self._config.simulation.frame_duration

        ticks_this_call = 0
        while self.is_running:
            if max_ticks is not None and ticks_this_call >= max_ticks:
                break
            self.tick(dt)
            ticks_this_call += 1

        return SimulationResult(
            winner=self._winner,
            status=self._status,
            is_timeout=self.is_timeout,
            elapsed_time=self._elapsed_time,
            ticks=self._ticks,
            counts=self._engine.get_counts()
        )

    def stop(self) -> None:
        """Stop a running game, keeping its population."""
        if self.is_running:
            self._status = SimulationStatus.IDLE

    def reset(self) -> None:
        """Return to the idle state with an empty arena."""
        self._engine.initialize([])
        self._engine.set_interaction_handler(None)
        self._engine.arena = self._config.arena
        self._snapshot_builder = SnapshotBuilder(self._config.arena)
        self._status = SimulationStatus.IDLE
        self._winner = None
        self._elapsed_time = 0.0
        self._ticks = 0

    def snapshot(self) -> ArenaSnapshot:
        """Snapshot of the current frame."""
        return self._snapshot_builder.build(
            self._engine.objects,
            elapsed_time=self._elapsed_time,
            status=self._status.value
        )

    def _tick_result(self) -> TickResult:
        return TickResult(
            status=self._status,
            winner=self._winner,
            elapsed_time=self._elapsed_time
        )
