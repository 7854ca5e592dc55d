"""
Arena Core - The deterministic heart of the game.

This module provides the seeded generator, layout generation, the physics
step and the completion rules, plus a fixed-timestep simulation driver.

Main exports:
- SeededRandom: MINSTD generator seeded from the revealed seed
- generate_objects_from_seed: Initial population for a game
- PhysicsEngine: Population container stepped once per tick
- Simulation: Fixed-timestep driver with timeout handling
- determine_winner: Winner of a population (with optional timeout)
- ShamboConfig: Configuration loaded from arena_config.yaml
"""

from shambo.arena_core.config_loader import (
    ArenaConfig,
    GenerationConfig,
    SimulationConfig,
    ShamboConfig,
    get_config,
    load_config,
)
from shambo.arena_core.objects import (
    GameObject,
    GameInitData,
    ObjectCounts,
    ObjectInit,
    ObjectType,
    TIEBREAKER_PRIORITY,
)
from shambo.arena_core.rng import SeededRandom
from shambo.arena_core.generation import PlacementError, generate_objects_from_seed
from shambo.arena_core.contract_layout import generate_contract_objects
from shambo.arena_core.movement import handle_wall_collision, update_position
from shambo.arena_core.completion import (
    check_game_complete,
    determine_winner,
    get_object_counts,
    get_winner_by_majority,
)
from shambo.arena_core.engine import PhysicsEngine
from shambo.arena_core.simulation import Simulation, SimulationResult, SimulationStatus
from shambo.arena_core.state_snapshot import ArenaSnapshot, SnapshotBuilder

__all__ = [
    "ArenaConfig",
    "GenerationConfig",
    "SimulationConfig",
    "ShamboConfig",
    "get_config",
    "load_config",
    "GameObject",
    "GameInitData",
    "ObjectCounts",
    "ObjectInit",
    "ObjectType",
    "TIEBREAKER_PRIORITY",
    "SeededRandom",
    "PlacementError",
    "generate_objects_from_seed",
    "generate_contract_objects",
    "handle_wall_collision",
    "update_position",
    "check_game_complete",
    "determine_winner",
    "get_object_counts",
    "get_winner_by_majority",
    "PhysicsEngine",
    "Simulation",
    "SimulationResult",
    "SimulationStatus",
    "ArenaSnapshot",
    "SnapshotBuilder",
]
