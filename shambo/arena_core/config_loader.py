"""
Configuration Loader
====================

Loads and validates arena_config.yaml, providing typed access to all parameters.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

import yaml


@dataclass(frozen=True)
class ArenaConfig:
    """Arena bounds and population size."""
    width: float             # Playfield width
    height: float            # Playfield height
    object_radius: float     # Radius shared by all objects
    objects_per_type: int    # Count of each of the 3 types

    @property
    def total_objects(self) -> int:
        """Population size of a generated layout."""
        return self.objects_per_type * 3


@dataclass(frozen=True)
class GenerationConfig:
    """Placement engine parameters."""
    min_speed: float
    max_speed: float
    max_placement_attempts: int


@dataclass(frozen=True)
class SimulationConfig:
    """Fixed-timestep driver parameters."""
    target_fps: int
    timeout_seconds: float
    max_frame_multiplier: float

    @property
    def frame_duration(self) -> float:
        """Duration of one frame in seconds."""
        return 1.0 / self.target_fps

    @property
    def max_dt(self) -> float:
        """Largest dt a single tick will integrate."""
        return self.max_frame_multiplier / self.target_fps


@dataclass(frozen=True)
class ShamboConfig:
    """
    Complete configuration loaded from YAML.

    All values are immutable so a config can be shared between games.
    """
    arena: ArenaConfig
    generation: GenerationConfig
    simulation: SimulationConfig


def _validate_config(config: ShamboConfig) -> None:
    """Validate configuration consistency."""
    arena = config.arena
    if arena.width <= 0 or arena.height <= 0:
        raise ValueError(
            f"Arena dimensions must be positive, got {arena.width}x{arena.height}"
        )
    if arena.object_radius <= 0:
        raise ValueError(f"object_radius must be positive, got {arena.object_radius}")
    if arena.objects_per_type <= 0:
        raise ValueError(f"objects_per_type must be positive, got {arena.objects_per_type}")

    # An object must fit inside the arena at all
    diameter = arena.object_radius * 2
    if diameter > arena.width or diameter > arena.height:
        raise ValueError(
            f"Arena {arena.width}x{arena.height} cannot hold an object "
            f"of radius {arena.object_radius}"
        )

    generation = config.generation
    if generation.min_speed <= 0:
        raise ValueError(f"min_speed must be positive, got {generation.min_speed}")
    if generation.max_speed < generation.min_speed:
        raise ValueError(
            f"max_speed ({generation.max_speed}) must be >= "
            f"min_speed ({generation.min_speed})"
        )
    if generation.max_placement_attempts <= 0:
        raise ValueError(
            f"max_placement_attempts must be positive, got {generation.max_placement_attempts}"
        )

    simulation = config.simulation
    if simulation.target_fps <= 0:
        raise ValueError(f"target_fps must be positive, got {simulation.target_fps}")
    if simulation.timeout_seconds <= 0:
        raise ValueError(f"timeout_seconds must be positive, got {simulation.timeout_seconds}")
    if simulation.max_frame_multiplier <= 0:
        raise ValueError(
            f"max_frame_multiplier must be positive, got {simulation.max_frame_multiplier}"
        )


def parse_config(raw: dict) -> ShamboConfig:
    """
    Build a validated config from already-parsed YAML data.

    Missing sections or keys fall back to the documented defaults.

    Raises:
        ValueError: If config validation fails.
    """
    arena_data = raw.get("arena", {})
    arena = ArenaConfig(
        width=float(arena_data.get("width", 800)),
        height=float(arena_data.get("height", 600)),
        object_radius=float(arena_data.get("object_radius", 15)),
        objects_per_type=int(arena_data.get("objects_per_type", 5))
    )

    generation_data = raw.get("generation", {})
    generation = GenerationConfig(
        min_speed=float(generation_data.get("min_speed", 50.0)),
        max_speed=float(generation_data.get("max_speed", 150.0)),
        max_placement_attempts=int(generation_data.get("max_placement_attempts", 100))
    )

    sim_data = raw.get("simulation", {})
    simulation = SimulationConfig(
        target_fps=int(sim_data.get("target_fps", 60)),
        timeout_seconds=float(sim_data.get("timeout_seconds", 60.0)),
        max_frame_multiplier=float(sim_data.get("max_frame_multiplier", 3))
    )

    config = ShamboConfig(
        arena=arena,
        generation=generation,
        simulation=simulation
    )

    _validate_config(config)
    return config


def load_config(config_path: Optional[str] = None) -> ShamboConfig:
    """
    Load and validate configuration from YAML.

    Args:
        config_path: Path to arena_config.yaml. If None, uses default location.

    Returns:
        Validated ShamboConfig instance.

    Raises:
        FileNotFoundError: If config file doesn't exist.
        ValueError: If config validation fails.
    """
    if config_path is None:
        config_path = os.path.join(
            os.path.dirname(os.path.dirname(__file__)),
            "arena_config.yaml"
        )

    config_path = Path(config_path)
    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(config_path, "r") as f:
        raw = yaml.safe_load(f) or {}

    return parse_config(raw)


# Module-level singleton for convenience
_cached_config: Optional[ShamboConfig] = None


def get_config() -> ShamboConfig:
    """Get the cached configuration, loading if necessary."""
    global _cached_config
    if _cached_config is None:
        _cached_config = load_config()
    return _cached_config


def reload_config(config_path: Optional[str] = None) -> ShamboConfig:
    """Reload the configuration (useful for testing)."""
    global _cached_config
    _cached_config = load_config(config_path)
    return _cached_config
