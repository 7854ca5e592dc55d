"""
Seed Verification Harness
=========================

Recomputes layouts from published seeds and runs each game to its end
with the fixed timestep, so outcomes can be checked independently.

Usage:
    python -m shambo.evaluation.run_eval --seed 42 --seed 1337
"""

from __future__ import annotations

import argparse
import sys
import time
from collections import Counter
from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence, Union

import numpy as np

from shambo.arena_core.config_loader import ArenaConfig, ShamboConfig, get_config, load_config
from shambo.arena_core.generation import PlacementError, generate_objects_from_seed
from shambo.arena_core.objects import GameObject, ObjectInit, to_init_records
from shambo.arena_core.rng import SeedLike
from shambo.arena_core.simulation import Simulation


@dataclass
class VerificationResult:
    """Layout check for a single seed."""
    seed: str
    objects: List[GameObject]
    matches: Optional[bool]      # None when nothing was compared
    mismatched_ids: List[str]


@dataclass
class EvalResult:
    """Outcome for a single seed."""
    seed: str
    winner: Optional[str]
    status: str
    is_timeout: bool
    sim_seconds: float
    ticks: int
    elapsed_time: float


@dataclass
class EvalSummary:
    """Summary across all seeds."""
    winners: Dict[str, int]
    timeout_rate: float
    mean_sim_seconds: float
    median_sim_seconds: float
    failed_seeds: List[str]
    total_time: float
    results: List[EvalResult]


def verify_seed(
    seed: SeedLike,
    arena: Optional[ArenaConfig] = None,
    expected: Optional[Sequence[Union[GameObject, ObjectInit]]] = None,
    config: Optional[ShamboConfig] = None
) -> VerificationResult:
    """
    Regenerate the layout for a seed and optionally compare it.

    Args:
        seed: Published seed.
        arena: Arena to generate in. Uses configured arena if None.
        expected: Published layout, as GameObjects or ObjectInit records.
        config: Configuration. Uses default if None.

    Returns:
        VerificationResult; matches is None when expected is None.
    """
    if config is None:
        config = get_config()
    if arena is None:
        arena = config.arena

    objects = generate_objects_from_seed(seed, arena, config.generation)

    if expected is None:
        return VerificationResult(str(seed), objects, None, [])

    if expected and isinstance(expected[0], ObjectInit):
        actual: Sequence[Union[GameObject, ObjectInit]] = to_init_records(objects)
    else:
        actual = objects

    mismatched = [
        objects[i].id
        for i in range(min(len(actual), len(expected)))
        if actual[i] != expected[i]
    ]
    matches = not mismatched and len(actual) == len(expected)
    return VerificationResult(str(seed), objects, matches, mismatched)


def simulate_seed(
    seed: SeedLike,
    config: Optional[ShamboConfig] = None,
    verbose: bool = False
) -> EvalResult:
    """
    Run one game from a seed to completion or timeout.

    Raises:
        PlacementError: If the layout cannot be placed.
    """
    sim = Simulation(config)
    start_time = time.time()

    sim.start_from_seed(seed)
    result = sim.run()

    elapsed = time.time() - start_time
    eval_result = EvalResult(
        seed=str(seed),
        winner=result.winner.value if result.winner is not None else None,
        status=result.status.value,
        is_timeout=result.is_timeout,
        sim_seconds=result.elapsed_time,
        ticks=result.ticks,
        elapsed_time=elapsed
    )

    if verbose:
        print(f"  Seed {seed}: winner={eval_result.winner}, "
              f"status={eval_result.status}, ticks={eval_result.ticks}, "
              f"time={elapsed:.2f}s")

    return eval_result


def evaluate_seeds(
    seeds: Sequence[SeedLike],
    config: Optional[ShamboConfig] = None,
    verbose: bool = True
) -> EvalSummary:
    """
    Simulate every seed and aggregate the outcomes.

    Seeds whose layout cannot be placed are reported in failed_seeds.
    """
    if verbose:
        print(f"Evaluating {len(seeds)} seeds...")

    results: List[EvalResult] = []
    failed: List[str] = []
    total_start = time.time()

    for i, seed in enumerate(seeds):
        if verbose:
            print(f"[{i+1}/{len(seeds)}] Running seed {seed}...")
        try:
            results.append(simulate_seed(seed, config=config, verbose=verbose))
        except PlacementError as e:
            failed.append(str(seed))
            if verbose:
                print(f"  Seed {seed}: {e}")

    total_time = time.time() - total_start

    winners = Counter(r.winner for r in results if r.winner is not None)
    durations = [r.sim_seconds for r in results]

    summary = EvalSummary(
        winners=dict(winners),
        timeout_rate=float(np.mean([r.is_timeout for r in results])) if results else 0.0,
        mean_sim_seconds=float(np.mean(durations)) if durations else 0.0,
        median_sim_seconds=float(np.median(durations)) if durations else 0.0,
        failed_seeds=failed,
        total_time=total_time,
        results=results
    )

    if verbose:
        print()
        print("=" * 50)
        print("EVALUATION SUMMARY")
        print("=" * 50)
        print(f"Seeds evaluated: {len(results)}")
        print(f"Failed seeds:    {len(failed)}")
        for name, count in sorted(summary.winners.items()):
            print(f"Winner {name + ':':<10} {count}")
        print(f"Timeout rate:    {summary.timeout_rate:.2%}")
        print(f"Mean duration:   {summary.mean_sim_seconds:.2f}s")
        print(f"Median duration: {summary.median_sim_seconds:.2f}s")
        print(f"Total time:      {total_time:.2f}s")
        print("=" * 50)

    return summary


def print_layout(result: VerificationResult) -> None:
    """Print a generated layout one object per line."""
    print(f"Layout for seed {result.seed}:")
    for obj in result.objects:
        print(f"  {obj.id:<8} {obj.type.value:<9} "
              f"x={obj.x:.6f} y={obj.y:.6f} vx={obj.vx:.6f} vy={obj.vy:.6f}")


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Verify and simulate arena seeds")
    parser.add_argument(
        "--seed",
        type=str,
        action="append",
        required=True,
        help="Seed to evaluate (decimal, may be repeated)"
    )
    parser.add_argument(
        "--config",
        type=str,
        default=None,
        help="Path to arena config YAML (uses default if not specified)"
    )
    parser.add_argument(
        "--layout",
        action="store_true",
        help="Print the generated layout of each seed"
    )
    parser.add_argument(
        "--quiet",
        action="store_true",
        help="Reduce output verbosity"
    )

    args = parser.parse_args(argv)

    try:
        config = load_config(args.config) if args.config else get_config()
    except (FileNotFoundError, ValueError) as e:
        print(f"Error loading config: {e}")
        return 1

    if args.layout:
        for seed in args.seed:
            try:
                print_layout(verify_seed(seed, config=config))
            except (ValueError, PlacementError) as e:
                print(f"Error generating layout for seed {seed}: {e}")
                return 1

    try:
        evaluate_seeds(args.seed, config=config, verbose=not args.quiet)
    except ValueError as e:
        print(f"Error: {e}")
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
