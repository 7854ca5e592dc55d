"""
Performance Benchmark
=====================

Measures layout generation and engine tick throughput.

Usage:
    python -m tools.benchmark_speed [--calls N] [--ticks T] [--per-type K ...]
"""

from __future__ import annotations

import argparse
import sys
import time
from dataclasses import replace

import numpy as np

from shambo.arena_core.config_loader import load_config
from shambo.arena_core.engine import PhysicsEngine
from shambo.arena_core.generation import generate_objects_from_seed


def benchmark_generation(
    num_calls: int = 1000,
    seed: int = 42
) -> dict:
    """
    Benchmark generate_objects_from_seed with the default arena.

    Args:
        num_calls: Number of layouts to generate.
        seed: First seed; each call uses the next one.

    Returns:
        Dict with timing results.
    """
    config = load_config()

    # Warmup
    for i in range(10):
        generate_objects_from_seed(seed + i, config.arena, config.generation)

    start = time.perf_counter()
    for i in range(num_calls):
        generate_objects_from_seed(seed + i, config.arena, config.generation)
    elapsed = time.perf_counter() - start

    return {
        "mode": "generation",
        "objects": config.arena.total_objects,
        "count": num_calls,
        "elapsed_seconds": elapsed,
        "per_second": num_calls / elapsed,
        "ms_per_call": (elapsed * 1000) / num_calls
    }


def benchmark_engine(
    objects_per_type: int = 5,
    num_ticks: int = 1000,
    seed: int = 42
) -> dict:
    """
    Benchmark PhysicsEngine.step() at the configured frame rate.

    Args:
        objects_per_type: Population size per type.
        num_ticks: Number of steps.
        seed: Layout seed.

    Returns:
        Dict with timing results.
    """
    config = load_config()
    arena = replace(config.arena, objects_per_type=objects_per_type)
    engine = PhysicsEngine(arena)
    engine.initialize(generate_objects_from_seed(seed, arena, config.generation))
    dt = config.simulation.frame_duration

    tick_times = np.zeros(num_ticks)
    start = time.perf_counter()
    for i in range(num_ticks):
        t0 = time.perf_counter()
        engine.step(dt)
        tick_times[i] = time.perf_counter() - t0
    elapsed = time.perf_counter() - start

    return {
        "mode": "engine",
        "objects": arena.total_objects,
        "count": num_ticks,
        "elapsed_seconds": elapsed,
        "per_second": num_ticks / elapsed,
        "ms_per_call": (elapsed * 1000) / num_ticks,
        "p99_ms": float(np.percentile(tick_times, 99) * 1000)
    }


def run_all_benchmarks(
    per_type_sizes: list = [5, 10, 20],
    calls: int = 500,
    ticks: int = 1000
) -> list:
    """Run comprehensive benchmarks."""
    results = []

    print("=" * 60)
    print("ARENA CORE PERFORMANCE BENCHMARK")
    print("=" * 60)
    print()

    print("Benchmarking layout generation...")
    result = benchmark_generation(num_calls=calls)
    results.append(result)
    print(f"  Layouts/sec: {result['per_second']:.1f}")
    print(f"  ms/layout:   {result['ms_per_call']:.3f}")
    print()

    for per_type in per_type_sizes:
        print(f"Benchmarking PhysicsEngine (n={per_type * 3})...")
        result = benchmark_engine(objects_per_type=per_type, num_ticks=ticks)
        results.append(result)
        print(f"  Ticks/sec: {result['per_second']:.1f}")
        print(f"  p99 ms:    {result['p99_ms']:.3f}")
        print()

    print("=" * 60)
    print("SUMMARY")
    print("=" * 60)
    print()
    print(f"{'Mode':<20} {'Objects':>8} {'Calls/s':>12} {'ms/call':>10}")
    print("-" * 52)

    for r in results:
        print(f"{r['mode']:<20} {r['objects']:>8} {r['per_second']:>12.1f} {r['ms_per_call']:>10.3f}")

    return results


def main():
    parser = argparse.ArgumentParser(description="Benchmark arena core performance")
    parser.add_argument("--calls", type=int, default=500, help="Layouts to generate")
    parser.add_argument("--ticks", type=int, default=1000, help="Engine ticks per size")
    parser.add_argument("--per-type", type=int, nargs="+", default=[5, 10, 20],
                        help="Objects per type to test")
    parser.add_argument("--quick", action="store_true", help="Quick benchmark (fewer calls)")

    args = parser.parse_args()

    calls = 50 if args.quick else args.calls
    ticks = 100 if args.quick else args.ticks

    run_all_benchmarks(
        per_type_sizes=args.per_type,
        calls=calls,
        ticks=ticks
    )

    return 0


if __name__ == "__main__":
    sys.exit(main())
