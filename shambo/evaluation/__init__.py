"""
Evaluation Package
==================

Seed verification and outcome statistics for published games.
"""

from shambo.evaluation.run_eval import evaluate_seeds, simulate_seed, verify_seed

__all__ = ["evaluate_seeds", "simulate_seed", "verify_seed"]
