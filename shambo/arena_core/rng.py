"""
RNG - Seeded MINSTD Generator
=============================

Provides the reproducible random stream every layout is drawn from.

The state is a Python int, so the 48271 * state product and the seed
reduction are exact for seeds of any width (revealed seeds are up to
256 bits). Each game owns its own SeededRandom instance.
"""

from __future__ import annotations

import math
import operator
import re
from typing import Union

# MINSTD parameters
MULTIPLIER = 48271
MODULUS = 2147483647  # 2^31 - 1

SeedLike = Union[int, str]

_DECIMAL_SEED = re.compile(r"^[+-]?[0-9]+$")


def parse_seed(seed: SeedLike) -> int:
    """
    Convert a seed given as int or base-10 string into an int.

    Raises:
        ValueError: If a string seed is not a decimal integer.
        TypeError: If seed is neither an int nor a string.
    """
    if isinstance(seed, str):
        text = seed.strip()
        if not _DECIMAL_SEED.match(text):
            raise ValueError(f"Seed must be a decimal integer string, got {seed!r}")
        return int(text)
    return operator.index(seed)


def normalize_seed(value: int) -> int:
    """
    Reduce a seed to a valid generator state in [1, MODULUS).

    The remainder keeps the sign of the seed (truncated division), and a
    negative remainder is negated, so -s and s share a state. A zero state
    would stay at zero forever and is replaced by 1.
    """
    state = abs(value) % MODULUS
    return state if state != 0 else 1


class SeededRandom:
    """
    Linear-congruential generator: state' = (48271 * state) mod (2^31 - 1).

    Identical seeds give identical sequences in every process.
    """

    def __init__(self, seed: SeedLike):
        """
        Initialize generator.

        Args:
            seed: Integer seed or its decimal string form.

        Raises:
            ValueError: If a string seed is not a decimal integer.
        """
        self._seed = parse_seed(seed)
        self._state = normalize_seed(self._seed)

    @property
    def seed(self) -> int:
        """The seed as given, before normalization."""
        return self._seed

    @property
    def state(self) -> int:
        """Current internal state."""
        return self._state

    def next(self) -> float:
        """Advance the state and return it as a float in [0, 1)."""
        self._state = (MULTIPLIER * self._state) % MODULUS
        return self._state / MODULUS

    def next_range(self, min_value: float, max_value: float) -> float:
        """Float in [min_value, max_value)."""
        return min_value + self.next() * (max_value - min_value)

    def next_int(self, min_value: int, max_value: int) -> int:
        """Integer in [min_value, max_value)."""
        return math.floor(self.next_range(min_value, max_value))

    def __repr__(self) -> str:
        return f"SeededRandom(seed={self._seed}, state={self._state})"
