"""Seed state for the two-stream combined uniform generator."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

SEED1_MAX = 2147483562
SEED2_MAX = 2147483398


class InvalidSeedError(ValueError):
    """Raised when a seed state lies outside the generator's operating range."""


@dataclass
class SeedState:
    """Internal state of the combined generator.

    Sampling updates ``seed1`` and ``seed2`` in place, so a state belongs to a
    single stream. Use :meth:`copy` to hand it to another one.
    """

    seed1: int
    seed2: int

    def is_valid(self) -> bool:
        return 1 <= self.seed1 <= SEED1_MAX and 1 <= self.seed2 <= SEED2_MAX

    def validate(self) -> SeedState:
        if not self.is_valid():
            raise InvalidSeedError(
                f"Seed ({self.seed1}, {self.seed2}) outside 1..{SEED1_MAX} / 1..{SEED2_MAX}"
            )
        return self

    def copy(self) -> SeedState:
        return SeedState(self.seed1, self.seed2)

    def as_tuple(self) -> Tuple[int, int]:
        return (self.seed1, self.seed2)
