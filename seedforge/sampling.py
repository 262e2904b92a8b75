"""Uniform sampling over a :class:`SeedState`.

``uniform`` is the two-stream combined multiplicative generator (L'Ecuyer,
1988) in the form used by standard HDL math packages. ``SeedStream`` wraps a
single owned state so one stream never aliases another's seed.
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import numpy as np

from seedforge.alerts import AlertSink
from seedforge.codec import decode_checked, encode, load_seed, save_seed
from seedforge.normalize import SeedAlgorithm, SeedMaterial, generate_seed
from seedforge.state import InvalidSeedError, SeedState

logger = logging.getLogger(__name__)

_SCALE = 4.656613e-10


def uniform(seed: SeedState) -> float:
    """Advance ``seed`` in place and return a value in ``(0, 1)``."""
    seed.validate()

    k = seed.seed1 // 53668
    s1 = 40014 * (seed.seed1 - k * 53668) - k * 12211
    if s1 < 0:
        s1 += 2147483563

    k = seed.seed2 // 52774
    s2 = 40692 * (seed.seed2 - k * 52774) - k * 3791
    if s2 < 0:
        s2 += 2147483399

    z = s1 - s2
    if z < 1:
        z += 2147483562

    seed.seed1, seed.seed2 = s1, s2
    return z * _SCALE


class SeedStream:
    """A random stream owning exactly one seed state."""

    def __init__(self, seed: SeedState) -> None:
        self._seed = seed.copy().validate()

    @classmethod
    def from_material(
        cls,
        material: SeedMaterial,
        algorithm: SeedAlgorithm = SeedAlgorithm.CURRENT,
        alert: Optional[AlertSink] = None,
    ) -> SeedStream:
        return cls(generate_seed(material, algorithm=algorithm, alert=alert))

    @property
    def seed(self) -> SeedState:
        return self._seed.copy()

    def set_seed(self, seed: SeedState) -> None:
        self._seed = seed.copy().validate()

    def uniform(self) -> float:
        return uniform(self._seed)

    def uniform_array(self, count: int) -> np.ndarray:
        if count < 0:
            raise ValueError("count must be non-negative")
        draws = np.empty(count, dtype=np.float64)
        for idx in range(count):
            draws[idx] = uniform(self._seed)
        return draws

    def fork(self) -> SeedStream:
        return SeedStream(self._seed)

    def to_string(self) -> str:
        return encode(self._seed)

    def restore(self, text: str) -> None:
        seed, good = decode_checked(text)
        if not good:
            raise InvalidSeedError(f"Cannot restore seed from {text!r}")
        self.set_seed(seed)

    def save(self, path: Path) -> Path:
        logger.debug("Saving seed %s to %s", self.to_string(), path)
        return save_seed(path, self._seed)

    def load(self, path: Path, alert: Optional[AlertSink] = None) -> None:
        self.set_seed(load_seed(path, alert=alert))
