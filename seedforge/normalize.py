"""Seed normalization: map arbitrary seed material to a valid :class:`SeedState`.

The string hash is the DJBX33A "times 33 plus add" family. These outputs are
persisted by users across runs; any change to the constants below changes
every seed sequence derived from them.
"""
from __future__ import annotations

import enum
import logging
from collections.abc import Iterable, Sequence
from typing import Optional, Union

from seedforge.alerts import AlertSink, Severity, resolve_sink
from seedforge.state import SEED1_MAX, SEED2_MAX, SeedState

logger = logging.getLogger(__name__)

DJB_INIT = 5381
DJB_MULTIPLIER = 33
STRING_MODULUS = 2**30
FALLBACK_SEED = (3, 17)

SeedMaterial = Union[str, int, Iterable[int]]


class SeedAlgorithm(str, enum.Enum):
    CURRENT = "current"
    LEGACY = "legacy"


def clamp(value: int, range_max: int) -> int:
    """Fold ``value`` into ``1..range_max``; values already in range are unchanged."""
    return (value - 1) % range_max + 1


def normalize_from_vector(values: Sequence[int], alert: Optional[AlertSink] = None) -> SeedState:
    """Build a seed from the first two integers of ``values``.

    An empty sequence raises a failure alert and returns the fallback seed
    ``(3, 17)``. A single value goes through :func:`normalize_from_integer`.
    """
    if len(values) == 0:
        resolve_sink(alert).alert(
            Severity.FAILURE, "seedforge.normalize_from_vector received an empty seed vector"
        )
        return SeedState(*FALLBACK_SEED)
    if len(values) == 1:
        return normalize_from_integer(values[0], alert=alert)
    return SeedState(clamp(values[0], SEED1_MAX), clamp(values[1], SEED2_MAX))


def normalize_from_integer(value: int, alert: Optional[AlertSink] = None) -> SeedState:
    return normalize_from_vector([value * 5381 + 313, value * 313 + 5381], alert=alert)


def normalize_from_string(text: str, alert: Optional[AlertSink] = None) -> SeedState:
    """Hash ``text`` from its last character to its first.

    The first half of the reversed characters yields ``seed1``; the same
    accumulator continues over the remainder to yield ``seed2``. Both lie
    below ``2**30`` so no clamp is applied.
    """
    reversed_codes = [ord(ch) for ch in reversed(text)]
    half = len(reversed_codes) // 2
    temp = DJB_INIT
    for code in reversed_codes[:half]:
        temp = (temp * DJB_MULTIPLIER + code) % STRING_MODULUS
    seed1 = temp
    for code in reversed_codes[half:]:
        temp = (temp * DJB_MULTIPLIER + code) % STRING_MODULUS
    logger.debug("Hashed %d characters to (%d, %d)", len(reversed_codes), seed1, temp)
    return SeedState(seed1, temp)


def _as_vector(material: Iterable[int]) -> list[int]:
    values = list(material)
    for item in values:
        if isinstance(item, bool) or not isinstance(item, int):
            raise TypeError(f"Seed vector elements must be integers, got {type(item).__name__}")
    return values


def generate_seed(
    material: SeedMaterial,
    algorithm: SeedAlgorithm = SeedAlgorithm.CURRENT,
    alert: Optional[AlertSink] = None,
) -> SeedState:
    """Normalize ``material`` with the named algorithm.

    Strings, integers, and integer sequences select the matching string,
    integer, or vector operation of that algorithm.
    """
    from seedforge import legacy

    algorithm = SeedAlgorithm(algorithm)
    if algorithm is SeedAlgorithm.CURRENT:
        by_string, by_integer, by_vector = normalize_from_string, normalize_from_integer, normalize_from_vector
    else:
        by_string = legacy.legacy_normalize_from_string
        by_integer = legacy.legacy_normalize_from_integer
        by_vector = legacy.legacy_normalize_from_vector

    if isinstance(material, str):
        return by_string(material, alert=alert)
    if isinstance(material, bool):
        raise TypeError("Seed material cannot be a bool")
    if isinstance(material, (bytes, bytearray, memoryview)):
        raise TypeError("Seed material cannot be bytes; decode it to a str first")
    if isinstance(material, int):
        return by_integer(material, alert=alert)
    if not isinstance(material, Iterable):
        raise TypeError(f"Unsupported seed material: {type(material).__name__}")
    return by_vector(_as_vector(material), alert=alert)
