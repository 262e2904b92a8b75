"""Legacy seed normalization.

Reproduces seeds produced by earlier releases. These functions are frozen:
they are kept bit-exact so that saved test seeds replay the same sequences,
and are not interchangeable with :mod:`seedforge.normalize`.
"""
from __future__ import annotations

import logging
from typing import Optional, Sequence

from seedforge.alerts import AlertSink, Severity, resolve_sink
from seedforge.normalize import FALLBACK_SEED
from seedforge.state import SEED1_MAX, SEED2_MAX, SeedState

logger = logging.getLogger(__name__)

# 32-bit signed integer maximum less 2**8
LEGACY_STRING_MODULUS = (2**31 - 1) - 2**8


def _wrap(value: int, range_max: int) -> int:
    wrapped = value % range_max
    if wrapped <= 0:
        wrapped += range_max
    return wrapped


def _truncating_div(value: int, divisor: int) -> int:
    quotient = abs(value) // divisor
    return -quotient if value < 0 else quotient


def legacy_normalize_from_vector(values: Sequence[int], alert: Optional[AlertSink] = None) -> SeedState:
    if len(values) == 0:
        resolve_sink(alert).alert(
            Severity.FAILURE, "seedforge.legacy_normalize_from_vector received an empty seed vector"
        )
        return SeedState(*FALLBACK_SEED)
    if len(values) == 1:
        return legacy_normalize_from_integer(values[0], alert=alert)
    return SeedState(_wrap(values[0], SEED1_MAX), _wrap(values[1], SEED2_MAX))


def legacy_normalize_from_integer(value: int, alert: Optional[AlertSink] = None) -> SeedState:
    return legacy_normalize_from_vector([value, _truncating_div(value, 3) + 1], alert=alert)


def legacy_normalize_from_string(text: str, alert: Optional[AlertSink] = None) -> SeedState:
    """Additive hash over the reversed string, split at its midpoint."""
    reversed_codes = [ord(ch) for ch in reversed(text)]
    half = len(reversed_codes) // 2
    temp = 0
    for code in reversed_codes[:half]:
        temp = (temp + code) % LEGACY_STRING_MODULUS
    first = temp
    for code in reversed_codes[half:]:
        temp = (temp + code) % LEGACY_STRING_MODULUS
    logger.debug("Legacy hash of %d characters gave raw (%d, %d)", len(reversed_codes), first, temp)
    return legacy_normalize_from_vector([first, temp], alert=alert)
