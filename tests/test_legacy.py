"""Tests for the frozen legacy normalizer."""
from __future__ import annotations

import pytest

from seedforge.alerts import Severity
from seedforge.legacy import (
    LEGACY_STRING_MODULUS,
    legacy_normalize_from_integer,
    legacy_normalize_from_string,
    legacy_normalize_from_vector,
)
from seedforge.normalize import SeedAlgorithm, generate_seed, normalize_from_integer, normalize_from_string
from seedforge.state import SEED1_MAX, SEED2_MAX, SeedState


def test_modulus_is_fixed_to_32_bit_width() -> None:
    assert LEGACY_STRING_MODULUS == 2147483391


def test_vector_range_handling() -> None:
    assert legacy_normalize_from_vector([SEED1_MAX, SEED2_MAX]) == SeedState(SEED1_MAX, SEED2_MAX)
    assert legacy_normalize_from_vector([0, 0]) == SeedState(SEED1_MAX, SEED2_MAX)
    assert legacy_normalize_from_vector([-1, -1, 99]) == SeedState(SEED1_MAX - 1, SEED2_MAX - 1)


def test_empty_vector_alerts_once(sink) -> None:
    assert legacy_normalize_from_vector([], alert=sink) == SeedState(3, 17)
    assert len(sink.alerts) == 1
    assert sink.alerts[0][0] is Severity.FAILURE
    assert "legacy_normalize_from_vector" in sink.alerts[0][1]


def test_integer_uses_truncating_division() -> None:
    assert legacy_normalize_from_integer(10) == SeedState(10, 4)
    assert legacy_normalize_from_integer(0) == SeedState(SEED1_MAX, 1)
    assert legacy_normalize_from_integer(-7) == SeedState(2147483555, 2147483397)


def test_single_value_vector_matches_integer() -> None:
    assert legacy_normalize_from_vector([10]) == legacy_normalize_from_integer(10)


def test_string_additive_hash() -> None:
    assert legacy_normalize_from_string("ab") == SeedState(98, 195)
    assert legacy_normalize_from_string("") == SeedState(SEED1_MAX, SEED2_MAX)


@pytest.mark.parametrize("material", ["", "ab", 0, 10])
def test_legacy_and_current_diverge(material) -> None:
    current = generate_seed(material, algorithm=SeedAlgorithm.CURRENT)
    legacy = generate_seed(material, algorithm=SeedAlgorithm.LEGACY)
    assert current != legacy


def test_diverge_on_empty_string_explicitly() -> None:
    assert normalize_from_string("") != legacy_normalize_from_string("")
    assert normalize_from_integer(10) != legacy_normalize_from_integer(10)
