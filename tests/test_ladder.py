"""Tests for the prize ladder."""

from decimal import Decimal

import pytest

from millionaire.ladder import (
    FIREPROOF_LEVELS,
    LEVELS,
    PRIZES,
    TOP_PRIZE,
    fireproof_fallback,
    is_fireproof,
    prize_for,
)


def test_ladder_shape():
    assert LEVELS == 15
    assert FIREPROOF_LEVELS == (4, 9, 14)
    assert TOP_PRIZE == Decimal("1000000")
    assert list(PRIZES) == sorted(PRIZES)


@pytest.mark.parametrize("level,prize", [(0, 100), (3, 500), (4, 1000), (9, 32000), (14, 1000000)])
def test_prize_for(level, prize):
    assert prize_for(level) == Decimal(prize)


@pytest.mark.parametrize(
    "level,fallback",
    [
        (0, 0), (1, 0), (4, 0),
        (5, 1000), (9, 1000),
        (10, 32000), (14, 32000),
        (15, 1000000),
    ],
)
def test_fireproof_fallback_uses_checkpoint_strictly_below(level, fallback):
    assert fireproof_fallback(level) == Decimal(fallback)


def test_fallback_never_exceeds_prize_of_previous_level():
    for level in range(1, LEVELS):
        assert fireproof_fallback(level) <= prize_for(level - 1)


@pytest.mark.parametrize("level", [-1, 15, 100])
def test_prize_for_rejects_levels_off_the_ladder(level):
    with pytest.raises(ValueError):
        prize_for(level)


@pytest.mark.parametrize("level", [-1, 16])
def test_fallback_rejects_levels_off_the_ladder(level):
    with pytest.raises(ValueError):
        fireproof_fallback(level)


def test_is_fireproof():
    assert [level for level in range(LEVELS) if is_fireproof(level)] == [4, 9, 14]
