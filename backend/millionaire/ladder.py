# millionaire/ladder.py
from decimal import Decimal

PRIZES = (
    Decimal("100"),
    Decimal("200"),
    Decimal("300"),
    Decimal("500"),
    Decimal("1000"),       # 🔒 fireproof
    Decimal("2000"),
    Decimal("4000"),
    Decimal("8000"),
    Decimal("16000"),
    Decimal("32000"),      # 🔒 fireproof
    Decimal("64000"),
    Decimal("125000"),
    Decimal("250000"),
    Decimal("500000"),
    Decimal("1000000"),    # 🔒 fireproof / top prize
)

FIREPROOF_LEVELS = (4, 9, 14)

LEVELS = len(PRIZES)
LAST_LEVEL = LEVELS - 1
TOP_PRIZE = PRIZES[LAST_LEVEL]

D0 = Decimal("0")


def _check_level(level: int, upper: int) -> None:
    if not 0 <= level <= upper:
        raise ValueError(f"Level {level} is outside the prize ladder")


def prize_for(level: int) -> Decimal:
    """Prize for answering the question at `level` correctly."""
    _check_level(level, LAST_LEVEL)
    return PRIZES[level]


def fireproof_fallback(level: int) -> Decimal:
    """
    Guaranteed payout when the game ends while attempting `level`:
    the prize of the highest fireproof level strictly below it, or zero.
    """
    _check_level(level, LEVELS)
    reached = [fp for fp in FIREPROOF_LEVELS if fp < level]
    if not reached:
        return D0
    return PRIZES[max(reached)]


def is_fireproof(level: int) -> bool:
    return level in FIREPROOF_LEVELS
