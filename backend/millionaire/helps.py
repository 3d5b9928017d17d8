# millionaire/helps.py
from __future__ import annotations

import random
from typing import Dict, List, Sequence

AUDIENCE_HELP = "audience_help"
FIFTY_FIFTY = "fifty_fifty"

HELP_TYPES = (AUDIENCE_HELP, FIFTY_FIFTY)

LETTERS = ("a", "b", "c", "d")


def audience_distribution(
    keys: Sequence[str], correct_key: str, rng: random.Random
) -> Dict[str, int]:
    """
    Simulated audience vote, in whole percents summing to exactly 100.

    Every option gets a random base share; the correct one gets an extra
    bonus so the hall is usually (not always) right.
    """
    raw = {key: rng.randint(1, 60) for key in keys}
    raw[correct_key] += rng.randint(30, 70)

    total = sum(raw.values())
    exact = {key: raw[key] * 100 / total for key in keys}
    votes = {key: int(exact[key]) for key in keys}

    # Hand the rounding leftovers to the largest remainders.
    leftover = 100 - sum(votes.values())
    by_remainder = sorted(keys, key=lambda k: exact[k] - votes[k], reverse=True)
    for key in by_remainder[:leftover]:
        votes[key] += 1

    return votes


def fifty_fifty(keys: Sequence[str], correct_key: str, rng: random.Random) -> List[str]:
    """Correct key plus one random wrong key, in letter order."""
    wrong = [key for key in keys if key != correct_key]
    return sorted([correct_key, rng.choice(wrong)])


GENERATORS = {
    AUDIENCE_HELP: audience_distribution,
    FIFTY_FIFTY: fifty_fifty,
}
