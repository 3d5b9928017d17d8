# millionaire/engine.py
from __future__ import annotations

import copy
import enum
import random
from dataclasses import dataclass, field
from decimal import Decimal
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional, Tuple

from .errors import (
    AlreadyUsedError,
    InvalidInputError,
    InvalidStateError,
    PreconditionError,
)
from .helps import GENERATORS, HELP_TYPES, LETTERS
from .ladder import D0, LAST_LEVEL, LEVELS, TOP_PRIZE, fireproof_fallback, prize_for


class GameStatus(str, enum.Enum):
    IN_PROGRESS = "in_progress"
    WON = "won"
    FAIL = "fail"
    MONEY = "money"
    KILLED = "killed"

    @property
    def is_terminal(self) -> bool:
        return self is not GameStatus.IN_PROGRESS


@dataclass(frozen=True)
class GameQuestion:
    level: int
    text: str
    answers: Mapping[str, str]
    correct_answer_key: str

    def __post_init__(self):
        object.__setattr__(self, "answers", MappingProxyType(dict(self.answers)))
        if tuple(sorted(self.answers)) != LETTERS:
            raise ValueError(f"Question needs answers keyed {LETTERS}")
        if self.correct_answer_key not in self.answers:
            raise ValueError(f"Unknown correct key {self.correct_answer_key!r}")

    def answer_correct(self, letter: str) -> bool:
        return letter == self.correct_answer_key

    def __hash__(self):
        return hash((self.level, self.text, tuple(sorted(self.answers.items())), self.correct_answer_key))


@dataclass
class GameSession:
    """
    One player's run up the prize ladder.

    The session only computes state transitions; loading, locking and
    saving are left to whoever owns the storage. A terminal transition
    assigns status, prize and level together through `_finish`, and every
    rejected call raises before anything is assigned.
    """

    user_id: Any
    questions: Tuple[GameQuestion, ...]
    current_level: int = 0
    status: GameStatus = GameStatus.IN_PROGRESS
    prize: Decimal = D0
    audience_help_used: bool = False
    fifty_fifty_used: bool = False
    help_hashes: Dict[int, Dict[str, Any]] = field(default_factory=dict)

    def __post_init__(self):
        self.questions = tuple(self.questions)
        self.status = GameStatus(self.status)
        if len(self.questions) != LEVELS:
            raise ValueError(f"A game needs exactly {LEVELS} questions, got {len(self.questions)}")
        if not 0 <= self.current_level <= LEVELS:
            raise ValueError(f"Level {self.current_level} is outside the prize ladder")
        if self.current_level == LEVELS and self.status is not GameStatus.WON:
            raise ValueError("Only a won game can stand past the last level")

    # -------------------------------------------------
    # queries
    # -------------------------------------------------

    @property
    def finished(self) -> bool:
        return self.status.is_terminal

    @property
    def previous_level(self) -> int:
        return self.current_level - 1

    @property
    def current_question(self) -> Optional[GameQuestion]:
        if self.current_level >= LEVELS:
            return None
        return self.questions[self.current_level]

    def help_hash_for(self, level: int) -> Dict[str, Any]:
        return copy.deepcopy(self.help_hashes.get(level, {}))

    def help_used(self, help_type: str) -> bool:
        return getattr(self, f"{help_type}_used")

    # -------------------------------------------------
    # operations
    # -------------------------------------------------

    def answer(self, letter: str) -> bool:
        """Returns True when the letter was the correct one."""
        self._ensure_in_progress()
        if letter not in LETTERS:
            raise InvalidInputError(f"Unknown answer letter {letter!r}")

        if not self.current_question.answer_correct(letter):
            self._finish(GameStatus.FAIL, fireproof_fallback(self.current_level))
            return False

        if self.current_level == LAST_LEVEL:
            self._finish(GameStatus.WON, TOP_PRIZE, level=LEVELS)
        else:
            self.current_level += 1
        return True

    def take_money(self) -> Decimal:
        self._ensure_in_progress()
        if self.current_level == 0:
            raise PreconditionError("Answer at least one question before taking the money")

        self._finish(GameStatus.MONEY, prize_for(self.previous_level))
        return self.prize

    def use_help(self, help_type: str, rng: Optional[random.Random] = None):
        self._ensure_in_progress()
        if help_type not in HELP_TYPES:
            raise InvalidInputError(f"Unknown help type {help_type!r}")
        if self.help_used(help_type):
            raise AlreadyUsedError(f"{help_type} was already used in this game")

        question = self.current_question
        value = GENERATORS[help_type](
            sorted(question.answers), question.correct_answer_key, rng or random.Random()
        )

        setattr(self, f"{help_type}_used", True)
        self.help_hashes.setdefault(self.current_level, {})[help_type] = value
        return copy.deepcopy(value)

    def kill(self) -> Decimal:
        self._ensure_in_progress()
        self._finish(GameStatus.KILLED, fireproof_fallback(self.current_level))
        return self.prize

    # -------------------------------------------------
    # internals
    # -------------------------------------------------

    def _ensure_in_progress(self) -> None:
        if self.finished:
            raise InvalidStateError(f"Game is already finished ({self.status.value})")

    def _finish(self, status: GameStatus, prize: Decimal, level: Optional[int] = None) -> None:
        if level is None:
            level = self.current_level
        self.status, self.prize, self.current_level = status, prize, level
