# millionaire/services.py
from __future__ import annotations

import logging
import random
from typing import Optional, Tuple

from django.db import IntegrityError, transaction

from wallets.services import credit_prize

from .engine import GameSession, GameStatus
from .errors import GameError
from .ladder import LEVELS
from .models import Game, GameQuestion, Question

logger = logging.getLogger(__name__)


class GameInProgressError(GameError):
    def __init__(self, game: Game):
        super().__init__(f"User already has game {game.id} in progress")
        self.game = game


class QuestionBankError(GameError):
    pass


# =====================================================
# INTERNAL
# =====================================================

def _rng(rng: Optional[random.Random]) -> random.Random:
    return rng or random.SystemRandom()


def _active_game(user) -> Optional[Game]:
    return Game.objects.select_for_update().filter(
        user=user, status=GameStatus.IN_PROGRESS.value
    ).first()


def _locked_game(game_id, user) -> Game:
    # Raises Game.DoesNotExist for unknown ids and for other users' games
    return Game.objects.select_for_update().get(id=game_id, user=user)


def _payout(game: Game) -> None:
    if game.prize > 0:
        credit_prize(
            game.user,
            game.prize,
            reference=f"millionaire:{game.id}:{game.status}",
            game_id=game.id,
            status=game.status,
            level=game.current_level,
        )


def _save(game: Game, session: GameSession, game_questions) -> None:
    was_finished = game.finished
    game.apply_session(session, game_questions)
    if game.finished and not was_finished:
        logger.info(
            f"Game {game.id} finished: status={game.status} "
            f"level={game.current_level} prize={game.prize}"
        )
        _payout(game)


def _expire_if_needed(game: Game, session: GameSession, game_questions) -> bool:
    if not game.is_expired():
        return False
    session.kill()
    _save(game, session, game_questions)
    logger.warning(f"Game {game.id} ran out of time at level {game.current_level}")
    return True


# =====================================================
# CREATE
# =====================================================

@transaction.atomic
def create_game(user, rng: Optional[random.Random] = None) -> Game:
    rng = _rng(rng)

    active = _active_game(user)
    if active is not None:
        raise GameInProgressError(active)

    picked = []
    for level in range(LEVELS):
        ids = list(Question.objects.filter(level=level).values_list("id", flat=True))
        if not ids:
            raise QuestionBankError(f"No questions for level {level}")
        picked.append(rng.choice(ids))

    try:
        with transaction.atomic():
            game = Game.objects.create(user=user)
    except IntegrityError:
        # a concurrent create won the one-game-in-progress constraint
        active = Game.objects.filter(user=user, status=GameStatus.IN_PROGRESS.value).first()
        if active is None:
            raise
        raise GameInProgressError(active)

    questions = Question.objects.in_bulk(picked)
    GameQuestion.objects.bulk_create(
        [GameQuestion.shuffled(game, questions[qid], rng) for qid in picked]
    )

    logger.info(f"Game {game.id} created for user {user.pk}")
    return game


# =====================================================
# OPERATIONS
# =====================================================

@transaction.atomic
def answer_current_question(game_id, user, letter: str) -> Tuple[Game, bool]:
    """
    Returns the game and whether the answer was correct. An expired game
    is killed instead and reported as not answered correctly.
    """
    game = _locked_game(game_id, user)
    game_questions = game.ordered_questions()
    session = game.to_session(game_questions)

    if _expire_if_needed(game, session, game_questions):
        return game, False

    correct = session.answer(letter)
    _save(game, session, game_questions)
    return game, correct


@transaction.atomic
def take_money(game_id, user) -> Game:
    game = _locked_game(game_id, user)
    game_questions = game.ordered_questions()
    session = game.to_session(game_questions)

    if not _expire_if_needed(game, session, game_questions):
        session.take_money()
        _save(game, session, game_questions)
    return game


@transaction.atomic
def use_help(game_id, user, help_type: str, rng: Optional[random.Random] = None) -> Game:
    game = _locked_game(game_id, user)
    game_questions = game.ordered_questions()
    session = game.to_session(game_questions)

    if not _expire_if_needed(game, session, game_questions):
        session.use_help(help_type, _rng(rng))
        _save(game, session, game_questions)
        logger.info(f"Game {game.id} used {help_type} at level {game.current_level}")
    return game


@transaction.atomic
def kill_game(game: Game) -> Game:
    game = Game.objects.select_for_update().get(id=game.id)
    game_questions = game.ordered_questions()
    session = game.to_session(game_questions)

    session.kill()
    _save(game, session, game_questions)
    return game
