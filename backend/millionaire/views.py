# millionaire/views.py
from __future__ import annotations

import logging

from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework import status

from . import services
from .errors import (
    AlreadyUsedError,
    InvalidInputError,
    InvalidStateError,
    PreconditionError,
)
from .models import Game
from .serializers import AnswerIn, HelpIn, game_state

logger = logging.getLogger(__name__)

ERROR_STATUS = {
    InvalidInputError: status.HTTP_400_BAD_REQUEST,
    PreconditionError: status.HTTP_400_BAD_REQUEST,
    AlreadyUsedError: status.HTTP_409_CONFLICT,
    InvalidStateError: status.HTTP_409_CONFLICT,
}


def _not_found():
    return Response({"detail": "Game not found"}, status=status.HTTP_404_NOT_FOUND)


def _rejected(request, game_id, exc):
    logger.warning(f"User {request.user.pk} rejected on game {game_id}: {exc}")
    return Response({"detail": str(exc)}, status=ERROR_STATUS[type(exc)])


def _state(game, **extra):
    payload = game_state(game, game.to_session())
    payload.update(extra)
    return payload


# =====================================================
# CREATE
# =====================================================

@api_view(["POST"])
@permission_classes([IsAuthenticated])
def create_game(request):
    try:
        game = services.create_game(request.user)
    except services.GameInProgressError as e:
        return Response(
            {"detail": "Finish your current game first", "game_id": e.game.id},
            status=status.HTTP_409_CONFLICT,
        )
    except services.QuestionBankError as e:
        logger.error(f"Cannot create game for user {request.user.pk}: {e}")
        return Response(
            {"detail": "Question bank is not ready"},
            status=status.HTTP_503_SERVICE_UNAVAILABLE,
        )

    return Response(_state(game), status=status.HTTP_201_CREATED)


# =====================================================
# SHOW
# =====================================================

@api_view(["GET"])
@permission_classes([IsAuthenticated])
def game_detail(request, game_id):
    try:
        game = Game.objects.get(id=game_id, user=request.user)
    except Game.DoesNotExist:
        return _not_found()

    return Response(_state(game))


# =====================================================
# ANSWER
# =====================================================

@api_view(["POST", "PUT"])
@permission_classes([IsAuthenticated])
def answer(request, game_id):
    serializer = AnswerIn(data=request.data)
    serializer.is_valid(raise_exception=True)

    try:
        game, correct = services.answer_current_question(
            game_id, request.user, serializer.validated_data["letter"]
        )
    except Game.DoesNotExist:
        return _not_found()
    except (InvalidInputError, InvalidStateError) as e:
        return _rejected(request, game_id, e)

    return Response(_state(game, answer_correct=correct))


# =====================================================
# TAKE MONEY
# =====================================================

@api_view(["POST", "PUT"])
@permission_classes([IsAuthenticated])
def take_money(request, game_id):
    try:
        game = services.take_money(game_id, request.user)
    except Game.DoesNotExist:
        return _not_found()
    except (PreconditionError, InvalidStateError) as e:
        return _rejected(request, game_id, e)

    return Response(_state(game))


# =====================================================
# HELP
# =====================================================

@api_view(["POST", "PUT"])
@permission_classes([IsAuthenticated])
def use_help(request, game_id):
    serializer = HelpIn(data=request.data)
    serializer.is_valid(raise_exception=True)

    try:
        game = services.use_help(
            game_id, request.user, serializer.validated_data["help_type"]
        )
    except Game.DoesNotExist:
        return _not_found()
    except (InvalidInputError, AlreadyUsedError, InvalidStateError) as e:
        return _rejected(request, game_id, e)

    return Response(_state(game))
