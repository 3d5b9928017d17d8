# millionaire/serializers.py
from __future__ import annotations
from rest_framework import serializers

from .ladder import LEVELS, is_fireproof, prize_for


class AnswerIn(serializers.Serializer):
    letter = serializers.CharField(max_length=8, trim_whitespace=False)


class HelpIn(serializers.Serializer):
    help_type = serializers.CharField(max_length=32)


class CurrentQuestionOut(serializers.Serializer):
    level = serializers.IntegerField()
    text = serializers.CharField()
    answers = serializers.DictField(child=serializers.CharField())
    help_hash = serializers.DictField()


class RungOut(serializers.Serializer):
    level = serializers.IntegerField()
    prize = serializers.DecimalField(max_digits=14, decimal_places=2)
    fireproof = serializers.BooleanField()


class GameStateOut(serializers.Serializer):
    game_id = serializers.IntegerField()
    status = serializers.CharField()
    finished = serializers.BooleanField()
    current_level = serializers.IntegerField()
    prize = serializers.DecimalField(max_digits=14, decimal_places=2)
    audience_help_used = serializers.BooleanField()
    fifty_fifty_used = serializers.BooleanField()
    current_question = CurrentQuestionOut(allow_null=True)
    ladder = RungOut(many=True)
    created_at = serializers.DateTimeField()
    finished_at = serializers.DateTimeField(allow_null=True)


def game_state(game, session) -> dict:
    question = None if session.finished else session.current_question
    return GameStateOut({
        "game_id": game.id,
        "status": session.status.value,
        "finished": session.finished,
        "current_level": session.current_level,
        "prize": session.prize,
        "audience_help_used": session.audience_help_used,
        "fifty_fifty_used": session.fifty_fifty_used,
        "current_question": question and {
            "level": question.level,
            "text": question.text,
            "answers": dict(question.answers),
            "help_hash": session.help_hash_for(question.level),
        },
        "ladder": [
            {"level": level, "prize": prize_for(level), "fireproof": is_fireproof(level)}
            for level in range(LEVELS)
        ],
        "created_at": game.created_at,
        "finished_at": game.finished_at,
    }).data
