"""
Pytest fixtures for the millionaire backend tests.

Engine fixtures are plain objects; the `game` and `question_bank`
fixtures need the database.
"""

import random

import pytest
from rest_framework.test import APIClient

from millionaire.engine import GameQuestion, GameSession
from millionaire.helps import LETTERS
from millionaire.ladder import LEVELS


def build_questions(correct_keys=None):
    keys = correct_keys or [LETTERS[level % len(LETTERS)] for level in range(LEVELS)]
    return tuple(
        GameQuestion(
            level=level,
            text=f"Question #{level}",
            answers={letter: f"Answer {letter.upper()}{level}" for letter in LETTERS},
            correct_answer_key=key,
        )
        for level, key in enumerate(keys)
    )


@pytest.fixture
def questions():
    """Fifteen questions whose correct keys cycle a, b, c, d."""
    return build_questions()


@pytest.fixture
def session(questions):
    """Fresh session at level 0."""
    return GameSession(user_id=1, questions=questions)


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def question_bank(db):
    """Two questions per level; answer1 is the right one."""
    from millionaire.models import Question

    return [
        Question.objects.create(
            level=level,
            text=f"Level {level} question {n}",
            answer1=f"Right {level}.{n}",
            answer2=f"Wrong A {level}.{n}",
            answer3=f"Wrong B {level}.{n}",
            answer4=f"Wrong C {level}.{n}",
        )
        for level in range(LEVELS)
        for n in range(2)
    ]


@pytest.fixture
def user(django_user_model):
    return django_user_model.objects.create_user(
        username="player", email="player@example.com", password="secret-pass-1"
    )


@pytest.fixture
def other_user(django_user_model):
    return django_user_model.objects.create_user(
        username="stranger", email="stranger@example.com", password="secret-pass-2"
    )


@pytest.fixture
def game(user, question_bank):
    """In-progress game for `user` built from the question bank."""
    from millionaire.services import create_game

    return create_game(user, rng=random.Random(42))


@pytest.fixture
def api_client():
    return APIClient()


@pytest.fixture
def player_client(api_client, user):
    api_client.force_authenticate(user=user)
    return api_client
