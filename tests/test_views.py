"""API tests for the games endpoints."""

from decimal import Decimal

import pytest
from django.urls import reverse

from millionaire.helps import AUDIENCE_HELP, FIFTY_FIFTY, LETTERS
from millionaire.models import Game
from wallets.models import Wallet

pytestmark = pytest.mark.django_db


def url(name, game):
    return reverse(name, args=[game.id])


def correct_letter(game):
    return Game.objects.get(id=game.id).to_session().current_question.correct_answer_key


def wrong_letter(game):
    correct = correct_letter(game)
    return next(l for l in LETTERS if l != correct)


class TestAnonymous:
    """Anonymous users are kicked out before reaching the game."""

    def test_kick_from_show(self, api_client, game):
        response = api_client.get(url("game-detail", game))
        assert response.status_code in (401, 403)

    def test_kick_from_create(self, api_client, question_bank):
        response = api_client.post(reverse("game-create"))
        assert response.status_code in (401, 403)
        assert not Game.objects.exists()

    def test_kick_from_answer(self, api_client, game):
        response = api_client.post(
            url("game-answer", game), {"letter": correct_letter(game)}, format="json"
        )
        assert response.status_code in (401, 403)

        game.refresh_from_db()
        assert game.current_level == 0

    def test_kick_from_take_money(self, api_client, game):
        Game.objects.filter(id=game.id).update(current_level=4)
        response = api_client.post(url("game-take-money", game))
        assert response.status_code in (401, 403)

        game.refresh_from_db()
        assert not game.finished


class TestPlayer:
    """Signed-in player drives their own game."""

    def test_creates_game(self, player_client, user, question_bank):
        response = player_client.post(reverse("game-create"))

        assert response.status_code == 201
        data = response.json()
        assert data["status"] == "in_progress"
        assert data["finished"] is False
        assert data["current_level"] == 0
        assert sorted(data["current_question"]["answers"]) == list(LETTERS)
        assert Game.objects.get(id=data["game_id"]).user == user

    def test_cannot_create_second_game(self, player_client, game):
        response = player_client.post(reverse("game-create"))

        assert response.status_code == 409
        assert response.json()["game_id"] == game.id
        assert Game.objects.count() == 1

    def test_concurrent_create_returns_conflict(self, player_client, game, monkeypatch):
        from millionaire import services

        monkeypatch.setattr(services, "_active_game", lambda user: None)
        response = player_client.post(reverse("game-create"))

        assert response.status_code == 409
        assert response.json()["game_id"] == game.id
        assert Game.objects.count() == 1

    def test_empty_question_bank(self, player_client, db):
        response = player_client.post(reverse("game-create"))
        assert response.status_code == 503

    def test_shows_game(self, player_client, game):
        response = player_client.get(url("game-detail", game))

        assert response.status_code == 200
        data = response.json()
        assert data["game_id"] == game.id
        assert data["current_question"]["level"] == 0
        assert data["current_question"]["help_hash"] == {}

    def test_shows_prize_ladder(self, player_client, game):
        ladder = player_client.get(url("game-detail", game)).json()["ladder"]

        assert [rung["level"] for rung in ladder] == list(range(15))
        assert [rung["level"] for rung in ladder if rung["fireproof"]] == [4, 9, 14]
        assert Decimal(ladder[4]["prize"]) == Decimal("1000")
        assert Decimal(ladder[14]["prize"]) == Decimal("1000000")

    def test_alien_game(self, player_client, other_user, question_bank):
        from millionaire.services import create_game

        alien = create_game(other_user)
        response = player_client.get(url("game-detail", alien))
        assert response.status_code == 404

        response = player_client.post(url("game-answer", alien), {"letter": "a"}, format="json")
        assert response.status_code == 404

    def test_answers_correct(self, player_client, game):
        response = player_client.post(
            url("game-answer", game), {"letter": correct_letter(game)}, format="json"
        )

        assert response.status_code == 200
        data = response.json()
        assert data["answer_correct"] is True
        assert data["finished"] is False
        assert data["current_level"] == 1
        assert data["current_question"]["level"] == 1

    def test_answers_incorrect(self, player_client, game):
        response = player_client.post(
            url("game-answer", game), {"letter": wrong_letter(game)}, format="json"
        )

        data = response.json()
        assert data["answer_correct"] is False
        assert data["finished"] is True
        assert data["status"] == "fail"
        assert data["current_level"] == 0
        assert data["current_question"] is None

    def test_answer_with_bad_letter(self, player_client, game):
        response = player_client.post(url("game-answer", game), {"letter": "e"}, format="json")
        assert response.status_code == 400

    def test_answer_on_finished_game(self, player_client, game):
        player_client.post(url("game-answer", game), {"letter": wrong_letter(game)}, format="json")
        response = player_client.post(url("game-answer", game), {"letter": "a"}, format="json")

        assert response.status_code == 409
        assert "detail" in response.json()

    def test_takes_money(self, player_client, user, game):
        Game.objects.filter(id=game.id).update(current_level=4)

        response = player_client.post(url("game-take-money", game))

        assert response.status_code == 200
        data = response.json()
        assert data["finished"] is True
        assert data["status"] == "money"
        assert Decimal(data["prize"]) == Decimal("500")
        assert Wallet.objects.get(user=user).balance == Decimal("500")

        wallet = player_client.get(reverse("wallet-summary")).json()
        assert Decimal(wallet["wallet"]["balance"]) == Decimal("500")
        assert len(wallet["transactions"]) == 1

    def test_take_money_at_start_rejected(self, player_client, game):
        response = player_client.post(url("game-take-money", game))

        assert response.status_code == 400
        game.refresh_from_db()
        assert not game.finished

    def test_uses_audience_help(self, player_client, game):
        response = player_client.post(
            url("game-help", game), {"help_type": AUDIENCE_HELP}, format="json"
        )

        assert response.status_code == 200
        data = response.json()
        assert data["finished"] is False
        assert data["audience_help_used"] is True
        votes = data["current_question"]["help_hash"][AUDIENCE_HELP]
        assert sorted(votes) == list(LETTERS)

    def test_uses_fifty_fifty(self, player_client, game):
        correct = correct_letter(game)
        response = player_client.post(
            url("game-help", game), {"help_type": FIFTY_FIFTY}, format="json"
        )

        data = response.json()
        assert data["fifty_fifty_used"] is True
        assert correct in data["current_question"]["help_hash"][FIFTY_FIFTY]

    def test_help_twice_rejected(self, player_client, game):
        player_client.post(url("game-help", game), {"help_type": FIFTY_FIFTY}, format="json")
        response = player_client.post(
            url("game-help", game), {"help_type": FIFTY_FIFTY}, format="json"
        )
        assert response.status_code == 409

    def test_unknown_help_rejected(self, player_client, game):
        response = player_client.post(
            url("game-help", game), {"help_type": "friend_call"}, format="json"
        )
        assert response.status_code == 400
