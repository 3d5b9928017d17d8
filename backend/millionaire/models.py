# millionaire/models.py
from __future__ import annotations

import random
from datetime import timedelta
from decimal import Decimal

from django.conf import settings
from django.core.validators import MaxValueValidator, MinValueValidator
from django.db import models
from django.utils import timezone

from .engine import GameQuestion as QuestionSnapshot
from .engine import GameSession, GameStatus
from .helps import LETTERS
from .ladder import LAST_LEVEL, LEVELS

User = settings.AUTH_USER_MODEL


class Question(models.Model):
    # answer1 is always the correct one; letters are shuffled per game
    level = models.PositiveSmallIntegerField(
        validators=[MinValueValidator(0), MaxValueValidator(LAST_LEVEL)], db_index=True
    )
    text = models.TextField(unique=True)
    answer1 = models.CharField(max_length=255)
    answer2 = models.CharField(max_length=255)
    answer3 = models.CharField(max_length=255)
    answer4 = models.CharField(max_length=255)

    created_at = models.DateTimeField(auto_now_add=True)

    def __str__(self) -> str:
        return f"L{self.level}: {self.text[:40]}"


class Game(models.Model):
    STATUS_CHOICES = [
        (GameStatus.IN_PROGRESS.value, "In progress"),
        (GameStatus.WON.value, "Won"),
        (GameStatus.FAIL.value, "Failed"),
        (GameStatus.MONEY.value, "Took the money"),
        (GameStatus.KILLED.value, "Killed"),
    ]

    user = models.ForeignKey(User, on_delete=models.CASCADE, related_name="games")
    current_level = models.PositiveSmallIntegerField(
        default=0, validators=[MaxValueValidator(LEVELS)]
    )
    status = models.CharField(
        max_length=16,
        choices=STATUS_CHOICES,
        default=GameStatus.IN_PROGRESS.value,
        db_index=True,
    )
    prize = models.DecimalField(max_digits=14, decimal_places=2, default=Decimal("0.00"))

    audience_help_used = models.BooleanField(default=False)
    fifty_fifty_used = models.BooleanField(default=False)

    created_at = models.DateTimeField(auto_now_add=True)
    finished_at = models.DateTimeField(null=True, blank=True)

    class Meta:
        ordering = ["-created_at"]
        constraints = [
            models.UniqueConstraint(
                fields=["user"],
                condition=models.Q(status="in_progress"),
                name="one_game_in_progress_per_user",
            ),
        ]
        indexes = [
            models.Index(fields=["user", "created_at"], name="game_user_created_idx"),
        ]

    def __str__(self) -> str:
        return f"Game {self.id} L{self.current_level} ({self.status})"

    @property
    def finished(self) -> bool:
        return self.status != GameStatus.IN_PROGRESS.value

    def is_expired(self, now=None) -> bool:
        if self.finished:
            return False
        now = now or timezone.now()
        limit = timedelta(minutes=settings.MILLIONAIRE_TIME_LIMIT_MINUTES)
        return self.created_at + limit < now

    def ordered_questions(self):
        return list(self.game_questions.select_related("question").order_by("question__level"))

    def to_session(self, game_questions=None) -> GameSession:
        game_questions = game_questions or self.ordered_questions()
        return GameSession(
            user_id=self.user_id,
            questions=[gq.snapshot() for gq in game_questions],
            current_level=self.current_level,
            status=GameStatus(self.status),
            prize=self.prize,
            audience_help_used=self.audience_help_used,
            fifty_fifty_used=self.fifty_fifty_used,
            help_hashes={
                gq.question.level: dict(gq.help_hash) for gq in game_questions if gq.help_hash
            },
        )

    def apply_session(self, session: GameSession, game_questions=None) -> None:
        """Copy a session's state back onto this row and its questions, then save."""
        was_finished = self.finished

        self.current_level = session.current_level
        self.status = session.status.value
        self.prize = session.prize
        self.audience_help_used = session.audience_help_used
        self.fifty_fifty_used = session.fifty_fifty_used
        if session.finished and not was_finished:
            self.finished_at = timezone.now()

        self.save(update_fields=[
            "current_level",
            "status",
            "prize",
            "audience_help_used",
            "fifty_fifty_used",
            "finished_at",
        ])

        for gq in game_questions or self.ordered_questions():
            help_hash = session.help_hash_for(gq.question.level)
            if help_hash != gq.help_hash:
                gq.help_hash = help_hash
                gq.save(update_fields=["help_hash"])


class GameQuestion(models.Model):
    game = models.ForeignKey(Game, on_delete=models.CASCADE, related_name="game_questions")
    question = models.ForeignKey(Question, on_delete=models.PROTECT, related_name="+")

    # which answerN of the question sits behind each letter
    a = models.PositiveSmallIntegerField()
    b = models.PositiveSmallIntegerField()
    c = models.PositiveSmallIntegerField()
    d = models.PositiveSmallIntegerField()

    help_hash = models.JSONField(default=dict, blank=True)

    class Meta:
        unique_together = [("game", "question")]

    def __str__(self) -> str:
        return f"Game {self.game_id} / {self.question}"

    @classmethod
    def shuffled(cls, game: Game, question: Question, rng: random.Random) -> "GameQuestion":
        slots = [1, 2, 3, 4]
        rng.shuffle(slots)
        return cls(game=game, question=question, **dict(zip(LETTERS, slots)))

    @property
    def variants(self) -> dict:
        return {
            letter: getattr(self.question, f"answer{getattr(self, letter)}")
            for letter in LETTERS
        }

    @property
    def correct_answer_key(self) -> str:
        return next(letter for letter in LETTERS if getattr(self, letter) == 1)

    def snapshot(self) -> QuestionSnapshot:
        return QuestionSnapshot(
            level=self.question.level,
            text=self.question.text,
            answers=self.variants,
            correct_answer_key=self.correct_answer_key,
        )
