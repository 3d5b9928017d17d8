import django.core.validators
import django.db.models.deletion
from decimal import Decimal
from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name="Question",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("level", models.PositiveSmallIntegerField(db_index=True, validators=[django.core.validators.MinValueValidator(0), django.core.validators.MaxValueValidator(14)])),
                ("text", models.TextField(unique=True)),
                ("answer1", models.CharField(max_length=255)),
                ("answer2", models.CharField(max_length=255)),
                ("answer3", models.CharField(max_length=255)),
                ("answer4", models.CharField(max_length=255)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
            ],
        ),
        migrations.CreateModel(
            name="Game",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("current_level", models.PositiveSmallIntegerField(default=0, validators=[django.core.validators.MaxValueValidator(15)])),
                ("status", models.CharField(choices=[("in_progress", "In progress"), ("won", "Won"), ("fail", "Failed"), ("money", "Took the money"), ("killed", "Killed")], db_index=True, default="in_progress", max_length=16)),
                ("prize", models.DecimalField(decimal_places=2, default=Decimal("0.00"), max_digits=14)),
                ("audience_help_used", models.BooleanField(default=False)),
                ("fifty_fifty_used", models.BooleanField(default=False)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("finished_at", models.DateTimeField(blank=True, null=True)),
                ("user", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="games", to=settings.AUTH_USER_MODEL)),
            ],
            options={
                "ordering": ["-created_at"],
                "indexes": [models.Index(fields=["user", "created_at"], name="game_user_created_idx")],
                "constraints": [models.UniqueConstraint(condition=models.Q(("status", "in_progress")), fields=("user",), name="one_game_in_progress_per_user")],
            },
        ),
        migrations.CreateModel(
            name="GameQuestion",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("a", models.PositiveSmallIntegerField()),
                ("b", models.PositiveSmallIntegerField()),
                ("c", models.PositiveSmallIntegerField()),
                ("d", models.PositiveSmallIntegerField()),
                ("help_hash", models.JSONField(blank=True, default=dict)),
                ("game", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="game_questions", to="millionaire.game")),
                ("question", models.ForeignKey(on_delete=django.db.models.deletion.PROTECT, related_name="+", to="millionaire.question")),
            ],
            options={
                "unique_together": {("game", "question")},
            },
        ),
    ]
