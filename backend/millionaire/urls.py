# millionaire/urls.py
from django.urls import path
from . import views

urlpatterns = [
    path("", views.create_game, name="game-create"),
    path("<int:game_id>/", views.game_detail, name="game-detail"),
    path("<int:game_id>/answer/", views.answer, name="game-answer"),
    path("<int:game_id>/take-money/", views.take_money, name="game-take-money"),
    path("<int:game_id>/help/", views.use_help, name="game-help"),
]
