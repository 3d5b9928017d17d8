# millionaire/admin.py
from django.contrib import admin
from .models import Question, Game, GameQuestion

@admin.register(Question)
class QuestionAdmin(admin.ModelAdmin):
    list_display = ("id", "level", "text", "answer1", "created_at")
    list_filter = ("level",)
    search_fields = ("text",)

class GameQuestionInline(admin.TabularInline):
    model = GameQuestion
    extra = 0
    readonly_fields = ("question", "a", "b", "c", "d", "help_hash")
    can_delete = False

@admin.register(Game)
class GameAdmin(admin.ModelAdmin):
    list_display = ("id", "user", "status", "current_level", "prize", "audience_help_used", "fifty_fifty_used", "created_at", "finished_at")
    list_filter = ("status",)
    search_fields = ("id", "user__email", "user__username")
    readonly_fields = ("created_at", "finished_at")
    inlines = [GameQuestionInline]
