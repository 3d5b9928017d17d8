from django.contrib import admin
from django.contrib.auth.admin import UserAdmin
from .models import User

@admin.register(User)
class MillionaireUserAdmin(UserAdmin):
    list_display = ("username", "email", "user_uid", "is_staff", "date_joined")
    readonly_fields = ("user_uid",)
