"""Admin registrations for Athlete models."""

from __future__ import annotations

from django.contrib import admin

from athletes.models import Athlete


@admin.register(Athlete)
class AthleteAdmin(admin.ModelAdmin):
    """Admin configuration for Athlete."""

    list_display = ("display_name", "user", "training_level", "body_weight", "created_at")
    list_filter = ("training_level",)
    search_fields = ("display_name", "user__username")
