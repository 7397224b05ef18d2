"""Django app configuration for Athletes."""

from __future__ import annotations

from django.apps import AppConfig


class AthletesConfig(AppConfig):
    """AppConfig for athlete profiles."""

    default_auto_field = "django.db.models.BigAutoField"
    name = "athletes"

    def ready(self) -> None:
        """Register Athlete signal handlers."""

        from athletes import signals  # noqa: F401
