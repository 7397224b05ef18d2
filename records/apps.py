"""Django app configuration for Records."""

from __future__ import annotations

from django.apps import AppConfig


class RecordsConfig(AppConfig):
    """AppConfig for logged personal records."""

    default_auto_field = "django.db.models.BigAutoField"
    name = "records"
