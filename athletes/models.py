"""Database models for athlete profiles."""

from __future__ import annotations

from django.conf import settings
from django.core.validators import MinValueValidator
from django.db import models

from analysis.experience import DEFAULT_EXPERIENCE_LEVEL, ExperienceLevel

TRAINING_LEVEL_CHOICES: tuple[tuple[str, str], ...] = tuple(
    (level.value, level.value.title()) for level in ExperienceLevel
)


class Athlete(models.Model):
    """Profile owning personal records for a single auth user.

    Attributes:
        user: Owning auth user.
        display_name: Name shown in the UI.
        training_level: Experience level used to bias projections.
        body_weight: Optional body weight used by the assumed-rate estimate.
        created_at: Creation timestamp.
    """

    user = models.OneToOneField(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="athlete",
    )
    display_name = models.CharField(max_length=80, blank=True)
    training_level = models.CharField(
        max_length=20,
        choices=TRAINING_LEVEL_CHOICES,
        default=DEFAULT_EXPERIENCE_LEVEL.value,
    )
    body_weight = models.DecimalField(
        max_digits=6,
        decimal_places=2,
        null=True,
        blank=True,
        validators=[MinValueValidator(0)],
        help_text="Optional body weight; heavier athletes get slower assumed progress.",
    )
    created_at = models.DateTimeField(auto_now_add=True)

    def __str__(self) -> str:
        """Return the athlete display name for display contexts."""

        return self.display_name or f"Athlete({self.user_id})"
