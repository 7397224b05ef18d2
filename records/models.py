"""Database models for logged personal records."""

from __future__ import annotations

from django.db import models

from athletes.models import Athlete


class PersonalRecord(models.Model):
    """A dated personal-record entry for one exercise.

    Every entry is both a history sample and, when it is the newest for its
    exercise, the source of the current value and goal target.

    Attributes:
        athlete: Owning athlete.
        exercise: Exercise (metric) name.
        value: Recorded value.
        unit: Display-only unit label; values are never converted.
        recorded_on: Date the record was achieved.
        target: Optional goal value for the exercise.
        created_at: Creation timestamp (tie-breaker for same-day entries).
    """

    athlete = models.ForeignKey(Athlete, on_delete=models.CASCADE, related_name="personal_records")
    exercise = models.CharField(max_length=120)
    value = models.DecimalField(max_digits=10, decimal_places=2)
    unit = models.CharField(max_length=20, default="lbs")
    recorded_on = models.DateField()
    target = models.DecimalField(max_digits=10, decimal_places=2, null=True, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        verbose_name = "Personal Record"
        verbose_name_plural = "Personal Records"
        ordering = ("athlete", "exercise", "recorded_on", "created_at")
        indexes = [
            models.Index(fields=["athlete", "exercise", "recorded_on"], name="record_athlete_exercise_idx"),
        ]

    def __str__(self) -> str:
        """Return a concise display string for admin/debug usage."""

        return f"{self.exercise}: {self.value} {self.unit} on {self.recorded_on.isoformat()}"
