"""Create the PersonalRecord table."""

from __future__ import annotations

import django.db.models.deletion
from django.db import migrations, models


class Migration(migrations.Migration):
    """Initial schema for personal records."""

    initial = True

    dependencies = [
        ("athletes", "0001_initial"),
    ]

    operations = [
        migrations.CreateModel(
            name="PersonalRecord",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("exercise", models.CharField(max_length=120)),
                ("value", models.DecimalField(decimal_places=2, max_digits=10)),
                ("unit", models.CharField(default="lbs", max_length=20)),
                ("recorded_on", models.DateField()),
                ("target", models.DecimalField(blank=True, decimal_places=2, max_digits=10, null=True)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                (
                    "athlete",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="personal_records",
                        to="athletes.athlete",
                    ),
                ),
            ],
            options={
                "verbose_name": "Personal Record",
                "verbose_name_plural": "Personal Records",
                "ordering": ("athlete", "exercise", "recorded_on", "created_at"),
                "indexes": [
                    models.Index(fields=["athlete", "exercise", "recorded_on"], name="record_athlete_exercise_idx"),
                ],
            },
        ),
    ]
