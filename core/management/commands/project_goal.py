"""Print the goal projection for a user's newest record of an exercise."""

from __future__ import annotations

from datetime import date

from django.contrib.auth import get_user_model
from django.core.management.base import BaseCommand, CommandError
from django.utils import timezone

from athletes.models import Athlete
from core.services import latest_records, project_record


class Command(BaseCommand):
    """Project progress towards a personal-record target."""

    help = "Print progress, time-to-goal and both chart series for an exercise."

    def add_arguments(self, parser) -> None:
        """Add command arguments."""

        parser.add_argument("--user", required=True, help="Username owning the records.")
        parser.add_argument("--exercise", required=True, help="Exercise name (case-sensitive).")
        parser.add_argument(
            "--today",
            default=None,
            help="Override the current date (YYYY-MM-DD) for reproducible output.",
        )

    def handle(self, *args, **options) -> str | None:
        """Run the command."""

        username: str = options["user"]
        exercise: str = options["exercise"].strip()
        today = _parse_today(options["today"])

        user = get_user_model().objects.filter(username=username).first()
        if user is None:
            raise CommandError(f"Unknown user: {username!r}")
        athlete = Athlete.objects.filter(user=user).first()
        if athlete is None:
            raise CommandError(f"User {username!r} does not have an associated Athlete.")

        record = next((r for r in latest_records(athlete=athlete) if r.exercise == exercise), None)
        if record is None:
            raise CommandError(f"No records for exercise {exercise!r}.")

        result = project_record(record, today=today).result
        self.stdout.write(f"{result.metric_name}: {record.value} -> {record.target} {result.unit}".rstrip())
        self.stdout.write(f"progress={result.progress_percent:.1f}%")
        self.stdout.write(f"time_to_goal={result.time_to_goal}")
        self.stdout.write(f"improvement_rate={result.improvement_rate_label}")
        self.stdout.write(f"experience={result.experience_level.value} ({result.experience_note})")
        self.stdout.write("display:")
        for point in result.display_series:
            marker = " (synthetic)" if point.is_synthetic else ""
            self.stdout.write(f"  {point.label}: {point.value:g}{marker}")
        self.stdout.write("projected:")
        for point in result.projected_series:
            self.stdout.write(f"  {point.label}: {point.value:g}")
        return None


def _parse_today(value: str | None) -> date:
    if not value:
        return timezone.localdate()
    try:
        return date.fromisoformat(value)
    except ValueError as exc:
        raise CommandError(f"Invalid --today value {value!r}; expected YYYY-MM-DD.") from exc
