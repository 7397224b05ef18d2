"""Seed starter personal records for an athlete (idempotent)."""

from __future__ import annotations

from django.contrib.auth import get_user_model
from django.core.management.base import BaseCommand, CommandError

from athletes.models import Athlete
from core.demo import seed_personal_records


class Command(BaseCommand):
    """Create the starter personal records for a user's Athlete."""

    help = "Ensure starter personal records exist for a user (idempotent)."

    def add_arguments(self, parser) -> None:
        """Add command arguments."""

        parser.add_argument("--user", required=True, help="Username to seed.")
        parser.add_argument(
            "--check",
            action="store_true",
            help="Dry-run: report what would be created without writing.",
        )
        parser.add_argument(
            "--write",
            action="store_true",
            help="Write changes to the database.",
        )

    def handle(self, *args, **options) -> str | None:
        """Run the command."""

        username: str = options["user"]
        check: bool = options["check"]
        write: bool = options["write"]

        if check and write:
            raise CommandError("Use either --check or --write, not both.")
        if not check and not write:
            raise CommandError("Refusing to write without explicit intent; pass --check or --write.")

        user = get_user_model().objects.filter(username=username).first()
        if user is None:
            raise CommandError(f"Unknown user: {username!r}")
        athlete, _ = Athlete.objects.get_or_create(user=user, defaults={"display_name": username})

        summary = seed_personal_records(athlete=athlete, write=write)
        mode = "CHECK" if check else "WRITE"
        self.stdout.write(f"[{mode}] user={username} summary={summary}")
        return None
