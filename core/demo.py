"""Starter personal-record data for new athletes.

Seeding gives a fresh profile something to project against. It is idempotent:
rows are keyed by (athlete, exercise, recorded_on).
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Final

from django.db import transaction

from athletes.models import Athlete
from records.models import PersonalRecord


@dataclass(frozen=True, slots=True)
class StarterRecord:
    """A starter personal record."""

    exercise: str
    value: Decimal
    unit: str
    recorded_on: date
    target: Decimal


@dataclass(frozen=True, slots=True)
class SeedSummary:
    """Outcome for starter record seeding."""

    existing: int
    created: int

    def __str__(self) -> str:
        """Return a compact summary for command output."""

        return f"existing={self.existing} created={self.created}"


STARTER_RECORDS: Final[tuple[StarterRecord, ...]] = (
    StarterRecord("Bench Press", Decimal("185"), "lbs", date(2023, 10, 15), Decimal("225")),
    StarterRecord("Squat", Decimal("275"), "lbs", date(2023, 10, 20), Decimal("315")),
    StarterRecord("Deadlift", Decimal("315"), "lbs", date(2023, 11, 1), Decimal("405")),
    StarterRecord("5K Run", Decimal("25.5"), "min", date(2023, 11, 5), Decimal("22")),
)


def seed_personal_records(*, athlete: Athlete, write: bool) -> SeedSummary:
    """Ensure the starter records exist for an athlete.

    Args:
        athlete: Athlete receiving the records.
        write: When False, only count what would be created.

    Returns:
        SeedSummary with counts of existing and created rows.
    """

    existing = 0
    created = 0
    with transaction.atomic():
        for starter in STARTER_RECORDS:
            lookup = PersonalRecord.objects.filter(
                athlete=athlete,
                exercise=starter.exercise,
                recorded_on=starter.recorded_on,
            )
            if lookup.exists():
                existing += 1
                continue
            created += 1
            if write:
                PersonalRecord.objects.create(
                    athlete=athlete,
                    exercise=starter.exercise,
                    value=starter.value,
                    unit=starter.unit,
                    recorded_on=starter.recorded_on,
                    target=starter.target,
                )
    return SeedSummary(existing=existing, created=created)
