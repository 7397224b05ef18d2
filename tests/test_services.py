"""Integration tests for the record service layer."""

from __future__ import annotations

from datetime import date
from decimal import Decimal

import pytest

from analysis.config import EstimatorConfig
from core.services import estimator_config, latest_records, project_record, summarize_records
from records.models import PersonalRecord

pytestmark = pytest.mark.integration


def _log(athlete, exercise: str, value: str, recorded_on: date, target: str = "160"):
    return PersonalRecord.objects.create(
        athlete=athlete,
        exercise=exercise,
        value=Decimal(value),
        recorded_on=recorded_on,
        target=Decimal(target),
    )


@pytest.mark.django_db
def test_latest_records_prefers_newest_date_then_newest_entry(athlete) -> None:
    """Same-day entries resolve to the one logged last."""

    _log(athlete, "Squat", "90", date(2024, 1, 1))
    _log(athlete, "Squat", "95", date(2024, 2, 1))
    newest = _log(athlete, "Squat", "100", date(2024, 2, 1))

    assert latest_records(athlete=athlete) == [newest]


@pytest.mark.django_db
def test_summaries_use_athlete_profile(athlete) -> None:
    """Training level and body weight feed the assumed-rate estimate."""

    _log(athlete, "Squat", "100", date(2024, 1, 1))

    assert summarize_records(athlete=athlete)[0].time_to_goal == "~12 months"

    athlete.body_weight = Decimal("250")
    athlete.save()
    assert summarize_records(athlete=athlete)[0].time_to_goal == "~1 years"

    athlete.body_weight = None
    athlete.training_level = "beginner"
    athlete.save()
    assert summarize_records(athlete=athlete)[0].time_to_goal == "~6 months"


@pytest.mark.django_db
def test_estimator_config_reads_settings(settings) -> None:
    """Thresholds come from PROGRESS_PROJECTION."""

    settings.PROGRESS_PROJECTION = {"heavy_weight_threshold": 175.0, "chart_width": 200.0}

    config = estimator_config()

    assert config.heavy_weight_threshold == 175.0
    assert config.light_weight_threshold == 150.0


@pytest.mark.django_db
def test_project_record_uses_display_headroom_for_history_chart(athlete) -> None:
    """The history chart puts the highest point on the top edge."""

    _log(athlete, "Squat", "80", date(2024, 1, 1), target="100")
    record = _log(athlete, "Squat", "100", date(2024, 2, 1), target="100")

    projection = project_record(record, today=date(2024, 2, 1), width=100, height=100, config=EstimatorConfig())

    assert projection.result.time_to_goal == "Goal reached!"
    assert projection.display_chart.max_value == 100.0
    assert projection.display_chart.points[-1].y == pytest.approx(0.0)
    assert projection.projected_chart.max_value == pytest.approx(110.0)
    assert len(projection.projected_chart.points) == 1
