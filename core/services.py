"""Service-layer functions for the core app.

Services in `core` coordinate Django persistence concerns (ORM lookups,
settings) with the pure projection engine in `analysis`.
"""

from __future__ import annotations

import logging
from dataclasses import asdict, dataclass
from datetime import date

from django.conf import settings

from analysis.config import EstimatorConfig
from analysis.dto import ChartGeometry, MetricGoal, ProjectionResult, SeriesPoint
from analysis.engine import project_goal
from analysis.geometry import map_to_chart_geometry
from analysis.goals import estimate_goal
from athletes.models import Athlete
from records.models import PersonalRecord

logger = logging.getLogger(__name__)

DEFAULT_CHART_WIDTH = 300.0
DEFAULT_CHART_HEIGHT = 180.0
DISPLAY_CHART_HEADROOM = 1.0
PROJECTED_CHART_HEADROOM = 1.1


@dataclass(frozen=True, slots=True)
class RecordSummary:
    """List-row summary for the newest record of an exercise.

    Attributes:
        record_id: PersonalRecord primary key.
        exercise: Exercise name.
        current: Newest recorded value.
        target: Goal value, if set.
        unit: Display-only unit label.
        recorded_on: Date of the newest record.
        progress_percent: Progress towards target (0..100).
        time_to_goal: Estimated time-to-goal label.
        history_count: Number of entries logged for the exercise.
    """

    record_id: int
    exercise: str
    current: float
    target: float | None
    unit: str
    recorded_on: date
    progress_percent: float
    time_to_goal: str
    history_count: int

    def as_json(self) -> dict[str, object]:
        """Return a JSON-serializable representation."""

        return {
            "id": self.record_id,
            "exercise": self.exercise,
            "current": self.current,
            "target": self.target,
            "unit": self.unit,
            "recorded_on": self.recorded_on.isoformat(),
            "progress_percent": round(self.progress_percent, 1),
            "time_to_goal": self.time_to_goal,
            "history_count": self.history_count,
        }


@dataclass(frozen=True, slots=True)
class RecordProjection:
    """A projection plus chart geometry for both series."""

    record: PersonalRecord
    result: ProjectionResult
    display_chart: ChartGeometry
    projected_chart: ChartGeometry


def estimator_config() -> EstimatorConfig:
    """Build the estimator configuration from `settings.PROGRESS_PROJECTION`."""

    return EstimatorConfig.from_mapping(getattr(settings, "PROGRESS_PROJECTION", None))


def chart_size() -> tuple[float, float]:
    """Return the default (width, height) for chart geometry."""

    options = getattr(settings, "PROGRESS_PROJECTION", None) or {}
    width = float(options.get("chart_width") or DEFAULT_CHART_WIDTH)
    height = float(options.get("chart_height") or DEFAULT_CHART_HEIGHT)
    return width, height


def latest_records(*, athlete: Athlete) -> list[PersonalRecord]:
    """Return the newest record per exercise for an athlete, ordered by exercise."""

    newest: dict[str, PersonalRecord] = {}
    queryset = PersonalRecord.objects.filter(athlete=athlete).order_by(
        "exercise", "-recorded_on", "-created_at", "-id"
    )
    for record in queryset:
        newest.setdefault(record.exercise, record)
    return list(newest.values())


def goal_for_record(record: PersonalRecord, *, history: list[PersonalRecord]) -> MetricGoal:
    """Build an engine MetricGoal from a record and the athlete's history rows.

    History is passed unfiltered; the engine scopes it to `record.exercise`.
    """

    return MetricGoal(
        metric_name=record.exercise,
        current=record.value,
        target=record.target,
        unit=record.unit,
        history=tuple(history),
    )


def summarize_records(*, athlete: Athlete, config: EstimatorConfig | None = None) -> list[RecordSummary]:
    """Summarize progress for the newest record of each exercise.

    Args:
        athlete: Athlete whose records are summarized.
        config: Optional estimator configuration; defaults to settings.

    Returns:
        RecordSummary rows ordered by exercise name.
    """

    config = config or estimator_config()
    history = list(PersonalRecord.objects.filter(athlete=athlete))
    summaries: list[RecordSummary] = []
    for record in latest_records(athlete=athlete):
        estimate = estimate_goal(
            goal_for_record(record, history=history),
            experience_level=athlete.training_level,
            weight=athlete.body_weight,
            config=config,
        )
        summaries.append(
            RecordSummary(
                record_id=record.pk,
                exercise=record.exercise,
                current=float(record.value),
                target=None if record.target is None else float(record.target),
                unit=record.unit,
                recorded_on=record.recorded_on,
                progress_percent=estimate.progress_percent,
                time_to_goal=estimate.time_to_goal,
                history_count=estimate.history_count,
            )
        )
    return summaries


def project_record(
    record: PersonalRecord,
    *,
    today: date,
    width: float | None = None,
    height: float | None = None,
    selected_display: int | None = None,
    selected_projected: int | None = None,
    config: EstimatorConfig | None = None,
) -> RecordProjection:
    """Project a record towards its target and map both series to chart geometry.

    Args:
        record: Record supplying the current value and target.
        today: Injected current date.
        width: Chart width; defaults to settings.
        height: Chart height; defaults to settings.
        selected_display: Caller-selected point index in the display chart.
        selected_projected: Caller-selected point index in the projected chart.
        config: Optional estimator configuration; defaults to settings.

    Returns:
        RecordProjection with the engine result and both chart geometries.
    """

    athlete = record.athlete
    config = config or estimator_config()
    default_width, default_height = chart_size()
    width = width or default_width
    height = height or default_height

    history = list(PersonalRecord.objects.filter(athlete=athlete))
    result = project_goal(
        goal_for_record(record, history=history),
        today=today,
        experience_level=athlete.training_level,
        weight=athlete.body_weight,
        config=config,
    )
    logger.debug(
        "Projected record %s (%s): %s, %d history samples",
        record.pk,
        record.exercise,
        result.time_to_goal,
        result.history_count,
    )
    display_chart = map_to_chart_geometry(
        result.display_series,
        record.target,
        width,
        height,
        selected_index=selected_display,
        unit=record.unit,
        headroom=DISPLAY_CHART_HEADROOM,
    )
    projected_chart = map_to_chart_geometry(
        result.projected_series,
        record.target,
        width,
        height,
        selected_index=selected_projected,
        unit=record.unit,
        headroom=PROJECTED_CHART_HEADROOM,
    )
    return RecordProjection(
        record=record,
        result=result,
        display_chart=display_chart,
        projected_chart=projected_chart,
    )


def projection_payload(projection: RecordProjection) -> dict[str, object]:
    """Return a JSON-serializable payload for a RecordProjection."""

    result = projection.result
    return {
        "record_id": projection.record.pk,
        "exercise": result.metric_name,
        "unit": result.unit,
        "progress_percent": round(result.progress_percent, 1),
        "time_to_goal": result.time_to_goal,
        "improvement_rate_per_month": result.improvement_rate_per_month,
        "improvement_rate": result.improvement_rate_label,
        "experience_level": result.experience_level.value,
        "experience_note": result.experience_note,
        "history_count": result.history_count,
        "display_series": [_point_json(point) for point in result.display_series],
        "projected_series": [_point_json(point) for point in result.projected_series],
        "display_chart": asdict(projection.display_chart),
        "projected_chart": asdict(projection.projected_chart),
    }


def _point_json(point: SeriesPoint) -> dict[str, object]:
    payload = asdict(point)
    payload["date"] = point.date.isoformat()
    return payload
