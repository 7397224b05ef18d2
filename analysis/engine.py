"""Orchestration entry points for the projection engine.

The engine is a pure, non-Django pipeline that accepts in-memory inputs and
returns DTOs: history normalization feeds goal estimation, which feeds series
generation; chart geometry is mapped per series on demand. It must not import
Django or perform database writes.
"""

from __future__ import annotations

from datetime import date

from .config import EstimatorConfig
from .dto import MetricGoal, ProjectionResult
from .goals import estimate_goal
from .series import build_series


def project_goal(
    goal: MetricGoal,
    *,
    today: date,
    experience_level: object = None,
    weight: object = None,
    config: EstimatorConfig | None = None,
) -> ProjectionResult:
    """Compute the full projection for a metric goal.

    Args:
        goal: Metric snapshot including raw history (any metrics).
        today: Injected current date.
        experience_level: Experience tag; defaults to intermediate.
        weight: Optional body weight hint.
        config: Optional tunables.

    Returns:
        ProjectionResult combining the estimate with display and projected
        series. Nothing is cached between calls.
    """

    estimate = estimate_goal(goal, experience_level=experience_level, weight=weight, config=config)
    series = build_series(goal, today=today, time_to_goal=estimate.time_to_goal, config=config)
    return ProjectionResult(
        metric_name=goal.metric_name,
        unit=goal.unit,
        progress_percent=estimate.progress_percent,
        time_to_goal=estimate.time_to_goal,
        improvement_rate_per_month=estimate.improvement_rate_per_month,
        improvement_rate_label=estimate.improvement_rate_label,
        experience_level=estimate.experience_level,
        experience_note=estimate.experience_note,
        history_count=estimate.history_count,
        display_series=series.display_series,
        projected_series=series.projected_series,
    )
