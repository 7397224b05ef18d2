"""Series generation for progress charts.

Two independent series are produced for a MetricGoal:

- the display series (what happened): recent real samples, or synthetic
  placeholders when history is too sparse,
- the projected series (what might happen): a straight line from "now" to the
  estimated goal date, sampled at a granularity matching the estimate's unit.

Outputs depend only on inputs and the injected `today`.
"""

from __future__ import annotations

import calendar
import re
from dataclasses import dataclass
from datetime import date, timedelta
from typing import Literal

from .config import DEFAULT_CONFIG, EstimatorConfig
from .dto import GoalSeries, MetricGoal, SeriesPoint
from .goals import GOAL_REACHED, estimate_goal
from .history import normalize_history
from .quantity import ceil_tolerant, coerce_finite

HorizonUnit = Literal["day", "week", "month", "year"]

NOW_LABEL = "Now"
GOAL_LABEL = "Goal"

_AMOUNT_RE = re.compile(r"\d+")
_DEFAULT_AMOUNTS: dict[HorizonUnit, int] = {"day": 7, "week": 4, "month": 3, "year": 1}
_UNIT_ORDER: tuple[HorizonUnit, ...] = ("day", "week", "month", "year")


@dataclass(frozen=True, slots=True)
class GoalHorizon:
    """Parsed time-to-goal horizon.

    Attributes:
        unit: Horizon unit parsed from the label.
        amount: Number of units until the goal.
    """

    unit: HorizonUnit
    amount: int


DEFAULT_HORIZON = GoalHorizon(unit="month", amount=3)


def format_point_label(value: date) -> str:
    """Format a date as a short axis label (e.g. "Oct 15")."""

    return f"{value:%b} {value.day}"


def add_months(value: date, months: int) -> date:
    """Add calendar months, clamping the day to the target month's length."""

    month_index = value.month - 1 + months
    year = value.year + month_index // 12
    month = month_index % 12 + 1
    day = min(value.day, calendar.monthrange(year, month)[1])
    return date(year, month, day)


def parse_time_to_goal(label: object) -> GoalHorizon | None:
    """Parse a time-to-goal label into a horizon.

    Args:
        label: Estimator label (e.g. "~3 weeks", "~2 years", "Goal reached!").

    Returns:
        GoalHorizon for day/week/month/year labels, None when the label says the
        goal is reached, and DEFAULT_HORIZON for anything unrecognized.
    """

    if not isinstance(label, str):
        return DEFAULT_HORIZON
    if label == GOAL_REACHED:
        return None
    for unit in _UNIT_ORDER:
        if unit in label:
            match = _AMOUNT_RE.search(label)
            amount = int(match.group(0)) if match else _DEFAULT_AMOUNTS[unit]
            return GoalHorizon(unit=unit, amount=amount)
    return DEFAULT_HORIZON


def display_series(
    goal: MetricGoal,
    *,
    today: date,
    config: EstimatorConfig | None = None,
) -> tuple[SeriesPoint, ...]:
    """Return the "what happened" series for a goal.

    Args:
        goal: Metric snapshot including raw history.
        today: Injected current date.
        config: Optional tunables.

    Returns:
        The most recent `display_window` real samples (at least one, oldest
        first) when at least `min_history_samples` exist; otherwise synthetic
        placeholders that rise towards the current value.
    """

    config = config or DEFAULT_CONFIG
    history = normalize_history(goal.history, metric_name=goal.metric_name)
    if len(history) >= config.min_history_samples:
        window = max(config.display_window, 1)
        recent = history[-window:]
        return tuple(
            SeriesPoint(
                date=sample.recorded_on,
                value=sample.value,
                label=format_point_label(sample.recorded_on),
            )
            for sample in recent
        )
    return synthetic_series(_safe_current(goal), today=today, config=config)


def synthetic_series(
    current: float,
    *,
    today: date,
    config: EstimatorConfig | None = None,
) -> tuple[SeriesPoint, ...]:
    """Build placeholder history ending at the current value.

    Step `i` back from today is valued `max(current * (1 - i * step),
    current * floor)` so the series never falls below the floor fraction.
    """

    config = config or DEFAULT_CONFIG
    points: list[SeriesPoint] = []
    for step in range(config.synthetic_points, 0, -1):
        point_date = today - timedelta(days=step * config.synthetic_spacing_days)
        value = max(current * (1 - step * config.synthetic_step), current * config.synthetic_floor)
        points.append(
            SeriesPoint(date=point_date, value=value, label=format_point_label(point_date), is_synthetic=True)
        )
    points.append(SeriesPoint(date=today, value=current, label=format_point_label(today), is_synthetic=True))
    return tuple(points)


def projected_series(
    goal: MetricGoal,
    *,
    today: date,
    time_to_goal: str,
) -> tuple[SeriesPoint, ...]:
    """Return the "what might happen" series from now until the goal.

    Args:
        goal: Metric snapshot.
        today: Injected current date.
        time_to_goal: Estimator label used to size the horizon.

    Returns:
        A single "Now" point when the goal is reached; otherwise "Now",
        linearly interpolated intermediate points, and "Goal".
    """

    current = _safe_current(goal)
    target = _safe_target(goal, current=current)
    now_point = SeriesPoint(date=today, value=current, label=NOW_LABEL)

    horizon = parse_time_to_goal(time_to_goal)
    if horizon is None:
        return (now_point,)

    intervals, step_date = _interval_plan(horizon, today=today)
    end_date = _horizon_end(horizon, today=today)
    increment = (target - current) / intervals

    points = [now_point]
    for index in range(1, intervals):
        point_date = step_date(index)
        points.append(
            SeriesPoint(date=point_date, value=current + increment * index, label=format_point_label(point_date))
        )
    points.append(SeriesPoint(date=end_date, value=target, label=GOAL_LABEL))
    return tuple(points)


def build_series(
    goal: MetricGoal,
    *,
    today: date,
    experience_level: object = None,
    weight: object = None,
    time_to_goal: str | None = None,
    config: EstimatorConfig | None = None,
) -> GoalSeries:
    """Build display and projected series for a goal.

    Args:
        goal: Metric snapshot including raw history.
        today: Injected current date.
        experience_level: Experience tag used when estimating time to goal.
        weight: Optional body weight used when estimating time to goal.
        time_to_goal: Precomputed estimator label; estimated when omitted.
        config: Optional tunables.

    Returns:
        GoalSeries with both series (each with at least one finite point).
    """

    if time_to_goal is None:
        time_to_goal = estimate_goal(
            goal, experience_level=experience_level, weight=weight, config=config
        ).time_to_goal
    return GoalSeries(
        display_series=display_series(goal, today=today, config=config),
        projected_series=projected_series(goal, today=today, time_to_goal=time_to_goal),
    )


def _safe_current(goal: MetricGoal) -> float:
    current = coerce_finite(goal.current)
    return 0.0 if current is None else current


def _safe_target(goal: MetricGoal, *, current: float) -> float:
    target = coerce_finite(goal.target)
    return current if target is None else target


def _horizon_end(horizon: GoalHorizon, *, today: date) -> date:
    if horizon.unit == "day":
        return today + timedelta(days=horizon.amount)
    if horizon.unit == "week":
        return today + timedelta(weeks=horizon.amount)
    if horizon.unit == "month":
        return add_months(today, horizon.amount)
    return add_months(today, horizon.amount * 12)


def _interval_plan(horizon: GoalHorizon, *, today: date):
    """Return (interval count, index -> date) for a horizon.

    Day-scale goals step weekly, week-scale bi-weekly, month-scale monthly and
    year-scale quarterly.
    """

    if horizon.unit == "day":
        intervals = ceil_tolerant(horizon.amount / 7)
        return max(intervals, 1), lambda i: today + timedelta(days=7 * i)
    if horizon.unit == "week":
        intervals = ceil_tolerant(horizon.amount * 7 / 14)
        return max(intervals, 1), lambda i: today + timedelta(days=14 * i)
    if horizon.unit == "month":
        return max(horizon.amount, 1), lambda i: add_months(today, i)
    return max(horizon.amount * 4, 1), lambda i: add_months(today, 3 * i)
