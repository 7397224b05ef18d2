"""Time-to-goal estimation for tracked metrics.

This module is intentionally pure (no Django imports) so it can be unit-tested
and reused across views without database coupling.

The estimator walks a small state machine over data sufficiency:

- unknown: current/target are malformed,
- reached: current already meets the target,
- sparse: fewer than `min_history_samples` samples, so an assumed monthly rate
  keyed by experience level (and body weight) is used,
- rich: the observed rate between the oldest and newest samples is used, unless
  it shows no measurable improvement, in which case the sparse formula applies.
"""

from __future__ import annotations

from dataclasses import dataclass

from .config import DEFAULT_CONFIG, EstimatorConfig
from .dto import GoalEstimate, HistorySample, MetricGoal
from .experience import ExperienceLevel, coerce_experience_level, experience_note
from .history import normalize_history
from .quantity import ceil_tolerant, coerce_finite, round_half_up

GOAL_REACHED = "Goal reached!"
UNKNOWN = "Unknown"


@dataclass(frozen=True, slots=True)
class ObservedRate:
    """Improvement observed between the oldest and newest samples.

    Attributes:
        oldest: Oldest sample.
        newest: Newest sample.
        span_days: Days between the two samples.
    """

    oldest: HistorySample
    newest: HistorySample
    span_days: int

    @property
    def is_measurable(self) -> bool:
        """Return True when the span is positive and the value improved."""

        return self.span_days > 0 and self.newest.value > self.oldest.value

    @property
    def daily_improvement(self) -> float:
        """Absolute improvement per day (only meaningful when measurable)."""

        return (self.newest.value - self.oldest.value) / self.span_days


def progress_percent(current: object, target: object) -> float:
    """Compute progress towards a target as a percentage.

    Args:
        current: Current value.
        target: Target value.

    Returns:
        `current / target * 100` clamped to 0..100, or 0 when either value is
        malformed or the target is 0.
    """

    current_value = coerce_finite(current)
    target_value = coerce_finite(target)
    if current_value is None or target_value is None or target_value == 0:
        return 0.0
    return max(0.0, min(current_value / target_value * 100.0, 100.0))


def observed_rate(history: tuple[HistorySample, ...]) -> ObservedRate | None:
    """Return the oldest/newest improvement window for normalized history.

    Args:
        history: Samples sorted oldest-first.

    Returns:
        ObservedRate, or None when fewer than two samples exist.
    """

    if len(history) < 2:
        return None
    oldest = history[0]
    newest = history[-1]
    return ObservedRate(
        oldest=oldest,
        newest=newest,
        span_days=(newest.recorded_on - oldest.recorded_on).days,
    )


def improvement_rate_per_month(rate: ObservedRate | None) -> float | None:
    """Return observed improvement as percent of the oldest value per month.

    Args:
        rate: Observed rate window, if any.

    Returns:
        Percent per 30 days, or None when the window shows no measurable
        improvement or the oldest value is 0.
    """

    if rate is None or not rate.is_measurable or rate.oldest.value == 0:
        return None
    daily_fraction = (rate.newest.value - rate.oldest.value) / rate.oldest.value / rate.span_days
    return daily_fraction * 30 * 100


def format_improvement_rate(rate_per_month: float | None) -> str:
    """Render an improvement rate for display."""

    if rate_per_month is None:
        return UNKNOWN
    return f"{rate_per_month:.2f}% per month"


def format_months(months: int) -> str:
    """Render a month count produced by the assumed-rate formula."""

    if months <= 1:
        return "~1 month"
    if months <= 12:
        return f"~{months} months"
    return f"~{round_half_up(months / 12)} years"


def format_days(days: int) -> str:
    """Render a day count produced by the observed-rate formula."""

    if days <= 7:
        return f"~{days} days"
    if days <= 30:
        return f"~{ceil_tolerant(days / 7)} weeks"
    if days <= 365:
        return f"~{ceil_tolerant(days / 30)} months"
    return f"~{round_half_up(days / 365)} years"


def assumed_time_to_goal(
    *,
    current: float,
    target: float,
    level: ExperienceLevel,
    weight: float | None,
    config: EstimatorConfig,
) -> str:
    """Estimate time to goal from an assumed monthly improvement rate.

    Args:
        current: Current value (finite, below target).
        target: Target value (finite).
        level: Experience level selecting the base monthly rate.
        weight: Optional body weight for the weight factor.
        config: Estimator tunables.

    Returns:
        Month/year label, or "Unknown" when the monthly improvement is not
        positive (e.g. a current value of 0).
    """

    rate = config.monthly_rate(level) * config.weight_factor(weight)
    monthly_improvement = current * rate
    if monthly_improvement <= 0:
        return UNKNOWN
    months = max(ceil_tolerant((target - current) / monthly_improvement), 1)
    return format_months(months)


def estimate_goal(
    goal: MetricGoal,
    *,
    experience_level: object = None,
    weight: object = None,
    config: EstimatorConfig | None = None,
) -> GoalEstimate:
    """Estimate progress and time-to-goal for a metric.

    Args:
        goal: Metric snapshot including raw history.
        experience_level: Experience tag; defaults to intermediate.
        weight: Optional body weight hint.
        config: Optional tunables; defaults to DEFAULT_CONFIG.

    Returns:
        GoalEstimate. Malformed numbers degrade to a zero/"Unknown" estimate;
        this function does not raise for bad input.
    """

    config = config or DEFAULT_CONFIG
    level = coerce_experience_level(experience_level)
    weight_value = coerce_finite(weight)
    history = normalize_history(goal.history, metric_name=goal.metric_name)
    rate = observed_rate(history) if len(history) >= config.min_history_samples else None
    rate_per_month = improvement_rate_per_month(rate)

    current = coerce_finite(goal.current)
    target = coerce_finite(goal.target)

    if current is None or target is None:
        path, time_to_goal = "unknown", UNKNOWN
    elif current >= target:
        path, time_to_goal = "reached", GOAL_REACHED
    elif rate is None:
        path = "sparse"
        time_to_goal = assumed_time_to_goal(
            current=current, target=target, level=level, weight=weight_value, config=config
        )
    elif not rate.is_measurable:
        path = "rich"
        time_to_goal = assumed_time_to_goal(
            current=current, target=target, level=level, weight=weight_value, config=config
        )
    else:
        path = "rich"
        daily = rate.daily_improvement * config.rate_adjustment(level)
        days = max(ceil_tolerant((target - current) / daily), 1)
        time_to_goal = format_days(days)

    return GoalEstimate(
        progress_percent=progress_percent(current, target),
        time_to_goal=time_to_goal,
        improvement_rate_per_month=rate_per_month,
        improvement_rate_label=format_improvement_rate(rate_per_month),
        experience_level=level,
        experience_note=experience_note(level),
        history_count=len(history),
        path=path,
    )
