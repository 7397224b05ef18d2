"""Tests for display and projected series generation."""

from __future__ import annotations

from datetime import date, timedelta

import pytest

from analysis.config import EstimatorConfig
from analysis.dto import MetricGoal
from analysis.series import (
    DEFAULT_HORIZON,
    GOAL_LABEL,
    NOW_LABEL,
    GoalHorizon,
    add_months,
    build_series,
    display_series,
    format_point_label,
    parse_time_to_goal,
    projected_series,
    synthetic_series,
)

pytestmark = pytest.mark.unit

TODAY = date(2024, 1, 31)


def _bench_history(count: int) -> tuple[dict[str, object], ...]:
    return tuple(
        {"exercise": "Bench Press", "recorded_on": date(2023, 1 + i, 1), "value": 100 + i * 5}
        for i in range(count)
    )


def test_format_point_label_uses_month_abbreviation_and_day() -> None:
    """Render short axis labels without zero padding."""

    assert format_point_label(date(2023, 10, 5)) == "Oct 5"
    assert format_point_label(date(2024, 2, 29)) == "Feb 29"


def test_add_months_clamps_to_month_end() -> None:
    """Calendar month stepping never overflows into the next month."""

    assert add_months(date(2024, 1, 31), 1) == date(2024, 2, 29)
    assert add_months(date(2023, 1, 31), 1) == date(2023, 2, 28)
    assert add_months(date(2024, 11, 15), 3) == date(2025, 2, 15)
    assert add_months(date(2024, 2, 29), 12) == date(2025, 2, 28)


@pytest.mark.parametrize(
    ("label", "expected"),
    [
        ("~5 days", GoalHorizon("day", 5)),
        ("~3 weeks", GoalHorizon("week", 3)),
        ("~1 month", GoalHorizon("month", 1)),
        ("~10 months", GoalHorizon("month", 10)),
        ("~2 years", GoalHorizon("year", 2)),
        ("weeks", GoalHorizon("week", 4)),
        ("Unknown", DEFAULT_HORIZON),
        (None, DEFAULT_HORIZON),
        ("Goal reached!", None),
    ],
)
def test_parse_time_to_goal(label: object, expected: GoalHorizon | None) -> None:
    """Map estimator labels to horizons with defaults for missing amounts."""

    assert parse_time_to_goal(label) == expected


def test_display_series_keeps_most_recent_real_samples() -> None:
    """Keep the last five real samples, oldest first."""

    goal = MetricGoal(metric_name="Bench Press", current=130, target=225, history=_bench_history(7))

    series = display_series(goal, today=TODAY)

    assert [point.value for point in series] == [110.0, 115.0, 120.0, 125.0, 130.0]
    assert series[0].label == "Mar 1"
    assert not any(point.is_synthetic for point in series)


def test_display_series_window_is_configurable() -> None:
    """Respect a custom display window."""

    goal = MetricGoal(metric_name="Bench Press", current=130, target=225, history=_bench_history(7))

    series = display_series(goal, today=TODAY, config=EstimatorConfig(display_window=3))

    assert [point.value for point in series] == [120.0, 125.0, 130.0]


def test_sparse_history_gets_synthetic_rising_series() -> None:
    """Synthetic placeholders rise monotonically to the current value."""

    goal = MetricGoal(metric_name="Squat", current=100, target=150, history=_bench_history(3))

    series = display_series(goal, today=TODAY)

    assert len(series) == 5
    assert all(point.is_synthetic for point in series)
    assert [point.value for point in series] == pytest.approx([80.0, 85.0, 90.0, 95.0, 100.0])
    assert [point.date for point in series] == [TODAY - timedelta(days=d) for d in (60, 45, 30, 15, 0)]
    values = [point.value for point in series]
    assert values == sorted(values)


def test_synthetic_series_respects_floor() -> None:
    """Placeholders never drop below the floor fraction of current."""

    config = EstimatorConfig(synthetic_step=0.25, synthetic_floor=0.5)

    series = synthetic_series(200.0, today=TODAY, config=config)

    assert min(point.value for point in series) == pytest.approx(100.0)
    assert series[-1].value == 200.0
    assert series[-1].date == TODAY


def test_projected_series_steps_monthly_for_month_horizon() -> None:
    """Month horizons step one calendar month at a time."""

    goal = MetricGoal(metric_name="Bench Press", current=135, target=225)

    series = projected_series(goal, today=TODAY, time_to_goal="~3 months")

    assert [point.label for point in series] == [NOW_LABEL, "Feb 29", "Mar 31", GOAL_LABEL]
    assert [point.date for point in series] == [
        TODAY,
        date(2024, 2, 29),
        date(2024, 3, 31),
        date(2024, 4, 30),
    ]
    assert [point.value for point in series] == pytest.approx([135.0, 165.0, 195.0, 225.0])


@pytest.mark.parametrize(
    ("label", "count", "end"),
    [
        ("~5 days", 2, TODAY + timedelta(days=5)),
        ("~7 days", 2, TODAY + timedelta(days=7)),
        ("~3 weeks", 3, TODAY + timedelta(weeks=3)),
        ("~4 weeks", 3, TODAY + timedelta(weeks=4)),
        ("~1 month", 2, date(2024, 2, 29)),
        ("~2 years", 9, date(2026, 1, 31)),
    ],
)
def test_projected_series_structure_per_unit(label: str, count: int, end: date) -> None:
    """Interval count follows the horizon unit; the goal lands on the horizon end."""

    goal = MetricGoal(metric_name="Squat", current=100, target=200)

    series = projected_series(goal, today=TODAY, time_to_goal=label)

    assert len(series) == count
    assert series[0].label == NOW_LABEL
    assert series[0].value == 100.0
    assert series[-1].label == GOAL_LABEL
    assert series[-1].value == 200.0
    assert series[-1].date == end
    dates = [point.date for point in series]
    assert dates == sorted(dates)


def test_projected_series_for_week_horizon_steps_fortnightly() -> None:
    """Intermediate week-horizon points sit two weeks apart."""

    goal = MetricGoal(metric_name="Squat", current=100, target=200)

    series = projected_series(goal, today=TODAY, time_to_goal="~3 weeks")

    assert series[1].date == TODAY + timedelta(days=14)
    assert series[1].value == pytest.approx(150.0)


def test_projected_series_for_reached_goal_is_single_point() -> None:
    """A reached goal has nothing left to project."""

    goal = MetricGoal(metric_name="Deadlift", current=410, target=405)

    series = projected_series(goal, today=TODAY, time_to_goal="Goal reached!")

    assert len(series) == 1
    assert series[0].label == NOW_LABEL
    assert series[0].value == 410.0


def test_projected_series_with_unknown_estimate_uses_default_horizon() -> None:
    """Unrecognized labels project over three months."""

    goal = MetricGoal(metric_name="Squat", current=100, target=130)

    series = projected_series(goal, today=TODAY, time_to_goal="Unknown")

    assert len(series) == 4
    assert series[-1].date == date(2024, 4, 30)


def test_projected_series_tolerates_malformed_numbers() -> None:
    """Malformed current becomes 0; malformed target becomes current."""

    bad_current = projected_series(
        MetricGoal(metric_name="Squat", current="n/a", target=90), today=TODAY, time_to_goal="Unknown"
    )
    bad_target = projected_series(
        MetricGoal(metric_name="Squat", current=90, target=float("nan")), today=TODAY, time_to_goal="Unknown"
    )

    assert bad_current[0].value == 0.0
    assert bad_current[-1].value == 90.0
    assert [point.value for point in bad_target] == [90.0, 90.0, 90.0, 90.0]


def test_build_series_for_reached_goal() -> None:
    """A target equal to current is reached and projects a single point."""

    goal = MetricGoal(metric_name="Squat", current=150, target=150)

    result = build_series(goal, today=TODAY)

    assert len(result.projected_series) == 1
    assert len(result.display_series) == 5


def test_build_series_is_idempotent() -> None:
    """Identical inputs produce identical outputs."""

    goal = MetricGoal(metric_name="Bench Press", current=130, target=225, history=_bench_history(7))

    first = build_series(goal, today=TODAY, experience_level="advanced", weight=180)
    second = build_series(goal, today=TODAY, experience_level="advanced", weight=180)

    assert first == second


def test_projected_goal_for_tiny_gap_lands_after_now() -> None:
    """A near-reached goal still projects at least one day ahead."""

    goal = MetricGoal(
        metric_name="Bench Press",
        current=100,
        target=100.0000000001,
        history=(
            {"exercise": "Bench Press", "recorded_on": "2024-01-01", "value": 50},
            {"exercise": "Bench Press", "recorded_on": "2024-01-02", "value": 100},
        ),
    )

    result = build_series(goal, today=TODAY)

    assert [point.label for point in result.projected_series] == [NOW_LABEL, GOAL_LABEL]
    assert result.projected_series[-1].date == TODAY + timedelta(days=1)


@pytest.mark.parametrize("window", [0, -3])
def test_display_window_below_one_keeps_newest_sample(window: int) -> None:
    """Non-positive windows still show only the newest real sample."""

    goal = MetricGoal(metric_name="Bench Press", current=130, target=225, history=_bench_history(7))

    series = display_series(goal, today=TODAY, config=EstimatorConfig(display_window=window))

    assert [point.value for point in series] == [130.0]
