"""DTO types consumed and returned by the projection engine.

DTOs are plain data containers used to transport inputs and results between the
UI layer and the engine. They intentionally avoid any Django/ORM dependencies.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date

from .experience import ExperienceLevel


@dataclass(frozen=True, slots=True)
class HistorySample:
    """A single dated observation of a metric.

    Attributes:
        metric_name: Metric the sample belongs to (e.g. an exercise name).
        recorded_on: Calendar date of the observation.
        value: Observed value.
    """

    metric_name: str
    recorded_on: date
    value: float


@dataclass(frozen=True)
class MetricGoal:
    """Snapshot of a tracked metric and its goal.

    `current` and `target` are accepted as loosely-typed values (ORM decimals,
    strings from forms, floats) and coerced by the engine. `history` may hold
    samples of other metrics; the engine filters by `metric_name`.

    Attributes:
        metric_name: Metric name used to scope history.
        current: Current value.
        target: Target value.
        unit: Display-only unit label (e.g. "lbs", "min").
        history: Raw history rows (mappings or attribute-bearing objects).
    """

    metric_name: str
    current: object
    target: object
    unit: str = ""
    history: tuple[object, ...] = ()


@dataclass(frozen=True, slots=True)
class GoalEstimate:
    """Time-to-goal estimate for a MetricGoal.

    Attributes:
        progress_percent: Progress towards target in the range 0..100.
        time_to_goal: Human-readable label (e.g. "~3 months", "Goal reached!").
        improvement_rate_per_month: Observed improvement in percent per month,
            or None when history cannot support a measurable rate.
        improvement_rate_label: Display form of the improvement rate.
        experience_level: Experience level used for the estimate.
        experience_note: Informational note about the level's bias.
        history_count: Number of usable history samples for the metric.
        path: Estimator branch: "unknown", "reached", "sparse" or "rich".
    """

    progress_percent: float
    time_to_goal: str
    improvement_rate_per_month: float | None
    improvement_rate_label: str
    experience_level: ExperienceLevel
    experience_note: str
    history_count: int
    path: str


@dataclass(frozen=True, slots=True)
class SeriesPoint:
    """A chart-ready point.

    Attributes:
        date: Calendar date of the point.
        value: Point value (always finite).
        label: X-axis label.
        is_synthetic: True when the point is a placeholder, not a real sample.
    """

    date: date
    value: float
    label: str
    is_synthetic: bool = False


@dataclass(frozen=True, slots=True)
class GoalSeries:
    """Display and projected series for a MetricGoal."""

    display_series: tuple[SeriesPoint, ...]
    projected_series: tuple[SeriesPoint, ...]


@dataclass(frozen=True, slots=True)
class ProjectionResult:
    """Full projection for a MetricGoal, recomputed on every request.

    Attributes:
        metric_name: Metric the projection describes.
        unit: Display-only unit label.
        progress_percent: Progress towards target in the range 0..100.
        time_to_goal: Human-readable time-to-goal label.
        improvement_rate_per_month: Observed percent-per-month rate, if any.
        improvement_rate_label: Display form of the improvement rate.
        experience_level: Experience level used for the estimate.
        experience_note: Informational note about the level's bias.
        history_count: Number of usable history samples for the metric.
        display_series: What happened (real or synthetic points).
        projected_series: What might happen from now until the goal.
    """

    metric_name: str
    unit: str
    progress_percent: float
    time_to_goal: str
    improvement_rate_per_month: float | None
    improvement_rate_label: str
    experience_level: ExperienceLevel
    experience_note: str
    history_count: int
    display_series: tuple[SeriesPoint, ...]
    projected_series: tuple[SeriesPoint, ...]


@dataclass(frozen=True, slots=True)
class Rect:
    """An axis-aligned rectangle in chart pixel space."""

    left: float
    top: float
    width: float
    height: float


@dataclass(frozen=True, slots=True)
class ChartPoint:
    """Pixel-space rendering data for one series point.

    Attributes:
        index: Position of the point in the input series.
        x: Horizontal pixel coordinate.
        y: Vertical pixel coordinate (0 is the top edge).
        value: Source value.
        label: Source label.
        is_synthetic: Source synthetic flag.
        selected: Whether the caller marked this point as selected.
        tap_target: Touch target centered on the point.
        marker: Data-point marker centered on the point.
        tooltip: Value bubble text for the selected point, otherwise None.
    """

    index: int
    x: float
    y: float
    value: float
    label: str
    is_synthetic: bool
    selected: bool
    tap_target: Rect
    marker: Rect
    tooltip: str | None = None


@dataclass(frozen=True, slots=True)
class LineSegment:
    """A segment joining two consecutive points.

    Attributes:
        start_index: Index of the segment's first point.
        x1: Start x.
        y1: Start y.
        x2: End x.
        y2: End y.
        length: Euclidean length in pixels.
        angle_degrees: Rotation for renderers that draw segments as rectangles.
        is_final: True for the segment that ends at the last point.
    """

    start_index: int
    x1: float
    y1: float
    x2: float
    y2: float
    length: float
    angle_degrees: float
    is_final: bool


@dataclass(frozen=True, slots=True)
class AxisLabel:
    """A single axis label and its pixel position along the axis."""

    text: str
    position: float


@dataclass(frozen=True, slots=True)
class ChartGeometry:
    """Geometry for drawing a series into a rectangular chart area.

    Attributes:
        width: Chart width in pixels.
        height: Chart height in pixels.
        max_value: Y-axis maximum (with headroom).
        y_scale: Pixels per value unit.
        bar_width: Horizontal distance between consecutive points.
        points: Per-point rendering data.
        segments: Line segments between consecutive points.
        y_axis_labels: Labels at 0, max/2 and max.
        x_axis_labels: One label per point.
    """

    width: float
    height: float
    max_value: float
    y_scale: float
    bar_width: float
    points: tuple[ChartPoint, ...] = ()
    segments: tuple[LineSegment, ...] = ()
    y_axis_labels: tuple[AxisLabel, ...] = ()
    x_axis_labels: tuple[AxisLabel, ...] = ()
