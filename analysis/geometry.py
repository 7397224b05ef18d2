"""Chart geometry for line charts drawn from primitive views.

Maps a value series into pixel space for a rectangular chart area. Renderers
without native line primitives draw each segment as a rotated rectangle, so
segments carry their length and rotation angle.

Selection state belongs to the caller; it only toggles presentation fields
(`selected`, `tooltip`) and never affects coordinates.
"""

from __future__ import annotations

import math
from collections.abc import Sequence

from .dto import AxisLabel, ChartGeometry, ChartPoint, LineSegment, Rect, SeriesPoint
from .quantity import coerce_finite, round_half_up

DEFAULT_HEADROOM = 1.1
DEFAULT_TAP_TARGET_SIZE = 30.0
DEFAULT_MARKER_SIZE = 8.0


def value_scale(
    series: Sequence[SeriesPoint],
    target_value: object,
    *,
    headroom: float = DEFAULT_HEADROOM,
) -> float:
    """Return the Y-axis maximum: the largest of target and values times `headroom`.

    Non-positive or non-finite maxima resolve to 1 so the scale is always usable.
    """

    candidates = [coerce_finite(target_value) or 0.0]
    candidates.extend(coerce_finite(point.value) or 0.0 for point in series)
    max_value = max(candidates) * headroom
    if not math.isfinite(max_value) or max_value <= 0:
        return 1.0
    return max_value


def map_to_chart_geometry(
    series: Sequence[SeriesPoint],
    target_value: object,
    width: float,
    height: float,
    *,
    selected_index: int | None = None,
    unit: str = "",
    tap_target_size: float = DEFAULT_TAP_TARGET_SIZE,
    marker_size: float = DEFAULT_MARKER_SIZE,
    headroom: float = DEFAULT_HEADROOM,
) -> ChartGeometry:
    """Map a series onto chart pixel geometry.

    Args:
        series: Points to draw, in display order.
        target_value: Goal value included in the Y-axis scale.
        width: Chart area width in pixels.
        height: Chart area height in pixels.
        selected_index: Caller-owned selected point index, if any.
        unit: Unit appended to the selected point's tooltip.
        tap_target_size: Side length of each point's touch target.
        marker_size: Side length of each point's marker.
        headroom: Multiplier applied to the largest value; 1.1 leaves 10% above
            the highest point, 1.0 puts it on the top edge.

    Returns:
        ChartGeometry with points, segments and axis labels. A single-point
        series yields no segments; an empty series yields no points.
    """

    max_value = value_scale(series, target_value, headroom=headroom)
    y_scale = height / max_value
    bar_width = width / (len(series) - 1) if len(series) > 1 else 0.0

    points: list[ChartPoint] = []
    for index, point in enumerate(series):
        value = coerce_finite(point.value) or 0.0
        x = index * bar_width
        y = height - value * y_scale
        selected = selected_index is not None and index == selected_index
        points.append(
            ChartPoint(
                index=index,
                x=x,
                y=y,
                value=value,
                label=point.label,
                is_synthetic=point.is_synthetic,
                selected=selected,
                tap_target=_centered(x, y, tap_target_size),
                marker=_centered(x, y, marker_size),
                tooltip=_tooltip(value, unit) if selected else None,
            )
        )

    segments: list[LineSegment] = []
    for start, end in zip(points, points[1:]):
        dx = end.x - start.x
        dy = end.y - start.y
        segments.append(
            LineSegment(
                start_index=start.index,
                x1=start.x,
                y1=start.y,
                x2=end.x,
                y2=end.y,
                length=math.hypot(dx, dy),
                angle_degrees=math.degrees(math.atan2(dy, dx)),
                is_final=end.index == len(points) - 1,
            )
        )

    y_axis_labels = tuple(
        AxisLabel(text=str(round_half_up(value)), position=height - value * y_scale)
        for value in (0.0, max_value / 2, max_value)
    )
    x_axis_labels = tuple(AxisLabel(text=point.label, position=point.x) for point in points)

    return ChartGeometry(
        width=width,
        height=height,
        max_value=max_value,
        y_scale=y_scale,
        bar_width=bar_width,
        points=tuple(points),
        segments=tuple(segments),
        y_axis_labels=y_axis_labels,
        x_axis_labels=x_axis_labels,
    )


def _centered(x: float, y: float, size: float) -> Rect:
    half = size / 2
    return Rect(left=x - half, top=y - half, width=size, height=size)


def _tooltip(value: float, unit: str) -> str:
    text = str(round_half_up(value))
    return f"{text} {unit}".strip()
