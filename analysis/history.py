"""History normalization for per-metric samples.

Raw history rows come from persisted storage (ORM rows) or deserialized
payloads (mappings). Rows are duck-typed; malformed rows are dropped rather
than aborting the computation.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from datetime import date, datetime

from .dto import HistorySample
from .quantity import coerce_finite

logger = logging.getLogger(__name__)

_METRIC_FIELDS = ("metric_name", "exercise")
_DATE_FIELDS = ("recorded_on", "date")
_VALUE_FIELDS = ("value",)


class HistoryDateError(ValueError):
    """Raised when a history sample date cannot be parsed."""

    def __init__(self, raw_value: object) -> None:
        """Initialize the error.

        Args:
            raw_value: The unparseable date value.
        """

        super().__init__(f"Unparseable history date: {raw_value!r}.")
        self.raw_value = raw_value


def parse_sample_date(value: object) -> date:
    """Parse a history sample date.

    Args:
        value: A `date`, `datetime`, or ISO-8601 date/datetime string.

    Returns:
        The calendar date of the value.

    Raises:
        HistoryDateError: When the value cannot be interpreted as a date.
    """

    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        trimmed = value.strip()
        if trimmed.endswith("Z"):
            trimmed = trimmed[:-1] + "+00:00"
        try:
            return date.fromisoformat(trimmed)
        except ValueError:
            pass
        try:
            return datetime.fromisoformat(trimmed).date()
        except ValueError:
            pass
    raise HistoryDateError(value)


def normalize_history(samples: Iterable[object], *, metric_name: str) -> tuple[HistorySample, ...]:
    """Return one metric's samples sorted oldest-first.

    Args:
        samples: Raw rows possibly spanning several metrics.
        metric_name: Metric to keep.

    Returns:
        Tuple of HistorySample ordered by date ascending. Rows with another
        metric name, an unparseable date, or a non-finite value are dropped.
        Rows sharing a date keep their input order.
    """

    wanted = metric_name.strip()
    normalized: list[HistorySample] = []
    for sample in samples:
        name = _read_field(sample, _METRIC_FIELDS)
        if not isinstance(name, str) or name.strip() != wanted:
            continue
        try:
            recorded_on = parse_sample_date(_read_field(sample, _DATE_FIELDS))
        except HistoryDateError as exc:
            logger.debug("Dropping %s sample: %s", wanted, exc)
            continue
        value = coerce_finite(_read_field(sample, _VALUE_FIELDS))
        if value is None:
            logger.debug("Dropping %s sample dated %s: non-numeric value", wanted, recorded_on)
            continue
        normalized.append(HistorySample(metric_name=wanted, recorded_on=recorded_on, value=value))

    normalized.sort(key=lambda s: s.recorded_on)
    return tuple(normalized)


def _read_field(sample: object, names: tuple[str, ...]) -> object:
    """Read the first present field from a mapping or attribute-bearing object."""

    for name in names:
        if isinstance(sample, Mapping):
            if name in sample:
                return sample[name]
        elif hasattr(sample, name):
            return getattr(sample, name)
    return None
