"""Best-effort numeric coercion utilities.

Goal values arrive from forms, ORM decimals and deserialized storage. This
module is intentionally:
- pure (no Django imports, no database writes),
- defensive (never raises on unknown formats),
- finite-only (NaN and infinities are treated as missing).
"""

from __future__ import annotations

import math
from decimal import Decimal, InvalidOperation


def coerce_finite(value: object) -> float | None:
    """Coerce an object into a finite float when safe.

    Args:
        value: Raw value (int, float, Decimal, or numeric string).

    Returns:
        A finite float, or None for booleans, blanks, non-numeric strings, NaN
        and infinities.
    """

    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        number = float(value)
    elif isinstance(value, Decimal):
        try:
            number = float(value)
        except (InvalidOperation, ValueError):
            return None
    elif isinstance(value, str):
        trimmed = value.strip().replace(",", "")
        if not trimmed:
            return None
        try:
            number = float(trimmed)
        except ValueError:
            return None
    else:
        return None
    if not math.isfinite(number):
        return None
    return number


def round_half_up(value: float) -> int:
    """Round to the nearest integer with halves rounded towards +infinity."""

    return math.floor(value + 0.5)


def ceil_tolerant(value: float, *, places: int = 9) -> int:
    """Ceil a float after trimming binary noise beyond `places` decimals.

    `90 / (5 / 60)` evaluates to `1080.0000000000002`; a plain ceil would push
    such values one unit too far.
    """

    return math.ceil(round(value, places))
