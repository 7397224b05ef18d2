"""Experience level definitions.

ExperienceLevel is a coarse, user-supplied tag that biases assumed rates of
improvement. It is informational input only; the engine never infers it.
"""

from __future__ import annotations

from enum import StrEnum


class ExperienceLevel(StrEnum):
    """Training experience of the athlete.

    Values are stable identifiers shared with the profile storage and UI.
    """

    beginner = "beginner"
    intermediate = "intermediate"
    advanced = "advanced"


DEFAULT_EXPERIENCE_LEVEL = ExperienceLevel.intermediate

_EXPERIENCE_NOTES: dict[ExperienceLevel, str] = {
    ExperienceLevel.beginner: "As a beginner, your progress predictions are accelerated (20% faster)",
    ExperienceLevel.intermediate: "As an intermediate lifter, your progress predictions are balanced",
    ExperienceLevel.advanced: "As an advanced lifter, your progress predictions are more conservative (20% slower)",
}


def coerce_experience_level(value: object) -> ExperienceLevel:
    """Coerce a raw tag into an ExperienceLevel.

    Args:
        value: Raw tag (enum member, string, or None).

    Returns:
        The matching ExperienceLevel, or `intermediate` when missing/unknown.
    """

    if isinstance(value, ExperienceLevel):
        return value
    if isinstance(value, str):
        try:
            return ExperienceLevel(value.strip().lower())
        except ValueError:
            return DEFAULT_EXPERIENCE_LEVEL
    return DEFAULT_EXPERIENCE_LEVEL


def experience_note(level: object) -> str:
    """Return the informational note describing how a level biases estimates."""

    return _EXPERIENCE_NOTES[coerce_experience_level(level)]
