"""Tunable constants for the projection engine.

Thresholds and rates here are configuration, not business truths. The Django
layer builds an EstimatorConfig from settings; tests construct one directly.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field, fields
from types import MappingProxyType

from .experience import ExperienceLevel


def _frozen(mapping: dict[ExperienceLevel, float]) -> Mapping[ExperienceLevel, float]:
    return MappingProxyType(dict(mapping))


@dataclass(frozen=True)
class EstimatorConfig:
    """Configuration for estimation and series generation.

    Attributes:
        min_history_samples: Samples required before observed history is used.
        monthly_rates: Assumed monthly improvement (fraction of current) by level.
        rate_adjustments: Multipliers applied to an observed daily rate by level.
        heavy_weight_threshold: Body weight above which the heavy factor applies.
        light_weight_threshold: Body weight at or below which the light factor applies.
        heavy_weight_factor: Monthly-rate multiplier for heavier athletes.
        light_weight_factor: Monthly-rate multiplier for lighter athletes.
        display_window: Number of most recent samples kept for display.
        synthetic_points: Placeholder points generated before "now".
        synthetic_spacing_days: Days between placeholder points.
        synthetic_step: Fractional drop per placeholder step.
        synthetic_floor: Lowest placeholder value as a fraction of current.
    """

    min_history_samples: int = 2
    monthly_rates: Mapping[ExperienceLevel, float] = field(
        default_factory=lambda: _frozen(
            {
                ExperienceLevel.beginner: 0.10,
                ExperienceLevel.intermediate: 0.05,
                ExperienceLevel.advanced: 0.02,
            }
        )
    )
    rate_adjustments: Mapping[ExperienceLevel, float] = field(
        default_factory=lambda: _frozen(
            {
                ExperienceLevel.beginner: 1.2,
                ExperienceLevel.intermediate: 1.0,
                ExperienceLevel.advanced: 0.8,
            }
        )
    )
    heavy_weight_threshold: float = 200.0
    light_weight_threshold: float = 150.0
    heavy_weight_factor: float = 0.9
    light_weight_factor: float = 1.1
    display_window: int = 5
    synthetic_points: int = 4
    synthetic_spacing_days: int = 15
    synthetic_step: float = 0.05
    synthetic_floor: float = 0.8

    @classmethod
    def from_mapping(cls, values: Mapping[str, object] | None) -> "EstimatorConfig":
        """Build a config from a flat mapping of overrides.

        Unknown keys are ignored so settings can carry unrelated chart options.

        Args:
            values: Mapping of field name -> override value.

        Returns:
            EstimatorConfig with overrides applied on top of defaults.
        """

        if not values:
            return cls()
        known = {f.name for f in fields(cls)} - {"monthly_rates", "rate_adjustments"}
        overrides = {key: value for key, value in values.items() if key in known and value is not None}
        return cls(**overrides)  # type: ignore[arg-type]

    def monthly_rate(self, level: ExperienceLevel) -> float:
        """Return the assumed monthly improvement rate for a level."""

        return self.monthly_rates[level]

    def rate_adjustment(self, level: ExperienceLevel) -> float:
        """Return the observed-rate adjustment factor for a level."""

        return self.rate_adjustments[level]

    def weight_factor(self, weight: float | None) -> float:
        """Return the body-weight multiplier for the assumed monthly rate.

        Args:
            weight: Body weight, or None when unknown.

        Returns:
            Heavy factor above the heavy threshold, light factor at or below the
            light threshold, otherwise 1.0. Unknown weight yields 1.0.
        """

        if weight is None or weight <= 0:
            return 1.0
        if weight > self.heavy_weight_threshold:
            return self.heavy_weight_factor
        if weight <= self.light_weight_threshold:
            return self.light_weight_factor
        return 1.0


DEFAULT_CONFIG = EstimatorConfig()
