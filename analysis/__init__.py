"""Pure projection engine for prTracker.

This package contains deterministic, testable computations that operate on
in-memory inputs and return DTOs. It must not import Django or perform any
database I/O.
"""

from .engine import project_goal
from .geometry import map_to_chart_geometry
from .goals import estimate_goal
from .series import build_series

__all__ = ["build_series", "estimate_goal", "map_to_chart_geometry", "project_goal"]
