"""경로 형상 계산기 (PathCalculator 구현)."""

from find_point_on_path.infra.path.linear import LinearCalculator
from find_point_on_path.infra.path.linear_with_angle import (
    LinearWithAngleCalculator,
)
from find_point_on_path.infra.path.spline import SplineCalculator
from find_point_on_path.infra.path.spline_with_angle import (
    SplineWithAngleCalculator,
)

__all__ = [
    "LinearCalculator",
    "LinearWithAngleCalculator",
    "SplineCalculator",
    "SplineWithAngleCalculator",
]
