"""경로 값 객체 (불변, 동등성 기반 비교)."""

from find_point_on_path.domain.value_objects.point import (
    Point,
    PointWithAngle,
    calculate_distance,
)
from find_point_on_path.domain.value_objects.segment import (
    LinearSegment,
    SplineSegment,
)

__all__ = [
    'LinearSegment',
    'Point',
    'PointWithAngle',
    'SplineSegment',
    'calculate_distance',
]
