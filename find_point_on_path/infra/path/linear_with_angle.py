"""각도가 추가된 직선 경로 계산기."""

from __future__ import annotations

from collections.abc import Sequence
import math

from find_point_on_path.domain.value_objects.point import Point, PointWithAngle
from find_point_on_path.domain.value_objects.segment import LinearSegment
from find_point_on_path.infra.path.linear import LinearCalculator
from find_point_on_path.usecase.ports.path_calculator import PathCalculator


class LinearWithAngleCalculator(PathCalculator):
    """직선 계산기에 진행 방향 각도를 덧붙이는 데코레이터.

    각도는 세그먼트 방향으로 일정하며 t와 무관하다.

    Args:
        base: 위치 계산을 위임할 직선 계산기. None이면 새로 생성.
    """

    def __init__(self, base: LinearCalculator | None = None) -> None:
        self._base = base or LinearCalculator()

    def length(self, params: LinearSegment) -> float:
        return self._base.length(params)

    def segment(self, points: Sequence[Point]) -> list[LinearSegment]:
        return self._base.segment(points)

    def point_at(self, params: LinearSegment, t: float) -> PointWithAngle:
        point = self._base.point_at(params, t)
        start, end = params.start, params.end
        angle = math.atan2(end.y - start.y, end.x - start.x)
        return PointWithAngle(x=point.x, y=point.y, angle=angle)
