"""직선 경로 계산기 구현체."""

from __future__ import annotations

from collections.abc import Sequence

from find_point_on_path.domain.value_objects.point import (
    Point,
    calculate_distance,
)
from find_point_on_path.domain.value_objects.segment import LinearSegment
from find_point_on_path.usecase.ports.path_calculator import PathCalculator


class LinearCalculator(PathCalculator):
    """PathCalculator의 직선 구현체.

    연속한 경유지 쌍마다 직선 세그먼트 하나를 만든다.
    """

    def length(self, params: LinearSegment) -> float:
        return calculate_distance(params.start, params.end)

    def segment(self, points: Sequence[Point]) -> list[LinearSegment]:
        """경유지를 바로 다음 경유지와 짝지어 세그먼트를 만든다.

        경유지가 1개 이하이면 빈 목록을 반환한다.
        """
        return [
            LinearSegment(start=a, end=b)
            for a, b in zip(points, points[1:])
        ]

    def point_at(self, params: LinearSegment, t: float) -> Point:
        start, end = params.start, params.end
        return Point(
            x=start.x + (end.x - start.x) * t,
            y=start.y + (end.y - start.y) * t,
        )
