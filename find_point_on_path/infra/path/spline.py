"""스플라인(3차 베지어) 경로 계산기 구현체.

경유지마다 양옆 이웃으로 Catmull-Rom 방식의 접선을 추정하여
3차 베지어 제어점을 만들고, 길이는 고정 분할 폴리라인으로 근사한다.
"""

from __future__ import annotations

from collections.abc import Sequence

from find_point_on_path.domain.exceptions import InvalidConfigurationError
from find_point_on_path.domain.value_objects.point import (
    Point,
    calculate_distance,
)
from find_point_on_path.domain.value_objects.segment import SplineSegment
from find_point_on_path.usecase.ports.config_port import SplineConfig
from find_point_on_path.usecase.ports.path_calculator import PathCalculator


class SplineCalculator(PathCalculator):
    """PathCalculator의 스플라인 구현체.

    Args:
        config: 스플라인 설정. None이면 기본값 사용.

    Raises:
        InvalidConfigurationError: segments가 1 이상의 정수가 아닐 때.
    """

    def __init__(self, config: SplineConfig | None = None) -> None:
        config = config or SplineConfig()
        segments = config.segments
        if isinstance(segments, bool) or not isinstance(segments, int):
            raise InvalidConfigurationError(
                f'segments는 정수여야 합니다: {segments!r}'
            )
        if segments < 1:
            raise InvalidConfigurationError(
                f'segments는 1 이상이어야 합니다: {segments}'
            )
        self._tension = config.tension
        self._segments = segments

    @property
    def tension(self) -> float:
        return self._tension

    @property
    def segments(self) -> int:
        return self._segments

    def length(self, params: SplineSegment) -> float:
        """세그먼트를 segments개 구간으로 나눈 폴리라인 길이를 반환한다."""
        total = 0.0
        prev = self.point_at(params, 0.0)
        for i in range(1, self._segments + 1):
            point = self.point_at(params, i / self._segments)
            total += calculate_distance(prev, point)
            prev = point
        return total

    def segment(self, points: Sequence[Point]) -> list[SplineSegment]:
        """경유지 쌍마다 베지어 세그먼트를 만든다.

        양 끝 경유지를 복제하여 모든 경유지가 앞뒤 이웃을 갖도록 한다.
        경유지가 2개 미만이면 빈 목록을 반환한다.
        """
        if len(points) < 2:
            return []

        extended = [points[0], *points, points[-1]]
        k = self._tension / 6

        segments: list[SplineSegment] = []
        for i in range(1, len(extended) - 2):
            prev_pt = extended[i - 1]
            current = extended[i]
            next_pt = extended[i + 1]
            next_next = extended[i + 2]

            cp1 = Point(
                x=current.x + (next_pt.x - prev_pt.x) * k,
                y=current.y + (next_pt.y - prev_pt.y) * k,
            )
            cp2 = Point(
                x=next_pt.x - (next_next.x - current.x) * k,
                y=next_pt.y - (next_next.y - current.y) * k,
            )
            segments.append(
                SplineSegment(p1=current, p2=next_pt, cp1=cp1, cp2=cp2)
            )
        return segments

    def point_at(self, params: SplineSegment, t: float) -> Point:
        """베른슈타인 형식으로 3차 베지어 곡선 위의 점을 계산한다."""
        p1, cp1, cp2, p2 = params.p1, params.cp1, params.cp2, params.p2
        mt = 1 - t
        b0 = mt * mt * mt
        b1 = 3 * mt * mt * t
        b2 = 3 * mt * t * t
        b3 = t * t * t
        return Point(
            x=b0 * p1.x + b1 * cp1.x + b2 * cp2.x + b3 * p2.x,
            y=b0 * p1.y + b1 * cp1.y + b2 * cp2.y + b3 * p2.y,
        )
