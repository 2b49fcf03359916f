"""경로 세그먼트 파라미터 값 객체."""

from dataclasses import dataclass

from find_point_on_path.domain.value_objects.point import Point


@dataclass(frozen=True)
class LinearSegment:
    """연속한 두 경유지를 잇는 직선 세그먼트.

    Args:
        start: 시작점.
        end: 끝점.
    """

    start: Point
    end: Point


@dataclass(frozen=True)
class SplineSegment:
    """3차 베지어 곡선 세그먼트.

    Args:
        p1: 시작 앵커 (경유지).
        p2: 끝 앵커 (다음 경유지).
        cp1: 시작 측 제어점.
        cp2: 끝 측 제어점.
    """

    p1: Point
    p2: Point
    cp1: Point
    cp2: Point
