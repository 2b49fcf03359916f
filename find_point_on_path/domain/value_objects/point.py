"""2D 좌표 관련 값 객체."""

from dataclasses import dataclass
import math


@dataclass(frozen=True)
class Point:
    """2D 평면 위의 점.

    Args:
        x: X 좌표.
        y: Y 좌표.
    """

    x: float
    y: float


@dataclass(frozen=True)
class PointWithAngle(Point):
    """진행 방향(접선 각도)이 추가된 점.

    Args:
        x: X 좌표.
        y: Y 좌표.
        angle: 진행 방향 (rad), atan2 기준 -PI ~ PI.
    """

    angle: float


def calculate_distance(a: Point, b: Point) -> float:
    """두 점 사이의 유클리드 거리를 계산한다.

    Args:
        a: 시작점.
        b: 끝점.

    Returns:
        두 점 사이의 거리.
    """
    return math.hypot(b.x - a.x, b.y - a.y)
