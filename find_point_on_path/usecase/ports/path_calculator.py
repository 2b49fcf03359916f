"""PathCalculator 포트 인터페이스.

경로 형상별 "세그먼트 길이 / 세그먼트 분할 / 국소 파라미터 위치" 계산을
추상화한다. 호 길이 탐색(PathSampler)은 이 인터페이스에만 의존한다.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence
from typing import Any

from find_point_on_path.domain.value_objects.point import Point


class PathCalculator(ABC):
    """경로 형상 계산기 인터페이스.

    세그먼트 파라미터의 구체 타입(LinearSegment, SplineSegment 등)은
    구현체가 정한다.
    """

    @abstractmethod
    def length(self, params: Any) -> float:
        """세그먼트 하나의 길이를 계산한다.

        Args:
            params: 세그먼트 파라미터.

        Returns:
            0 이상의 길이.
        """

    @abstractmethod
    def segment(self, points: Sequence[Point]) -> list[Any]:
        """경유지 목록에서 세그먼트 파라미터 목록을 생성한다.

        Args:
            points: 경로 순서의 경유지 목록.

        Returns:
            경로 순서의 세그먼트 파라미터 목록.
        """

    @abstractmethod
    def point_at(self, params: Any, t: float) -> Point:
        """세그먼트 내 국소 파라미터 t 위치의 점을 계산한다.

        각도 추정용 내부 호출에서는 t가 [0, 1]을 한 스텝 벗어날 수 있으며,
        이 경우에도 예외를 던지지 않아야 한다.

        Args:
            params: 세그먼트 파라미터.
            t: 국소 파라미터 (0.0~1.0).

        Returns:
            계산된 점 (Point 또는 그 하위 타입).
        """
