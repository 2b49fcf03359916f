"""호 길이 기반 경로 점 탐색 유스케이스.

경유지 목록과 PathCalculator로 세그먼트 파라미터/길이 테이블을 한 번
계산해 두고, 진행률 t를 누적 길이 탐색으로 특정 세그먼트와 국소
파라미터로 변환한다.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
import logging
from typing import Any

from find_point_on_path.domain.exceptions import InvalidInputError
from find_point_on_path.domain.value_objects.point import Point
from find_point_on_path.usecase.ports.path_calculator import PathCalculator

logger = logging.getLogger(__name__)

MIN_WAYPOINTS = 2


class PathSampler:
    """경유지 경로 위의 점 탐색기.

    생성 시 세그먼트 파라미터, 세그먼트별 길이, 전체 길이를 계산하며
    이후에는 읽기 전용이다. 따라서 여러 스레드에서 동시에 query를
    호출해도 안전하다.

    Args:
        calculator: 경로 형상 계산기.
        points: 경로 순서의 경유지 목록 (2개 이상).

    Raises:
        InvalidInputError: 경유지가 2개 미만일 때.
    """

    def __init__(
        self, calculator: PathCalculator, points: Sequence[Point]
    ) -> None:
        if len(points) < MIN_WAYPOINTS:
            raise InvalidInputError(
                f'경유지는 최소 {MIN_WAYPOINTS}개가 필요합니다: '
                f'{len(points)}개'
            )

        self._calculator = calculator
        self._params: tuple[Any, ...] = tuple(calculator.segment(points))
        if not self._params:
            raise InvalidInputError('경유지에서 세그먼트를 생성하지 못했습니다.')

        self._lengths: tuple[float, ...] = tuple(
            calculator.length(p) for p in self._params
        )
        self._total_length = sum(self._lengths)

        logger.debug(
            'PathSampler built: %d segments, total length %.3f',
            len(self._params), self._total_length,
        )

    @property
    def params(self) -> tuple[Any, ...]:
        """세그먼트 파라미터 목록."""
        return self._params

    @property
    def lengths(self) -> tuple[float, ...]:
        """세그먼트별 길이 목록 (params와 같은 인덱스)."""
        return self._lengths

    @property
    def total_length(self) -> float:
        """경로 전체 길이."""
        return self._total_length

    def __call__(self, t: float) -> Point | None:
        return self.query(t)

    def query(self, t: float) -> Point | None:
        """진행률 t에 해당하는 경로 위의 점을 반환한다.

        세그먼트 경계에 정확히 걸리는 경우 앞 세그먼트의 끝(국소 t=1)으로
        해석한다.

        Args:
            t: 호 길이 기준 진행률 (0.0~1.0).

        Returns:
            계산된 점. t가 범위를 벗어나거나 NaN이면 None.
        """
        if not 0 <= t <= 1:
            return None

        target = self._total_length * t
        accumulated = 0.0

        for params, length in zip(self._params, self._lengths):
            if accumulated + length >= target:
                # 길이 0 세그먼트는 내부 위치가 없으므로 끝점으로 취급
                ratio = (target - accumulated) / length if length > 0 else 1.0
                return self._calculator.point_at(params, ratio)
            accumulated += length

        # 부동소수점 오차로 목표 거리에 못 미친 경우
        return self._calculator.point_at(self._params[-1], 1.0)


FindPointOnPathFunction = Callable[[Sequence[Point]], PathSampler]


def create_find_point_on_path(
    calculator: PathCalculator,
) -> FindPointOnPathFunction:
    """계산기를 고정한 PathSampler 생성 함수를 만든다.

    Args:
        calculator: 경로 형상 계산기.

    Returns:
        경유지 목록을 받아 PathSampler를 반환하는 함수.
    """
    def build(points: Sequence[Point]) -> PathSampler:
        return PathSampler(calculator, points)

    return build
