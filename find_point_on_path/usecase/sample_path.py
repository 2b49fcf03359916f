"""경로 샘플링 유스케이스.

UI 슬라이더나 애니메이션 루프처럼 진행률 t를 반복 조회하는 호출자를 위해
샘플러 생성과 균등 간격 조회를 묶는다.
"""

from __future__ import annotations

from collections.abc import Sequence
import logging
from typing import Any

from find_point_on_path.domain.exceptions import InvalidConfigurationError
from find_point_on_path.domain.value_objects.point import Point
from find_point_on_path.usecase.find_point_on_path import PathSampler
from find_point_on_path.usecase.ports.path_calculator import PathCalculator

logger = logging.getLogger(__name__)


class SamplePath:
    """경로 샘플링 유스케이스.

    Args:
        calculator: 경로 형상 계산기.
    """

    def __init__(self, calculator: PathCalculator) -> None:
        self._calculator = calculator

    def build(self, points: Sequence[Point]) -> PathSampler:
        """경유지 목록에 대한 샘플러를 생성한다.

        Raises:
            InvalidInputError: 경유지가 2개 미만일 때.
        """
        return PathSampler(self._calculator, points)

    def at(self, points: Sequence[Point], t: float) -> Point | None:
        """진행률 t 한 지점의 점을 계산한다.

        Args:
            points: 경유지 목록.
            t: 진행률 (0.0~1.0).

        Returns:
            계산된 점 또는 범위 밖이면 None.
        """
        return self.build(points).query(t)

    def sample(self, points: Sequence[Point], steps: int) -> list[Point]:
        """t = i / steps (i = 0..steps) 위치의 점 목록을 계산한다.

        Args:
            points: 경유지 목록.
            steps: 균등 분할 수 (1 이상).

        Returns:
            steps + 1개의 점.

        Raises:
            InvalidConfigurationError: steps가 1 미만일 때.
            InvalidInputError: 경유지가 2개 미만일 때.
        """
        if not isinstance(steps, int) or steps < 1:
            raise InvalidConfigurationError(
                f'steps는 1 이상의 정수여야 합니다: {steps!r}'
            )

        sampler = self.build(points)
        # i / steps는 항상 [0, 1] 범위이므로 None이 나오지 않는다
        samples = [sampler.query(i / steps) for i in range(steps + 1)]

        logger.info(
            'Sampled %d points over length %.3f',
            len(samples), sampler.total_length,
        )
        return samples

    def segments(self, points: Sequence[Point]) -> list[Any]:
        """가이드 표시용 원시 세그먼트 형상 목록을 반환한다."""
        return self._calculator.segment(points)
