"""난수 경유지 생성기."""

from __future__ import annotations

import logging
import random

from find_point_on_path.domain.exceptions import InvalidInputError
from find_point_on_path.domain.value_objects.point import Point
from find_point_on_path.usecase.ports.waypoint_source import WaypointSource

logger = logging.getLogger(__name__)


class RandomWaypointSource(WaypointSource):
    """지정 영역 안에 균등 분포 경유지를 생성한다.

    x는 padding ~ width - padding, y는 padding ~ height - padding 범위.

    Args:
        count: 생성할 경유지 수.
        width: 영역 너비.
        height: 영역 높이.
        padding: 가장자리 여백.
        seed: 난수 시드. None이면 매번 다른 결과.
    """

    def __init__(
        self,
        count: int,
        width: float = 800.0,
        height: float = 600.0,
        padding: float = 30.0,
        seed: int | None = None,
    ) -> None:
        if count < 0:
            raise InvalidInputError(f'count는 0 이상이어야 합니다: {count}')
        if width < 2 * padding or height < 2 * padding:
            raise InvalidInputError(
                f'영역({width}x{height})이 padding({padding})보다 작습니다.'
            )
        self._count = count
        self._width = width
        self._height = height
        self._padding = padding
        self._rng = random.Random(seed)

    def load(self) -> list[Point]:
        pad = self._padding
        points = [
            Point(
                x=pad + self._rng.random() * (self._width - 2 * pad),
                y=pad + self._rng.random() * (self._height - 2 * pad),
            )
            for _ in range(self._count)
        ]
        logger.debug('Generated %d random waypoints', len(points))
        return points
