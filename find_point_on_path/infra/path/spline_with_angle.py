"""각도가 추가된 스플라인 경로 계산기."""

from __future__ import annotations

from collections.abc import Sequence
import math

from find_point_on_path.domain.exceptions import InvalidConfigurationError
from find_point_on_path.domain.value_objects.point import Point, PointWithAngle
from find_point_on_path.domain.value_objects.segment import SplineSegment
from find_point_on_path.infra.path.spline import SplineCalculator
from find_point_on_path.usecase.ports.config_port import (
    SplineConfig,
    SplineWithAngleConfig,
)
from find_point_on_path.usecase.ports.path_calculator import PathCalculator


class SplineWithAngleCalculator(PathCalculator):
    """스플라인 계산기에 진행 방향 각도를 덧붙이는 데코레이터.

    각도는 베지어 도함수가 아닌 유한 차분으로 추정한다.
    t 근처의 두 점을 감싼 계산기로 구해 atan2로 방향을 얻는다.

    Args:
        config: 스플라인 + 각도 설정. None이면 기본값 사용.
            angle_precision이 없는 SplineConfig이면 기본 angle_precision을
            사용한다.
        base: 위치 계산을 위임할 스플라인 계산기. None이면 config로 생성.
            base를 넘기면 config의 tension/segments는 사용하지 않고
            angle_precision만 적용한다.

    Raises:
        InvalidConfigurationError: segments 또는 angle_precision이
            유효하지 않을 때.
    """

    def __init__(
        self,
        config: SplineConfig | None = None,
        base: SplineCalculator | None = None,
    ) -> None:
        config = config or SplineWithAngleConfig()
        if not isinstance(config, SplineWithAngleConfig):
            config = SplineWithAngleConfig(
                tension=config.tension, segments=config.segments
            )
        if config.angle_precision <= 0:
            raise InvalidConfigurationError(
                f'angle_precision은 0보다 커야 합니다: '
                f'{config.angle_precision}'
            )
        self._base = base or SplineCalculator(config)
        self._angle_precision = config.angle_precision

    @property
    def angle_precision(self) -> float:
        return self._angle_precision

    def length(self, params: SplineSegment) -> float:
        return self._base.length(params)

    def segment(self, points: Sequence[Point]) -> list[SplineSegment]:
        return self._base.segment(points)

    def point_at(self, params: SplineSegment, t: float) -> PointWithAngle:
        """t 위치의 점과 그 점의 진행 방향을 계산한다.

        t >= 1이면 곡선 끝 너머로 외삽하지 않도록 한 스텝 앞을 기준점으로
        삼아 도착 방향을 구한다.
        """
        point = self._base.point_at(params, t)
        step = self._angle_precision
        probe_t = t - step if t >= 1 else t + step
        probe = self._base.point_at(params, min(probe_t, 1.0))

        if t >= 1:
            origin, target = probe, point
        else:
            origin, target = point, probe

        angle = math.atan2(target.y - origin.y, target.x - origin.x)
        return PointWithAngle(x=point.x, y=point.y, angle=angle)
