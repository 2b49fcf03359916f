"""경로 변형별 PathSampler 생성 팩토리.

설정 → 계산기 → 샘플러 생성 함수 순으로 조립한다.
PathType에 따른 분기는 create_calculator 한 곳에서만 한다.
"""

from __future__ import annotations

from collections.abc import Callable
import logging

from find_point_on_path.domain.enums import PathType
from find_point_on_path.domain.exceptions import InvalidConfigurationError
from find_point_on_path.infra.path.linear import LinearCalculator
from find_point_on_path.infra.path.linear_with_angle import (
    LinearWithAngleCalculator,
)
from find_point_on_path.infra.path.spline import SplineCalculator
from find_point_on_path.infra.path.spline_with_angle import (
    SplineWithAngleCalculator,
)
from find_point_on_path.usecase.find_point_on_path import (
    FindPointOnPathFunction,
    create_find_point_on_path,
)
from find_point_on_path.usecase.ports.config_port import (
    LinearConfig,
    SplineConfig,
    SplineWithAngleConfig,
)
from find_point_on_path.usecase.ports.path_calculator import PathCalculator

logger = logging.getLogger(__name__)


def create_find_point_on_linear_path(
    config: LinearConfig | None = None,
) -> FindPointOnPathFunction:
    """직선 경로 샘플러 생성 함수를 만든다."""
    return create_find_point_on_path(LinearCalculator())


def create_find_point_on_linear_path_with_angle(
    config: LinearConfig | None = None,
) -> FindPointOnPathFunction:
    """각도 포함 직선 경로 샘플러 생성 함수를 만든다."""
    return create_find_point_on_path(LinearWithAngleCalculator())


def create_find_point_on_spline_path(
    config: SplineConfig | None = None,
) -> FindPointOnPathFunction:
    """스플라인 경로 샘플러 생성 함수를 만든다.

    Raises:
        InvalidConfigurationError: segments가 유효하지 않을 때.
    """
    return create_find_point_on_path(SplineCalculator(config))


def create_find_point_on_spline_path_with_angle(
    config: SplineWithAngleConfig | None = None,
) -> FindPointOnPathFunction:
    """각도 포함 스플라인 경로 샘플러 생성 함수를 만든다.

    Raises:
        InvalidConfigurationError: segments 또는 angle_precision이
            유효하지 않을 때.
    """
    return create_find_point_on_path(SplineWithAngleCalculator(config))


def create_calculator(
    path_type: PathType | str,
    config: SplineConfig | None = None,
) -> PathCalculator:
    """경로 변형에 맞는 계산기를 생성한다.

    config의 스플라인/각도 항목은 해당 변형에서만 사용된다.
    angle_precision이 없는 SplineConfig이면 각도 계산에 기본값을 쓴다.

    Args:
        path_type: 경로 변형 (PathType 또는 그 문자열 값).
        config: 경로 설정. None이면 기본값 사용.

    Returns:
        경로 계산기.

    Raises:
        InvalidConfigurationError: 알 수 없는 변형이거나 설정이 유효하지
            않을 때.
    """
    path_type = _to_path_type(path_type)
    config = config or SplineWithAngleConfig()

    factories: dict[PathType, Callable[[], PathCalculator]] = {
        PathType.LINEAR: LinearCalculator,
        PathType.LINEAR_WITH_ANGLE: LinearWithAngleCalculator,
        PathType.SPLINE: lambda: SplineCalculator(config),
        PathType.SPLINE_WITH_ANGLE: lambda: SplineWithAngleCalculator(config),
    }
    calculator = factories[path_type]()
    logger.debug('Created %s for %s', type(calculator).__name__, path_type)
    return calculator


def create_find_point_on_path_for(
    path_type: PathType | str,
    config: SplineConfig | None = None,
) -> FindPointOnPathFunction:
    """경로 변형에 맞는 샘플러 생성 함수를 만든다.

    Args:
        path_type: 경로 변형 (PathType 또는 그 문자열 값).
        config: 경로 설정. None이면 기본값 사용.

    Returns:
        경유지 목록을 받아 PathSampler를 반환하는 함수.
    """
    return create_find_point_on_path(create_calculator(path_type, config))


def _to_path_type(value: PathType | str) -> PathType:
    """문자열을 PathType으로 변환한다."""
    try:
        return PathType(value)
    except ValueError as e:
        valid = ', '.join(p.value for p in PathType)
        raise InvalidConfigurationError(
            f'알 수 없는 path_type [{value}] (가능한 값: {valid})'
        ) from e
