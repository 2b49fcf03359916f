"""2D 경유지 기반 경로 위의 점 탐색 라이브러리.

경유지 목록을 호 길이로 매개변수화된 경로로 바꾸고,
진행률 t(0~1)에 해당하는 점(선택적으로 접선 각도 포함)을 계산한다.
"""

from find_point_on_path.domain.enums import PathType
from find_point_on_path.domain.exceptions import (
    DomainError,
    InvalidConfigurationError,
    InvalidInputError,
)
from find_point_on_path.domain.value_objects import (
    LinearSegment,
    Point,
    PointWithAngle,
    SplineSegment,
)
from find_point_on_path.infra.path.path_factory import (
    create_find_point_on_linear_path,
    create_find_point_on_linear_path_with_angle,
    create_find_point_on_path_for,
    create_find_point_on_spline_path,
    create_find_point_on_spline_path_with_angle,
)
from find_point_on_path.usecase.find_point_on_path import PathSampler

__all__ = [
    'DomainError',
    'InvalidConfigurationError',
    'InvalidInputError',
    'LinearSegment',
    'PathSampler',
    'PathType',
    'Point',
    'PointWithAngle',
    'SplineSegment',
    'create_find_point_on_linear_path',
    'create_find_point_on_linear_path_with_angle',
    'create_find_point_on_path_for',
    'create_find_point_on_spline_path',
    'create_find_point_on_spline_path_with_angle',
]
