"""경유지 좌표계 변환 유틸리티.

두 좌표계의 기준점 쌍으로 닮음 변환(회전, 스케일, 이동)을 추정하고
경유지에 적용한다.
"""

from __future__ import annotations

from collections.abc import Sequence
import logging
import math

import nudged

from find_point_on_path.domain.exceptions import InvalidInputError
from find_point_on_path.domain.value_objects.point import Point

logger = logging.getLogger(__name__)


def compute_transform(
    source_coords: list[list[float]],
    target_coords: list[list[float]],
) -> nudged.Transform:
    """원본 ↔ 대상 좌표계 변환을 계산한다.

    Args:
        source_coords: 원본 좌표계 기준점 [[x,y], ...].
        target_coords: 대상 좌표계 기준점 [[x,y], ...].

    Returns:
        nudged Transform 객체 (source → target).

    Raises:
        InvalidInputError: 기준점 개수가 다르거나 비어 있을 때.
    """
    if not source_coords or len(source_coords) != len(target_coords):
        raise InvalidInputError(
            '기준점은 source/target 개수가 같고 비어있지 않아야 합니다: '
            f'{len(source_coords)} != {len(target_coords)}'
        )

    tf = nudged.estimate(source_coords, target_coords)
    mse = nudged.estimate_error(tf, source_coords, target_coords)
    logger.info('Waypoint transform MSE: %.6f', mse)
    return tf


def transform_point(
    point: Point,
    rotation: float,
    scale: float,
    translation: Sequence[float],
) -> Point:
    """점 하나를 대상 좌표계로 변환한다.

    Args:
        point: 원본 좌표계의 점.
        rotation: 회전 각도 (rad).
        scale: 스케일 팩터.
        translation: [tx, ty] 이동 벡터.

    Returns:
        변환된 점.
    """
    cos_r = math.cos(rotation)
    sin_r = math.sin(rotation)
    x_rot = point.x * cos_r - point.y * sin_r
    y_rot = point.x * sin_r + point.y * cos_r
    return Point(
        x=x_rot * scale + translation[0],
        y=y_rot * scale + translation[1],
    )


def apply_transform(
    points: Sequence[Point], tf: nudged.Transform
) -> list[Point]:
    """경유지 목록 전체에 변환을 적용한다.

    Args:
        points: 원본 좌표계의 경유지.
        tf: compute_transform 반환값.

    Returns:
        대상 좌표계의 경유지 (새 목록).
    """
    rotation = tf.get_rotation()
    scale = tf.get_scale()
    translation = tf.get_translation()
    return [
        transform_point(p, rotation, scale, translation) for p in points
    ]
