"""YAML 파일 기반 경유지 공급자 구현체."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml

from find_point_on_path.domain.exceptions import InvalidInputError
from find_point_on_path.domain.value_objects.point import Point
from find_point_on_path.infra.waypoint.frame_transform import (
    apply_transform,
    compute_transform,
)
from find_point_on_path.usecase.ports.waypoint_source import WaypointSource

logger = logging.getLogger(__name__)


class YamlWaypointSource(WaypointSource):
    """WaypointSource의 YAML 파일 구현체.

    파일 형식::

        waypoints:
          - [0.0, 0.0]
          - {x: 10.0, y: 5.0}
        reference_coordinates:     # 선택
          source: [[0, 0], [1, 0], [0, 1]]
          target: [[0, 0], [100, 0], [0, 100]]

    reference_coordinates가 있으면 경유지를 target 좌표계로 변환한다.

    Args:
        path: 경유지 YAML 파일 경로.
    """

    def __init__(self, path: Path | str) -> None:
        self._path = Path(path)

    def load(self) -> list[Point]:
        """경유지를 읽어 반환한다.

        Raises:
            InvalidInputError: 파일이 없거나 형식이 잘못되었을 때.
        """
        data = self._read_yaml()

        raw_points = data.get('waypoints')
        if not isinstance(raw_points, list):
            raise InvalidInputError(
                f'{self._path}: waypoints 목록이 없습니다.'
            )
        points = [
            self._parse_point(i, raw) for i, raw in enumerate(raw_points)
        ]

        ref = data.get('reference_coordinates')
        if ref is not None:
            if not isinstance(ref, dict):
                raise InvalidInputError(
                    f'{self._path}: reference_coordinates 형식이 잘못되었습니다.'
                )
            tf = compute_transform(
                ref.get('source', []), ref.get('target', [])
            )
            points = apply_transform(points, tf)

        logger.info('Loaded %d waypoints from %s', len(points), self._path)
        return points

    def _read_yaml(self) -> dict[str, Any]:
        """YAML 파일을 dict로 읽는다."""
        if not self._path.exists():
            raise InvalidInputError(
                f'경유지 파일을 찾을 수 없습니다: {self._path}'
            )

        with open(self._path, encoding='utf-8') as f:
            try:
                data = yaml.safe_load(f)
            except yaml.YAMLError as e:
                raise InvalidInputError(
                    f'{self._path}: YAML 파싱 실패: {e}'
                ) from e

        if not isinstance(data, dict):
            raise InvalidInputError(f'{self._path}: 잘못된 YAML 형식입니다.')
        return data

    def _parse_point(self, index: int, raw: Any) -> Point:
        """[x, y] 또는 {x:, y:} 형식의 경유지 하나를 변환한다."""
        try:
            if isinstance(raw, dict):
                return Point(x=float(raw['x']), y=float(raw['y']))
            if isinstance(raw, (list, tuple)) and len(raw) == 2:
                return Point(x=float(raw[0]), y=float(raw[1]))
        except (KeyError, TypeError, ValueError) as e:
            raise InvalidInputError(
                f'{self._path}: waypoints[{index}] 값이 잘못되었습니다: {raw!r}'
            ) from e
        raise InvalidInputError(
            f'{self._path}: waypoints[{index}] 형식이 잘못되었습니다: {raw!r}'
        )
