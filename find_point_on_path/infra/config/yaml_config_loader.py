"""YAML 파일 기반 설정 로더 구현체."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml

from find_point_on_path.domain.enums import PathType
from find_point_on_path.domain.exceptions import InvalidConfigurationError
from find_point_on_path.usecase.ports.config_port import (
    AppConfig,
    ConfigPort,
    SamplingConfig,
    SplineWithAngleConfig,
)

logger = logging.getLogger(__name__)

_DEFAULT_CONFIG_PATH = (
    Path(__file__).resolve().parent.parent.parent
    / "config"
    / "default_params.yaml"
)


class YamlConfigLoader(ConfigPort):
    """ConfigPort의 YAML 파일 구현체.

    YAML 파일에서 설정을 읽어 AppConfig로 변환한다.
    파일이 없으면 기본값을 사용한다.

    Args:
        config_path: YAML 설정 파일 경로. None이면 기본 경로 사용.
    """

    def __init__(self, config_path: Path | str | None = None) -> None:
        self._path = Path(config_path) if config_path else _DEFAULT_CONFIG_PATH

    def load(self) -> AppConfig:
        """YAML 파일에서 설정을 로드한다.

        Raises:
            InvalidConfigurationError: YAML 파싱에 실패했거나 섹션/값의
                형식이 잘못되었거나 path_type이 알 수 없는 값일 때.
        """
        raw = self._read_yaml()
        params = self._extract_params(raw)

        spline_data = self._section(params, "spline")
        angle_data = self._section(params, "angle")
        sampling_data = self._section(params, "sampling")

        raw_path_type = params.get("path_type", PathType.SPLINE_WITH_ANGLE)
        try:
            path_type = PathType(raw_path_type)
        except ValueError as e:
            raise InvalidConfigurationError(
                f"{self._path}: 알 수 없는 path_type [{raw_path_type}]"
            ) from e

        config = AppConfig(
            path_type=path_type,
            path=SplineWithAngleConfig(
                tension=self._float(spline_data, "tension", 1.0),
                segments=spline_data.get("segments", 50),
                angle_precision=self._float(
                    angle_data, "angle_precision", 0.01
                ),
            ),
            sampling=SamplingConfig(
                steps=sampling_data.get("steps", 20),
            ),
        )

        logger.info("Config loaded from %s", self._path)
        return config

    def _section(self, params: dict[str, Any], name: str) -> dict[str, Any]:
        """이름이 name인 하위 섹션을 반환한다. 비어 있으면 빈 dict."""
        data = params.get(name)
        if data is None:
            return {}
        if not isinstance(data, dict):
            raise InvalidConfigurationError(
                f"{self._path}: {name} 섹션은 mapping이어야 합니다: {data!r}"
            )
        return data

    def _float(self, data: dict[str, Any], key: str, default: float) -> float:
        value = data.get(key, default)
        try:
            return float(value)
        except (TypeError, ValueError) as e:
            raise InvalidConfigurationError(
                f"{self._path}: {key} 값이 숫자가 아닙니다: {value!r}"
            ) from e

    def _read_yaml(self) -> dict[str, Any]:
        """YAML 파일을 dict로 읽는다."""
        if not self._path.exists():
            logger.warning(
                "Config file not found: %s, using defaults", self._path
            )
            return {}

        with open(self._path, encoding="utf-8") as f:
            try:
                data = yaml.safe_load(f)
            except yaml.YAMLError as e:
                raise InvalidConfigurationError(
                    f"{self._path}: YAML 파싱 실패: {e}"
                ) from e

        if not isinstance(data, dict):
            logger.warning("Invalid YAML format, using defaults")
            return {}

        return data

    def _extract_params(self, raw: dict[str, Any]) -> dict[str, Any]:
        """YAML 구조에서 find_point_on_path 섹션을 추출한다."""
        node_data = raw.get("find_point_on_path", raw)
        if isinstance(node_data, dict):
            return node_data
        return {}
