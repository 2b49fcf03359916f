"""유스케이스 포트 인터페이스 (ABC).

infra 레이어에서 구현해야 하는 추상 인터페이스를 정의한다.
"""

from find_point_on_path.usecase.ports.config_port import (
    AppConfig,
    ConfigPort,
    LinearConfig,
    SamplingConfig,
    SplineConfig,
    SplineWithAngleConfig,
)
from find_point_on_path.usecase.ports.path_calculator import PathCalculator
from find_point_on_path.usecase.ports.waypoint_source import WaypointSource

__all__ = [
    "AppConfig",
    "ConfigPort",
    "LinearConfig",
    "PathCalculator",
    "SamplingConfig",
    "SplineConfig",
    "SplineWithAngleConfig",
    "WaypointSource",
]
