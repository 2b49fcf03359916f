"""설정 포트 인터페이스.

경로 형상별 설정 값과 애플리케이션 설정의 로딩을 추상화한다.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field

from find_point_on_path.domain.enums import PathType


@dataclass(frozen=True)
class LinearConfig:
    """직선 경로 설정 (설정 항목 없음)."""


@dataclass(frozen=True)
class SplineConfig:
    """스플라인 경로 설정.

    Args:
        tension: 곡선 장력. 0이면 직선 현, 클수록 오버슈트가 커진다.
        segments: 길이 근사에 사용하는 세그먼트당 분할 수.
    """

    tension: float = 1.0
    segments: int = 50


@dataclass(frozen=True)
class SplineWithAngleConfig(SplineConfig):
    """각도 계산이 추가된 스플라인 경로 설정.

    Args:
        tension: 곡선 장력.
        segments: 길이 근사 분할 수.
        angle_precision: 각도 추정용 유한 차분 t 증분.
    """

    angle_precision: float = 0.01


@dataclass(frozen=True)
class SamplingConfig:
    """경로 샘플링 설정.

    Args:
        steps: t=0~1 구간 균등 분할 수 (출력 점 수는 steps + 1).
    """

    steps: int = 20


@dataclass(frozen=True)
class AppConfig:
    """애플리케이션 전체 설정.

    Args:
        path_type: 사용할 경로 변형.
        path: 경로 계산 설정 (스플라인/각도 항목 포함).
        sampling: 샘플링 설정.
    """

    path_type: PathType = PathType.SPLINE_WITH_ANGLE
    path: SplineWithAngleConfig = field(default_factory=SplineWithAngleConfig)
    sampling: SamplingConfig = field(default_factory=SamplingConfig)


class ConfigPort(ABC):
    """설정 로더 인터페이스."""

    @abstractmethod
    def load(self) -> AppConfig:
        """설정을 로드한다.

        Returns:
            애플리케이션 설정.
        """
