"""경로 도메인 열거형 정의."""

from enum import StrEnum


class PathType(StrEnum):
    """경로 형상 + 각도 보강 조합."""

    LINEAR = 'linear'
    SPLINE = 'spline'
    LINEAR_WITH_ANGLE = 'linearWithAngle'
    SPLINE_WITH_ANGLE = 'splineWithAngle'

    @property
    def has_angle(self) -> bool:
        """접선 각도를 함께 계산하는 변형인지 여부."""
        return self in (PathType.LINEAR_WITH_ANGLE, PathType.SPLINE_WITH_ANGLE)

    @property
    def is_spline(self) -> bool:
        """스플라인 형상인지 여부."""
        return self in (PathType.SPLINE, PathType.SPLINE_WITH_ANGLE)
