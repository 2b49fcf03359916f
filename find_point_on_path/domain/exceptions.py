"""find_point_on_path 도메인 예외 정의."""


class DomainError(Exception):
    """도메인 계층 기본 예외."""


class InvalidInputError(DomainError):
    """경유지 목록 등 입력 데이터가 지원되지 않을 때."""


class InvalidConfigurationError(DomainError):
    """경로 계산 설정값이 유효하지 않을 때."""
