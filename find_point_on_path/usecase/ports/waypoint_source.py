"""경유지 공급 포트 인터페이스."""

from abc import ABC, abstractmethod

from find_point_on_path.domain.value_objects.point import Point


class WaypointSource(ABC):
    """경유지 목록 공급자 인터페이스.

    파일, 난수 생성기 등 경유지의 출처를 추상화한다.
    """

    @abstractmethod
    def load(self) -> list[Point]:
        """경로 순서의 경유지 목록을 반환한다.

        Returns:
            경유지 목록.
        """
