"""공통 테스트 fixture."""

import pytest

from find_point_on_path.domain.value_objects.point import Point


@pytest.fixture
def horizontal_points():
    return [Point(x=0.0, y=0.0), Point(x=10.0, y=0.0)]


@pytest.fixture
def vertical_points():
    return [Point(x=0.0, y=0.0), Point(x=0.0, y=10.0)]


@pytest.fixture
def corner_points():
    """길이 10인 직선 세그먼트 두 개 (오른쪽, 위쪽)."""
    return [
        Point(x=0.0, y=0.0),
        Point(x=10.0, y=0.0),
        Point(x=10.0, y=10.0),
    ]


@pytest.fixture
def collinear_points():
    """x축 위 등간격 경유지."""
    return [Point(x=float(x), y=0.0) for x in (0, 10, 20, 30)]


@pytest.fixture
def zigzag_points():
    """일직선이 아닌 경유지."""
    return [
        Point(x=0.0, y=0.0),
        Point(x=6.0, y=0.0),
        Point(x=12.0, y=6.0),
        Point(x=20.0, y=2.0),
        Point(x=24.0, y=10.0),
    ]
