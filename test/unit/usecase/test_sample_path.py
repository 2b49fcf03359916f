"""SamplePath 유스케이스 단위 테스트."""

from unittest.mock import MagicMock

import pytest

from find_point_on_path.domain.exceptions import (
    InvalidConfigurationError,
    InvalidInputError,
)
from find_point_on_path.domain.value_objects.point import Point
from find_point_on_path.infra.path.linear import LinearCalculator
from find_point_on_path.usecase.sample_path import SamplePath


@pytest.fixture
def usecase():
    return SamplePath(LinearCalculator())


class TestSample:
    def test_returns_steps_plus_one_points(self, usecase, horizontal_points):
        samples = usecase.sample(horizontal_points, 4)

        assert samples == [
            Point(x=0.0, y=0.0),
            Point(x=2.5, y=0.0),
            Point(x=5.0, y=0.0),
            Point(x=7.5, y=0.0),
            Point(x=10.0, y=0.0),
        ]

    def test_single_step(self, usecase, corner_points):
        samples = usecase.sample(corner_points, 1)
        assert samples == [corner_points[0], corner_points[-1]]

    @pytest.mark.parametrize('steps', [3, 7, 97])
    def test_every_sample_is_on_path(self, usecase, corner_points, steps):
        samples = usecase.sample(corner_points, steps)

        assert len(samples) == steps + 1
        assert all(isinstance(p, Point) for p in samples)
        assert samples[-1] == corner_points[-1]

    @pytest.mark.parametrize('steps', [0, -1, 2.0])
    def test_invalid_steps(self, usecase, horizontal_points, steps):
        with pytest.raises(InvalidConfigurationError):
            usecase.sample(horizontal_points, steps)

    def test_too_few_waypoints(self, usecase):
        with pytest.raises(InvalidInputError):
            usecase.sample([Point(0.0, 0.0)], 4)


class TestAt:
    def test_in_range(self, usecase, horizontal_points):
        assert usecase.at(horizontal_points, 0.5) == Point(x=5.0, y=0.0)

    def test_out_of_range(self, usecase, horizontal_points):
        assert usecase.at(horizontal_points, 1.5) is None


class TestSegments:
    def test_delegates_to_calculator(self, corner_points):
        calculator = MagicMock()
        calculator.segment.return_value = ['s1', 's2']

        result = SamplePath(calculator).segments(corner_points)

        assert result == ['s1', 's2']
        calculator.segment.assert_called_once_with(corner_points)

    def test_single_waypoint_is_allowed(self, usecase):
        """세그먼트 보기는 샘플러와 무관하게 1개 경유지도 허용한다."""
        assert usecase.segments([Point(0.0, 0.0)]) == []
