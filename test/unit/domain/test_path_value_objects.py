"""값 객체 단위 테스트."""

import math

import pytest

from find_point_on_path.domain.value_objects.point import (
    Point,
    PointWithAngle,
    calculate_distance,
)
from find_point_on_path.domain.value_objects.segment import (
    LinearSegment,
    SplineSegment,
)


class TestPoint:
    def test_frozen(self):
        p = Point(x=1.0, y=2.0)
        with pytest.raises(AttributeError):
            p.x = 99.0

    def test_equality(self):
        assert Point(x=1.0, y=2.0) == Point(x=1.0, y=2.0)

    def test_inequality(self):
        assert Point(x=1.0, y=2.0) != Point(x=1.0, y=3.0)

    def test_hashable(self):
        assert len({Point(x=1.0, y=2.0), Point(x=1.0, y=2.0)}) == 1


class TestPointWithAngle:
    def test_is_point(self):
        p = PointWithAngle(x=1.0, y=2.0, angle=math.pi)
        assert isinstance(p, Point)
        assert p.angle == math.pi

    def test_frozen(self):
        p = PointWithAngle(x=1.0, y=2.0, angle=0.0)
        with pytest.raises(AttributeError):
            p.angle = 1.0

    def test_not_equal_to_plain_point(self):
        assert PointWithAngle(x=1.0, y=2.0, angle=0.0) != Point(x=1.0, y=2.0)


class TestCalculateDistance:
    def test_pythagorean(self):
        assert calculate_distance(Point(0.0, 0.0), Point(3.0, 4.0)) == 5.0

    def test_same_point(self):
        assert calculate_distance(Point(2.0, 2.0), Point(2.0, 2.0)) == 0.0

    def test_symmetric(self):
        a, b = Point(1.0, -2.0), Point(-4.0, 7.0)
        assert calculate_distance(a, b) == calculate_distance(b, a)


class TestSegments:
    def test_linear_segment(self):
        seg = LinearSegment(start=Point(0.0, 0.0), end=Point(1.0, 1.0))
        assert seg.start == Point(0.0, 0.0)
        assert seg.end == Point(1.0, 1.0)

    def test_spline_segment_equality(self):
        a = SplineSegment(
            p1=Point(0.0, 0.0), p2=Point(3.0, 0.0),
            cp1=Point(1.0, 1.0), cp2=Point(2.0, 1.0),
        )
        b = SplineSegment(
            p1=Point(0.0, 0.0), p2=Point(3.0, 0.0),
            cp1=Point(1.0, 1.0), cp2=Point(2.0, 1.0),
        )
        assert a == b
