"""도메인 열거형 단위 테스트."""

from find_point_on_path.domain.enums import PathType


class TestPathType:
    def test_values(self):
        assert PathType.LINEAR == 'linear'
        assert PathType.SPLINE == 'spline'
        assert PathType.LINEAR_WITH_ANGLE == 'linearWithAngle'
        assert PathType.SPLINE_WITH_ANGLE == 'splineWithAngle'

    def test_all_variants_exist(self):
        expected = {'linear', 'spline', 'linearWithAngle', 'splineWithAngle'}
        assert {p.value for p in PathType} == expected

    def test_from_string(self):
        assert PathType('splineWithAngle') is PathType.SPLINE_WITH_ANGLE

    def test_has_angle(self):
        assert PathType.LINEAR_WITH_ANGLE.has_angle
        assert PathType.SPLINE_WITH_ANGLE.has_angle
        assert not PathType.LINEAR.has_angle
        assert not PathType.SPLINE.has_angle

    def test_is_spline(self):
        assert PathType.SPLINE.is_spline
        assert PathType.SPLINE_WITH_ANGLE.is_spline
        assert not PathType.LINEAR.is_spline
        assert not PathType.LINEAR_WITH_ANGLE.is_spline
