"""커맨드 라인 진입점 유닛 테스트."""

import pytest
import yaml

from find_point_on_path.presentation.main import EXIT_ERROR, EXIT_OK, main


@pytest.fixture
def waypoints_yaml(tmp_path):
    path = tmp_path / 'waypoints.yaml'
    with open(path, 'w') as f:
        yaml.dump({'waypoints': [[0, 0], [10, 0]]}, f)
    return str(path)


@pytest.fixture
def config_yaml(tmp_path):
    path = tmp_path / 'config.yaml'
    with open(path, 'w') as f:
        yaml.dump({
            'find_point_on_path': {
                'path_type': 'linearWithAngle',
                'sampling': {'steps': 2},
            },
        }, f)
    return str(path)


class TestMain:
    def test_samples_linear_path(self, waypoints_yaml, capsys):
        code = main(['-w', waypoints_yaml, '-p', 'linear', '-s', '2'])

        lines = capsys.readouterr().out.splitlines()
        assert code == EXIT_OK
        assert lines == [
            '0.000000 0.000000 0.000000',
            '0.500000 5.000000 0.000000',
            '1.000000 10.000000 0.000000',
        ]

    def test_config_file(self, waypoints_yaml, config_yaml, capsys):
        code = main(['-w', waypoints_yaml, '-c', config_yaml])

        lines = capsys.readouterr().out.splitlines()
        assert code == EXIT_OK
        assert len(lines) == 3
        # t x y angle
        assert lines[1].split() == ['0.500000', '5.000000', '0.000000',
                                    '0.000000']

    def test_single_query(self, waypoints_yaml, capsys):
        main(['-w', waypoints_yaml, '-p', 'linear', '-t', '0.25'])

        out = capsys.readouterr().out
        assert out == '0.250000 2.500000 0.000000\n'

    def test_out_of_range_query(self, waypoints_yaml, capsys):
        code = main(['-w', waypoints_yaml, '-t', '1.5'])

        assert code == EXIT_OK
        assert capsys.readouterr().out == '1.500000 none\n'

    def test_yaml_output(self, waypoints_yaml, capsys):
        main([
            '-w', waypoints_yaml, '-p', 'linearWithAngle', '-s', '4',
            '--show_segments', '-f', 'yaml',
        ])

        data = yaml.safe_load(capsys.readouterr().out)
        assert data['segments'] == [
            {'start': {'x': 0.0, 'y': 0.0}, 'end': {'x': 10.0, 'y': 0.0}},
        ]
        assert len(data['samples']) == 5
        assert data['samples'][2] == {
            't': 0.5, 'point': {'x': 5.0, 'y': 0.0, 'angle': 0.0},
        }

    def test_text_segments(self, waypoints_yaml, capsys):
        main([
            '-w', waypoints_yaml, '-p', 'spline', '-t', '0',
            '--show_segments',
        ])

        lines = capsys.readouterr().out.splitlines()
        # p1, p2, cp1, cp2 (x, y)
        assert len(lines[0].split()) == 8
        assert lines[1] == ''
        assert lines[2] == '0.000000 0.000000 0.000000'

    def test_random_waypoints(self, capsys):
        code = main(['--random', '5', '--seed', '3', '-s', '10'])

        lines = capsys.readouterr().out.splitlines()
        assert code == EXIT_OK
        assert len(lines) == 11
        assert all(len(line.split()) == 4 for line in lines)

    def test_too_few_waypoints(self, tmp_path, capsys):
        path = tmp_path / 'one.yaml'
        with open(path, 'w') as f:
            yaml.dump({'waypoints': [[1, 1]]}, f)

        assert main(['-w', str(path)]) == EXIT_ERROR
        assert capsys.readouterr().out == ''

    def test_invalid_segments(self, waypoints_yaml):
        code = main([
            '-w', waypoints_yaml, '-p', 'spline', '--segments', '0',
        ])
        assert code == EXIT_ERROR

    def test_non_numeric_config_value(self, waypoints_yaml, tmp_path):
        path = tmp_path / 'bad_tension.yaml'
        with open(path, 'w') as f:
            yaml.dump(
                {'find_point_on_path': {'spline': {'tension': 'abc'}}}, f
            )

        assert main(['-w', waypoints_yaml, '-c', str(path)]) == EXIT_ERROR

    def test_missing_waypoint_file(self, tmp_path):
        assert main(['-w', str(tmp_path / 'missing.yaml')]) == EXIT_ERROR

    def test_source_is_required(self):
        with pytest.raises(SystemExit):
            main([])
