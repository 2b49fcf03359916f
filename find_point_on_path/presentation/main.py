"""find_point_on_path 진입점.

실행: find_point_on_path -w waypoints.yaml -p splineWithAngle -s 10
      find_point_on_path --random 10 --seed 1 -t 0.5
"""

from __future__ import annotations

import argparse
from dataclasses import asdict, replace
import logging
import sys
from typing import Any

import yaml

from find_point_on_path.domain.enums import PathType
from find_point_on_path.domain.exceptions import DomainError
from find_point_on_path.domain.value_objects.point import Point
from find_point_on_path.infra.config.yaml_config_loader import (
    YamlConfigLoader,
)
from find_point_on_path.infra.path.path_factory import create_calculator
from find_point_on_path.infra.waypoint.random_waypoint_source import (
    RandomWaypointSource,
)
from find_point_on_path.infra.waypoint.yaml_waypoint_source import (
    YamlWaypointSource,
)
from find_point_on_path.usecase.ports.config_port import AppConfig
from find_point_on_path.usecase.ports.waypoint_source import WaypointSource
from find_point_on_path.usecase.sample_path import SamplePath

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_ERROR = 2


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='find_point_on_path',
        description='Find points along an arc-length parameterized path',
    )
    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument(
        '-w', '--waypoints', type=str,
        help='Path to a YAML file with the waypoint list',
    )
    source.add_argument(
        '--random', type=int, metavar='N',
        help='Generate N random waypoints instead of reading a file',
    )
    parser.add_argument(
        '--width', type=float, default=800.0,
        help='Width of the random waypoint area, default: 800',
    )
    parser.add_argument(
        '--height', type=float, default=600.0,
        help='Height of the random waypoint area, default: 600',
    )
    parser.add_argument(
        '--seed', type=int, default=None,
        help='Random seed for --random',
    )
    parser.add_argument(
        '-c', '--config_file', type=str, default=None,
        help='Path to the config YAML file',
    )
    parser.add_argument(
        '-p', '--path_type', type=str, default=None,
        choices=[p.value for p in PathType],
        help='Path shape, overrides the config file',
    )
    parser.add_argument('--tension', type=float, default=None)
    parser.add_argument('--segments', type=int, default=None)
    parser.add_argument('--angle_precision', type=float, default=None)
    parser.add_argument(
        '-s', '--steps', type=int, default=None,
        help='Number of equal t intervals to sample',
    )
    parser.add_argument(
        '-t', '--t', type=float, default=None, dest='t',
        help='Query a single progress value instead of sampling',
    )
    parser.add_argument(
        '--show_segments', action='store_true',
        help='Also print the raw segment geometry',
    )
    parser.add_argument(
        '-f', '--format', choices=['text', 'yaml'], default='text',
        help='Output format, default: text',
    )
    parser.add_argument(
        '-v', '--verbose', action='store_true',
        help='Enable debug logging',
    )
    return parser


def _apply_overrides(
    config: AppConfig, args: argparse.Namespace
) -> AppConfig:
    """커맨드 라인 인자로 설정 값을 덮어쓴다."""
    path_overrides = {
        name: getattr(args, name)
        for name in ('tension', 'segments', 'angle_precision')
        if getattr(args, name) is not None
    }
    path_config = replace(config.path, **path_overrides)
    sampling = config.sampling
    if args.steps is not None:
        sampling = replace(sampling, steps=args.steps)
    path_type = (
        PathType(args.path_type) if args.path_type else config.path_type
    )
    return replace(
        config, path_type=path_type, path=path_config, sampling=sampling
    )


def _make_source(args: argparse.Namespace) -> WaypointSource:
    if args.waypoints:
        return YamlWaypointSource(args.waypoints)
    return RandomWaypointSource(
        args.random, width=args.width, height=args.height, seed=args.seed
    )


def _format_point(point: Point | None) -> str:
    if point is None:
        return 'none'
    line = f'{point.x:.6f} {point.y:.6f}'
    angle = getattr(point, 'angle', None)
    if angle is not None:
        line += f' {angle:.6f}'
    return line


def _emit(output: dict[str, Any], fmt: str, out=None) -> None:
    """결과를 text 또는 yaml 형식으로 출력한다."""
    out = out or sys.stdout
    if fmt == 'yaml':
        yaml.safe_dump(output, out, sort_keys=False)
        return

    if 'segments' in output:
        for seg in output['segments']:
            out.write(' '.join(f'{v:.6f}' for v in _flatten(seg)) + '\n')
        out.write('\n')
    for t, point in output['samples']:
        out.write(f'{t:.6f} {_format_point(point)}\n')


def _flatten(value: Any) -> list[float]:
    if isinstance(value, dict):
        return [v for item in value.values() for v in _flatten(item)]
    return [float(value)]


def run(args: argparse.Namespace) -> int:
    """파싱된 인자로 경로 샘플링을 수행한다.

    Returns:
        종료 코드.
    """
    config = _apply_overrides(YamlConfigLoader(args.config_file).load(), args)
    points = _make_source(args).load()
    logger.info(
        'Sampling %s path through %d waypoints',
        config.path_type, len(points),
    )

    usecase = SamplePath(create_calculator(config.path_type, config.path))

    if args.t is not None:
        samples = [(args.t, usecase.at(points, args.t))]
    else:
        steps = config.sampling.steps
        sampled = usecase.sample(points, steps)
        samples = [(i / steps, p) for i, p in enumerate(sampled)]

    output: dict[str, Any] = {}
    if args.show_segments:
        output['segments'] = [asdict(s) for s in usecase.segments(points)]
    if args.format == 'yaml':
        output['samples'] = [
            {'t': t, 'point': asdict(p) if p is not None else None}
            for t, p in samples
        ]
    else:
        output['samples'] = samples

    _emit(output, args.format)
    return EXIT_OK


def main(argv: list[str] | None = None) -> int:
    """커맨드 라인 도구를 실행한다.

    Args:
        argv: 커맨드 라인 인자 (프로그램 이름 제외).

    Returns:
        종료 코드.
    """
    args = _build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format='[%(name)s] %(levelname)s: %(message)s',
    )

    try:
        return run(args)
    except DomainError as e:
        logger.error('%s', e)
        return EXIT_ERROR


if __name__ == '__main__':
    sys.exit(main())
