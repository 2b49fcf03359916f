"""find_point_on_path 유스케이스 레이어.

포트(PathCalculator)를 통해 경로 계산을 조율하는 서비스를 정의한다.
domain 레이어만 의존하며, infra 레이어 의존성은 없다.
"""

from find_point_on_path.usecase.find_point_on_path import (
    PathSampler,
    create_find_point_on_path,
)
from find_point_on_path.usecase.sample_path import SamplePath

__all__ = [
    "PathSampler",
    "SamplePath",
    "create_find_point_on_path",
]
