"""경유지 공급 인프라 (WaypointSource 구현)."""

from find_point_on_path.infra.waypoint.random_waypoint_source import (
    RandomWaypointSource,
)
from find_point_on_path.infra.waypoint.yaml_waypoint_source import (
    YamlWaypointSource,
)

__all__ = ["RandomWaypointSource", "YamlWaypointSource"]
