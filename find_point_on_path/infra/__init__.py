"""find_point_on_path 인프라 계층 (포트 구현체)."""
