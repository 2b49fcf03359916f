"""설정 인프라 (ConfigPort 구현)."""

from find_point_on_path.infra.config.yaml_config_loader import YamlConfigLoader

__all__ = ["YamlConfigLoader"]
