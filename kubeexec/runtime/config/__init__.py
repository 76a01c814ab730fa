"""Settings resolution: flag > environment > config file > default."""

from .config_loader import ConfigFileSettings, get_config_path, load_config
from .settings import ConfigSource, parse_bool, resolve_bool_setting, resolve_settings

__all__ = [
    "ConfigFileSettings",
    "ConfigSource",
    "get_config_path",
    "load_config",
    "parse_bool",
    "resolve_bool_setting",
    "resolve_settings",
]
