from .loader import ConfigError, load_config, parse_config

__all__ = [
    "ConfigError",
    "load_config",
    "parse_config",
]
