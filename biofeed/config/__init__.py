"""Configuration management for biofeed."""

from .loader import Config, default_config_path, load_config, load_sources, save_config, save_sources
from .models import FEED_TYPES, CacheConfig, ConfigModel, FetchConfig, ServerConfig, SourceConfig

__all__ = [
    "Config",
    "ConfigModel",
    "FetchConfig",
    "ServerConfig",
    "CacheConfig",
    "SourceConfig",
    "FEED_TYPES",
    "default_config_path",
    "load_config",
    "load_sources",
    "save_config",
    "save_sources",
]
