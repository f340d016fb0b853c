"""Configuration models and the lazily loaded global settings."""

from .config import Config, LazyConfig, LoaderConfig, MonitoringConfig, find_config_file, settings

__all__ = ["Config", "LazyConfig", "LoaderConfig", "MonitoringConfig", "find_config_file", "settings"]
