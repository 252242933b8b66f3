"""Configuration management for newsdash."""

from .loader import DEFAULT_CONFIG_PATH, Config, load_config, save_config
from .models import ConfigModel, IngestionConfig, LLMConfig, PostgresConfig

__all__ = [
    "Config",
    "ConfigModel",
    "DEFAULT_CONFIG_PATH",
    "IngestionConfig",
    "LLMConfig",
    "PostgresConfig",
    "load_config",
    "save_config",
]
