"""Configuration management utilities."""

from forsyth.core.configs.loader import load_config, load_forsyth_config, save_config
from forsyth.core.configs.schema import (
    CheckConfig,
    ForsythConfig,
    LoggingConfig,
    config_from_dict,
    config_to_dict,
)

__all__ = [
    "CheckConfig",
    "ForsythConfig",
    "LoggingConfig",
    "config_from_dict",
    "config_to_dict",
    "load_config",
    "load_forsyth_config",
    "save_config",
]
