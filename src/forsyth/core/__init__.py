"""Core utilities shared by the library and the command-line tool."""

from forsyth.core.configs import load_config, save_config
from forsyth.core.utils.logging import setup_logging

__all__ = ["load_config", "save_config", "setup_logging"]
