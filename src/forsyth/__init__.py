"""Forsyth: parsing, validation and serialization of chess FEN strings.

- `from forsyth import FenPosition, Validator, CastlingRights`
- `from forsyth.core import setup_logging, load_config`
"""

__version__ = "0.1.0"

from loguru import logger

# Re-export common utilities for convenience
from forsyth.core import load_config, save_config, setup_logging
from forsyth.core.notation import (
    DEFAULT_POSITION,
    CastlingRights,
    FenPosition,
    InvalidCastlingValueError,
    InvalidFenError,
    Turn,
    ValidationResult,
    Validator,
    validate_fen,
)

# Library records stay silent until setup_logging() enables them
logger.disable("forsyth")

__all__ = [
    "DEFAULT_POSITION",
    "CastlingRights",
    "FenPosition",
    "InvalidCastlingValueError",
    "InvalidFenError",
    "Turn",
    "ValidationResult",
    "Validator",
    "__version__",
    "load_config",
    "save_config",
    "setup_logging",
    "validate_fen",
]
