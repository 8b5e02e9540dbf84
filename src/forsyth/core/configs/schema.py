"""Typed configuration schemas for the forsyth command-line tool.

These dataclasses are the single source of truth for configuration options;
YAML files loaded with OmegaConf are converted into them with
`config_from_dict`.
"""

from dataclasses import asdict, dataclass, field, fields
from pathlib import Path
from typing import Any

_LOG_LEVELS = ("TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL")


@dataclass
class LoggingConfig:
    """Configuration for loguru sinks."""

    level: str = "INFO"
    log_file: Path | None = None
    rotation: str = "10 MB"
    retention: str = "1 week"

    def __post_init__(self) -> None:
        """Normalize and validate."""
        self.level = self.level.upper()
        if self.level not in _LOG_LEVELS:
            msg = f"Unknown log level {self.level!r}, expected one of {', '.join(_LOG_LEVELS)}"
            raise ValueError(msg)
        if isinstance(self.log_file, str):
            self.log_file = Path(self.log_file)


@dataclass
class CheckConfig:
    """Configuration for checking files of FEN strings, one per line."""

    comment_prefix: str = "#"
    skip_blank_lines: bool = True
    fail_fast: bool = False  # Stop at the first invalid line
    show_valid: bool = False  # List valid lines in the report as well


@dataclass
class ForsythConfig:
    """Top-level configuration combining all sub-configs."""

    logging: LoggingConfig = field(default_factory=LoggingConfig)
    check: CheckConfig = field(default_factory=CheckConfig)


def _known_fields(cls: type, data: dict[str, Any]) -> dict[str, Any]:
    """Drop keys that are not fields of the dataclass."""
    names = {f.name for f in fields(cls)}
    return {key: value for key, value in data.items() if key in names}


def config_from_dict(data: dict[str, Any]) -> ForsythConfig:
    """Create ForsythConfig from a dictionary (e.g., from OmegaConf).

    Unknown keys are ignored.

    Args:
        data: Dictionary with configuration values.

    Returns:
        ForsythConfig instance.
    """
    return ForsythConfig(
        logging=LoggingConfig(**_known_fields(LoggingConfig, data.get("logging") or {})),
        check=CheckConfig(**_known_fields(CheckConfig, data.get("check") or {})),
    )


def config_to_dict(config: ForsythConfig) -> dict[str, Any]:
    """Convert ForsythConfig to a dictionary for serialization.

    Args:
        config: ForsythConfig instance.

    Returns:
        Dictionary representation.
    """
    result = asdict(config)
    # Convert Path objects to strings for YAML serialization
    if result["logging"]["log_file"] is not None:
        result["logging"]["log_file"] = str(result["logging"]["log_file"])
    return result
