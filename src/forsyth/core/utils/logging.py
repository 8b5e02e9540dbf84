"""Logging configuration for the library and the command-line tool.

The library logs through loguru but stays silent until `setup_logging` is
called, so importing forsyth never writes to an application's sinks.
"""

import sys
from pathlib import Path

from loguru import logger

from forsyth.core.configs.schema import LoggingConfig

_CONSOLE_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> | "
    "<level>{message}</level>"
)
_FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} | {message}"


def setup_logging(
    level: str = "INFO",
    log_file: str | Path | None = None,
    rotation: str = "10 MB",
    retention: str = "1 week",
) -> None:
    """Configure loguru sinks and enable log records from forsyth.

    Args:
        level: Minimum log level to display.
        log_file: Optional path to a log file.
        rotation: When to rotate the log file.
        retention: How long to keep old log files.
    """
    logger.remove()
    logger.enable("forsyth")

    logger.add(sys.stderr, level=level, format=_CONSOLE_FORMAT, colorize=True)

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        logger.add(
            log_path,
            level=level,
            format=_FILE_FORMAT,
            rotation=rotation,
            retention=retention,
            compression="gz",
        )

    logger.debug(f"Logging configured at level: {level}")


def setup_logging_from_config(config: LoggingConfig) -> None:
    """Configure logging from a LoggingConfig."""
    setup_logging(
        level=config.level,
        log_file=config.log_file,
        rotation=config.rotation,
        retention=config.retention,
    )
