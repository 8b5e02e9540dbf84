"""Pytest configuration and shared fixtures."""

import sys
from collections.abc import Iterator

import pytest
from loguru import logger

from forsyth import DEFAULT_POSITION, Validator


@pytest.fixture
def start_fen() -> str:
    """The standard starting position."""
    return DEFAULT_POSITION


@pytest.fixture
def validator() -> Validator:
    """A fresh validator."""
    return Validator()


@pytest.fixture
def log_messages() -> Iterator[list[str]]:
    """Collect forsyth log messages emitted during a test."""
    messages: list[str] = []
    logger.enable("forsyth")
    handler_id = logger.add(messages.append, level="DEBUG", format="{message}")
    yield messages
    logger.remove(handler_id)
    logger.disable("forsyth")


@pytest.fixture
def restore_logging() -> Iterator[None]:
    """Reset loguru to its default sink after a test reconfigures it."""
    yield
    logger.remove()
    logger.add(sys.stderr)
    logger.disable("forsyth")
