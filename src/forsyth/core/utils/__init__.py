"""Shared utilities."""

from forsyth.core.utils.logging import setup_logging

__all__ = ["setup_logging"]
