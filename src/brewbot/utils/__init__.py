"""Utilities package."""

from brewbot.utils.logging import setup_logging

__all__ = [
    "setup_logging",
]
