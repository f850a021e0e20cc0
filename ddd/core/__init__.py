"""Core configuration and logging package."""

from ddd.core.config import Settings, settings
from ddd.core.logging import get_logger, setup_logging

__all__ = [
    "Settings",
    "get_logger",
    "settings",
    "setup_logging",
]
