"""
Logging configuration module.

The toolkit never configures logging on import; library modules only call
``logging.getLogger(__name__)``. Applications that want the toolkit's
defaults call ``setup_logging()`` at startup. Supported outputs:
- Console logging with a detailed text format
- JSON logging (for log aggregation)
- Optional rotating file and error-file handlers
"""

import logging
import logging.config
import sys
from pathlib import Path
from typing import Any, Optional

from ddd.core.config import Settings, settings as default_settings


def setup_logging(settings: Optional[Settings] = None) -> None:
    """
    Configure logging from settings.

    Args:
        settings: Settings to use, defaults to the module-level instance
    """
    settings = settings or default_settings

    if settings.log_file_enabled:
        log_dir = Path(settings.log_file_path).parent
        log_dir.mkdir(parents=True, exist_ok=True)

    logging.config.dictConfig(get_logging_config(settings))

    logger = logging.getLogger(__name__)
    logger.debug(
        "Logging configured: level=%s, format=%s, file_enabled=%s",
        settings.log_level,
        settings.log_format,
        settings.log_file_enabled,
    )


def get_logging_config(settings: Optional[Settings] = None) -> dict[str, Any]:
    """
    Get logging configuration dictionary.

    Args:
        settings: Settings to use, defaults to the module-level instance

    Returns:
        Dictionary compatible with logging.config.dictConfig()
    """
    settings = settings or default_settings
    formatter = "json" if settings.log_format == "json" else "detailed"

    config: dict[str, Any] = {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "default": {
                "format": "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
                "datefmt": "%Y-%m-%d %H:%M:%S",
            },
            "detailed": {
                "format": (
                    "%(asctime)s - %(name)s - %(levelname)s - "
                    "[%(filename)s:%(lineno)d] - %(funcName)s() - %(message)s"
                ),
                "datefmt": "%Y-%m-%d %H:%M:%S",
            },
            "json": {
                "()": "pythonjsonlogger.jsonlogger.JsonFormatter",
                "format": (
                    "%(asctime)s %(name)s %(levelname)s %(filename)s "
                    "%(lineno)d %(funcName)s %(message)s"
                ),
            },
        },
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "level": settings.log_level,
                "formatter": formatter,
                "stream": sys.stdout,
            },
        },
        "loggers": {
            "ddd": {
                "level": settings.log_level,
                "handlers": ["console"],
                "propagate": False,
            },
        },
    }

    if settings.log_file_enabled:
        config["handlers"]["file"] = {
            "class": "logging.handlers.RotatingFileHandler",
            "level": settings.log_level,
            "formatter": formatter,
            "filename": settings.log_file_path,
            "maxBytes": settings.log_file_max_bytes,
            "backupCount": settings.log_file_backup_count,
            "encoding": "utf-8",
        }

        config["handlers"]["error_file"] = {
            "class": "logging.handlers.RotatingFileHandler",
            "level": "ERROR",
            "formatter": formatter,
            "filename": str(Path(settings.log_file_path).parent / "error.log"),
            "maxBytes": settings.log_file_max_bytes,
            "backupCount": settings.log_file_backup_count,
            "encoding": "utf-8",
        }

        config["loggers"]["ddd"]["handlers"].extend(["file", "error_file"])

    return config


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger instance for a module.

    Args:
        name: Logger name, typically __name__ of the module

    Returns:
        Logger instance

    Example:
        >>> logger = get_logger(__name__)
        >>> logger.info("Order placed")
    """
    return logging.getLogger(name)
