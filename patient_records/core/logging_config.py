"""
Logging Configuration Module.

This module provides the central logging configuration dictionary for the
application. Email addresses are masked by the sanitizing filter before any
handler writes a record.
"""

import logging
import logging.config
import os
from copy import deepcopy
from typing import Any

# Get log level from environment or default to INFO
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

LOGGING_CONFIG_BASE: dict[str, Any] = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "standard": {
            "format": "[%(asctime)s] [%(levelname)s] [%(name)s] - %(message)s",
            "datefmt": "%Y-%m-%d %H:%M:%S",
        },
        "json": {
            "()": "patient_records.infrastructure.logging.logger.StructuredFormatter",
        },
    },
    "filters": {
        "phi_sanitizer": {
            "()": "patient_records.core.utils.logging.PHISanitizingFilter",
        }
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "level": LOG_LEVEL,
            "formatter": "standard",
            "filters": ["phi_sanitizer"],
            "stream": "ext://sys.stdout",
        },
    },
    "loggers": {
        "patient_records": {
            "level": LOG_LEVEL,
            "handlers": ["console"],
            "propagate": False,
        },
        "uvicorn": {
            "level": LOG_LEVEL,
            "handlers": ["console"],
            "propagate": False,
        },
        "sqlalchemy.engine": {
            "level": os.getenv("SQL_LOG_LEVEL", "WARNING"),
            "handlers": ["console"],
            "propagate": False,
        },
        "grpc": {
            "level": "WARNING",
            "handlers": ["console"],
            "propagate": False,
        },
    },
    "root": {
        "level": LOG_LEVEL,
        "handlers": ["console"],
    },
}

LOGGING_CONFIG = deepcopy(LOGGING_CONFIG_BASE)


def build_logging_config(level: str = LOG_LEVEL, json_output: bool = False) -> dict[str, Any]:
    """
    Build a logging configuration for the given level and output format.

    Args:
        level: Log level applied to the console handler and app loggers
        json_output: Emit JSON records instead of the plain text format

    Returns:
        A dictConfig-compatible configuration dictionary
    """
    config = deepcopy(LOGGING_CONFIG_BASE)
    config["handlers"]["console"]["level"] = level
    if json_output:
        config["handlers"]["console"]["formatter"] = "json"
    for name in ("patient_records", "uvicorn"):
        config["loggers"][name]["level"] = level
    config["root"]["level"] = level
    return config


def setup_logging(config: dict[str, Any] | None = None) -> None:
    """
    Configure the logging system with the provided configuration or default.

    Args:
        config: Optional logging configuration dictionary to use instead of the default
    """
    if config is None:
        config = LOGGING_CONFIG

    logging.config.dictConfig(config)

    logger = logging.getLogger(__name__)
    logger.debug("Logging configured successfully")
