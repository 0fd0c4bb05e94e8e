"""
Logging configuration module.

This module provides a configured logger and a structured JSON formatter for
deployments that ship logs to an aggregator.
"""

import json
import logging
import sys
from datetime import datetime, timezone

from patient_records.core.config import get_settings
from patient_records.core.utils.logging import PHISanitizingFilter


class StructuredFormatter(logging.Formatter):
    """
    Formats log records as single-line JSON documents.
    """

    def format(self, record: logging.LogRecord) -> str:
        """
        Format the log record as a JSON string.

        Args:
            record: The log record to format

        Returns:
            Formatted log message as a JSON string
        """
        log_data = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
            "message": record.getMessage(),
        }

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_data)


def get_logger(name: str) -> logging.Logger:
    """
    Get a configured logger instance.

    Loggers under the ``patient_records`` namespace are configured through
    dictConfig at startup; a handler is attached here only for loggers that
    would otherwise have nowhere to write.

    Args:
        name: The name for the logger, typically __name__

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(name)

    if not logger.handlers and not logger.parent.handlers:
        settings = get_settings()
        logger.setLevel(getattr(logging, settings.LOG_LEVEL))

        console_handler = logging.StreamHandler(sys.stdout)
        if settings.LOG_JSON:
            console_handler.setFormatter(StructuredFormatter())
        console_handler.addFilter(PHISanitizingFilter())
        logger.addHandler(console_handler)

    return logger
