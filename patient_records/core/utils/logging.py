"""
Logging Utility Module.

This module provides logging helpers for the application, with care taken
not to write patient email addresses to log output.
"""

import logging
import re

EMAIL_PATTERN = re.compile(r"[A-Za-z0-9._%+\-]+@[A-Za-z0-9.\-]+\.[A-Za-z]{2,}")
EMAIL_MASK = "[REDACTED_EMAIL]"


def mask_emails(text: str) -> str:
    """Replace every email address in ``text`` with a fixed mask."""
    return EMAIL_PATTERN.sub(EMAIL_MASK, text)


class PHISanitizingFilter(logging.Filter):
    """Custom logging filter to mask email addresses in log records."""

    def __init__(self, name: str = "PHISanitizer"):
        super().__init__(name)

    def filter(self, record: logging.LogRecord) -> bool:
        """Sanitize the log record message."""
        original_message = record.getMessage()
        sanitized_message = mask_emails(original_message)

        if sanitized_message != original_message:
            # Args are baked into the sanitized message
            record.msg = sanitized_message
            record.args = ()

        return True
