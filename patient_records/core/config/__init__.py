"""
Configuration package.

This package contains application configuration and settings.
"""

from patient_records.core.config.settings import Settings, get_settings

__all__ = ["Settings", "get_settings"]
