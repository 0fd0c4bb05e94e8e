"""Infrastructure service implementations."""

from patient_records.infrastructure.services.system_clock import SystemClock

__all__ = ["SystemClock"]
