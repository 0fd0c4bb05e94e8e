"""Shared test doubles."""

from datetime import date, datetime, timezone, tzinfo

from patient_records.core.interfaces.clock import IClock

FIXED_NOW = datetime(2024, 6, 24, 10, 30, 0, tzinfo=timezone.utc)


class FixedClock(IClock):
    """Clock frozen at a given instant."""

    def __init__(self, instant: datetime = FIXED_NOW, local_tz: tzinfo = timezone.utc):
        self._instant = instant
        self._local_tz = local_tz

    @property
    def utc_now(self) -> datetime:
        return self._instant

    @property
    def now(self) -> datetime:
        return self._instant.astimezone(self._local_tz)

    @property
    def today(self) -> date:
        return self.now.date()
