"""System clock backed by the host's wall time."""

from datetime import date, datetime

from patient_records.core.interfaces.clock import IClock
from patient_records.domain.utils.datetime_utils import now_utc


class SystemClock(IClock):
    """Clock implementation reading the real current time."""

    @property
    def utc_now(self) -> datetime:
        return now_utc()

    @property
    def now(self) -> datetime:
        return datetime.now().astimezone()

    @property
    def today(self) -> date:
        return date.today()
