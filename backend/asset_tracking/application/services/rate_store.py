"""In-memory holder for the current exchange-rate table."""

import threading
from collections.abc import Callable
from datetime import datetime, timedelta, timezone

from asset_tracking.domain.entities import RateTable


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class RateStore:
    """Thread-safe holder of the latest RateTable.

    Tables are immutable and replaced as a whole, so the lock only guards the
    reference swap. Readers never see a partially updated table and are never
    blocked by a provider fetch.
    """

    def __init__(self, clock: Callable[[], datetime] | None = None):
        self._table: RateTable | None = None
        self._lock = threading.Lock()
        self._clock = clock or utc_now

    def get_rates(self) -> RateTable | None:
        with self._lock:
            return self._table

    def set_rates(self, table: RateTable) -> None:
        with self._lock:
            self._table = table

    def is_stale(self, max_age: timedelta) -> bool:
        """True when the store is empty or the table is older than ``max_age``."""
        table = self.get_rates()
        if table is None:
            return True
        return self._clock() - table.fetched_at > max_age

    @property
    def last_updated(self) -> datetime | None:
        table = self.get_rates()
        return table.fetched_at if table else None
