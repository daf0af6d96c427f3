"""Currency conversion service backed by a refreshable rate cache.

All conversions are triangulated through the base currency (EUR) because the
provider only publishes EUR-relative rates. When the provider is unreachable
the converter installs an approximate fallback table instead of failing, so a
report never breaks because of a rate outage.
"""

import asyncio
import logging
from collections.abc import Callable
from datetime import datetime, timedelta
from decimal import Decimal

from asset_tracking.application.interfaces import RateSource
from asset_tracking.application.services.rate_store import RateStore, utc_now
from asset_tracking.domain.entities import (
    BASE_CURRENCY,
    Currency,
    MonetaryValue,
    RateTable,
    fallback_table,
    quantize_amount,
)
from asset_tracking.domain.exceptions import MissingRateError, RateSourceError

logger = logging.getLogger(__name__)

DEFAULT_MAX_AGE = timedelta(hours=24)
REQUIRED_CURRENCIES = [c for c in Currency if c != BASE_CURRENCY]


def _code(currency: Currency | str) -> str:
    return currency.value if isinstance(currency, Currency) else currency.upper()


class CurrencyConverter:
    """Converts amounts between supported currencies.

    One instance is shared per process; each test builds its own. The
    provider fetch never runs under the store lock, and concurrent refreshes
    are coalesced so only one request talks to the provider at a time.
    """

    def __init__(
        self,
        source: RateSource,
        store: RateStore | None = None,
        *,
        max_age: timedelta = DEFAULT_MAX_AGE,
        clock: Callable[[], datetime] | None = None,
    ):
        self._source = source
        self._clock = clock or utc_now
        self._store = store or RateStore(clock=self._clock)
        self._max_age = max_age
        self._refresh_lock = asyncio.Lock()
        self.last_error: str | None = None

    @property
    def store(self) -> RateStore:
        return self._store

    @property
    def max_age(self) -> timedelta:
        return self._max_age

    def current_rates(self) -> RateTable | None:
        return self._store.get_rates()

    def last_update_time(self) -> datetime | None:
        return self._store.last_updated

    async def refresh(self, suppress_errors: bool = False) -> bool:
        """Fetch a new table unconditionally; install the fallback on failure.

        Returns True when live provider rates were stored.
        """
        try:
            table = await self._source.fetch()
        except RateSourceError as exc:
            self.last_error = str(exc)
            if suppress_errors:
                logger.debug("Rate refresh failed, using fallback rates: %s", exc)
            else:
                logger.warning("Error updating currency rates: %s", exc)
                logger.warning("Using fallback exchange rates.")
            self._store.set_rates(fallback_table(self._clock()))
            return False

        self._store.set_rates(table)
        self.last_error = None
        logger.info(
            "Exchange rates updated from %s (%d currencies)",
            self._source.source_name,
            len(table.rates),
        )
        return True

    async def ensure_fresh(
        self,
        max_age: timedelta | None = None,
        suppress_errors: bool = False,
    ) -> bool:
        """Refresh the table when it is missing or older than ``max_age``.

        Returns True when live rates are in place afterwards, False when the
        fallback table is being used. Never raises. While another refresh is
        running, a caller that already has a table returns at once instead of
        waiting for the provider.
        """
        max_age = self._max_age if max_age is None else max_age
        if not self._store.is_stale(max_age):
            return self._has_live_rates()

        # A refresh is already running: keep using the current table unless
        # there is nothing to use yet.
        if self._refresh_lock.locked() and self._store.get_rates() is not None:
            return self._has_live_rates()

        async with self._refresh_lock:
            # Another request may have refreshed while we waited.
            if not self._store.is_stale(max_age):
                return self._has_live_rates()
            return await self.refresh(suppress_errors=suppress_errors)

    async def convert(
        self,
        amount: Decimal,
        from_currency: Currency | str,
        to_currency: Currency | str,
    ) -> Decimal:
        """Convert ``amount`` via the base currency.

        Silently refreshes stale rates first. Same-currency conversions return
        the amount untouched.

        Raises:
            MissingRateError: If either currency is absent from the table.
        """
        if self._store.is_stale(DEFAULT_MAX_AGE):
            await self.ensure_fresh(DEFAULT_MAX_AGE, suppress_errors=True)

        amount = Decimal(str(amount))
        from_code = _code(from_currency)
        to_code = _code(to_currency)
        if from_code == to_code:
            return amount

        table = self._store.get_rates()
        if table is None:
            raise MissingRateError(from_code)

        amount_in_base = amount
        if from_code != table.base:
            from_rate = table.rate_for(from_code)
            if from_rate is None:
                raise MissingRateError(from_code)
            amount_in_base = amount / from_rate

        if to_code == table.base:
            return amount_in_base

        to_rate = table.rate_for(to_code)
        if to_rate is None:
            raise MissingRateError(to_code)
        return amount_in_base * to_rate

    async def to_usd(self, value: MonetaryValue) -> Decimal:
        """USD equivalent of a price, rounded to cents."""
        converted = await self.convert(value.amount, value.currency, Currency.USD)
        return quantize_amount(converted)

    def has_valid_rates(self) -> bool:
        """True if every supported non-base currency has a rate."""
        table = self._store.get_rates()
        return table is not None and table.covers(REQUIRED_CURRENCIES)

    def _has_live_rates(self) -> bool:
        table = self._store.get_rates()
        return table is not None and not table.is_fallback
