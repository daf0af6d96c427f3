"""Domain entity for exchange-rate snapshots."""

from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import datetime, timezone
from decimal import Decimal
from types import MappingProxyType

from .currency import BASE_CURRENCY, Currency


@dataclass(frozen=True)
class RateTable:
    """Immutable snapshot of rates quoted as units of a currency per 1 EUR.

    Always carries ``EUR = 1``. ``fetched_at`` is the time of the successful
    provider refresh, or the time the fallback table was installed.
    """

    rates: Mapping[str, Decimal]
    fetched_at: datetime
    source: str = "ecb"
    is_fallback: bool = False
    base: str = field(default=BASE_CURRENCY.value)

    def __post_init__(self) -> None:
        normalized: dict[str, Decimal] = {}
        for code, rate in self.rates.items():
            value = Decimal(str(rate))
            if value <= 0:
                raise ValueError(f"Rate for {code} must be positive, got {value}")
            normalized[code.upper()] = value
        normalized[self.base] = Decimal("1")
        object.__setattr__(self, "rates", MappingProxyType(normalized))

    def rate_for(self, currency: Currency | str) -> Decimal | None:
        code = currency.value if isinstance(currency, Currency) else currency.upper()
        return self.rates.get(code)

    def covers(self, currencies: list[Currency]) -> bool:
        """True when every given currency has a rate in this table."""
        return all(self.rate_for(c) is not None for c in currencies)


# Approximate rates used whenever the provider cannot be reached.
FALLBACK_RATES: dict[str, Decimal] = {
    Currency.EUR.value: Decimal("1.0"),
    Currency.USD.value: Decimal("1.1"),
    Currency.SEK.value: Decimal("10.5"),
}


def fallback_table(now: datetime | None = None) -> RateTable:
    """Hardcoded approximate table, stamped with ``now`` (defaults to UTC now)."""
    return RateTable(
        rates=FALLBACK_RATES,
        fetched_at=now or datetime.now(timezone.utc),
        source="fallback",
        is_fallback=True,
    )
