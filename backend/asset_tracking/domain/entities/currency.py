"""Domain entities for money — supported currencies and the monetary value object."""

from dataclasses import dataclass, field
from decimal import ROUND_HALF_UP, Decimal
from enum import Enum

CENTS = Decimal("0.01")


class Currency(str, Enum):
    """Closed set of currencies an asset price may be recorded in."""

    USD = "USD"
    EUR = "EUR"
    SEK = "SEK"


BASE_CURRENCY = Currency.EUR


def quantize_amount(amount: Decimal) -> Decimal:
    """Round an amount to two fraction digits."""
    return amount.quantize(CENTS, rounding=ROUND_HALF_UP)


@dataclass(frozen=True)
class MonetaryValue:
    """A non-negative amount with two fraction digits in one supported currency.

    Value object: an asset's price is replaced, never mutated in place.
    ``id`` is the storage identity, assigned once the value has been written;
    it takes no part in equality.
    """

    amount: Decimal
    currency: Currency
    id: int | None = field(default=None, compare=False)

    def __post_init__(self) -> None:
        amount = Decimal(str(self.amount))
        if amount < 0:
            raise ValueError(f"Monetary amount must be >= 0, got {amount}")
        object.__setattr__(self, "amount", quantize_amount(amount))
        object.__setattr__(self, "currency", Currency(self.currency))

    def with_id(self, value_id: int) -> "MonetaryValue":
        """Return a copy carrying the storage identity."""
        return MonetaryValue(amount=self.amount, currency=self.currency, id=value_id)
