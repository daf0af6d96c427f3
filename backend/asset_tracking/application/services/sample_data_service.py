"""Seeds the inventory with demonstration assets."""

import logging
from collections.abc import Callable
from datetime import date, datetime, timedelta
from decimal import Decimal

from asset_tracking.application.services.asset_ledger import AssetLedger
from asset_tracking.application.services.rate_store import utc_now
from asset_tracking.domain.entities import Asset, AssetKind, Currency, MonetaryValue
from asset_tracking.domain.lifecycle import LIFETIME_YEARS, add_years

logger = logging.getLogger(__name__)

# (kind, brand, model, purchase date, amount, currency, office)
_SAMPLE_ASSETS = [
    (AssetKind.COMPUTER, "Apple", "MacBook Pro 13", date(2022, 1, 15), "1299.99", Currency.USD, "USA"),
    (AssetKind.COMPUTER, "Dell", "XPS 15", date(2021, 6, 10), "1199.99", Currency.USD, "USA"),
    (AssetKind.COMPUTER, "Lenovo", "ThinkPad X1 Carbon", date(2021, 3, 20), "1450.00", Currency.EUR, "Germany"),
    (AssetKind.COMPUTER, "Asus", "ZenBook 14", date(2022, 8, 5), "12500.00", Currency.SEK, "Sweden"),
    (AssetKind.COMPUTER, "Apple", "MacBook Air", date(2023, 2, 14), "999.99", Currency.USD, "USA"),
    (AssetKind.PHONE, "Apple", "iPhone 13 Pro", date(2022, 9, 25), "999.99", Currency.USD, "USA"),
    (AssetKind.PHONE, "Samsung", "Galaxy S22", date(2022, 4, 12), "849.99", Currency.EUR, "Germany"),
    (AssetKind.PHONE, "Nokia", "X20", date(2021, 11, 8), "3999.00", Currency.SEK, "Sweden"),
    (AssetKind.PHONE, "Apple", "iPhone 12", date(2021, 5, 30), "699.99", Currency.USD, "USA"),
    (AssetKind.PHONE, "Samsung", "Galaxy A52", date(2023, 1, 18), "399.99", Currency.EUR, "Germany"),
]

CRITICAL_TEST_REMAINING = timedelta(days=30)
WARNING_TEST_REMAINING = timedelta(days=120)


def _build(kind, brand, model, purchase_date, amount, currency, office) -> Asset:
    return Asset(
        kind=kind,
        brand=brand,
        model=model,
        purchase_date=purchase_date,
        purchase_price=MonetaryValue(Decimal(amount), currency),
        office_location=office,
    )


class SampleDataService:
    """Adds demonstration assets through the ledger."""

    def __init__(self, ledger: AssetLedger, clock: Callable[[], datetime] | None = None):
        self._ledger = ledger
        self._clock = clock or utc_now

    async def add_sample_data(self) -> int:
        """Add five computers and five phones. Skipped when assets already exist.

        Returns the number of assets added.
        """
        existing = await self._ledger.get_all()
        if existing:
            logger.info("Database already contains assets. Skipping sample data creation.")
            return 0

        added = 0
        for row in _SAMPLE_ASSETS:
            if await self._ledger.create(_build(*row)) is not None:
                added += 1
        logger.info("Added %d sample assets", added)
        return added

    async def add_end_of_life_test_data(self) -> int:
        """Add one asset in the critical band and one in the warning band."""
        today = self._clock().date()
        purchased_lifetime_ago = add_years(today, -LIFETIME_YEARS)

        test_assets = [
            _build(
                AssetKind.COMPUTER, "Dell", "Latitude 5420 (RED TEST)",
                purchased_lifetime_ago + CRITICAL_TEST_REMAINING,
                "899.99", Currency.USD, "USA",
            ),
            _build(
                AssetKind.PHONE, "Nokia", "G50 (YELLOW TEST)",
                purchased_lifetime_ago + WARNING_TEST_REMAINING,
                "2999.00", Currency.SEK, "Sweden",
            ),
        ]
        added = 0
        for asset in test_assets:
            if await self._ledger.create(asset) is not None:
                added += 1
        logger.info("Added %d end-of-life test assets", added)
        return added
