"""Shared fakes and fixtures for unit and integration tests."""

import asyncio
import os
from collections import Counter
from datetime import datetime, timedelta, timezone
from decimal import Decimal

import pytest

# Keep the application engine off the filesystem and away from the network.
os.environ.setdefault("DATABASE_URL", "sqlite:///:memory:")
os.environ.setdefault("RATES_REFRESH_ON_STARTUP", "false")

from asset_tracking.application.interfaces import (  # noqa: E402
    AssetRepository,
    PriceRepository,
    RateSource,
)
from asset_tracking.application.services import AssetLedger, CurrencyConverter  # noqa: E402
from asset_tracking.domain.entities import Asset, AssetKind, MonetaryValue, RateTable  # noqa: E402
from asset_tracking.domain.exceptions import RateSourceError, StorageError  # noqa: E402

NOW = datetime(2025, 1, 1, 12, 0, tzinfo=timezone.utc)

LIVE_RATES = {
    "USD": Decimal("1.0389"),
    "SEK": Decimal("11.4900"),
    "JPY": Decimal("163.06"),
}


class FixedClock:
    """Callable clock that only moves when told to."""

    def __init__(self, now: datetime = NOW):
        self.now = now

    def __call__(self) -> datetime:
        return self.now

    def advance(self, delta: timedelta) -> None:
        self.now += delta


class FakeRateSource(RateSource):
    """In-memory rate source; raises RateSourceError when ``error`` is set."""

    def __init__(self, clock: FixedClock, rates: dict | None = None):
        self._clock = clock
        self.rates = dict(LIVE_RATES if rates is None else rates)
        self.error: str | None = None
        self.calls = 0
        self.delay: float = 0
        self.gate: asyncio.Event | None = None

    @property
    def source_name(self) -> str:
        return "fake"

    async def fetch(self) -> RateTable:
        self.calls += 1
        if self.gate is not None:
            await self.gate.wait()
        if self.delay:
            await asyncio.sleep(self.delay)
        if self.error:
            raise RateSourceError(self.source_name, self.error)
        return RateTable(rates=self.rates, fetched_at=self._clock(), source=self.source_name)


class FakePriceRepository(PriceRepository):
    """In-memory fake price store."""

    def __init__(self):
        self.prices: dict[int, MonetaryValue] = {}
        self._next_id = 1
        self.fail = False

    async def create(self, price: MonetaryValue) -> MonetaryValue:
        if self.fail:
            raise StorageError("price insert", "disk full")
        stored = price.with_id(self._next_id)
        self._next_id += 1
        self.prices[stored.id] = stored
        return stored

    async def get_by_id(self, price_id: int) -> MonetaryValue | None:
        return self.prices.get(price_id)

    async def count(self) -> int:
        return len(self.prices)

    def remove(self, price_id: int) -> None:
        self.prices.pop(price_id, None)


class FakeAssetRepository(AssetRepository):
    """In-memory fake asset store that cascades deletes to the price store."""

    def __init__(self, prices: FakePriceRepository):
        self._prices = prices
        self.assets: dict[int, Asset] = {}
        self._next_id = 1
        self.failing: set[str] = set()

    def _check(self, operation: str) -> None:
        if operation in self.failing:
            raise StorageError(operation, "connection lost")

    async def get_by_id(self, asset_id: int) -> Asset | None:
        self._check("get")
        return self.assets.get(asset_id)

    async def get_all(self) -> list[Asset]:
        self._check("query")
        return sorted(self.assets.values(), key=lambda a: a.id)

    async def get_sorted(self) -> list[Asset]:
        self._check("query")
        return sorted(
            self.assets.values(),
            key=lambda a: (a.office_location, a.purchase_date, a.id),
        )

    async def create(self, asset: Asset) -> Asset:
        self._check("insert")
        if asset.purchase_price.id not in self._prices.prices:
            raise StorageError("insert", "purchase price has not been stored")
        asset.id = self._next_id
        self._next_id += 1
        self.assets[asset.id] = asset
        return asset

    async def update(self, asset: Asset) -> bool:
        self._check("update")
        current = self.assets.get(asset.id)
        if current is None:
            return False
        price = current.purchase_price
        if price != asset.purchase_price:
            self._prices.remove(price.id)
            price = await self._prices.create(asset.purchase_price)
        self.assets[asset.id] = asset.with_price(price)
        return True

    async def delete(self, asset_id: int) -> bool:
        self._check("delete")
        asset = self.assets.pop(asset_id, None)
        if asset is None:
            return False
        self._prices.remove(asset.purchase_price.id)
        return True

    async def count_by_kind(self, kind: AssetKind) -> int:
        self._check("query")
        return sum(1 for a in self.assets.values() if a.kind == kind)

    async def count_by_office(self) -> dict[str, int]:
        self._check("query")
        return dict(Counter(a.office_location for a in self.assets.values()))


@pytest.fixture
def clock() -> FixedClock:
    return FixedClock()


@pytest.fixture
def rate_source(clock: FixedClock) -> FakeRateSource:
    return FakeRateSource(clock)


@pytest.fixture
def converter(rate_source: FakeRateSource, clock: FixedClock) -> CurrencyConverter:
    return CurrencyConverter(rate_source, clock=clock)


@pytest.fixture
def price_repo() -> FakePriceRepository:
    return FakePriceRepository()


@pytest.fixture
def asset_repo(price_repo: FakePriceRepository) -> FakeAssetRepository:
    return FakeAssetRepository(price_repo)


@pytest.fixture
def ledger(asset_repo: FakeAssetRepository, price_repo: FakePriceRepository) -> AssetLedger:
    return AssetLedger(asset_repo, price_repo)
