"""Reporting over the asset inventory — lifecycle status and USD valuation."""

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal

from asset_tracking.application.services.asset_ledger import AssetLedger
from asset_tracking.application.services.currency_converter import CurrencyConverter
from asset_tracking.application.services.rate_store import utc_now
from asset_tracking.domain.entities import Asset, AssetKind
from asset_tracking.domain.exceptions import MissingRateError
from asset_tracking.domain.lifecycle import LifecycleAssessment, LifecycleStatus, classify

logger = logging.getLogger(__name__)


@dataclass
class AssetValuation:
    """An asset together with its lifecycle status and USD equivalent."""

    asset: Asset
    lifecycle: LifecycleAssessment
    usd_value: Decimal | None


@dataclass
class InventorySummary:
    total_assets: int = 0
    counts_by_kind: dict[str, int] = field(default_factory=dict)
    counts_by_office: dict[str, int] = field(default_factory=dict)
    near_end_of_life: int = 0
    approaching_end_of_life: int = 0
    expired: int = 0
    total_value_usd: Decimal = Decimal("0.00")
    using_live_rates: bool = False


class AssetReportService:
    """Builds per-asset valuations and the inventory summary report."""

    def __init__(
        self,
        ledger: AssetLedger,
        converter: CurrencyConverter,
        clock: Callable[[], datetime] | None = None,
    ):
        self._ledger = ledger
        self._converter = converter
        self._clock = clock or utc_now

    async def value(self, asset: Asset) -> AssetValuation:
        try:
            usd_value = await self._converter.to_usd(asset.purchase_price)
        except MissingRateError as exc:
            logger.warning("Could not value asset %s in USD: %s", asset.id, exc)
            usd_value = None
        return AssetValuation(
            asset=asset,
            lifecycle=classify(asset.purchase_date, self._clock()),
            usd_value=usd_value,
        )

    async def list_valued(self) -> list[AssetValuation]:
        """Sorted inventory (office, then purchase date) with status and USD value."""
        return [await self.value(asset) for asset in await self._ledger.get_sorted()]

    async def build_summary(self) -> InventorySummary:
        valuations = await self.list_valued()
        summary = InventorySummary(total_assets=len(valuations))

        for kind in AssetKind:
            summary.counts_by_kind[kind.value] = await self._ledger.count_by_kind(kind)

        by_office = await self._ledger.group_counts_by_office()
        summary.counts_by_office = dict(sorted(by_office.items()))

        total = Decimal("0.00")
        for item in valuations:
            status = item.lifecycle.status
            if status is LifecycleStatus.CRITICAL:
                summary.near_end_of_life += 1
            elif status is LifecycleStatus.WARNING:
                summary.approaching_end_of_life += 1
            elif status is LifecycleStatus.EXPIRED:
                summary.expired += 1
            if item.usd_value is not None:
                total += item.usd_value
        summary.total_value_usd = total

        table = self._converter.current_rates()
        summary.using_live_rates = table is not None and not table.is_fallback
        return summary
