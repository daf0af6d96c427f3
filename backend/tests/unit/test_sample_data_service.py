"""Unit tests for the SampleDataService."""

import pytest

from asset_tracking.application.services import SampleDataService
from asset_tracking.domain.entities import AssetKind
from asset_tracking.domain.lifecycle import LifecycleStatus, classify


@pytest.fixture
def service(ledger, clock) -> SampleDataService:
    return SampleDataService(ledger, clock=clock)


@pytest.mark.asyncio
async def test_adds_five_computers_and_five_phones(service, ledger):
    assert await service.add_sample_data() == 10

    assert await ledger.count_by_kind(AssetKind.COMPUTER) == 5
    assert await ledger.count_by_kind(AssetKind.PHONE) == 5
    assert await ledger.group_counts_by_office() == {"USA": 5, "Germany": 3, "Sweden": 2}


@pytest.mark.asyncio
async def test_sample_data_is_skipped_when_inventory_exists(service, ledger):
    await service.add_sample_data()
    assert await service.add_sample_data() == 0
    assert len(await ledger.get_all()) == 10


@pytest.mark.asyncio
async def test_end_of_life_assets_land_in_critical_and_warning(service, ledger, clock):
    assert await service.add_end_of_life_test_data() == 2

    statuses = {
        asset.model: classify(asset.purchase_date, clock()).status
        for asset in await ledger.get_all()
    }
    assert statuses == {
        "Latitude 5420 (RED TEST)": LifecycleStatus.CRITICAL,
        "G50 (YELLOW TEST)": LifecycleStatus.WARNING,
    }


@pytest.mark.asyncio
async def test_storage_failure_adds_nothing(service, asset_repo):
    asset_repo.failing.add("insert")
    assert await service.add_sample_data() == 0
