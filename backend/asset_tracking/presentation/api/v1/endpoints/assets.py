"""Asset CRUD endpoints."""

from fastapi import APIRouter, Depends, HTTPException, status

from asset_tracking.application.schemas import (
    AssetCreate,
    AssetResponse,
    AssetUpdate,
    LifecycleResponse,
    PriceSchema,
)
from asset_tracking.application.services import AssetLedger, AssetReportService, AssetValuation
from asset_tracking.infrastructure.dependencies import get_asset_ledger, get_asset_report_service

router = APIRouter(prefix="/assets", tags=["Assets"])


def _to_response(item: AssetValuation) -> AssetResponse:
    asset = item.asset
    return AssetResponse(
        id=asset.id,
        kind=asset.kind,
        brand=asset.brand,
        model=asset.model,
        purchase_date=asset.purchase_date,
        purchase_price=PriceSchema(
            amount=asset.purchase_price.amount,
            currency=asset.purchase_price.currency,
        ),
        office_location=asset.office_location,
        lifecycle=LifecycleResponse(
            status=item.lifecycle.status,
            remaining_days=item.lifecycle.remaining_days,
            end_of_life_date=item.lifecycle.end_of_life_date,
        ),
        usd_value=item.usd_value,
    )


def _storage_failure(ledger: AssetLedger, fallback: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail=ledger.last_error or fallback,
    )


@router.get("", response_model=list[AssetResponse])
async def list_assets(
    reports: AssetReportService = Depends(get_asset_report_service),
) -> list[AssetResponse]:
    """All assets sorted by office location, then purchase date."""
    return [_to_response(item) for item in await reports.list_valued()]


@router.get("/{asset_id}", response_model=AssetResponse)
async def get_asset(
    asset_id: int,
    ledger: AssetLedger = Depends(get_asset_ledger),
    reports: AssetReportService = Depends(get_asset_report_service),
) -> AssetResponse:
    """Retrieve a single asset by ID."""
    asset = await ledger.get_by_id(asset_id)
    if asset is None:
        if ledger.last_error:
            raise _storage_failure(ledger, "Failed to retrieve asset.")
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Asset not found.")
    return _to_response(await reports.value(asset))


@router.post("", response_model=AssetResponse, status_code=status.HTTP_201_CREATED)
async def create_asset(
    data: AssetCreate,
    ledger: AssetLedger = Depends(get_asset_ledger),
    reports: AssetReportService = Depends(get_asset_report_service),
) -> AssetResponse:
    """Create a new asset together with its purchase price."""
    asset_id = await ledger.create(data.to_entity())
    if asset_id is None:
        raise _storage_failure(ledger, "Failed to add asset.")
    asset = await ledger.get_by_id(asset_id)
    if asset is None:
        raise _storage_failure(ledger, "Failed to add asset.")
    return _to_response(await reports.value(asset))


@router.put("/{asset_id}", response_model=AssetResponse)
async def update_asset(
    asset_id: int,
    data: AssetUpdate,
    ledger: AssetLedger = Depends(get_asset_ledger),
    reports: AssetReportService = Depends(get_asset_report_service),
) -> AssetResponse:
    """Replace every field of an existing asset."""
    updated = await ledger.update(data.to_entity(asset_id))
    if not updated:
        if ledger.last_error:
            raise _storage_failure(ledger, "Failed to update asset.")
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Asset not found.")
    asset = await ledger.get_by_id(asset_id)
    if asset is None:
        raise _storage_failure(ledger, "Failed to update asset.")
    return _to_response(await reports.value(asset))


@router.delete("/{asset_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_asset(
    asset_id: int,
    ledger: AssetLedger = Depends(get_asset_ledger),
) -> None:
    """Delete an asset and its purchase price."""
    deleted = await ledger.delete(asset_id)
    if not deleted:
        if ledger.last_error:
            raise _storage_failure(ledger, "Failed to delete asset.")
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Asset not found.")
