"""Inventory report and demo-data endpoints."""

from fastapi import APIRouter, Depends, Query

from asset_tracking.application.schemas import InventorySummaryResponse, SampleDataResponse
from asset_tracking.application.services import AssetReportService, SampleDataService
from asset_tracking.infrastructure.dependencies import (
    get_asset_report_service,
    get_sample_data_service,
)

router = APIRouter(tags=["Reports"])


@router.get("/reports/summary", response_model=InventorySummaryResponse)
async def get_summary(
    reports: AssetReportService = Depends(get_asset_report_service),
) -> InventorySummaryResponse:
    """Counts per kind and office, end-of-life analysis and total USD value."""
    summary = await reports.build_summary()
    return InventorySummaryResponse.model_validate(summary, from_attributes=True)


@router.post("/sample-data", response_model=SampleDataResponse)
async def add_sample_data(
    include_end_of_life: bool = Query(False, description="Also add critical/warning test assets"),
    service: SampleDataService = Depends(get_sample_data_service),
) -> SampleDataResponse:
    """Populate an empty inventory with demonstration assets."""
    added = await service.add_sample_data()
    end_of_life_added = 0
    if include_end_of_life:
        end_of_life_added = await service.add_end_of_life_test_data()
    return SampleDataResponse(added=added, end_of_life_added=end_of_life_added)
