"""V1 API router — aggregates all v1 endpoint routers."""

from fastapi import APIRouter

from asset_tracking.presentation.api.v1.endpoints.health import router as health_router
from asset_tracking.presentation.api.v1.endpoints.assets import router as assets_router
from asset_tracking.presentation.api.v1.endpoints.currency import router as currency_router
from asset_tracking.presentation.api.v1.endpoints.reports import router as reports_router

router = APIRouter(prefix="/v1")
router.include_router(health_router)
router.include_router(assets_router)
router.include_router(currency_router)
router.include_router(reports_router)
