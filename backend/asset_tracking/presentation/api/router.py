"""Mounts the versioned asset-tracking API under ``/api``."""

from fastapi import APIRouter

from asset_tracking.presentation.api.v1.router import router as v1_router

router = APIRouter(prefix="/api")
router.include_router(v1_router)
