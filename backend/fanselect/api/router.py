"""
Top-level API router that aggregates all sub-routers.
"""

from fastapi import APIRouter

from fanselect.api.units import router as units_router
from fanselect.api.curve import router as curve_router
from fanselect.api.fans import router as fans_router

router = APIRouter()
router.include_router(units_router)
router.include_router(curve_router)
router.include_router(fans_router)
