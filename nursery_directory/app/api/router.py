"""
Top‑level API router.

This router aggregates the per-collection routers under a unified
prefix.  When a new collection is exposed, add its router here.
"""

from fastapi import APIRouter

from .endpoints import (
    nurseries,
    offers,
    categories,
    sponsors,
    settings,
)

router = APIRouter()

router.include_router(nurseries.router, prefix="/nurseries", tags=["nurseries"])
router.include_router(offers.router, prefix="/offers", tags=["offers"])
router.include_router(categories.router, prefix="/categories", tags=["categories"])
router.include_router(sponsors.router, prefix="/sponsors", tags=["sponsors"])
router.include_router(settings.router, prefix="/settings", tags=["settings"])
