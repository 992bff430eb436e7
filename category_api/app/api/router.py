"""
Top‑level router.

Aggregates the endpoint routers.  The health check sits at the root
and the category routes under ``/api/categories``.
"""

from fastapi import APIRouter

from .endpoints import categories, health

router = APIRouter()

router.include_router(health.router, tags=["health"])
router.include_router(categories.router, prefix="/api/categories", tags=["categories"])
