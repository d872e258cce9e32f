"""
Top‑level API router.

Aggregates domain routers under the ``/api`` prefix applied in
``main.create_app``.  Add new domains here.
"""

from fastapi import APIRouter

from .endpoints import items

router = APIRouter()

router.include_router(items.router, prefix="/items", tags=["items"])
