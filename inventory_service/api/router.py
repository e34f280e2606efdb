"""API router aggregation.

Routes live at the root (no version prefix) so the HTML forms can post to
/register and /search directly.
"""

from fastapi import APIRouter

from inventory_service.api.endpoints import forms, health, inventory, search

api_router = APIRouter()

api_router.include_router(forms.router, tags=["forms"])
api_router.include_router(inventory.router, tags=["inventory"])
api_router.include_router(search.router, tags=["search"])
api_router.include_router(health.router, prefix="/health", tags=["health"])
