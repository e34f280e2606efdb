"""HTTP API: routers, endpoints and dependencies."""

from inventory_service.api.router import api_router

__all__ = ["api_router"]
