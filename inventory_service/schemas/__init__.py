"""API request/response schemas (pydantic)."""

from inventory_service.schemas.health import HealthResponse
from inventory_service.schemas.inventory import (
    DeleteResponse,
    ErrorResponse,
    InventoryItemResponse,
    InventoryItemUpdate,
)

__all__ = [
    "DeleteResponse",
    "ErrorResponse",
    "HealthResponse",
    "InventoryItemResponse",
    "InventoryItemUpdate",
]
