"""Application DTOs."""

from inventory_service.application.dtos.inventory import InventoryRecord, PhotoUpload

__all__ = ["InventoryRecord", "PhotoUpload"]
