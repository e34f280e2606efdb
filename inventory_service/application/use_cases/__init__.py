"""Application use cases."""

from inventory_service.application.use_cases.inventory import InventoryService

__all__ = ["InventoryService"]
