"""Persistence models: ORM entities."""

from inventory_service.infrastructure.persistence.models.inventory_item import (
    InventoryItem,
)

__all__ = ["InventoryItem"]
