"""Inventory store implementations. Re-exports for the store factory."""

from inventory_service.infrastructure.persistence.repositories.json_inventory_store import (
    JsonFileInventoryStore,
)
from inventory_service.infrastructure.persistence.repositories.sql_inventory_store import (
    SqlInventoryStore,
)

__all__ = ["JsonFileInventoryStore", "SqlInventoryStore"]
