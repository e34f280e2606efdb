"""Inventory store factory: creates the json or sql backend from settings."""

from __future__ import annotations

from typing import TYPE_CHECKING

from inventory_service.application.interfaces.repositories import IInventoryStore

if TYPE_CHECKING:
    from inventory_service.core.config import Settings


class InventoryStoreFactory:
    """Factory for inventory store instances based on configuration."""

    @staticmethod
    def create_inventory_store(settings: "Settings | None" = None) -> IInventoryStore:
        """Create inventory store from settings.

        Args:
            settings: Application settings; if None, uses get_settings().

        Returns:
            JsonFileInventoryStore or SqlInventoryStore.

        Raises:
            ValueError: Unknown backend.
        """
        from inventory_service.core.config import get_settings

        s = settings or get_settings()
        backend = s.inventory_backend.lower()

        if backend == "json":
            from inventory_service.infrastructure.persistence.repositories.json_inventory_store import (
                JsonFileInventoryStore,
            )

            return JsonFileInventoryStore(s.data_file)
        if backend == "sql":
            from inventory_service.infrastructure.persistence.database import (
                create_engine_from_settings,
            )
            from inventory_service.infrastructure.persistence.repositories.sql_inventory_store import (
                SqlInventoryStore,
            )

            return SqlInventoryStore(
                create_engine_from_settings(s),
                auto_create=s.database_auto_create,
            )
        raise ValueError(
            f"Unknown inventory backend: {backend}. Supported: 'json', 'sql'"
        )
