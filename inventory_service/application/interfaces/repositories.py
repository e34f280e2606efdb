"""Store interfaces (ports) for the application layer.

Protocols define contracts that infrastructure implementations must fulfill (DIP).
Both the JSON-file store and the SQL table store satisfy IInventoryStore and
must behave identically from the caller's perspective.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from inventory_service.application.dtos.inventory import InventoryRecord


class IInventoryStore(Protocol):
    """Protocol for inventory record persistence (json file or sql table)."""

    async def initialize(self) -> None:
        """Prepare backing storage (create data file or table). Idempotent."""

    async def close(self) -> None:
        """Release resources held by the store (engine, connections)."""

    async def create(
        self,
        name: str | None,
        description: str | None = None,
        photo: str | None = None,
    ) -> InventoryRecord:
        """Create a record. Raises ValidationException if name is empty or missing."""

    async def list_all(self) -> list[InventoryRecord]:
        """Return all records in a stable order (creation order)."""

    async def get(self, record_id: str) -> InventoryRecord:
        """Return a record. Raises ResourceNotFoundException if absent."""

    async def update(
        self,
        record_id: str,
        name: str | None = None,
        description: str | None = None,
    ) -> InventoryRecord:
        """Overwrite only the supplied (non-None) fields. Raises ResourceNotFoundException if absent."""

    async def replace_photo(self, record_id: str, photo: str) -> InventoryRecord:
        """Set the photo reference. Raises ResourceNotFoundException if absent."""

    async def delete(self, record_id: str) -> None:
        """Delete a record (its photo blob is kept). Raises ResourceNotFoundException if absent."""
