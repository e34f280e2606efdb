"""Application interfaces (ports)."""

from inventory_service.application.interfaces.repositories import IInventoryStore
from inventory_service.application.interfaces.storage import IPhotoStorage

__all__ = ["IInventoryStore", "IPhotoStorage"]
