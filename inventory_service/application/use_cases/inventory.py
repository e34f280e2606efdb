"""Inventory operations spanning the record store and the photo storage."""

from __future__ import annotations

from inventory_service.application.dtos.inventory import InventoryRecord, PhotoUpload
from inventory_service.application.interfaces.repositories import IInventoryStore
from inventory_service.application.interfaces.storage import IPhotoStorage
from inventory_service.domain.exceptions import (
    PhotoNotFoundException,
    ValidationException,
)
from inventory_service.domain.inventory import require_name
from inventory_service.shared.logging_setup import get_logger

logger = get_logger(__name__)


class InventoryService:
    """Register items with photos, replace and read photos, and look up items for search.

    Plain CRUD (list, get, update, delete) goes straight to the store; this
    service covers the operations that touch both the store and the blobs.
    Blobs are never deleted: deleting a record or replacing its photo leaves
    the previous blob in place.
    """

    def __init__(self, store: IInventoryStore, photo_storage: IPhotoStorage) -> None:
        self.store = store
        self.photo_storage = photo_storage

    async def register(
        self,
        name: str | None,
        description: str | None = None,
        photo: PhotoUpload | None = None,
    ) -> InventoryRecord:
        """Save the photo (if any), then create the record referencing it.

        The name is checked before any blob is written, so a rejected
        registration leaves nothing behind.
        """
        require_name(name)
        blob_id = None
        if photo is not None:
            blob_id = await self.photo_storage.save(photo.data, photo.filename)
        return await self.store.create(name, description, blob_id)

    async def replace_photo(
        self, record_id: str, photo: PhotoUpload | None
    ) -> InventoryRecord:
        """Store a new photo blob and point the record at it."""
        await self.store.get(record_id)
        if photo is None:
            raise ValidationException("Photo is required", field="photo")
        blob_id = await self.photo_storage.save(photo.data, photo.filename)
        record = await self.store.replace_photo(record_id, blob_id)
        logger.info("Replaced photo of inventory item %s with %s", record_id, blob_id)
        return record

    async def get_photo(self, record_id: str) -> bytes:
        """Return photo bytes of a record; PhotoNotFoundException when it has none."""
        record = await self.store.get(record_id)
        if not record.photo:
            raise PhotoNotFoundException(str(record_id))
        return await self.photo_storage.read(record.photo)

    async def search(
        self, record_id: str, include_photo: bool = False
    ) -> tuple[InventoryRecord, bool]:
        """Return the record and whether the search view should embed its photo."""
        record = await self.store.get(record_id)
        return record, bool(include_photo and record.photo)
