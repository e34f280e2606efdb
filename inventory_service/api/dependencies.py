"""Presentation-layer dependency injection (composition root).

Provides FastAPI Depends() for settings, the inventory store, photo storage
and the InventoryService. Stores are built once in create_app() and kept on
app.state; routes depend only on these functions, not on infrastructure.
"""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends, Request

from inventory_service.application.interfaces.repositories import IInventoryStore
from inventory_service.application.interfaces.storage import IPhotoStorage
from inventory_service.application.use_cases.inventory import InventoryService
from inventory_service.core.config import Settings


def get_app_settings(request: Request) -> Settings:
    """Settings the app was created with."""
    return request.app.state.settings


def get_inventory_store(request: Request) -> IInventoryStore:
    """Inventory store selected by settings.inventory_backend."""
    return request.app.state.inventory_store


def get_photo_storage(request: Request) -> IPhotoStorage:
    """Photo blob storage under settings.photo_dir."""
    return request.app.state.photo_storage


def get_inventory_service(
    store: Annotated[IInventoryStore, Depends(get_inventory_store)],
    photo_storage: Annotated[IPhotoStorage, Depends(get_photo_storage)],
) -> InventoryService:
    """InventoryService over the app's store and photo storage."""
    return InventoryService(store, photo_storage)
