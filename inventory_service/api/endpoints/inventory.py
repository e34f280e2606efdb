"""Inventory API: thin routes delegating to the inventory store and InventoryService.

Domain exceptions propagate to the registered exception handlers
(ValidationException -> 400, not found -> 404, storage errors -> 500).
"""

from typing import Annotated

from fastapi import APIRouter, Depends, File, Form, Response, UploadFile, status

from inventory_service.api.dependencies import get_inventory_service, get_inventory_store
from inventory_service.application.dtos.inventory import PhotoUpload
from inventory_service.application.interfaces.repositories import IInventoryStore
from inventory_service.application.use_cases.inventory import InventoryService
from inventory_service.schemas.inventory import (
    DeleteResponse,
    ErrorResponse,
    InventoryItemResponse,
    InventoryItemUpdate,
)

router = APIRouter()

PHOTO_MEDIA_TYPE = "image/jpeg"

_NOT_FOUND = {404: {"model": ErrorResponse, "description": "Inventory item not found"}}


async def _read_upload(photo: UploadFile | None) -> PhotoUpload | None:
    """Return the uploaded bytes, or None when no file was chosen."""
    if photo is None or not photo.filename:
        return None
    return PhotoUpload(data=await photo.read(), filename=photo.filename)


@router.post(
    "/register",
    response_model=InventoryItemResponse,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ErrorResponse, "description": "Name is required"}},
)
async def register_item(
    service: Annotated[InventoryService, Depends(get_inventory_service)],
    inventory_name: Annotated[str | None, Form()] = None,
    description: Annotated[str | None, Form()] = None,
    photo: Annotated[UploadFile | None, File()] = None,
) -> InventoryItemResponse:
    """Register a new inventory item with an optional photo."""
    record = await service.register(
        inventory_name,
        description,
        await _read_upload(photo),
    )
    return InventoryItemResponse.model_validate(record)


@router.get("/inventory", response_model=list[InventoryItemResponse])
async def list_items(
    store: Annotated[IInventoryStore, Depends(get_inventory_store)],
) -> list[InventoryItemResponse]:
    """List all inventory items in creation order."""
    records = await store.list_all()
    return [InventoryItemResponse.model_validate(r) for r in records]


@router.get("/inventory/{record_id}", response_model=InventoryItemResponse, responses=_NOT_FOUND)
async def get_item(
    record_id: str,
    store: Annotated[IInventoryStore, Depends(get_inventory_store)],
) -> InventoryItemResponse:
    """Get one inventory item by id."""
    return InventoryItemResponse.model_validate(await store.get(record_id))


@router.put("/inventory/{record_id}", response_model=InventoryItemResponse, responses=_NOT_FOUND)
async def update_item(
    record_id: str,
    store: Annotated[IInventoryStore, Depends(get_inventory_store)],
    body: InventoryItemUpdate | None = None,
) -> InventoryItemResponse:
    """Update name and/or description. Omitted or null fields (or no body) keep their value."""
    body = body or InventoryItemUpdate()
    record = await store.update(record_id, name=body.name, description=body.description)
    return InventoryItemResponse.model_validate(record)


@router.delete("/inventory/{record_id}", response_model=DeleteResponse, responses=_NOT_FOUND)
async def delete_item(
    record_id: str,
    store: Annotated[IInventoryStore, Depends(get_inventory_store)],
) -> DeleteResponse:
    """Delete an inventory item. Its photo file is kept."""
    await store.delete(record_id)
    return DeleteResponse()


@router.get(
    "/inventory/{record_id}/photo",
    response_class=Response,
    responses={
        200: {"content": {PHOTO_MEDIA_TYPE: {}}, "description": "Photo bytes"},
        404: {"model": ErrorResponse, "description": "Item or photo not found"},
    },
)
async def get_item_photo(
    record_id: str,
    service: Annotated[InventoryService, Depends(get_inventory_service)],
) -> Response:
    """Return the item's photo."""
    data = await service.get_photo(record_id)
    return Response(content=data, media_type=PHOTO_MEDIA_TYPE)


@router.put(
    "/inventory/{record_id}/photo",
    response_model=InventoryItemResponse,
    responses={
        400: {"model": ErrorResponse, "description": "No photo file given"},
        **_NOT_FOUND,
    },
)
async def replace_item_photo(
    record_id: str,
    service: Annotated[InventoryService, Depends(get_inventory_service)],
    photo: Annotated[UploadFile | None, File()] = None,
) -> InventoryItemResponse:
    """Replace the item's photo. The previous photo file is kept."""
    record = await service.replace_photo(record_id, await _read_upload(photo))
    return InventoryItemResponse.model_validate(record)
