"""Search view: look up one item by id and render it as an HTML fragment."""

from typing import Annotated

from fastapi import APIRouter, Depends, Form
from fastapi.responses import HTMLResponse

from inventory_service.api.dependencies import get_inventory_service
from inventory_service.application.use_cases.inventory import InventoryService
from inventory_service.domain.exceptions import ResourceNotFoundException
from inventory_service.pages import NOT_FOUND_HTML, render_search_result

router = APIRouter()

PHOTO_CHECKBOX_ON = "on"


@router.post(
    "/search",
    response_class=HTMLResponse,
    responses={404: {"content": {"text/html": {}}, "description": "Item not found"}},
)
async def search_item(
    service: Annotated[InventoryService, Depends(get_inventory_service)],
    id: Annotated[str | None, Form()] = None,
    has_photo: Annotated[str | None, Form()] = None,
) -> HTMLResponse:
    """Find an item by id; embed its photo when has_photo is "on"."""
    if not id:
        return HTMLResponse(content=NOT_FOUND_HTML, status_code=404)
    try:
        record, include_photo = await service.search(
            id, include_photo=has_photo == PHOTO_CHECKBOX_ON
        )
    except ResourceNotFoundException:
        return HTMLResponse(content=NOT_FOUND_HTML, status_code=404)
    return HTMLResponse(content=render_search_result(record, include_photo))
