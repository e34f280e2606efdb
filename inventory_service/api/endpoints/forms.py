"""HTML form pages."""

from fastapi import APIRouter
from fastapi.responses import HTMLResponse

from inventory_service.pages import render_register_form, render_search_form

router = APIRouter()


@router.get("/RegisterForm.html", response_class=HTMLResponse)
def register_form() -> HTMLResponse:
    """Open the HTML form for registering an inventory item."""
    return HTMLResponse(content=render_register_form())


@router.get("/SearchForm.html", response_class=HTMLResponse)
def search_form() -> HTMLResponse:
    """Open the HTML form for searching an inventory item by id."""
    return HTMLResponse(content=render_search_form())
