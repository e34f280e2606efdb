"""Server-rendered HTML: register/search forms and the search result fragment."""

from inventory_service.pages.forms import render_register_form, render_search_form
from inventory_service.pages.search import NOT_FOUND_HTML, render_search_result

__all__ = [
    "NOT_FOUND_HTML",
    "render_register_form",
    "render_search_form",
    "render_search_result",
]
