"""HTML fragment rendered by POST /search."""

from html import escape

from inventory_service.application.dtos.inventory import InventoryRecord

NOT_FOUND_HTML = "<h1>Not found</h1>"


def render_search_result(record: InventoryRecord, include_photo: bool = False) -> str:
    """Return name and description, plus an <img> pointing at the photo route when requested.

    Text is HTML-escaped; include_photo should already account for the record having a photo.
    """
    html = f"<h1>{escape(record.name)}</h1><p>{escape(record.description)}</p>"
    if include_photo:
        photo_url = f"/inventory/{escape(str(record.id), quote=True)}/photo"
        html += f'<img src="{photo_url}" width="200">'
    return html
