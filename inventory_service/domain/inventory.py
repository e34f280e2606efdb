"""Inventory record rules shared by every store implementation."""

from inventory_service.domain.exceptions import ValidationException

RESOURCE_TYPE = "inventory item"


def require_name(name: str | None) -> str:
    """Return name if present; raise ValidationException when missing or empty.

    Only presence is checked: whitespace and markup are stored as given.
    """
    if not name:
        raise ValidationException("Name is required", field="name")
    return name
