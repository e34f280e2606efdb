"""DTOs for inventory use cases (no dependency on ORM or web framework)."""

from dataclasses import asdict, dataclass
from typing import Any


@dataclass(frozen=True)
class InventoryRecord:
    """Inventory read-model returned by every store operation.

    id is a timestamp-derived string for the json backend and an
    auto-increment integer for the sql backend.
    """

    id: str | int
    name: str
    description: str = ""
    photo: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class PhotoUpload:
    """Uploaded photo payload handed from the route to the service."""

    data: bytes
    filename: str | None = None
