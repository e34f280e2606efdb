"""Photo blob storage interface (DIP). Implementation: LocalPhotoStorage."""

from typing import Protocol


class IPhotoStorage(Protocol):
    """Protocol for photo blob storage."""

    async def save(self, data: bytes, suggested_name: str | None = None) -> str:
        """Persist bytes under a new unique name and return that name. Never overwrites."""
        ...

    async def read(self, blob_id: str) -> bytes:
        """Return stored bytes. Raises PhotoNotFoundException if absent."""
        ...

    async def exists(self, blob_id: str) -> bool:
        """Return True if a blob is stored under blob_id."""
        ...
