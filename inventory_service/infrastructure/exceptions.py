"""Infrastructure exceptions for file, blob and database operations.

Storage errors extend InventoryServiceException so presentation can map them
to HTTP 500 responses consistently, with the underlying reason in the body.
"""

from inventory_service.domain.exceptions import InventoryServiceException


class StorageException(InventoryServiceException):
    """Base exception for storage operations."""


class StorageReadError(StorageException):
    """Reading a data file or blob failed."""

    def __init__(self, file_path: str, reason: str) -> None:
        super().__init__(
            f"Failed to read {file_path}: {reason}",
            "STORAGE_READ_ERROR",
            {"file_path": file_path, "reason": reason},
        )


class StorageWriteError(StorageException):
    """Writing a data file or blob failed."""

    def __init__(self, file_path: str, reason: str) -> None:
        super().__init__(
            f"Failed to write {file_path}: {reason}",
            "STORAGE_WRITE_ERROR",
            {"file_path": file_path, "reason": reason},
        )


class DatabaseError(StorageException):
    """A statement against the inventory table failed."""

    def __init__(self, operation: str, reason: str) -> None:
        super().__init__(
            f"Database error during {operation}: {reason}",
            "DATABASE_ERROR",
            {"operation": operation, "reason": reason},
        )
