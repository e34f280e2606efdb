"""Domain exceptions for the inventory service.

Defines domain-level exceptions that represent business rule violations.
These exceptions are independent of infrastructure concerns. The presentation
layer maps them to HTTP responses in exception handlers.
"""

from typing import Any


class InventoryServiceException(Exception):
    """Base exception for all inventory service errors.

    Presentation layer maps these to HTTP responses using message,
    error_code, and details.

    Attributes:
        message: Human-readable error description.
        error_code: Machine-readable error code.
        details: Additional error context (e.g. field, resource_id).
    """

    def __init__(
        self,
        message: str,
        error_code: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize the exception.

        Args:
            message: Human-readable error description.
            error_code: Optional machine-readable code; defaults to class name.
            details: Optional dict of extra context.
        """
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON body used for error responses."""
        return {
            "error": self.message,
            "error_code": self.error_code,
            "details": self.details,
        }


class ValidationException(InventoryServiceException):
    """Raised when a required field is missing or empty."""

    def __init__(self, message: str, field: str | None = None) -> None:
        """Initialize with message and optional field name.

        Args:
            message: Description of the validation failure.
            field: Optional field that failed validation.
        """
        details = {"field": field} if field else {}
        super().__init__(message, "VALIDATION_ERROR", details)


class ResourceNotFoundException(InventoryServiceException):
    """Raised when a requested resource is not found."""

    def __init__(self, resource_type: str, resource_id: str) -> None:
        """Initialize with resource type and id.

        Args:
            resource_type: Type of resource (e.g. 'inventory item').
            resource_id: The ID that was not found.
        """
        super().__init__(
            f"{resource_type} not found: {resource_id}",
            "RESOURCE_NOT_FOUND",
            {"resource_type": resource_type, "resource_id": resource_id},
        )


class PhotoNotFoundException(InventoryServiceException):
    """Raised when a record has no photo or the photo blob is missing."""

    def __init__(self, reference: str) -> None:
        super().__init__(
            f"Photo not found: {reference}",
            "PHOTO_NOT_FOUND",
            {"reference": reference},
        )
