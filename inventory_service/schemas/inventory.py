"""Inventory API schemas."""

from pydantic import BaseModel, ConfigDict, Field


class InventoryItemResponse(BaseModel):
    """Inventory record as returned by every inventory endpoint."""

    model_config = ConfigDict(from_attributes=True)

    id: int | str = Field(..., description="Timestamp string (json backend) or integer (sql backend)")
    name: str
    description: str = ""
    photo: str | None = Field(default=None, description="Photo blob name, if any")


class InventoryItemUpdate(BaseModel):
    """Request body for PUT /inventory/{id}. Omitted or null fields are kept."""

    name: str | None = None
    description: str | None = None


class DeleteResponse(BaseModel):
    """Response for DELETE /inventory/{id}."""

    status: str = "deleted"


class ErrorResponse(BaseModel):
    """Error body produced by the exception handlers."""

    error: str
    error_code: str | None = None
    details: dict = Field(default_factory=dict)
