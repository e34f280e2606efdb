"""Health check endpoint. Used for liveness probes."""

from typing import Annotated

from fastapi import APIRouter, Depends

from inventory_service.api.dependencies import get_app_settings
from inventory_service.core.config import Settings
from inventory_service.schemas.health import HealthResponse

router = APIRouter()


@router.get("", response_model=HealthResponse)
def health_check(settings: Annotated[Settings, Depends(get_app_settings)]) -> HealthResponse:
    """Return ok status and the configured inventory backend."""
    return HealthResponse(backend=settings.inventory_backend)
