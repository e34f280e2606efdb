"""Centralized exception handlers for the FastAPI app.

Register with register_exception_handlers(app). Maps domain and storage
exceptions to HTTP responses; endpoints stay free of try/except.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from inventory_service.domain.exceptions import InventoryServiceException

logger = logging.getLogger(__name__)

# Map error_code to HTTP status; anything unlisted is a storage failure (500).
_ERROR_CODE_STATUS: dict[str, int] = {
    "VALIDATION_ERROR": 400,
    "RESOURCE_NOT_FOUND": 404,
    "PHOTO_NOT_FOUND": 404,
}


def _inventory_exception_handler(
    request: Request, exc: InventoryServiceException
) -> JSONResponse:
    """Return JSON from exc.to_dict() with the mapped status code."""
    status = _ERROR_CODE_STATUS.get(exc.error_code, 500)
    if status >= 500:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc.message)
    return JSONResponse(status_code=status, content=exc.to_dict())


def _validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Return 422 with validation error details."""
    return JSONResponse(
        status_code=422,
        content={
            "error": "Request validation failed",
            "error_code": "REQUEST_VALIDATION_ERROR",
            "details": jsonable_encoder(exc.errors()),
        },
    )


def _http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    """Return JSON for Starlette HTTP exceptions (unknown route, method not allowed)."""
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.detail},
        headers=getattr(exc, "headers", None),
    )


def _generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Return 500 with the error message; log the traceback."""
    logger.exception("Unhandled exception: %s", exc)
    return JSONResponse(
        status_code=500,
        content={"error": str(exc) or exc.__class__.__name__, "error_code": "INTERNAL_ERROR"},
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Register all exception handlers on the FastAPI app.

    Handlers: InventoryServiceException (and subclasses, including storage
    errors), RequestValidationError, StarletteHTTPException, generic Exception.
    """
    app.add_exception_handler(InventoryServiceException, _inventory_exception_handler)
    app.add_exception_handler(RequestValidationError, _validation_exception_handler)
    app.add_exception_handler(StarletteHTTPException, _http_exception_handler)
    app.add_exception_handler(Exception, _generic_exception_handler)
