"""FastAPI application factory.

Wiring only: settings, stores, lifespan, exception handlers, middleware, routers.
No business logic here. See inventory_service.core.lifespan and
inventory_service.core.exception_handlers.

Settings are passed in explicitly (CLI, tests) or resolved from the
environment when omitted. There is no module-level app instance: run with
`inventory-service --host ... --port ... --cache ...` or
`uvicorn --factory inventory_service.main:create_app`.
"""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from inventory_service.api import api_router
from inventory_service.core.config import Settings, get_settings
from inventory_service.core.exception_handlers import register_exception_handlers
from inventory_service.core.lifespan import create_lifespan
from inventory_service.infrastructure.external.storage import LocalPhotoStorage
from inventory_service.infrastructure.persistence.factory import InventoryStoreFactory
from inventory_service.middleware import RequestLoggingMiddleware

ROOT_METHODS = ["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS", "HEAD"]


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build and return the FastAPI application for the given settings."""
    settings = settings or get_settings()
    app = FastAPI(
        title="Inventory API",
        description="Register, list, search, update and delete inventory items with photos.",
        version=settings.app_version,
        debug=settings.debug,
        docs_url="/docs",
        servers=[{"url": settings.public_url}],
        lifespan=create_lifespan,
    )

    app.state.settings = settings
    app.state.photo_storage = LocalPhotoStorage(settings.photo_dir)
    app.state.inventory_store = InventoryStoreFactory.create_inventory_store(settings)

    register_exception_handlers(app)

    # Middleware: first added = innermost. Request logging wraps CORS.
    app.add_middleware(
        CORSMiddleware,
        allow_origins=[o.strip() for o in settings.allowed_origins.split(",") if o.strip()],
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(RequestLoggingMiddleware, header_name=settings.request_id_header)

    app.include_router(api_router)

    @app.api_route("/", methods=ROOT_METHODS, include_in_schema=False)
    def root() -> JSONResponse:
        """The root path accepts no method."""
        return JSONResponse(status_code=405, content={"error": "Method Not Allowed"})

    return app
