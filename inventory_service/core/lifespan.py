"""Application lifespan: startup and shutdown.

Single place for startup/shutdown logic. Stores are constructed in
create_app(); here they are initialized (data file / table) and closed.
"""

from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI

from inventory_service.shared.logging_setup import get_logger

logger = get_logger(__name__)


@asynccontextmanager
async def create_lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Initialize the inventory store, yield, then close it."""
    settings = app.state.settings
    store = app.state.inventory_store

    # ---- Startup ----
    await store.initialize()
    logger.info(
        "Inventory backend '%s' ready; photos in %s",
        settings.inventory_backend,
        settings.photo_dir,
    )
    logger.info("Server running at %s", settings.public_url)

    try:
        yield
    finally:
        # ---- Shutdown ----
        await store.close()
        logger.info("Inventory store closed")
