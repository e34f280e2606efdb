"""Persistence: async engine, session factory, and Base for SQLAlchemy ORM.

Used only when inventory_backend is 'sql'. The engine and session factory are
built from an explicit Settings instance (no module-level globals) and owned
by SqlInventoryStore, which disposes the engine on shutdown.
"""

import logging
from typing import Any

from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase

from inventory_service.core.config import Settings

logger = logging.getLogger(__name__)


class Base(DeclarativeBase):
    """Base class for all SQLAlchemy declarative models."""


def create_engine_from_settings(settings: Settings) -> AsyncEngine:
    """Create the async engine for settings.sqlalchemy_url.

    Postgres gets pool tuning and pre-ping; SQLite (tests, local runs) uses
    the driver defaults.
    """
    url = make_url(settings.sqlalchemy_url)
    kwargs: dict[str, Any] = {"echo": settings.database_echo}
    if url.get_backend_name().startswith("postgresql"):
        kwargs.update(pool_pre_ping=True, pool_recycle=3600)
    logger.info(
        "Creating database engine for %s",
        url.render_as_string(hide_password=True),
    )
    return create_async_engine(url, **kwargs)


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Session factory: no expire on commit, no autoflush."""
    return async_sessionmaker(
        bind=engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
    )


async def create_tables(engine: AsyncEngine) -> None:
    """Create all mapped tables that do not exist yet."""
    # Import models so they are registered on Base.metadata.
    from inventory_service.infrastructure.persistence import models  # noqa: F401

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
