"""Pytest configuration and fixtures for the inventory service.

Every test gets its own cache directory under tmp_path. The sql backend runs
against a SQLite file through aiosqlite, so no database server is needed.
httpx's ASGITransport does not run the lifespan, so fixtures initialize and
close the store themselves.
"""

from pathlib import Path

import pytest
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

from inventory_service.core.config import Settings
from inventory_service.infrastructure.external.storage import LocalPhotoStorage
from inventory_service.infrastructure.persistence.factory import InventoryStoreFactory
from inventory_service.main import create_app

TEST_HOST = "127.0.0.1"
TEST_PORT = 3000


def make_settings(cache_dir: Path, backend: str = "json", **overrides) -> Settings:
    """Settings isolated from the developer's environment and .env file."""
    values = {
        "cache_dir": str(cache_dir),
        "inventory_backend": backend,
        "host": TEST_HOST,
        "port": TEST_PORT,
        "debug": False,
    }
    if backend == "sql":
        values["database_url"] = f"sqlite+aiosqlite:///{cache_dir / 'inventory.db'}"
    values.update(overrides)
    return Settings(_env_file=None, **values)


@pytest.fixture
def cache_dir(tmp_path: Path) -> Path:
    return tmp_path / "cache"


@pytest.fixture
def settings(cache_dir: Path) -> Settings:
    """json backend settings."""
    return make_settings(cache_dir)


@pytest.fixture
def sql_settings(cache_dir: Path) -> Settings:
    """sql backend settings (SQLite file in the cache directory)."""
    cache_dir.mkdir(parents=True, exist_ok=True)
    return make_settings(cache_dir, backend="sql")


@pytest.fixture
def photo_storage(settings: Settings) -> LocalPhotoStorage:
    return LocalPhotoStorage(settings.photo_dir)


@pytest.fixture
async def json_store(settings: Settings):
    store = InventoryStoreFactory.create_inventory_store(settings)
    await store.initialize()
    yield store
    await store.close()


@pytest.fixture
async def sql_store(sql_settings: Settings):
    store = InventoryStoreFactory.create_inventory_store(sql_settings)
    await store.initialize()
    yield store
    await store.close()


@pytest.fixture(params=["json", "sql"])
async def store(request: pytest.FixtureRequest, cache_dir: Path):
    """Each inventory store backend in turn, initialized and empty."""
    cache_dir.mkdir(parents=True, exist_ok=True)
    backend_store = InventoryStoreFactory.create_inventory_store(
        make_settings(cache_dir, backend=request.param)
    )
    await backend_store.initialize()
    yield backend_store
    await backend_store.close()


@pytest.fixture(params=["json", "sql"])
async def app(request: pytest.FixtureRequest, cache_dir: Path) -> FastAPI:
    """Application on each backend, with its store initialized."""
    cache_dir.mkdir(parents=True, exist_ok=True)
    application = create_app(make_settings(cache_dir, backend=request.param))
    await application.state.inventory_store.initialize()
    yield application
    await application.state.inventory_store.close()


@pytest.fixture
async def client(app: FastAPI) -> AsyncClient:
    """Async HTTP client against the FastAPI app (ASGI)."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest.fixture
async def json_client(settings: Settings) -> AsyncClient:
    """Client for tests that inspect the json backend's files directly."""
    application = create_app(settings)
    await application.state.inventory_store.initialize()
    transport = ASGITransport(app=application)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
    await application.state.inventory_store.close()
