"""Tests specific to the SQL table store (SQLite via aiosqlite)."""

import pytest
from sqlalchemy import inspect

from inventory_service.core.config import Settings
from inventory_service.infrastructure.exceptions import DatabaseError
from inventory_service.infrastructure.persistence.factory import InventoryStoreFactory
from inventory_service.infrastructure.persistence.repositories import SqlInventoryStore

pytestmark = pytest.mark.requires_db


async def test_factory_builds_sql_store(sql_store) -> None:
    assert isinstance(sql_store, SqlInventoryStore)


async def test_ids_are_ascending_integers(sql_store: SqlInventoryStore) -> None:
    first = await sql_store.create("Drill")
    second = await sql_store.create("Hammer")
    assert isinstance(first.id, int)
    assert second.id > first.id


async def test_initialize_creates_inventory_table(sql_store: SqlInventoryStore) -> None:
    async with sql_store._engine.connect() as conn:
        columns = await conn.run_sync(
            lambda sync_conn: [c["name"] for c in inspect(sync_conn).get_columns("inventory")]
        )
    assert columns == ["id", "name", "description", "photo"]


async def test_records_survive_a_new_store(sql_settings: Settings) -> None:
    first = InventoryStoreFactory.create_inventory_store(sql_settings)
    await first.initialize()
    created = await first.create("Drill", "Cordless", "abc.jpg")
    await first.close()

    second = InventoryStoreFactory.create_inventory_store(sql_settings)
    await second.initialize()
    try:
        assert await second.get(str(created.id)) == created
    finally:
        await second.close()


async def test_without_auto_create_missing_table_is_a_database_error(
    sql_settings: Settings,
) -> None:
    settings = sql_settings.model_copy(update={"database_auto_create": False})
    store = InventoryStoreFactory.create_inventory_store(settings)
    await store.initialize()
    try:
        with pytest.raises(DatabaseError):
            await store.create("Drill")
    finally:
        await store.close()
