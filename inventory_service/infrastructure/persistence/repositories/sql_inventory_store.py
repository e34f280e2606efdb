"""SQL-table-backed inventory store. Returns application DTOs.

Each operation is a single parameterized statement (INSERT ... RETURNING,
SELECT, UPDATE ... RETURNING, DELETE ... RETURNING) in its own short
transaction; the table's auto-increment primary key supplies the id.
"""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import Any

from sqlalchemy import delete, insert, select, update
from sqlalchemy.engine import Row
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from inventory_service.application.dtos.inventory import InventoryRecord
from inventory_service.domain.exceptions import ResourceNotFoundException
from inventory_service.domain.inventory import RESOURCE_TYPE, require_name
from inventory_service.infrastructure.exceptions import DatabaseError
from inventory_service.infrastructure.persistence.database import (
    create_session_factory,
    create_tables,
)
from inventory_service.infrastructure.persistence.models.inventory_item import (
    InventoryItem,
)

logger = logging.getLogger(__name__)

_COLUMNS = (
    InventoryItem.id,
    InventoryItem.name,
    InventoryItem.description,
    InventoryItem.photo,
)


def _row_to_record(row: Row[Any]) -> InventoryRecord:
    """Map a returned (id, name, description, photo) row to InventoryRecord."""
    return InventoryRecord(
        id=row.id,
        name=row.name,
        description=row.description or "",
        photo=row.photo,
    )


_MAX_ID = 2**63 - 1


def _parse_id(record_id: str | int) -> int:
    """Table ids are positive 64-bit integers; anything else cannot exist."""
    try:
        value = int(str(record_id).strip())
    except ValueError as e:
        raise ResourceNotFoundException(RESOURCE_TYPE, str(record_id)) from e
    if not 0 < value <= _MAX_ID:
        raise ResourceNotFoundException(RESOURCE_TYPE, str(record_id))
    return value


class SqlInventoryStore:
    """IInventoryStore over the 'inventory' table. list_all orders by id ascending."""

    def __init__(self, engine: AsyncEngine, *, auto_create: bool = True) -> None:
        self._engine = engine
        self._session_factory: async_sessionmaker[AsyncSession] = (
            create_session_factory(engine)
        )
        self._auto_create = auto_create

    @asynccontextmanager
    async def _transaction(self, operation: str) -> AsyncIterator[AsyncSession]:
        """Session with a transaction; commits on success, maps driver errors to DatabaseError."""
        try:
            async with self._session_factory() as session:
                async with session.begin():
                    yield session
        except SQLAlchemyError as e:
            logger.error("Inventory %s failed: %s", operation, e)
            raise DatabaseError(operation, str(e)) from e

    # --- Lifecycle ------------------------------------------------------------

    async def initialize(self) -> None:
        """Create the inventory table when auto_create is enabled."""
        if not self._auto_create:
            return
        try:
            await create_tables(self._engine)
        except SQLAlchemyError as e:
            raise DatabaseError("initialize", str(e)) from e

    async def close(self) -> None:
        await self._engine.dispose()
        logger.info("Database engine disposed")

    # --- IInventoryStore ------------------------------------------------------

    async def create(
        self,
        name: str | None,
        description: str | None = None,
        photo: str | None = None,
    ) -> InventoryRecord:
        name = require_name(name)
        stmt = (
            insert(InventoryItem)
            .values(name=name, description=description or "", photo=photo)
            .returning(*_COLUMNS)
        )
        async with self._transaction("create") as session:
            row = (await session.execute(stmt)).one()
        record = _row_to_record(row)
        logger.info("Created inventory item %s", record.id)
        return record

    async def list_all(self) -> list[InventoryRecord]:
        stmt = select(*_COLUMNS).order_by(InventoryItem.id.asc())
        async with self._transaction("list") as session:
            rows = (await session.execute(stmt)).all()
        return [_row_to_record(r) for r in rows]

    async def get(self, record_id: str) -> InventoryRecord:
        item_id = _parse_id(record_id)
        stmt = select(*_COLUMNS).where(InventoryItem.id == item_id)
        async with self._transaction("get") as session:
            row = (await session.execute(stmt)).one_or_none()
        if row is None:
            raise ResourceNotFoundException(RESOURCE_TYPE, str(record_id))
        return _row_to_record(row)

    async def update(
        self,
        record_id: str,
        name: str | None = None,
        description: str | None = None,
    ) -> InventoryRecord:
        item_id = _parse_id(record_id)
        changes: dict[str, Any] = {}
        if name is not None:
            changes["name"] = require_name(name)
        if description is not None:
            changes["description"] = description
        if not changes:
            return await self.get(record_id)
        stmt = (
            update(InventoryItem)
            .where(InventoryItem.id == item_id)
            .values(**changes)
            .returning(*_COLUMNS)
        )
        async with self._transaction("update") as session:
            row = (await session.execute(stmt)).one_or_none()
        if row is None:
            raise ResourceNotFoundException(RESOURCE_TYPE, str(record_id))
        return _row_to_record(row)

    async def replace_photo(self, record_id: str, photo: str) -> InventoryRecord:
        item_id = _parse_id(record_id)
        stmt = (
            update(InventoryItem)
            .where(InventoryItem.id == item_id)
            .values(photo=photo)
            .returning(*_COLUMNS)
        )
        async with self._transaction("replace_photo") as session:
            row = (await session.execute(stmt)).one_or_none()
        if row is None:
            raise ResourceNotFoundException(RESOURCE_TYPE, str(record_id))
        return _row_to_record(row)

    async def delete(self, record_id: str) -> None:
        item_id = _parse_id(record_id)
        stmt = (
            delete(InventoryItem)
            .where(InventoryItem.id == item_id)
            .returning(InventoryItem.id)
        )
        async with self._transaction("delete") as session:
            deleted = (await session.execute(stmt)).scalar_one_or_none()
        if deleted is None:
            raise ResourceNotFoundException(RESOURCE_TYPE, str(record_id))
        logger.info("Deleted inventory item %s", record_id)
