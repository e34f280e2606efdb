"""JSON-file-backed inventory store.

The whole collection lives in one JSON array. Every operation reads the file
fresh (no in-memory cache); every mutation rewrites the whole file through a
temp file and an atomic rename. Mutations are serialized by an asyncio.Lock,
so concurrent requests in one process never lose each other's writes.
"""

from __future__ import annotations

import asyncio
import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Any

import aiofiles
import aiofiles.os

from inventory_service.application.dtos.inventory import InventoryRecord
from inventory_service.domain.exceptions import ResourceNotFoundException
from inventory_service.domain.inventory import RESOURCE_TYPE, require_name
from inventory_service.infrastructure.exceptions import (
    StorageReadError,
    StorageWriteError,
)
from inventory_service.shared.utils.generators import generate_timestamp_id

logger = logging.getLogger(__name__)


def _raw_to_record(item: dict[str, Any]) -> InventoryRecord:
    return InventoryRecord(
        id=str(item["id"]),
        name=item["name"],
        description=item.get("description") or "",
        photo=item.get("photo"),
    )


class JsonFileInventoryStore:
    """IInventoryStore over a single JSON file. Preserves insertion order."""

    def __init__(self, file_path: str | Path) -> None:
        self._file_path = Path(file_path)
        self._file_path.parent.mkdir(parents=True, exist_ok=True)
        self._lock = asyncio.Lock()
        # Highest id issued by this store; deleting the newest record must not free its id.
        self._last_issued_id: str | None = None

    @property
    def file_path(self) -> Path:
        return self._file_path

    # --- Lifecycle ------------------------------------------------------------

    async def initialize(self) -> None:
        """Create an empty '[]' data file when missing."""
        if await aiofiles.os.path.exists(self._file_path):
            return
        async with self._lock:
            await self._persist([])
        logger.info("Created inventory data file %s", self._file_path)

    async def close(self) -> None:
        """Nothing to release; every operation opens and closes the file."""

    # --- IInventoryStore ------------------------------------------------------

    async def create(
        self,
        name: str | None,
        description: str | None = None,
        photo: str | None = None,
    ) -> InventoryRecord:
        name = require_name(name)
        async with self._lock:
            records = await self._load()
            issued = [str(r.id) for r in records]
            if self._last_issued_id is not None:
                issued.append(self._last_issued_id)
            record = InventoryRecord(
                id=generate_timestamp_id(issued),
                name=name,
                description=description or "",
                photo=photo,
            )
            records.append(record)
            await self._persist(records)
            self._last_issued_id = record.id
        logger.info("Created inventory item %s", record.id)
        return record

    async def list_all(self) -> list[InventoryRecord]:
        return await self._load()

    async def get(self, record_id: str) -> InventoryRecord:
        records = await self._load()
        return records[self._index_of(records, record_id)]

    async def update(
        self,
        record_id: str,
        name: str | None = None,
        description: str | None = None,
    ) -> InventoryRecord:
        if name is not None:
            require_name(name)
        async with self._lock:
            records = await self._load()
            index = self._index_of(records, record_id)
            current = records[index]
            updated = InventoryRecord(
                id=current.id,
                name=name if name is not None else current.name,
                description=description if description is not None else current.description,
                photo=current.photo,
            )
            records[index] = updated
            await self._persist(records)
        return updated

    async def replace_photo(self, record_id: str, photo: str) -> InventoryRecord:
        async with self._lock:
            records = await self._load()
            index = self._index_of(records, record_id)
            current = records[index]
            updated = InventoryRecord(
                id=current.id,
                name=current.name,
                description=current.description,
                photo=photo,
            )
            records[index] = updated
            await self._persist(records)
        return updated

    async def delete(self, record_id: str) -> None:
        async with self._lock:
            records = await self._load()
            index = self._index_of(records, record_id)
            del records[index]
            await self._persist(records)
        logger.info("Deleted inventory item %s", record_id)

    # --- Serialization helpers ------------------------------------------------

    @staticmethod
    def _index_of(records: list[InventoryRecord], record_id: str) -> int:
        for index, record in enumerate(records):
            if record.id == str(record_id):
                return index
        raise ResourceNotFoundException(RESOURCE_TYPE, str(record_id))

    async def _load(self) -> list[InventoryRecord]:
        """Read and parse the data file. A missing file is an empty collection."""
        try:
            async with aiofiles.open(self._file_path, "r", encoding="utf-8") as f:
                content = await f.read()
        except FileNotFoundError:
            return []
        except OSError as e:
            logger.error("Inventory data file read failed: %s", e)
            raise StorageReadError(str(self._file_path), str(e)) from e
        try:
            raw = json.loads(content or "[]")
        except json.JSONDecodeError as e:
            raise StorageReadError(str(self._file_path), f"invalid JSON: {e}") from e
        if not isinstance(raw, list):
            raise StorageReadError(str(self._file_path), "expected a JSON array")
        try:
            return [_raw_to_record(item) for item in raw]
        except (KeyError, TypeError) as e:
            raise StorageReadError(str(self._file_path), f"malformed record: {e}") from e

    async def _persist(self, records: list[InventoryRecord]) -> None:
        """Rewrite the whole file atomically (temp file in same dir + rename)."""
        payload = json.dumps(
            [r.to_dict() for r in records], indent=2, ensure_ascii=False
        )
        temp_path: str | None = None
        try:
            temp_fd, temp_path = tempfile.mkstemp(
                dir=self._file_path.parent,
                prefix=".tmp_",
                suffix=".json",
            )
            os.close(temp_fd)
            async with aiofiles.open(temp_path, "w", encoding="utf-8") as f:
                await f.write(payload + "\n")
            await aiofiles.os.replace(temp_path, self._file_path)
            temp_path = None
        except OSError as e:
            logger.error("Inventory data file write failed: %s", e)
            raise StorageWriteError(str(self._file_path), str(e)) from e
        finally:
            if temp_path is not None and os.path.exists(temp_path):
                os.unlink(temp_path)
