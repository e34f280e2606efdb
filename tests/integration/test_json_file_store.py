"""Tests specific to the json file store: file format, fresh reads, concurrency."""

import asyncio
import json

import pytest

from inventory_service.infrastructure.exceptions import StorageReadError
from inventory_service.infrastructure.persistence.repositories import (
    JsonFileInventoryStore,
)


async def test_initialize_creates_empty_array(tmp_path) -> None:
    store = JsonFileInventoryStore(tmp_path / "cache" / "inventory.json")
    await store.initialize()
    assert json.loads(store.file_path.read_text(encoding="utf-8")) == []


async def test_initialize_keeps_existing_file(tmp_path) -> None:
    path = tmp_path / "inventory.json"
    path.write_text('[{"id": "1", "name": "Drill", "description": "", "photo": null}]')
    store = JsonFileInventoryStore(path)
    await store.initialize()
    assert [r.name for r in await store.list_all()] == ["Drill"]


async def test_missing_file_is_an_empty_collection(tmp_path) -> None:
    store = JsonFileInventoryStore(tmp_path / "inventory.json")
    assert await store.list_all() == []


async def test_file_format(json_store: JsonFileInventoryStore) -> None:
    """Records are stored as a pretty-printed array of flat objects."""
    created = await json_store.create("Drill", "Cordless", "abc.jpg")
    text = json_store.file_path.read_text(encoding="utf-8")
    assert text.startswith("[\n  {\n")
    assert json.loads(text) == [
        {"id": created.id, "name": "Drill", "description": "Cordless", "photo": "abc.jpg"}
    ]
    assert isinstance(created.id, str)
    assert created.id.isdigit()


async def test_reads_see_external_edits(json_store: JsonFileInventoryStore) -> None:
    """Every operation reads the file again; nothing is cached in memory."""
    await json_store.create("Drill")
    json_store.file_path.write_text(
        json.dumps([{"id": "5", "name": "Edited", "description": "", "photo": None}]),
        encoding="utf-8",
    )
    records = await json_store.list_all()
    assert [(r.id, r.name) for r in records] == [("5", "Edited")]


async def test_new_ids_are_above_existing_ids(json_store: JsonFileInventoryStore) -> None:
    future_id = "99999999999999"
    json_store.file_path.write_text(
        json.dumps([{"id": future_id, "name": "Old", "description": "", "photo": None}]),
        encoding="utf-8",
    )
    created = await json_store.create("New")
    assert int(created.id) > int(future_id)


async def test_concurrent_creates_are_all_kept(json_store: JsonFileInventoryStore) -> None:
    created = await asyncio.gather(*(json_store.create(f"item {i}") for i in range(20)))
    assert len({r.id for r in created}) == 20
    stored = json.loads(json_store.file_path.read_text(encoding="utf-8"))
    assert len(stored) == 20


async def test_no_temp_files_left_behind(json_store: JsonFileInventoryStore) -> None:
    await json_store.create("Drill")
    await json_store.create("Hammer")
    leftovers = [p.name for p in json_store.file_path.parent.iterdir() if p.name.startswith(".tmp_")]
    assert leftovers == []


@pytest.mark.parametrize(
    "content",
    ["{not json", '{"id": "1"}', '[{"description": "no name"}]'],
)
async def test_corrupt_file_raises_read_error(
    json_store: JsonFileInventoryStore, content: str
) -> None:
    json_store.file_path.write_text(content, encoding="utf-8")
    with pytest.raises(StorageReadError):
        await json_store.list_all()
