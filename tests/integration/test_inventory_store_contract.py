"""Behaviour shared by both inventory stores (json file and SQL table).

Runs once per backend through the parametrized `store` fixture.
"""

import pytest

from inventory_service.domain.exceptions import (
    ResourceNotFoundException,
    ValidationException,
)


async def test_new_store_is_empty(store) -> None:
    assert await store.list_all() == []


async def test_create_and_get(store) -> None:
    created = await store.create("Drill", "Cordless", "abc.jpg")
    assert created.name == "Drill"
    assert created.description == "Cordless"
    assert created.photo == "abc.jpg"

    fetched = await store.get(str(created.id))
    assert fetched == created


async def test_create_defaults_description_and_photo(store) -> None:
    created = await store.create("Hammer")
    assert created.description == ""
    assert created.photo is None


@pytest.mark.parametrize("name", [None, ""])
async def test_create_requires_name(store, name: str | None) -> None:
    with pytest.raises(ValidationException):
        await store.create(name)
    assert await store.list_all() == []


async def test_ids_are_unique(store) -> None:
    ids = {(await store.create(f"item {i}")).id for i in range(5)}
    assert len(ids) == 5


async def test_list_preserves_creation_order(store) -> None:
    for name in ("Drill", "Hammer", "Saw"):
        await store.create(name)
    assert [r.name for r in await store.list_all()] == ["Drill", "Hammer", "Saw"]


async def test_update_name_only_keeps_description(store) -> None:
    created = await store.create("Drill", "Cordless", "abc.jpg")
    updated = await store.update(str(created.id), name="Impact drill")
    assert updated.id == created.id
    assert updated.name == "Impact drill"
    assert updated.description == "Cordless"
    assert updated.photo == "abc.jpg"
    assert await store.get(str(created.id)) == updated


async def test_update_description_only_keeps_name(store) -> None:
    created = await store.create("Drill", "Cordless")
    updated = await store.update(str(created.id), description="18V")
    assert updated.name == "Drill"
    assert updated.description == "18V"


async def test_update_with_empty_description_clears_it(store) -> None:
    created = await store.create("Drill", "Cordless")
    updated = await store.update(str(created.id), description="")
    assert updated.description == ""


async def test_update_without_changes_returns_record(store) -> None:
    created = await store.create("Drill", "Cordless")
    assert await store.update(str(created.id)) == created


async def test_update_with_empty_name_is_rejected(store) -> None:
    created = await store.create("Drill")
    with pytest.raises(ValidationException):
        await store.update(str(created.id), name="")
    assert (await store.get(str(created.id))).name == "Drill"


async def test_replace_photo(store) -> None:
    created = await store.create("Drill", "Cordless", "old.jpg")
    updated = await store.replace_photo(str(created.id), "new.jpg")
    assert updated.photo == "new.jpg"
    assert updated.name == "Drill"
    assert updated.description == "Cordless"


async def test_delete(store) -> None:
    keep = await store.create("Hammer")
    gone = await store.create("Drill")
    await store.delete(str(gone.id))
    assert await store.list_all() == [keep]
    with pytest.raises(ResourceNotFoundException):
        await store.get(str(gone.id))


@pytest.mark.parametrize("record_id", ["999999", "not-a-number", "-1", "99999999999999999999"])
async def test_unknown_id_is_not_found_everywhere(store, record_id: str) -> None:
    await store.create("Drill")
    with pytest.raises(ResourceNotFoundException):
        await store.get(record_id)
    with pytest.raises(ResourceNotFoundException):
        await store.update(record_id, name="x")
    with pytest.raises(ResourceNotFoundException):
        await store.replace_photo(record_id, "x.jpg")
    with pytest.raises(ResourceNotFoundException):
        await store.delete(record_id)


async def test_delete_twice_is_not_found(store) -> None:
    created = await store.create("Drill")
    await store.delete(str(created.id))
    with pytest.raises(ResourceNotFoundException):
        await store.delete(str(created.id))


async def test_id_of_deleted_newest_record_is_not_reused(store, monkeypatch) -> None:
    """Ids stay unique for the store's lifetime, even after the newest record is deleted."""
    monkeypatch.setattr(
        "inventory_service.shared.utils.generators.to_timestamp_ms", lambda dt: 1000
    )
    first = await store.create("Drill")
    newest = await store.create("Hammer")
    await store.delete(str(newest.id))
    replacement = await store.create("Saw")
    assert replacement.id != newest.id
    assert replacement.id != first.id
    with pytest.raises(ResourceNotFoundException):
        await store.get(str(newest.id))
