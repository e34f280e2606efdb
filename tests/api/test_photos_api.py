"""Photo upload, download and replacement over HTTP."""

from pathlib import Path
from unittest.mock import patch

from httpx import AsyncClient

JPEG_BYTES = b"\xff\xd8\xff\xe0fake-jpeg-body"
PNG_BYTES = b"\x89PNG\r\n\x1a\nfake-png-body"


async def _register_with_photo(client: AsyncClient, data: bytes = JPEG_BYTES) -> dict:
    response = await client.post(
        "/register",
        data={"inventory_name": "Drill", "description": "Cordless"},
        files={"photo": ("drill.jpg", data, "image/jpeg")},
    )
    assert response.status_code == 201
    return response.json()


async def test_register_with_photo_and_download(client: AsyncClient) -> None:
    created = await _register_with_photo(client)
    assert created["photo"]

    response = await client.get(f"/inventory/{created['id']}/photo")
    assert response.status_code == 200
    assert response.headers["content-type"] == "image/jpeg"
    assert response.content == JPEG_BYTES


async def test_photo_of_item_without_photo_returns_404(client: AsyncClient) -> None:
    created = (await client.post("/register", data={"inventory_name": "Drill"})).json()
    response = await client.get(f"/inventory/{created['id']}/photo")
    assert response.status_code == 404
    assert response.json()["error_code"] == "PHOTO_NOT_FOUND"


async def test_replace_photo(client: AsyncClient) -> None:
    created = await _register_with_photo(client)
    response = await client.put(
        f"/inventory/{created['id']}/photo",
        files={"photo": ("drill.png", PNG_BYTES, "image/png")},
    )
    assert response.status_code == 200
    assert response.json()["photo"] != created["photo"]
    assert response.json()["name"] == "Drill"

    download = await client.get(f"/inventory/{created['id']}/photo")
    assert download.content == PNG_BYTES


async def test_replace_photo_without_file_returns_400(client: AsyncClient) -> None:
    created = await _register_with_photo(client)
    response = await client.put(f"/inventory/{created['id']}/photo")
    assert response.status_code == 400
    assert response.json()["error"] == "Photo is required"


async def test_replace_photo_of_unknown_item_returns_404(client: AsyncClient) -> None:
    response = await client.put(
        "/inventory/123/photo",
        files={"photo": ("drill.png", PNG_BYTES, "image/png")},
    )
    assert response.status_code == 404


async def test_old_blobs_are_kept(json_client: AsyncClient, cache_dir: Path) -> None:
    """Replacing a photo or deleting the item leaves earlier photo files on disk."""
    created = await _register_with_photo(json_client)
    await json_client.put(
        f"/inventory/{created['id']}/photo",
        files={"photo": ("drill.png", PNG_BYTES, "image/png")},
    )
    await json_client.delete(f"/inventory/{created['id']}")

    photos = sorted(p.read_bytes() for p in (cache_dir / "photos").iterdir())
    assert photos == sorted([JPEG_BYTES, PNG_BYTES])


async def test_photo_write_failure_returns_500(client: AsyncClient) -> None:
    """A storage failure is a 500 carrying the underlying reason; no record is created."""
    with patch(
        "inventory_service.infrastructure.external.storage.local_storage.aiofiles.open",
        side_effect=PermissionError(13, "Permission denied"),
    ):
        response = await client.post(
            "/register",
            data={"inventory_name": "Drill"},
            files={"photo": ("drill.jpg", JPEG_BYTES, "image/jpeg")},
        )
    assert response.status_code == 500
    body = response.json()
    assert body["error_code"] == "STORAGE_WRITE_ERROR"
    assert "Permission denied" in body["error"]
    assert (await client.get("/inventory")).json() == []
