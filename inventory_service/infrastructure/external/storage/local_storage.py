"""Local filesystem photo storage with path validation and exclusive-create writes."""

from __future__ import annotations

import logging
import re
from pathlib import Path

import aiofiles
import aiofiles.os

from inventory_service.domain.exceptions import PhotoNotFoundException
from inventory_service.infrastructure.exceptions import (
    StorageReadError,
    StorageWriteError,
)
from inventory_service.shared.utils.generators import generate_blob_name

logger = logging.getLogger(__name__)

# Extensions copied from the uploaded filename onto the generated blob name.
_SUFFIX_RE = re.compile(r"^\.[a-z0-9]{1,10}$")
_MAX_NAME_ATTEMPTS = 5


def _suffix_from(suggested_name: str | None) -> str:
    """Return a safe lower-cased extension (e.g. '.jpg') or '' when unusable."""
    if not suggested_name:
        return ""
    suffix = Path(suggested_name.replace("\\", "/")).suffix.lower()
    return suffix if _SUFFIX_RE.fullmatch(suffix) else ""


class LocalPhotoStorage:
    """Photo blobs as flat files under storage_root.

    Names are generated (random hex + original extension) and written with
    exclusive create, so an existing blob is never overwritten. Blob ids that
    resolve outside storage_root are treated as missing.
    """

    def __init__(self, storage_root: str | Path) -> None:
        """Initialize local storage.

        Args:
            storage_root: Directory for all photo files; created if missing.
        """
        self.storage_root = Path(storage_root).resolve()
        self.storage_root.mkdir(parents=True, exist_ok=True)

    def _get_full_path(self, blob_id: str) -> Path:
        """Resolve blob_id under storage_root. Raises PhotoNotFoundException on traversal."""
        if not blob_id:
            raise PhotoNotFoundException(blob_id)
        full_path = (self.storage_root / blob_id).resolve()
        if full_path.parent != self.storage_root:
            raise PhotoNotFoundException(blob_id)
        return full_path

    async def save(self, data: bytes, suggested_name: str | None = None) -> str:
        """Write data under a new unique name and return the name."""
        suffix = _suffix_from(suggested_name)
        for _ in range(_MAX_NAME_ATTEMPTS):
            blob_id = generate_blob_name(suffix)
            target = self.storage_root / blob_id
            try:
                async with aiofiles.open(target, "xb") as f:
                    await f.write(data)
            except FileExistsError:
                continue
            except OSError as e:
                logger.error("Photo write failed in %s: %s", self.storage_root, e)
                raise StorageWriteError(str(target), str(e)) from e
            logger.debug("Stored photo %s (%d bytes)", blob_id, len(data))
            return blob_id
        raise StorageWriteError(
            str(self.storage_root), "could not allocate a unique photo name"
        )

    async def read(self, blob_id: str) -> bytes:
        """Return the full content of a stored photo."""
        file_path = self._get_full_path(blob_id)
        if not await aiofiles.os.path.isfile(file_path):
            raise PhotoNotFoundException(blob_id)
        try:
            async with aiofiles.open(file_path, "rb") as f:
                return await f.read()
        except FileNotFoundError as e:
            raise PhotoNotFoundException(blob_id) from e
        except OSError as e:
            raise StorageReadError(str(file_path), str(e)) from e

    async def exists(self, blob_id: str) -> bool:
        """Return True if a photo file is stored under blob_id."""
        try:
            file_path = self._get_full_path(blob_id)
        except PhotoNotFoundException:
            return False
        return await aiofiles.os.path.isfile(file_path)
