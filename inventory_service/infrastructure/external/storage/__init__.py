"""Photo storage: local filesystem backend.

LocalPhotoStorage implements IPhotoStorage (save, read, exists). Files live
under the configured photo directory; only aiofiles is required.
"""

from inventory_service.infrastructure.external.storage.local_storage import (
    LocalPhotoStorage,
)

__all__ = ["LocalPhotoStorage"]
