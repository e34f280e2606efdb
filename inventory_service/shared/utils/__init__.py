"""Shared utilities: datetime and generators."""

from inventory_service.shared.utils.datetime import to_timestamp_ms, utc_now
from inventory_service.shared.utils.generators import (
    generate_blob_name,
    generate_timestamp_id,
)

__all__ = [
    "generate_blob_name",
    "generate_timestamp_id",
    "to_timestamp_ms",
    "utc_now",
]
