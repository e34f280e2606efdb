"""Shared utilities: logging setup and cross-cutting helpers.

Used by application and infrastructure. No business logic.
"""

from inventory_service.shared.logging_setup import get_logger, setup_logging
from inventory_service.shared.utils import (
    generate_blob_name,
    generate_timestamp_id,
    utc_now,
)

__all__ = [
    "generate_blob_name",
    "generate_timestamp_id",
    "get_logger",
    "setup_logging",
    "utc_now",
]
