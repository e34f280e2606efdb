"""ID and name generators (record ids, blob names)."""

import secrets
from collections.abc import Iterable

from inventory_service.shared.utils.datetime import to_timestamp_ms, utc_now

BLOB_TOKEN_BYTES = 16


def generate_timestamp_id(existing_ids: Iterable[str] = ()) -> str:
    """Generate a millisecond-timestamp id that is unique among existing_ids.

    Two records created within the same millisecond would collide, so the
    timestamp is bumped past the largest numeric id already in use. Ids stay
    monotonically increasing, which keeps insertion order and id order equal.

    Args:
        existing_ids: Ids already present in the collection.

    Returns:
        A decimal string, e.g. "1718035200123".
    """
    candidate = to_timestamp_ms(utc_now())
    numeric = [int(i) for i in existing_ids if str(i).isdigit()]
    if numeric and candidate <= max(numeric):
        candidate = max(numeric) + 1
    return str(candidate)


def generate_blob_name(suffix: str = "") -> str:
    """Return a random hex name (32 chars) with an optional suffix such as '.jpg'."""
    return f"{secrets.token_hex(BLOB_TOKEN_BYTES)}{suffix}"
