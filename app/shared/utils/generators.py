"""ID and value generators (CUID for stored documents, time-based ids for list items)."""

import threading
import time

from cuid2 import cuid_wrapper

cuid_generator = cuid_wrapper()

_item_id_lock = threading.Lock()
_last_item_id = 0


def generate_cuid() -> str:
    """Generate a collision-resistant unique identifier (CUID2).

    Returns:
        A new CUID string.
    """
    result = cuid_generator()
    if not isinstance(result, str):
        raise TypeError(
            f"Expected str from cuid_generator, got {type(result).__name__}"
        )
    return result


def generate_item_id() -> str:
    """Return a time-based id for a sub-entity (artist, tier, nav item...).

    Millisecond clock, bumped by one when two ids are requested within the
    same millisecond so ids stay strictly increasing within the process.
    Not globally unique.
    """
    global _last_item_id
    with _item_id_lock:
        candidate = time.time_ns() // 1_000_000
        if candidate <= _last_item_id:
            candidate = _last_item_id + 1
        _last_item_id = candidate
        return str(candidate)
