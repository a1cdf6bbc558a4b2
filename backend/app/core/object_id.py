from __future__ import annotations

import itertools
import os
import re
import threading
import time

OBJECT_ID_RE = re.compile(r"[0-9a-fA-F]{24}")

# 5 random bytes per process, 3-byte counter seeded randomly.
_PROCESS_RANDOM = os.urandom(5)
_COUNTER = itertools.count(int.from_bytes(os.urandom(3), "big"))
_COUNTER_LOCK = threading.Lock()


def is_valid_object_id(value: object) -> bool:
    """True when `value` is a 24-character hexadecimal string."""
    return isinstance(value, str) and OBJECT_ID_RE.fullmatch(value) is not None


def new_object_id(timestamp: float | None = None) -> str:
    ts = int(time.time() if timestamp is None else timestamp) & 0xFFFFFFFF
    with _COUNTER_LOCK:
        counter = next(_COUNTER) & 0xFFFFFF
    raw = ts.to_bytes(4, "big") + _PROCESS_RANDOM + counter.to_bytes(3, "big")
    return raw.hex()


def normalize_object_id(value: str) -> str:
    """Canonical (lower-case) form of a valid id; raises ValueError otherwise."""
    if not is_valid_object_id(value):
        raise ValueError(f"invalid object id: {value!r}")
    return value.lower()
