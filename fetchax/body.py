import json
from collections.abc import AsyncIterable, Iterator
from typing import Any

import httpx

from .models import Blob, FormData

BODY_METHODS = frozenset({"POST", "PUT", "PATCH"})

_BODY_TYPES = (str, bytes, bytearray, memoryview, Blob, FormData, httpx.QueryParams)


def is_body_init(data: Any) -> bool:
    """Return True when ``data`` can be sent as-is."""
    if isinstance(data, _BODY_TYPES):
        return True
    # byte streams: async iterables and one-shot iterators such as generators
    return isinstance(data, (AsyncIterable, Iterator))


def ensure_body(data: Any) -> Any:
    if data is None or is_body_init(data):
        return data
    return json.dumps(data)


def method_has_body(method: str) -> bool:
    return method.upper() in BODY_METHODS
