from dataclasses import fields

import httpx

from .interceptors import chain_interceptors
from .models import FetchConfig
from .types import HeadersInit


def merge_headers(*sources: HeadersInit | None) -> httpx.Headers:
    """Merge header sources left to right.

    Keys compare case-insensitively; a later source overwrites the value of an
    earlier key in place, so first-seen order is kept.
    """
    merged = httpx.Headers()
    for source in sources:
        if source is None:
            continue
        headers = httpx.Headers(source)
        for key, value in headers.raw:
            merged[key.decode(headers.encoding)] = value.decode(headers.encoding)
    return merged


def merge_config(default: FetchConfig | None, call: FetchConfig | None) -> FetchConfig:
    """Resolve one configuration from instance defaults and per-call options.

    Set values in ``call`` win. Headers merge key by key, and an option that is
    callable on both sides is chained with the default running first.
    """
    default = default or FetchConfig()
    call = call or FetchConfig()

    resolved = {}
    for f in fields(FetchConfig):
        base = getattr(default, f.name)
        override = getattr(call, f.name)
        if f.name == "headers":
            resolved[f.name] = (
                merge_headers(base, override) if base is not None or override is not None else None
            )
        elif callable(base) and callable(override):
            resolved[f.name] = chain_interceptors(base, override)
        else:
            resolved[f.name] = override if override is not None else base

    if resolved["throw_error"] is None:
        resolved["throw_error"] = False
    return FetchConfig(**resolved)
