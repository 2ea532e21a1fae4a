import re
from collections.abc import Mapping
from urllib.parse import urlencode

import httpx

from .errors import InvalidURLError
from .types import QueryParams

_ABSOLUTE_URL = re.compile(r"^([a-z][a-z0-9+.-]*:)?//", re.IGNORECASE)


def is_absolute_url(url: str) -> bool:
    return _ABSOLUTE_URL.match(url) is not None


def combine_urls(base_url: str, relative_url: str) -> str:
    if not relative_url:
        return base_url
    return re.sub(r"/+$", "", base_url) + "/" + re.sub(r"^/+", "", relative_url)


def encode_params(params: QueryParams) -> str:
    if hasattr(params, "multi_items"):
        items = params.multi_items()
    elif isinstance(params, Mapping):
        items = params.items()
    else:
        items = params
    pairs = []
    for key, value in items:
        if value is None:
            continue
        if isinstance(value, bool):
            value = "true" if value else "false"
        if isinstance(value, (list, tuple)):
            pairs.extend((key, item) for item in value if item is not None)
        else:
            pairs.append((key, value))
    return urlencode(pairs, doseq=False)


def build_url(
    base_url: str | None,
    requested_url: str,
    params: QueryParams | None = None,
) -> str:
    """Compose the final request URL.

    A relative ``requested_url`` is appended to ``base_url``; absolute and
    protocol-relative URLs are left alone. ``params`` are encoded after any
    existing query string and before a ``#fragment``. No path normalization
    is performed.
    """
    url = requested_url
    if base_url and not is_absolute_url(requested_url):
        url = combine_urls(base_url, requested_url)

    if not params:
        return url
    query = encode_params(params)
    if not query:
        return url

    url, hash_sign, fragment = url.partition("#")
    url = url + ("&" if "?" in url else "?") + query
    return url + hash_sign + fragment


def validate_url(url: str) -> str:
    try:
        httpx.URL(url)
    except (httpx.InvalidURL, TypeError) as exc:
        raise InvalidURLError(f"Invalid request URL {url!r}: {exc}") from exc
    return url
