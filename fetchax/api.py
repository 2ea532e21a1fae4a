"""Module-level verbs backed by one lazily created default instance."""

from typing import Any

from .client import ConfigInit, FetchAX
from .models import FetchResponse

_default_instance: FetchAX | None = None


def default_instance() -> FetchAX:
    global _default_instance
    if _default_instance is None:
        _default_instance = FetchAX()
    return _default_instance


async def request(method: str, url: str, config: ConfigInit = None, **options: Any) -> FetchResponse:
    return await default_instance().request(method, url, config, **options)


async def get(url: str, config: ConfigInit = None, **options: Any) -> FetchResponse:
    return await default_instance().get(url, config, **options)


async def delete(url: str, config: ConfigInit = None, **options: Any) -> FetchResponse:
    return await default_instance().delete(url, config, **options)


async def head(url: str, config: ConfigInit = None, **options: Any) -> FetchResponse:
    return await default_instance().head(url, config, **options)


async def post(url: str, data: Any = None, config: ConfigInit = None, **options: Any) -> FetchResponse:
    return await default_instance().post(url, data, config, **options)


async def put(url: str, data: Any = None, config: ConfigInit = None, **options: Any) -> FetchResponse:
    return await default_instance().put(url, data, config, **options)


async def patch(url: str, data: Any = None, config: ConfigInit = None, **options: Any) -> FetchResponse:
    return await default_instance().patch(url, data, config, **options)
