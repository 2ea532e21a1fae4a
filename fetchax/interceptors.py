import inspect
import logging
from typing import Any

import httpx

from .models import FetchConfig
from .types import ChainedInterceptor, Interceptor, RequestInterceptor, ResponseInterceptor


def chain_interceptors(*interceptors: Interceptor | None) -> ChainedInterceptor | None:
    """Compose interceptors into one async callable, applied in the given order.

    Returns ``None`` when no interceptor is defined so callers can skip the
    call entirely. Each step receives the previous step's output; exceptions
    propagate and abort the chain.
    """
    steps = [interceptor for interceptor in interceptors if callable(interceptor)]
    if not steps:
        return None

    async def chained(value: Any) -> Any:
        result = value
        for step in steps:
            result = step(result)
            if inspect.isawaitable(result):
                result = await result
        return result

    return chained


def header_interceptor(**headers: str) -> RequestInterceptor:
    def interceptor(config: FetchConfig) -> FetchConfig:
        merged = httpx.Headers(config.headers)
        for key, value in headers.items():
            merged[key.replace("_", "-")] = value
        return config.evolve(headers=merged)

    return interceptor


def logging_interceptor(logger: logging.Logger | None = None) -> ResponseInterceptor:
    log = logger or logging.getLogger(__name__)

    def interceptor(response: httpx.Response) -> httpx.Response:
        request = response.request
        log.info(f"<- {response.status_code} {request.method} {request.url}")
        return response

    return interceptor
