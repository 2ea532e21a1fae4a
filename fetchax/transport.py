import asyncio
import logging
from collections.abc import AsyncIterable, AsyncIterator, Iterator
from typing import Any, Protocol

import httpx

from .configs import FetchAXConfig, fetchax_config
from .errors import RedirectNotAllowedError, RequestAbortedError
from .models import Blob, FormData, RequestInit

logger = logging.getLogger(__name__)


async def _aiter_sync(chunks: Iterator[bytes]) -> AsyncIterator[bytes]:
    for chunk in chunks:
        yield chunk


class Transport(Protocol):
    """IO boundary: sends one request and returns the raw response.

    Network failures are raised as-is; the client never wraps them.
    """

    async def send(self, url: str, init: RequestInit) -> httpx.Response: ...

    async def aclose(self) -> None: ...


class HttpxTransport:
    def __init__(
        self,
        config: FetchAXConfig | None = None,
        client: httpx.AsyncClient | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self._config = config or fetchax_config
        self._client = client
        self._owns_client = client is None
        self._transport = transport
        self._client_loop: asyncio.AbstractEventLoop | None = None

    async def _ensure_client(self) -> httpx.AsyncClient:
        loop = asyncio.get_running_loop()
        if self._owns_client and self._client is not None and self._client_loop is not loop:
            # pooled connections belong to the loop that opened them and cannot
            # be closed from another one
            logger.debug("Event loop changed, replacing httpx client")
            self._client = None

        if self._client is None:
            self._client = httpx.AsyncClient(
                timeout=self._config.TIMEOUT,
                verify=self._config.VERIFY_TLS,
                transport=self._transport,
            )
            self._client_loop = loop
        return self._client

    async def aclose(self) -> None:
        if self._client and self._owns_client:
            await self._client.aclose()
            self._client = None
            self._client_loop = None

    async def __aenter__(self) -> "HttpxTransport":
        await self._ensure_client()
        return self

    async def __aexit__(self, *_args: Any) -> None:
        await self.aclose()

    def _follow_redirects(self, init: RequestInit) -> bool:
        if init.redirect is None:
            return self._config.FOLLOW_REDIRECTS
        return init.redirect == "follow"

    def _prepare_content(self, init: RequestInit, headers: httpx.Headers) -> dict[str, Any]:
        body = init.body
        if body is None:
            return {}
        if isinstance(body, FormData):
            # httpx generates the multipart boundary
            headers.pop("content-type", None)
            return {"files": body.to_httpx_files()}
        if isinstance(body, httpx.QueryParams):
            headers["Content-Type"] = "application/x-www-form-urlencoded;charset=UTF-8"
            return {"content": str(body)}
        if isinstance(body, Blob):
            if body.content_type:
                headers["Content-Type"] = body.content_type
            return {"content": body.content}
        if isinstance(body, (bytearray, memoryview)):
            return {"content": bytes(body)}
        if isinstance(body, (str, bytes, AsyncIterable)):
            return {"content": body}
        if isinstance(body, Iterator):
            # AsyncClient only accepts async byte streams
            return {"content": _aiter_sync(body)}
        raise TypeError(f"Unsupported request body type: {type(body).__name__}")

    def _build_request(
        self, client: httpx.AsyncClient, url: str, init: RequestInit
    ) -> httpx.Request:
        headers = httpx.Headers(init.headers)
        if init.referrer and init.referrer != "about:client" and "referer" not in headers:
            headers["Referer"] = init.referrer

        extra = self._prepare_content(init, headers)
        if init.timeout is not None:
            extra["timeout"] = init.timeout

        return client.build_request(method=init.method, url=url, headers=headers, **extra)

    async def send(self, url: str, init: RequestInit) -> httpx.Response:
        if init.signal is not None and init.signal.is_set():
            raise RequestAbortedError()

        client = await self._ensure_client()
        request = self._build_request(client, url, init)
        pending = client.send(request, stream=True, follow_redirects=self._follow_redirects(init))

        if init.signal is None:
            response = await pending
        else:
            response = await self._send_until_aborted(pending, init.signal)

        if init.redirect == "error" and response.is_redirect:
            await response.aclose()
            raise RedirectNotAllowedError(
                f"{request.method} {request.url} redirected with status {response.status_code}"
            )
        return response

    async def _send_until_aborted(self, pending: Any, signal: asyncio.Event) -> httpx.Response:
        send_task = asyncio.ensure_future(pending)
        abort_task = asyncio.ensure_future(signal.wait())
        try:
            await asyncio.wait({send_task, abort_task}, return_when=asyncio.FIRST_COMPLETED)
        finally:
            abort_task.cancel()
            if not send_task.done():
                send_task.cancel()

        if send_task.done() and not send_task.cancelled():
            return send_task.result()
        logger.debug("Request aborted by signal")
        raise RequestAbortedError()
