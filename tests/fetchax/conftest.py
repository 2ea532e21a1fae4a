from collections.abc import Callable

import httpx
import pytest

from fetchax.client import FetchAX, create
from fetchax.models import RequestInit
from fetchax.transport import HttpxTransport

TODO = {"userId": 1, "id": 1, "title": "delectus aut autem", "completed": False}


class StubTransport:
    """Returns canned responses and records what it was asked to send."""

    def __init__(self, responder: Callable[[str, RequestInit], httpx.Response] | httpx.Response):
        self._responder = responder
        self.calls: list[tuple[str, RequestInit]] = []
        self.closed = False

    async def send(self, url: str, init: RequestInit) -> httpx.Response:
        self.calls.append((url, init))
        if isinstance(self._responder, httpx.Response):
            return self._responder
        return self._responder(url, init)

    async def aclose(self) -> None:
        self.closed = True

    @property
    def last_url(self) -> str:
        return self.calls[-1][0]

    @property
    def last_init(self) -> RequestInit:
        return self.calls[-1][1]


def json_response(data, status_code: int = 200, url: str = "https://example.com") -> httpx.Response:
    return httpx.Response(status_code, json=data, request=httpx.Request("GET", url))


@pytest.fixture
def todo_transport() -> StubTransport:
    return StubTransport(lambda url, init: json_response(TODO))


@pytest.fixture
def mock_http() -> Callable[..., tuple[FetchAX, list[httpx.Request]]]:
    """Build a client whose httpx transport is backed by an in-process handler."""

    def factory(handler: Callable[[httpx.Request], httpx.Response], **options):
        seen: list[httpx.Request] = []

        def recording_handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return handler(request)

        client = httpx.AsyncClient(transport=httpx.MockTransport(recording_handler))
        return create(transport=HttpxTransport(client=client), **options), seen

    return factory
