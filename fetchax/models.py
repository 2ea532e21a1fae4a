import asyncio
from collections.abc import Iterator
from dataclasses import dataclass, field, fields, replace
from typing import Any, Generic

import httpx

from .types import (
    RESPONSE_TYPES,
    HeadersInit,
    QueryParams,
    RequestInterceptor,
    ResponseInterceptor,
    ResponseRejectedInterceptor,
    ResponseType,
    T,
)


@dataclass(frozen=True)
class FetchConfig:
    """Options driving a request.

    Every field defaults to ``None`` which means "not set": merging only lets
    a set value override, so an explicit ``throw_error=False`` is kept apart
    from an absent one.
    """

    base_url: str | None = None
    headers: HeadersInit | None = None
    throw_error: bool | None = None
    response_type: ResponseType | None = None
    request_interceptor: RequestInterceptor | None = None
    response_interceptor: ResponseInterceptor | None = None
    response_rejected_interceptor: ResponseRejectedInterceptor | None = None
    data: Any = None
    params: QueryParams | None = None

    # passed through to the transport untouched
    cache: str | None = None
    credentials: str | None = None
    integrity: str | None = None
    keepalive: bool | None = None
    mode: str | None = None
    priority: str | None = None
    redirect: str | None = None
    referrer: str | None = None
    referrer_policy: str | None = None
    signal: asyncio.Event | None = None
    timeout: float | None = None

    def __post_init__(self) -> None:
        if self.response_type is not None and self.response_type not in RESPONSE_TYPES:
            raise ValueError(
                f"response_type must be one of {', '.join(RESPONSE_TYPES)}, "
                f"got {self.response_type!r}"
            )
        if self.redirect is not None and self.redirect not in ("follow", "manual", "error"):
            raise ValueError(f"redirect must be 'follow', 'manual' or 'error', got {self.redirect!r}")
        if self.timeout is not None and self.timeout <= 0:
            raise ValueError("timeout must be > 0 when provided")

    @classmethod
    def from_options(cls, **options: Any) -> "FetchConfig":
        unknown = set(options) - cls.field_names()
        if unknown:
            raise TypeError(f"Unknown fetch option(s): {', '.join(sorted(unknown))}")
        return cls(**options)

    @classmethod
    def field_names(cls) -> set[str]:
        return {f.name for f in fields(cls)}

    def evolve(self, **changes: Any) -> "FetchConfig":
        return replace(self, **changes)

    def passthrough(self) -> dict[str, Any]:
        return {name: getattr(self, name) for name in PASSTHROUGH_OPTIONS}


PASSTHROUGH_OPTIONS: tuple[str, ...] = (
    "cache",
    "credentials",
    "integrity",
    "keepalive",
    "mode",
    "priority",
    "redirect",
    "referrer",
    "referrer_policy",
    "signal",
    "timeout",
)


@dataclass(frozen=True)
class RequestInit:
    method: str
    headers: httpx.Headers = field(default_factory=httpx.Headers)
    body: Any = None
    cache: str | None = None
    credentials: str | None = None
    integrity: str | None = None
    keepalive: bool | None = None
    mode: str | None = None
    priority: str | None = None
    redirect: str | None = None
    referrer: str | None = None
    referrer_policy: str | None = None
    signal: asyncio.Event | None = None
    timeout: float | None = None


@dataclass(frozen=True)
class FetchResponse(Generic[T]):
    data: Any
    status: int
    status_text: str
    headers: httpx.Headers

    @property
    def ok(self) -> bool:
        return 200 <= self.status < 300


@dataclass(frozen=True)
class Blob:
    content: bytes
    content_type: str = ""

    @property
    def size(self) -> int:
        return len(self.content)

    def text(self) -> str:
        return self.content.decode("utf-8")


@dataclass(frozen=True)
class FormDataEntry:
    name: str
    value: str | bytes
    filename: str | None = None
    content_type: str | None = None

    @property
    def is_file(self) -> bool:
        return self.filename is not None


class FormData:
    """Ordered multi-valued form fields, usable as a request body."""

    def __init__(self, entries: list[FormDataEntry] | None = None) -> None:
        self._entries: list[FormDataEntry] = list(entries or [])

    def append(
        self,
        name: str,
        value: str | bytes,
        filename: str | None = None,
        content_type: str | None = None,
    ) -> None:
        self._entries.append(FormDataEntry(name, value, filename, content_type))

    def get(self, name: str) -> str | bytes | None:
        for entry in self._entries:
            if entry.name == name:
                return entry.value
        return None

    def get_all(self, name: str) -> list[str | bytes]:
        return [entry.value for entry in self._entries if entry.name == name]

    def entries(self) -> list[FormDataEntry]:
        return list(self._entries)

    def to_httpx_files(self) -> list[tuple[str, tuple[str | None, str | bytes, str | None]]]:
        # plain fields go through as files without a filename so httpx always
        # encodes multipart, even when no file is attached
        return [
            (entry.name, (entry.filename, entry.value, entry.content_type))
            for entry in self._entries
        ]

    def __contains__(self, name: object) -> bool:
        return any(entry.name == name for entry in self._entries)

    def __iter__(self) -> Iterator[tuple[str, str | bytes]]:
        return iter([(entry.name, entry.value) for entry in self._entries])

    def __len__(self) -> int:
        return len(self._entries)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FormData):
            return NotImplemented
        return self._entries == other._entries

    def __repr__(self) -> str:
        return f"FormData({self._entries!r})"
