from collections.abc import Awaitable, Callable, Iterable, Mapping, Sequence
from typing import TYPE_CHECKING, Any, Literal, TypeVar, Union

import httpx

if TYPE_CHECKING:
    from .errors import ResponseStatusError
    from .models import FetchConfig

T = TypeVar("T")

ResponseType = Literal["arraybuffer", "blob", "json", "text", "stream", "formdata"]
RESPONSE_TYPES: tuple[str, ...] = ("arraybuffer", "blob", "json", "text", "stream", "formdata")

HeadersInit = Union[httpx.Headers, Mapping[str, str], Sequence[tuple[str, str]]]
QueryParams = Union[Mapping[str, Any], Iterable[tuple[str, Any]]]

MaybeAwaitable = Union[T, Awaitable[T]]

RequestInterceptor = Callable[["FetchConfig"], MaybeAwaitable["FetchConfig"]]
ResponseInterceptor = Callable[[httpx.Response], MaybeAwaitable[httpx.Response]]
ResponseRejectedInterceptor = Callable[["ResponseStatusError"], MaybeAwaitable[Any]]

Interceptor = Callable[[Any], MaybeAwaitable[Any]]
ChainedInterceptor = Callable[[Any], Awaitable[Any]]
