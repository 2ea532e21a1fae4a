"""fetchax: async HTTP client with interceptors and default options."""

from .api import delete, get, head, patch, post, put, request
from .body import ensure_body, is_body_init
from .client import FetchAX, create
from .errors import (
    FetchAXError,
    InvalidURLError,
    RedirectNotAllowedError,
    RejectedError,
    RequestAbortedError,
    ResponseStatusError,
)
from .interceptors import chain_interceptors, header_interceptor, logging_interceptor
from .log import init_logging
from .merge import merge_config, merge_headers
from .models import Blob, FetchConfig, FetchResponse, FormData, RequestInit
from .parser import parse_response
from .presets import PRESET_CONFIG
from .transport import HttpxTransport, Transport
from .types import ResponseType
from .urls import build_url, is_absolute_url

__all__ = [
    "FetchAX",
    "create",
    "request",
    "get",
    "post",
    "put",
    "patch",
    "delete",
    "head",
    "FetchConfig",
    "FetchResponse",
    "RequestInit",
    "Blob",
    "FormData",
    "ResponseType",
    "PRESET_CONFIG",
    "Transport",
    "HttpxTransport",
    "FetchAXError",
    "ResponseStatusError",
    "RejectedError",
    "InvalidURLError",
    "RequestAbortedError",
    "RedirectNotAllowedError",
    "chain_interceptors",
    "header_interceptor",
    "logging_interceptor",
    "merge_config",
    "merge_headers",
    "build_url",
    "is_absolute_url",
    "ensure_body",
    "is_body_init",
    "parse_response",
    "init_logging",
]
