import logging
from collections.abc import Mapping
from typing import Any

from .body import ensure_body, method_has_body
from .errors import RejectedError, ResponseStatusError
from .interceptors import chain_interceptors
from .log import request_id_generator, request_id_var
from .merge import merge_config, merge_headers
from .models import FetchConfig, FetchResponse, RequestInit
from .parser import parse_response
from .presets import PRESET_CONFIG
from .transport import HttpxTransport, Transport
from .urls import build_url, validate_url

logger = logging.getLogger(__name__)

ConfigInit = FetchConfig | Mapping[str, Any] | None


def to_config(config: ConfigInit = None, **options: Any) -> FetchConfig:
    if isinstance(config, Mapping):
        config = FetchConfig.from_options(**config)
    config = config or FetchConfig()
    if options:
        FetchConfig.from_options(**options)
        config = config.evolve(**options)
    return config


class FetchAX:
    """Async HTTP client with default options and interceptor chains.

    ``config`` holds the instance defaults; they are merged over the preset
    options once and never change afterwards. Every call merges its own
    options over these defaults.
    """

    def __init__(
        self,
        config: FetchConfig | None = None,
        transport: Transport | None = None,
    ):
        self._defaults = merge_config(PRESET_CONFIG, config)
        self._transport: Transport = transport or HttpxTransport()

    @property
    def defaults(self) -> FetchConfig:
        return self._defaults

    async def aclose(self) -> None:
        await self._transport.aclose()

    async def __aenter__(self) -> "FetchAX":
        return self

    async def __aexit__(self, *_args: Any) -> None:
        await self.aclose()

    async def request(
        self,
        method: str,
        url: str,
        config: ConfigInit = None,
        **options: Any,
    ) -> FetchResponse:
        resolved = merge_config(self._defaults, to_config(config, **options))
        token = request_id_var.set(request_id_generator())
        try:
            return await self._dispatch(method.upper(), url, resolved)
        finally:
            request_id_var.reset(token)

    async def _dispatch(self, method: str, url: str, config: FetchConfig) -> FetchResponse:
        intercept_request = chain_interceptors(config.request_interceptor)
        if intercept_request is not None:
            config = await intercept_request(config)

        request_url = validate_url(build_url(config.base_url, url, config.params))
        init = RequestInit(
            method=method,
            headers=merge_headers(config.headers),
            body=ensure_body(config.data) if method_has_body(method) else None,
            **config.passthrough(),
        )

        logger.debug(f"-> {method} {request_url}")
        response = await self._transport.send(request_url, init)
        logger.debug(f"<- {response.status_code} {method} {request_url}")

        if config.throw_error and response.status_code >= 300:
            parsed = await parse_response(response, config.response_type)
            raise await self._reject(ResponseStatusError(response.status_code, parsed), config)

        intercept_response = chain_interceptors(config.response_interceptor)
        if intercept_response is not None:
            response = await intercept_response(response)

        return await parse_response(response, config.response_type)

    async def _reject(self, error: ResponseStatusError, config: FetchConfig) -> BaseException:
        intercept_rejected = chain_interceptors(config.response_rejected_interceptor)
        if intercept_rejected is None:
            return error

        reason = await intercept_rejected(error)
        if isinstance(reason, BaseException):
            return reason
        return RejectedError(reason)

    def _with_data(self, data: Any, config: ConfigInit, options: dict[str, Any]) -> FetchConfig:
        call = to_config(config, **options)
        if data is not None:
            call = call.evolve(data=data)
        return call

    async def get(self, url: str, config: ConfigInit = None, **options: Any) -> FetchResponse:
        return await self.request("GET", url, config, **options)

    async def delete(self, url: str, config: ConfigInit = None, **options: Any) -> FetchResponse:
        return await self.request("DELETE", url, config, **options)

    async def head(self, url: str, config: ConfigInit = None, **options: Any) -> FetchResponse:
        return await self.request("HEAD", url, config, **options)

    async def post(
        self, url: str, data: Any = None, config: ConfigInit = None, **options: Any
    ) -> FetchResponse:
        return await self.request("POST", url, self._with_data(data, config, options))

    async def put(
        self, url: str, data: Any = None, config: ConfigInit = None, **options: Any
    ) -> FetchResponse:
        return await self.request("PUT", url, self._with_data(data, config, options))

    async def patch(
        self, url: str, data: Any = None, config: ConfigInit = None, **options: Any
    ) -> FetchResponse:
        return await self.request("PATCH", url, self._with_data(data, config, options))


def create(
    config: ConfigInit = None,
    *,
    transport: Transport | None = None,
    **options: Any,
) -> FetchAX:
    return FetchAX(to_config(config, **options), transport=transport)


__all__ = ["FetchAX", "create", "to_config"]
