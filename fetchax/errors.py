from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from .models import FetchResponse


class FetchAXError(Exception):
    detail: str = "Request failed."

    def __init__(self, detail: str | None = None):
        super().__init__(detail or self.detail)
        self.detail = detail or self.detail


class ResponseStatusError(FetchAXError):
    """Raised when ``throw_error`` is on and the response status is >= 300."""

    detail = "Response status indicates failure."

    def __init__(self, status_code: int, response: "FetchResponse"):
        super().__init__(f"Request failed with status code {status_code}")
        self._status_code = status_code
        self._response = response

    @property
    def status_code(self) -> int:
        return self._status_code

    @property
    def response(self) -> "FetchResponse":
        return self._response


class RejectedError(FetchAXError):
    """Carries a non-exception value a rejection interceptor produced."""

    detail = "Request rejected by interceptor."

    def __init__(self, reason: Any):
        super().__init__(f"Request rejected: {reason!r}")
        self.reason = reason


class InvalidURLError(FetchAXError, ValueError):
    detail = "Invalid request URL."


class RequestAbortedError(FetchAXError):
    detail = "Request aborted by signal."


class RedirectNotAllowedError(FetchAXError):
    detail = "Redirect received while redirect mode is 'error'."
