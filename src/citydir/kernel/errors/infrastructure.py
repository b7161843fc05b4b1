"""Infrastructure errors – failures talking to the directory API.

Every read against the listing endpoint fails with a :class:`FetchError`
subclass, so callers can catch the whole taxonomy at one boundary:

* :class:`NetworkError`: the request never completed (DNS, refused, timeout).
* :class:`HttpError`: the server answered with a non-2xx status.
* :class:`ParseError`: the body was not JSON or had an unexpected shape.
"""

from __future__ import annotations

from typing import Any

from citydir.kernel.errors.base import BaseError


class InfrastructureError(BaseError):
    """Infrastructure / I/O failure that is not a business rule violation."""

    default_code = "infrastructure_error"


class FetchError(InfrastructureError):
    """A read against the external API failed."""

    default_code = "fetch_error"

    def __init__(
        self,
        message: str,
        *,
        status: int | None = None,
        url: str | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)
        self.status = status
        self.url = url

    def log_fields(self) -> dict[str, Any]:
        fields = super().log_fields()
        if self.status is not None:
            fields["status"] = self.status
        if self.url is not None:
            fields["url"] = self.url
        return fields

    def to_dict(self) -> dict[str, Any]:
        base = super().to_dict()
        if self.status is not None:
            base["status"] = self.status
        return base


class NetworkError(FetchError):
    """The request never produced a response."""

    default_code = "network_error"
    default_retryable = True


class HttpError(FetchError):
    """The server responded with a non-success status."""

    default_code = "http_error"

    def __init__(self, status: int, message: str | None = None, **kwargs: Any) -> None:
        super().__init__(message or f"HTTP error! status: {status}", status=status, **kwargs)

    @property
    def retryable(self) -> bool:
        # 5xx, request timeout, throttling
        return self.status >= 500 or self.status in (408, 429)


class ParseError(FetchError):
    """The response body could not be decoded into the expected shape."""

    default_code = "parse_error"


__all__ = [
    "FetchError",
    "HttpError",
    "InfrastructureError",
    "NetworkError",
    "ParseError",
]
