"""HTTP adapter – HttpxHttpClient."""
from __future__ import annotations

from typing import Any

import httpx

from citydir.config.app import DirectorySettings
from citydir.config.context import AppContext
from citydir.kernel.errors import HttpError, NetworkError, ParseError
from citydir.observability.correlation import CorrelationContext


class HttpxHttpClient:
    """Thin async httpx wrapper with structured error mapping.

    * transport failures and timeouts raise :class:`NetworkError`
    * non-2xx responses raise :class:`HttpError` carrying the status
    * :meth:`get_json` raises :class:`ParseError` on a non-JSON body

    Correlation headers from the ambient :class:`CorrelationContext` are added
    to every request; headers passed by the caller take precedence.
    """

    def __init__(
        self,
        base_url: str = "",
        timeout: float = 10.0,
        headers: dict[str, str] | None = None,
        **kwargs: Any,
    ) -> None:
        self._client = httpx.AsyncClient(base_url=base_url, timeout=timeout, headers=headers, **kwargs)

    @classmethod
    def for_settings(
        cls,
        settings: DirectorySettings,
        context: AppContext | None = None,
        **kwargs: Any,
    ) -> "HttpxHttpClient":
        headers = {"Accept": "application/json"}
        if context is not None:
            headers["Accept-Language"] = context.accept_language
        return cls(
            base_url=settings.api_url.rstrip("/"),
            timeout=settings.request_timeout,
            headers=headers,
            **kwargs,
        )

    async def __aenter__(self) -> "HttpxHttpClient":
        await self._client.__aenter__()
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self._client.__aexit__(*args)

    async def aclose(self) -> None:
        await self._client.aclose()

    async def get(self, url: str, **kwargs: Any) -> httpx.Response:
        return await self._request("GET", url, **kwargs)

    async def post(self, url: str, **kwargs: Any) -> httpx.Response:
        return await self._request("POST", url, **kwargs)

    async def get_json(self, url: str, **kwargs: Any) -> Any:
        response = await self.get(url, **kwargs)
        try:
            return response.json()
        except ValueError as exc:
            raise ParseError(
                f"Response from GET {url} is not valid JSON",
                status=response.status_code,
                url=url,
                cause=exc,
            ) from exc

    async def _request(self, method: str, url: str, **kwargs: Any) -> httpx.Response:
        headers = httpx.Headers(CorrelationContext.headers())
        headers.update(kwargs.pop("headers", None) or {})
        try:
            response = await self._client.request(method, url, headers=headers, **kwargs)
            response.raise_for_status()
            return response
        except httpx.TimeoutException as exc:
            raise NetworkError(f"HTTP request timed out: {method} {url}", url=url, cause=exc) from exc
        except httpx.HTTPStatusError as exc:
            raise HttpError(
                exc.response.status_code,
                f"HTTP {exc.response.status_code} from {method} {url}",
                url=url,
            ) from exc
        except httpx.HTTPError as exc:
            raise NetworkError(f"HTTP request failed: {method} {url}: {exc}", url=url, cause=exc) from exc


HttpClient = HttpxHttpClient

__all__ = ["HttpClient", "HttpxHttpClient"]
