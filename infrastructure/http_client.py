"""Shared async HTTP client used by alert providers."""

from typing import Any, Optional

import httpx

from config import HttpClientSettings


class HttpClient:
    """Thin async wrapper around httpx.AsyncClient with a configurable timeout.

    The timeout is the only deadline a webhook call gets; providers make a
    single attempt and never retry. ``transport`` lets tests plug in an
    ``httpx.MockTransport``.
    """

    def __init__(
        self,
        timeout: float = 10.0,
        *,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self._client = httpx.AsyncClient(timeout=timeout, transport=transport)

    @classmethod
    def from_settings(cls, settings: HttpClientSettings, **kwargs: Any) -> "HttpClient":
        return cls(timeout=settings.alert_http_timeout_seconds, **kwargs)

    async def post(self, url: str, **kwargs: Any) -> httpx.Response:
        # The body is fully read before this returns (non-streaming request)
        return await self._client.post(url, **kwargs)

    async def aclose(self) -> None:
        await self._client.aclose()

    async def __aenter__(self) -> "HttpClient":
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.aclose()
