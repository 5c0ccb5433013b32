"""Default asynchronous HTTP transport backed by httpx."""

from __future__ import annotations

from collections.abc import Mapping

import httpx

from index_history.fetchers.base import RequestFailedError


class HttpxTransport:
    """Performs GET requests with ``httpx.AsyncClient``.

    A caller-supplied client is reused and left open; otherwise a client is
    opened and closed around each request.
    """

    def __init__(
        self,
        timeout: float = 30.0,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self._timeout = timeout
        self._client = client

    async def get(self, url: str, headers: Mapping[str, str]) -> httpx.Response:
        try:
            if self._client is not None:
                return await self._client.get(url, headers=dict(headers))
            async with httpx.AsyncClient(timeout=self._timeout) as client:
                return await client.get(url, headers=dict(headers))
        except httpx.RequestError as e:
            raise RequestFailedError(None, f"{type(e).__name__}: {e}") from e
