"""Fetcher error taxonomy and the HTTP transport protocol."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Protocol, runtime_checkable


class HistoryError(Exception):
    """Base exception for all price history failures."""


class InvalidArgumentError(HistoryError, ValueError):
    """The ticker is missing, empty, or not a string."""


class TransportUnavailableError(HistoryError):
    """No usable HTTP capability is available."""


class RequestFailedError(HistoryError):
    """The provider answered with a non-success status, or the request never completed.

    ``status_code`` is ``None`` when no HTTP response was received.
    """

    def __init__(self, status_code: int | None, reason: str) -> None:
        self.status_code = status_code
        self.reason = reason
        if status_code is None:
            message = f"Yahoo Finance request failed: {reason}"
        else:
            message = f"Yahoo Finance request failed: {status_code} {reason}".rstrip()
        super().__init__(message)


class InvalidResponseError(HistoryError):
    """The response body is not JSON or lacks the chart result node."""


@runtime_checkable
class HttpResponse(Protocol):
    """The slice of an HTTP response the fetcher reads.

    ``httpx.Response`` conforms without any wrapping.
    """

    @property
    def status_code(self) -> int: ...

    @property
    def reason_phrase(self) -> str: ...

    def json(self) -> Any: ...


@runtime_checkable
class HttpTransport(Protocol):
    """Anything able to perform an asynchronous HTTP GET."""

    async def get(self, url: str, headers: Mapping[str, str]) -> HttpResponse:
        """Issue one GET and return the fully read response."""
        ...


def resolve_transport(
    transport: object | None = None,
    timeout: float = 30.0,
) -> HttpTransport:
    """Return a usable transport, building the httpx default when none is given.

    Raises TransportUnavailableError if the given object cannot issue GET
    requests or the default transport cannot be imported.
    """
    if transport is not None:
        if not isinstance(transport, HttpTransport):
            raise TransportUnavailableError(
                f"{type(transport).__name__} has no get(url, headers) method"
            )
        return transport

    # Lazy import keeps httpx out of the protocol layer
    try:
        from index_history.fetchers.transport import HttpxTransport
    except ImportError as e:
        raise TransportUnavailableError(
            f"No HTTP transport available. Install httpx or pass a transport: {e}"
        ) from e

    return HttpxTransport(timeout=timeout)
