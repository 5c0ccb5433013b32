"""Price history fetchers and their error taxonomy."""

from index_history.fetchers.base import (
    HistoryError,
    InvalidArgumentError,
    InvalidResponseError,
    RequestFailedError,
    TransportUnavailableError,
)

__all__ = [
    "HistoryError",
    "InvalidArgumentError",
    "InvalidResponseError",
    "RequestFailedError",
    "TransportUnavailableError",
]
