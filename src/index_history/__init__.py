"""Recent daily price history from the Yahoo Finance chart API, keyed by date."""

import logging

from index_history.fetchers.base import (
    HistoryError,
    HttpResponse,
    HttpTransport,
    InvalidArgumentError,
    InvalidResponseError,
    RequestFailedError,
    TransportUnavailableError,
)
from index_history.fetchers.yahoo import YahooChartFetcher, build_chart_url
from index_history.history import get_index_history, get_index_history_json
from index_history.processing.normalizer import normalize_chart
from index_history.processing.schemas import HistoryMap, PriceRecord, history_to_json

# Silent unless the host application configures logging
logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    # Entry points
    "get_index_history",
    "get_index_history_json",
    "YahooChartFetcher",
    "build_chart_url",
    "normalize_chart",
    # Models
    "HistoryMap",
    "PriceRecord",
    "history_to_json",
    # Transport
    "HttpResponse",
    "HttpTransport",
    # Errors
    "HistoryError",
    "InvalidArgumentError",
    "TransportUnavailableError",
    "RequestFailedError",
    "InvalidResponseError",
]
