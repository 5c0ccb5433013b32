"""Public entry points: recent daily history for one ticker."""

from __future__ import annotations

from index_history.config.settings import YahooChartSettings
from index_history.fetchers.base import HttpTransport
from index_history.fetchers.yahoo import YahooChartFetcher
from index_history.processing.schemas import HistoryMap


def _fetcher(
    transport: HttpTransport | None,
    settings: YahooChartSettings | None,
) -> YahooChartFetcher:
    if settings is None:
        from index_history.config.loader import get_settings

        settings = get_settings().yahoo
    return YahooChartFetcher(settings=settings, transport=transport)


async def get_index_history(
    ticker: str,
    *,
    transport: HttpTransport | None = None,
    settings: YahooChartSettings | None = None,
) -> HistoryMap:
    """Return the last five daily bars for ``ticker`` keyed by ``YYYY-MM-DD``.

    Raises InvalidArgumentError, TransportUnavailableError,
    RequestFailedError or InvalidResponseError.
    """
    return await _fetcher(transport, settings).fetch_history(ticker)


async def get_index_history_json(
    ticker: str,
    *,
    transport: HttpTransport | None = None,
    settings: YahooChartSettings | None = None,
) -> str:
    """Same as get_index_history, serialized to a JSON string."""
    return await _fetcher(transport, settings).fetch_history_json(ticker)
