"""Yahoo Finance chart fetcher for the last five daily bars of one ticker."""

from __future__ import annotations

from urllib.parse import quote

from index_history.config.settings import YahooChartSettings
from index_history.fetchers.base import (
    HttpTransport,
    InvalidArgumentError,
    InvalidResponseError,
    RequestFailedError,
    resolve_transport,
)
from index_history.processing.normalizer import normalize_chart
from index_history.processing.schemas import HistoryMap, history_to_json
from index_history.utils.logging import get_logger

logger = get_logger(__name__)

CHART_PATH = "/v7/finance/chart"
CHART_RANGE = "5d"
CHART_INTERVAL = "1d"

# Same unreserved set as JavaScript's encodeURIComponent
_TICKER_SAFE_CHARS = "!*'()"


def validate_ticker(ticker: object) -> str:
    """Return the ticker unchanged, or raise InvalidArgumentError."""
    if not isinstance(ticker, str) or not ticker:
        raise InvalidArgumentError("ticker is required")
    return ticker


def build_chart_url(ticker: str, base_url: str = "https://query1.finance.yahoo.com") -> str:
    """Build the chart URL requesting a 5-day range at daily interval."""
    encoded = quote(validate_ticker(ticker), safe=_TICKER_SAFE_CHARS)
    return (
        f"{base_url.rstrip('/')}{CHART_PATH}/{encoded}"
        f"?range={CHART_RANGE}&interval={CHART_INTERVAL}"
    )


class YahooChartFetcher:
    """Fetches and normalizes recent daily history from the Yahoo chart API.

    The transport is resolved lazily on first use, after the ticker has
    been validated, so an invalid ticker never touches the network layer.
    """

    source_name = "yahoo_finance"

    def __init__(
        self,
        settings: YahooChartSettings | None = None,
        transport: HttpTransport | None = None,
    ) -> None:
        self._settings = settings or YahooChartSettings()
        self._transport = transport
        self._resolved: HttpTransport | None = None

    @property
    def headers(self) -> dict[str, str]:
        return {"User-Agent": self._settings.user_agent}

    def _get_transport(self) -> HttpTransport:
        if self._resolved is None:
            self._resolved = resolve_transport(self._transport, timeout=self._settings.timeout)
        return self._resolved

    async def fetch_history(self, ticker: str) -> HistoryMap:
        """Fetch the last five daily bars for ``ticker`` keyed by UTC date."""
        url = build_chart_url(ticker, self._settings.base_url)
        transport = self._get_transport()

        logger.info("fetching_history", source=self.source_name, ticker=ticker, url=url)

        response = await transport.get(url, self.headers)

        if not 200 <= response.status_code < 300:
            logger.warning(
                "request_failed",
                ticker=ticker,
                status=response.status_code,
                reason=response.reason_phrase,
            )
            raise RequestFailedError(response.status_code, response.reason_phrase)

        try:
            payload = response.json()
        except ValueError as e:
            raise InvalidResponseError(f"Yahoo Finance returned invalid JSON for {ticker}: {e}") from e

        history = normalize_chart(payload)

        logger.info("fetch_complete", ticker=ticker, rows=len(history))
        return history

    async def fetch_history_json(self, ticker: str) -> str:
        """Same as fetch_history, serialized to a JSON object string."""
        return history_to_json(await self.fetch_history(ticker))
