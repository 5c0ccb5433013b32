"""Converts a Yahoo Finance chart payload into a date-keyed history map.

The chart API returns one ``timestamp`` list plus parallel value lists:

    {"chart": {"result": [{
        "timestamp": [1729382400, ...],
        "indicators": {
            "quote": [{"open": [...], "high": [...], "low": [...],
                       "close": [...], "volume": [...]}],
            "adjclose": [{"adjclose": [...]}]
        }
    }]}}

Value lists may be shorter than ``timestamp`` and may hold nulls. Every
position is read with a bounds and null check, so a record always carries
all six fields.
"""

from __future__ import annotations

from typing import Any

from pydantic import ValidationError

from index_history.fetchers.base import InvalidResponseError
from index_history.processing.schemas import HistoryMap, PriceRecord
from index_history.utils.dates import epoch_to_iso_date

QUOTE_FIELDS = ("open", "high", "low", "close", "volume")


def _child(node: Any, key: str) -> Any:
    """Return ``node[key]`` if node is a JSON object, else None."""
    return node.get(key) if isinstance(node, dict) else None


def _first(node: Any) -> Any:
    """Return the first element of a JSON array, else None."""
    if isinstance(node, list) and node:
        return node[0]
    return None


def _as_list(node: Any) -> list:
    return node if isinstance(node, list) else []


def _value_at(values: Any, i: int) -> Any:
    """Positional read treating short arrays, non-arrays and nulls as absent."""
    if not isinstance(values, list) or i >= len(values):
        return None
    return values[i]


def extract_chart_result(payload: Any) -> dict[str, Any]:
    """Return ``chart.result[0]`` or raise InvalidResponseError."""
    chart = _child(payload, "chart")
    result = _first(_child(chart, "result"))

    if result is None:
        message = "No chart result from Yahoo Finance"
        description = _child(_child(chart, "error"), "description")
        if description:
            message = f"{message}: {description}"
        raise InvalidResponseError(message)

    if not isinstance(result, dict):
        raise InvalidResponseError(
            f"Chart result is a {type(result).__name__}, expected an object"
        )

    return result


def normalize_result(result: dict[str, Any]) -> HistoryMap:
    """Merge the parallel arrays of one chart result into a history map.

    Later timestamps falling on an already-seen UTC date overwrite the
    earlier record.
    """
    timestamps = _as_list(result.get("timestamp"))
    indicators = _child(result, "indicators")
    quote = _first(_child(indicators, "quote"))
    if not isinstance(quote, dict):
        quote = {}
    adjclose = _child(_first(_child(indicators, "adjclose")), "adjclose")

    history: HistoryMap = {}
    for i, ts in enumerate(timestamps):
        if isinstance(ts, bool) or not isinstance(ts, (int, float)):
            raise InvalidResponseError(f"Timestamp at position {i} is not a number: {ts!r}")

        try:
            date_key = epoch_to_iso_date(ts)
        except (OverflowError, OSError, ValueError) as e:
            raise InvalidResponseError(f"Timestamp {ts} is out of range: {e}") from e

        values = {field: _value_at(quote.get(field), i) for field in QUOTE_FIELDS}
        values["adjclose"] = _value_at(adjclose, i)

        try:
            history[date_key] = PriceRecord(**values)
        except ValidationError as e:
            raise InvalidResponseError(
                f"Malformed price values for {date_key}: {e.error_count()} error(s)"
            ) from e

    return history


def normalize_chart(payload: Any) -> HistoryMap:
    """Normalize a full chart API payload.

    Raises InvalidResponseError if ``chart.result[0]`` is missing, before any
    array is touched.
    """
    return normalize_result(extract_chart_result(payload))
