"""Shared test fixtures."""

from __future__ import annotations

import copy
from typing import Any

import pytest

# 2024-10-20T00:00:00Z and 2024-10-21T00:00:00Z
TS_OCT_20 = 1729382400
TS_OCT_21 = 1729468800

SAMPLE_CHART: dict[str, Any] = {
    "chart": {
        "result": [
            {
                "meta": {"symbol": "^GSPC", "currency": "USD"},
                "timestamp": [TS_OCT_20, TS_OCT_21],
                "indicators": {
                    "quote": [
                        {
                            "open": [5840.5, 5851.2],
                            "high": [5866.0, 5878.9],
                            "low": [5829.1, 5842.3],
                            "close": [5853.9, 5864.7],
                            "volume": [3521000000, 3610000000],
                        }
                    ],
                    "adjclose": [{"adjclose": [5853.9, 5864.7]}],
                },
            }
        ],
        "error": None,
    }
}


class RecordingResponse:
    """Minimal HttpResponse that counts json() calls."""

    def __init__(self, status_code: int, reason_phrase: str, body: Any = None) -> None:
        self.status_code = status_code
        self.reason_phrase = reason_phrase
        self._body = body
        self.json_calls = 0

    def json(self) -> Any:
        self.json_calls += 1
        if isinstance(self._body, Exception):
            raise self._body
        return self._body


class RecordingTransport:
    """HttpTransport stub returning a fixed response and recording requests."""

    def __init__(self, response: RecordingResponse) -> None:
        self.response = response
        self.requests: list[tuple[str, dict[str, str]]] = []

    async def get(self, url: str, headers) -> RecordingResponse:
        self.requests.append((url, dict(headers)))
        return self.response


@pytest.fixture
def chart_payload() -> dict[str, Any]:
    """A fresh copy of a two-day chart payload for ^GSPC."""
    return copy.deepcopy(SAMPLE_CHART)


@pytest.fixture
def ok_transport(chart_payload: dict[str, Any]) -> RecordingTransport:
    return RecordingTransport(RecordingResponse(200, "OK", chart_payload))


@pytest.fixture
def make_transport():
    """Factory building a RecordingTransport around a canned response."""

    def _make(status_code: int = 200, reason_phrase: str = "OK", body: Any = None):
        return RecordingTransport(RecordingResponse(status_code, reason_phrase, body))

    return _make
