"""Canonical daily price record and the date-keyed history map."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, TypeAdapter


class PriceRecord(BaseModel):
    """One trading day. ``None`` marks a value the provider did not supply."""

    # strict: booleans and numeric strings in the payload are rejected, not coerced
    model_config = ConfigDict(frozen=True, strict=True)

    open: float | None = None
    high: float | None = None
    low: float | None = None
    close: float | None = None
    volume: int | None = None
    adjclose: float | None = None


# ISO ``YYYY-MM-DD`` UTC date -> record, in provider timestamp order
HistoryMap = dict[str, PriceRecord]

PRICE_RECORD_FIELDS = list(PriceRecord.model_fields.keys())

_HISTORY_ADAPTER = TypeAdapter(HistoryMap)


def history_to_json(history: HistoryMap) -> str:
    """Serialize a history map to a compact JSON object string."""
    return _HISTORY_ADAPTER.dump_json(history).decode("utf-8")
