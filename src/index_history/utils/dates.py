"""Epoch and calendar date helpers."""

from __future__ import annotations

import datetime


def epoch_to_date(seconds: int | float) -> datetime.date:
    """Return the UTC calendar date containing the given epoch second."""
    return datetime.datetime.fromtimestamp(seconds, tz=datetime.timezone.utc).date()


def epoch_to_iso_date(seconds: int | float) -> str:
    """Format an epoch second as a ``YYYY-MM-DD`` UTC date key.

    Time of day is truncated; no offset other than UTC is applied.
    """
    return epoch_to_date(seconds).isoformat()
