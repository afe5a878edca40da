"""Utility helpers for rendering dates in the UI."""
from __future__ import annotations

from datetime import date, datetime
from typing import Any, Optional


DISPLAY_FORMAT = "%b %d, %Y"


def _coerce_date(value: Any) -> Optional[date]:
    """Best-effort conversion of an ISO date or datetime string to a ``date``."""

    if value is None:
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str):
        return None
    text = value.strip()
    if not text:
        return None
    try:
        return date.fromisoformat(text[:10])
    except ValueError:
        return None


def format_display_date(value: Any, default: str = "—") -> str:
    """Format an ISO date as ``Jan 15, 2024``.

    Values that cannot be parsed are returned unchanged so a bad record still
    shows what the server sent.
    """

    parsed = _coerce_date(value)
    if parsed is None:
        return str(value) if value else default
    return parsed.strftime(DISPLAY_FORMAT)


def today_iso() -> str:
    return date.today().isoformat()


def to_date(value: Any) -> Optional[date]:
    """Public wrapper exposing the internal conversion helper."""

    return _coerce_date(value)


__all__ = [
    "DISPLAY_FORMAT",
    "format_display_date",
    "today_iso",
    "to_date",
]
