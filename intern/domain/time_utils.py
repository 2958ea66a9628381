from __future__ import annotations

"""Instant parsing and display formatting shared by adapters and mappers."""

from datetime import datetime, timezone
from typing import Any

# Fixed English table; ``%b`` would follow the process locale.
_MONTH_ABBREVIATIONS = (
    "Jan",
    "Feb",
    "Mar",
    "Apr",
    "May",
    "Jun",
    "Jul",
    "Aug",
    "Sep",
    "Oct",
    "Nov",
    "Dec",
)


def as_utc(instant: datetime) -> datetime:
    """Return ``instant`` in UTC; naive values are taken to already be UTC."""
    if instant.tzinfo is None or instant.tzinfo.utcoffset(instant) is None:
        return instant.replace(tzinfo=timezone.utc)
    return instant.astimezone(timezone.utc)


def format_display_date(instant: datetime) -> str:
    """Format an instant as ``MMM d, yyyy`` (for example ``Jun 23, 2023``)."""
    utc = as_utc(instant)
    month = _MONTH_ABBREVIATIONS[utc.month - 1]
    return f"{month} {utc.day}, {utc.year:04d}"


def parse_instant(value: Any) -> datetime:
    """Parse an ISO-8601 instant (``Z`` suffix allowed) into an aware UTC datetime.

    Raises:
        ValueError: If ``value`` is empty or not an ISO-8601 timestamp.
    """
    if isinstance(value, datetime):
        return as_utc(value)
    text = str(value or "").strip()
    if not text:
        raise ValueError("Instant text must not be empty.")
    normalized = text.replace(" ", "T")
    if normalized.endswith(("Z", "z")):
        normalized = normalized[:-1] + "+00:00"
    try:
        parsed = datetime.fromisoformat(normalized)
    except ValueError as exc:
        raise ValueError(f"Invalid ISO-8601 instant: {text!r}") from exc
    return as_utc(parsed)


__all__ = ["as_utc", "format_display_date", "parse_instant"]
