from __future__ import annotations

import re
from datetime import date, datetime, timedelta, timezone

from ..core.constants import ISO_DATE_PATTERN

_ISO_DATE_RE = re.compile(ISO_DATE_PATTERN, re.ASCII)


def parse_iso_date(value: str) -> date:
    """Parse a zero-padded YYYY-MM-DD string into date.

    Raises ValueError for anything else (`2024-9-6`, `20240906`, impossible days).
    """
    if not _ISO_DATE_RE.fullmatch(value):
        raise ValueError(f"Not a YYYY-MM-DD date: {value!r}")
    return date.fromisoformat(value)


def format_iso_date(value: date) -> str:
    if isinstance(value, datetime):
        value = value.date()
    # isoformat pads years below 1000, strftime("%Y") does not
    return value.isoformat()


def now_utc() -> datetime:
    """Current time (timezone aware).

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now(timezone.utc)


def parse_timestamp(value) -> datetime:
    """Accept datetime objects or ISO strings (including a trailing 'Z')."""
    if isinstance(value, datetime):
        return value if value.tzinfo else value.replace(tzinfo=timezone.utc)
    text = str(value).strip()
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    parsed = datetime.fromisoformat(text)
    return parsed if parsed.tzinfo else parsed.replace(tzinfo=timezone.utc)


def format_timestamp(value: datetime) -> str:
    return value.isoformat()


def default_report_window(today: date, days: int) -> tuple[str, str]:
    """Return (start, end) ISO strings covering the last `days` days up to today."""
    start = today - timedelta(days=days)
    return format_iso_date(start), format_iso_date(today)
