from __future__ import annotations

from datetime import date, datetime, timezone, tzinfo
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError


def parse_iso_date(value: str) -> date:
    """Calendar day of a ``YYYY-MM-DD`` filter value; raises ValueError otherwise."""
    return datetime.strptime(value, "%Y-%m-%d").date()


def now_utc() -> datetime:
    """Current instant, timezone-aware in UTC; the default clock of the time helpers."""
    return datetime.now(timezone.utc)


def load_timezone(name: str | None) -> tzinfo | None:
    """Resolve an IANA zone name; empty or unknown names mean the local zone (None)."""
    if not name:
        return None
    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError):
        return None


def to_local(instant: datetime, tz: tzinfo | None = None) -> datetime:
    """Convert an aware instant into `tz`, or the process's local zone when tz is None."""
    return instant.astimezone(tz)
