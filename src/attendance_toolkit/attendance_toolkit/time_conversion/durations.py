from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta, tzinfo
from typing import Any

from ..common.datetime_utils import now_utc, to_local
from .parsing import parse_utc


@dataclass(frozen=True)
class DurationSummary:
    """Worked time as shown in the logs table: ``label`` like ``7h 30m`` and whole minutes."""

    label: str
    minutes: int


def duration_seconds(start_raw: Any, end_raw: Any = None, *, now: datetime | None = None) -> int:
    """Whole seconds from `start_raw` to `end_raw` (or now); never negative, 0 on bad input."""
    if not start_raw:
        return 0

    start = parse_utc(start_raw)
    end = parse_utc(end_raw) if end_raw else (now or now_utc())
    if start is None or end is None:
        return 0

    return max(0, (end - start) // timedelta(seconds=1))


def is_today(raw: Any, *, now: datetime | None = None, tz: tzinfo | None = None) -> bool:
    """True if `raw` falls on the viewer's current calendar day.

    The comparison happens in `tz` (default: the process's local zone), not in
    UTC.
    """
    if not raw:
        return False
    instant = parse_utc(raw)
    if instant is None:
        return False

    now = now or now_utc()
    return to_local(instant, tz).date() == to_local(now, tz).date()


def duration_summary(start_raw: Any, end_raw: Any) -> DurationSummary:
    if not start_raw or not end_raw:
        return DurationSummary(label="0h", minutes=0)

    seconds = duration_seconds(start_raw, end_raw)
    if seconds <= 0:
        return DurationSummary(label="0h", minutes=0)

    total_minutes = seconds // 60
    hours, minutes = divmod(total_minutes, 60)
    parts = []
    if hours > 0:
        parts.append(f"{hours}h")
    if minutes > 0:
        parts.append(f"{minutes}m")
    return DurationSummary(label=" ".join(parts) if parts else "0h", minutes=total_minutes)


def format_hours(hours: float | None) -> str:
    """Fractional hours (e.g. 7.5) as ``7h 30m``."""
    if not hours:
        return "0h 0m"
    whole = int(hours // 1)
    minutes = int((hours - whole) * 60 // 1)
    return f"{whole}h {minutes}m"
