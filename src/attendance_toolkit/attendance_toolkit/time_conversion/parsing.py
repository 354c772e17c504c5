"""UTC normalization and parsing.

The backend stores every timestamp in UTC but does not always send the
``Z`` suffix. Everything that reads a timestamp goes through
:func:`normalize_to_utc` so a bare wall-clock string is never mistaken for
local time.
"""
from __future__ import annotations

import logging
import re
from datetime import datetime, timezone
from typing import Any

from ..common.datetime_utils import now_utc

logger = logging.getLogger(__name__)

_OFFSET_SUFFIX = re.compile(r"[+-]\d{2}:?\d{2}$")
_SHORT_OFFSET_SUFFIX = re.compile(r"[+-]\d{2}$")


def normalize_to_utc(raw: Any) -> str | None:
    """Return `raw` trimmed, with ``Z`` appended when it carries no timezone.

    Returns None for non-string or blank input.
    """
    if not isinstance(raw, str):
        return None
    trimmed = raw.strip()
    if not trimmed:
        return None

    has_timezone = (
        trimmed.endswith("Z")
        or _OFFSET_SUFFIX.search(trimmed) is not None
        or _SHORT_OFFSET_SUFFIX.search(trimmed) is not None
    )
    if has_timezone:
        return trimmed
    return f"{trimmed}Z"


def _from_iso(value: str) -> datetime | None:
    try:
        parsed = datetime.fromisoformat(value)
    except ValueError:
        return None
    if parsed.tzinfo is None:
        # Date-only strings come back naive; they denote UTC midnight.
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def parse_utc(raw: Any) -> datetime | None:
    """Parse a backend timestamp into an aware datetime, or None."""
    if not raw or not isinstance(raw, str):
        return None

    normalized = normalize_to_utc(raw)
    parsed = _from_iso(normalized) if normalized else None
    if parsed is not None:
        return parsed

    fallback = _from_iso(raw.strip())
    if fallback is None:
        logger.debug("unparseable timestamp %r", raw)
    return fallback


def current_utc_iso(*, now: datetime | None = None) -> str:
    """Current instant as an ISO-8601 UTC string, e.g. ``2024-01-01T10:00:00.000Z``."""
    now = now or now_utc()
    return now.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")
