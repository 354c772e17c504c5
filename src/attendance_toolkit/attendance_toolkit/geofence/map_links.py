from __future__ import annotations

import re
from typing import Any

from .model import Coordinate

_NUMBER = r"([+-]?\d+\.?\d*)"

# Tried in order; the first that yields two numbers wins.
_URL_PATTERNS = (
    # https://www.google.com/maps?q=lat,lng
    re.compile(rf"[?&]q={_NUMBER},{_NUMBER}"),
    # https://www.google.com/maps/@lat,lng,zoom
    re.compile(rf"@{_NUMBER},{_NUMBER}"),
    # https://maps.google.com/maps?ll=lat,lng
    re.compile(rf"[?&]ll={_NUMBER},{_NUMBER}"),
)


def extract_lat_lng_from_url(url: Any) -> Coordinate | None:
    """Pull the coordinates out of a shared map link, or None."""
    if not url or not isinstance(url, str):
        return None

    for pattern in _URL_PATTERNS:
        match = pattern.search(url)
        if not match:
            continue
        try:
            return Coordinate(lat=float(match.group(1)), lng=float(match.group(2)))
        except ValueError:
            continue
    return None
