"""Geofence checks for clock-in locations."""
from __future__ import annotations

import math
from typing import Any

from ..core.constants import EARTH_RADIUS_M, EXACT_MATCH_TOLERANCE_DEG
from .model import Coordinate


def haversine_distance_meters(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """
    Calculate distance (in meters) between two GPS coordinates.
    """
    phi1 = math.radians(lat1)
    phi2 = math.radians(lat2)
    dphi = math.radians(lat2 - lat1)
    dlambda = math.radians(lon2 - lon1)

    a = math.sin(dphi / 2) ** 2 + math.cos(phi1) * math.cos(phi2) * math.sin(dlambda / 2) ** 2
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))

    return EARTH_RADIUS_M * c


def _to_float(token: str) -> float | None:
    if "_" in token:
        return None
    try:
        value = float(token.strip())
    except ValueError:
        return None
    return value if math.isfinite(value) else None


def parse_coordinate_string(value: Any) -> Coordinate | None:
    """Parse ``"lat,lng"`` into a Coordinate; None unless exactly two numeric parts."""
    if not value or not isinstance(value, str):
        return None
    parts = value.split(",")
    if len(parts) != 2:
        return None
    lat = _to_float(parts[0])
    lng = _to_float(parts[1])
    if lat is None or lng is None:
        return None
    return Coordinate(lat=lat, lng=lng)


def is_within_radius(
    clockin_location: Any,
    ref_lat: float | None,
    ref_lng: float | None,
    radius_meters: float | None,
) -> bool:
    """Return True if the "lat,lng" clock-in location lies within the shift radius.

    A reference latitude or longitude of exactly 0 is treated as missing.
    A radius of 0 is legal.
    """
    if not clockin_location or not ref_lat or not ref_lng or radius_meters is None:
        return False

    coords = parse_coordinate_string(clockin_location)
    if coords is None:
        return False

    # Same point as the reference (within ~1 m): inside even with a zero radius.
    if abs(coords.lat - ref_lat) < EXACT_MATCH_TOLERANCE_DEG and abs(coords.lng - ref_lng) < EXACT_MATCH_TOLERANCE_DEG:
        return True

    distance = haversine_distance_meters(coords.lat, coords.lng, ref_lat, ref_lng)
    return distance <= radius_meters
