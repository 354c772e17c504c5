from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping


@dataclass(frozen=True)
class Coordinate:
    """A (lat, lng) pair in degrees. Ranges are not validated."""

    lat: float
    lng: float

    def to_dict(self) -> dict:
        return {"lat": self.lat, "lng": self.lng}


@dataclass(frozen=True)
class ShiftRule:
    """Reference location of a shift: clock-ins within the radius count as office."""

    latitude: float | None
    longitude: float | None
    radius_meters: float | None
    name: str | None = None

    @classmethod
    def from_api(cls, obj: Mapping[str, Any] | None) -> ShiftRule | None:
        if not obj or not isinstance(obj, Mapping):
            return None
        return cls(
            latitude=obj.get("latitude"),
            longitude=obj.get("longitude"),
            radius_meters=obj.get("radiusMeters"),
            name=obj.get("name"),
        )
