"""Display defaults and geofence constants shared by the time and location helpers."""

# Shown in place of a timestamp that is missing or cannot be parsed.
PLACEHOLDER = "—"

DEFAULT_LOCALE = "en-US"
ARABIC_LOCALE = "ar-EG"

EARTH_RADIUS_M = 6371000

# ~1.1 m at the equator; below this on both axes two points count as identical.
EXACT_MATCH_TOLERANCE_DEG = 0.00001

DEFAULT_TIME_OPTIONS = {"hour": "numeric", "minute": "2-digit", "hour12": True}
DEFAULT_DATE_OPTIONS = {"year": "numeric", "month": "short", "day": "numeric"}
DEFAULT_DATETIME_OPTIONS = {**DEFAULT_DATE_OPTIONS, **DEFAULT_TIME_OPTIONS}
WEEKDAY_OPTIONS = {"year": None, "month": None, "day": None, "weekday": "long"}
