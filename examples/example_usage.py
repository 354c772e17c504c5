"""Example: using the service layer directly (no Flask).

Controllers are a thin layer; the conversions live in plain functions and services.
"""

import importlib

from config import get_settings_module

from src.attendance_toolkit.attendance_toolkit.container import build_container
from src.attendance_toolkit.attendance_toolkit.geofence.distance import is_within_radius
from src.attendance_toolkit.attendance_toolkit.geofence.map_links import extract_lat_lng_from_url


def main():
    settings = importlib.import_module(get_settings_module())
    container = build_container(settings=vars(settings))

    print(container.time_service.convert("2024-01-01T10:00:00"))

    office = extract_lat_lng_from_url("https://www.google.com/maps/@30.0444,31.2357,15z")
    print(office, is_within_radius("30.0450,31.2360", office.lat, office.lng, 100))


if __name__ == "__main__":
    main()
