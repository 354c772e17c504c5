from src.attendance_toolkit.attendance_toolkit.core.enums import WorkLocation
from src.attendance_toolkit.attendance_toolkit.geofence.location import derive_work_location
from src.attendance_toolkit.attendance_toolkit.geofence.model import ShiftRule

RULE = ShiftRule(latitude=30.0444, longitude=31.2357, radius_meters=150, name="HQ")


def test_office_flag_wins():
    assert derive_work_location(True, None, None) == WorkLocation.OFFICE


def test_remote_flag_rechecked_against_shift_radius():
    assert derive_work_location(False, "30.0445,31.2358", RULE) == WorkLocation.OFFICE
    assert derive_work_location(False, "30.1000,31.3000", RULE) == WorkLocation.HOME


def test_remote_without_rule_is_home():
    assert derive_work_location(False, "30.0444,31.2357", None) == WorkLocation.HOME


def test_legacy_office_remote_flag():
    assert derive_work_location(None, None, None, office_remote=True) == WorkLocation.OFFICE
    assert derive_work_location(None, None, None, office_remote=False) == WorkLocation.HOME
    assert derive_work_location(None, None, None) == WorkLocation.UNKNOWN


def test_shift_rule_from_api():
    rule = ShiftRule.from_api({"latitude": 30.0444, "longitude": 31.2357, "radiusMeters": 150, "name": "HQ"})
    assert rule == RULE
    assert ShiftRule.from_api(None) is None
    assert ShiftRule.from_api("HQ") is None
    assert ShiftRule.from_api([30.0, 31.0]) is None
