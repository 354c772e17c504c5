from __future__ import annotations

from ..core.enums import WorkLocation
from .distance import is_within_radius
from .model import ShiftRule


def derive_work_location(
    office: bool | None,
    clockin_location: str | None,
    shift_rule: ShiftRule | None,
    office_remote: bool | None = None,
) -> WorkLocation:
    """Decide office/home for a clock-in.

    The backend's ``office`` flag wins when it is True. When it is False the
    clock-in location is re-checked against the shift radius. Older records
    only carry ``officeRemote``.
    """
    if office is True:
        return WorkLocation.OFFICE
    if office is False:
        if shift_rule is not None and is_within_radius(
            clockin_location, shift_rule.latitude, shift_rule.longitude, shift_rule.radius_meters
        ):
            return WorkLocation.OFFICE
        return WorkLocation.HOME

    if office_remote is True:
        return WorkLocation.OFFICE
    if office_remote is False:
        return WorkLocation.HOME
    return WorkLocation.UNKNOWN
