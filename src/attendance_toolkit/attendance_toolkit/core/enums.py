from __future__ import annotations

from enum import Enum, IntEnum


class WorkDay(IntEnum):
    """Backend work-day enum. Values are sequential (1..7), not bit flags."""

    SATURDAY = 1
    SUNDAY = 2
    MONDAY = 3
    TUESDAY = 4
    WEDNESDAY = 5
    THURSDAY = 6
    FRIDAY = 7


class AttendanceStatus(str, Enum):
    """Status shown for one clock-in log."""

    PRESENT = "present"
    LATE = "late"
    ABSENT = "absent"


class WorkLocation(str, Enum):
    """Where an employee worked from, as derived from a clock-in log."""

    OFFICE = "office"
    HOME = "home"
    UNKNOWN = "unknown"
