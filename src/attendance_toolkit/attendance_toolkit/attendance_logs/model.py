from __future__ import annotations

from dataclasses import asdict, dataclass
from datetime import datetime
from typing import Any, Mapping

from ..core.enums import AttendanceStatus, WorkLocation
from ..geofence.model import ShiftRule


@dataclass(frozen=True)
class ClockinLog:
    """One clock-in/clock-out record as returned by the attendance backend."""

    log_id: Any
    clockin_time: str | None = None
    clockout_time: str | None = None
    created_at: str | None = None
    updated_at: str | None = None
    is_late: bool = False
    office: bool | None = None
    office_remote: bool | None = None
    clockin_location: str | None = None
    shift_rule: ShiftRule | None = None
    company_name: str | None = None
    break_duration: Any = None

    @classmethod
    def from_api(cls, obj: Mapping[str, Any]) -> "ClockinLog":
        company = obj.get("company") or {}
        return cls(
            log_id=obj.get("id"),
            clockin_time=obj.get("clockinTime") or None,
            clockout_time=obj.get("clockoutTime") or None,
            created_at=obj.get("createdAt") or None,
            updated_at=obj.get("updatedAt") or None,
            is_late=bool(obj.get("isLate")),
            office=obj.get("office"),
            office_remote=obj.get("officeRemote"),
            clockin_location=obj.get("clockinLocation"),
            shift_rule=ShiftRule.from_api(obj.get("shiftRule")),
            company_name=company.get("name") if isinstance(company, Mapping) else None,
            break_duration=obj.get("breakDuration") or None,
        )

    @property
    def primary_time(self) -> str | None:
        return self.clockin_time or self.clockout_time or self.created_at or self.updated_at


@dataclass(frozen=True)
class AttendanceLogRow:
    """Read-model for one line of the attendance logs table."""

    log_id: Any
    date_iso: str | None
    date_sort: datetime
    date_label: str
    day_label: str
    check_in_iso: str | None
    check_out_iso: str | None
    check_in_label: str
    check_out_label: str
    work_hours_label: str
    work_minutes: int
    status: AttendanceStatus
    location: WorkLocation
    office_name: str | None = None
    break_duration: Any = None

    def to_dict(self) -> dict:
        data = asdict(self)
        data["date_sort"] = self.date_sort.isoformat()
        data["status"] = self.status.value
        data["location"] = self.location.value
        return data
