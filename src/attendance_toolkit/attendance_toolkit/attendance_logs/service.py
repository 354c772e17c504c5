from __future__ import annotations

from datetime import date, datetime, time, timedelta, timezone
from typing import Any, Iterable

from ..core.enums import AttendanceStatus, WorkLocation
from ..geofence.location import derive_work_location
from ..time_conversion.parsing import parse_utc
from ..time_conversion.service import TimeDisplayService
from .model import AttendanceLogRow, ClockinLog

_ENVELOPE_KEYS = ("value", "data", "items", "results")
_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


def unwrap_items(payload: Any) -> list:
    """Return the list of records from a bare list or a paginated envelope."""
    if isinstance(payload, list):
        return payload
    if isinstance(payload, dict):
        for key in _ENVELOPE_KEYS:
            if isinstance(payload.get(key), list):
                return payload[key]
    return []


def derive_status(log: ClockinLog) -> AttendanceStatus:
    if not log.clockin_time and not log.clockout_time:
        return AttendanceStatus.ABSENT
    if log.is_late:
        return AttendanceStatus.LATE
    return AttendanceStatus.PRESENT


class AttendanceLogService:
    """Turns backend clock-in logs into table rows and filters them."""

    def __init__(self, time_display: TimeDisplayService):
        self._time = time_display

    def build_row(self, log: ClockinLog, locale: str | None = None) -> AttendanceLogRow:
        primary = log.primary_time
        duration = self._time.duration_summary(log.clockin_time, log.clockout_time)
        location = derive_work_location(log.office, log.clockin_location, log.shift_rule, log.office_remote)

        return AttendanceLogRow(
            log_id=log.log_id,
            date_iso=primary,
            date_sort=parse_utc(primary) or _EPOCH,
            date_label=self._time.date(primary, locale),
            day_label=self._time.weekday(primary, locale),
            check_in_iso=log.clockin_time,
            check_out_iso=log.clockout_time,
            check_in_label=self._time.time(log.clockin_time, locale),
            check_out_label=self._time.time(log.clockout_time, locale),
            work_hours_label=duration.label,
            work_minutes=duration.minutes,
            status=derive_status(log),
            location=location,
            office_name=log.company_name or (log.shift_rule.name if log.shift_rule else None),
            break_duration=log.break_duration,
        )

    def build_rows(self, payload: Any, locale: str | None = None) -> list[AttendanceLogRow]:
        logs = [ClockinLog.from_api(item) for item in unwrap_items(payload) if isinstance(item, dict)]
        return [self.build_row(log, locale) for log in logs]

    def _day_start(self, day: date) -> datetime:
        local = datetime.combine(day, time.min)
        tz = self._time.tz
        return local.replace(tzinfo=tz) if tz is not None else local.astimezone()

    def filter_rows(
        self,
        rows: Iterable[AttendanceLogRow],
        *,
        location: str = "all",
        status: str = "all",
        date_from: date | None = None,
        date_to: date | None = None,
        sort_by: str = "newest",
    ) -> list[AttendanceLogRow]:
        result = list(rows)

        if location in (WorkLocation.OFFICE.value, WorkLocation.HOME.value):
            result = [r for r in result if r.location.value == location]
        if status != "all":
            result = [r for r in result if r.status.value == status]
        if date_from:
            start = self._day_start(date_from)
            result = [r for r in result if r.date_sort >= start]
        if date_to:
            end = self._day_start(date_to) + timedelta(days=1) - timedelta(milliseconds=1)
            result = [r for r in result if r.date_sort <= end]

        result.sort(key=lambda r: r.date_sort, reverse=sort_by == "newest")
        return result
