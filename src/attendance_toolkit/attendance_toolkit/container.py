from __future__ import annotations

from dataclasses import dataclass

from .attendance_logs.service import AttendanceLogService
from .common.datetime_utils import load_timezone
from .core.constants import DEFAULT_LOCALE
from .time_conversion.service import TimeDisplayService


@dataclass(frozen=True)
class Container:
    time_service: TimeDisplayService
    attendance_log_service: AttendanceLogService


def build_container(*, settings: dict) -> Container:
    time_service = TimeDisplayService(
        default_locale=str(settings.get("DEFAULT_LOCALE") or DEFAULT_LOCALE),
        tz=load_timezone(settings.get("DISPLAY_TIMEZONE")),
    )
    attendance_log_service = AttendanceLogService(time_service)

    return Container(
        time_service=time_service,
        attendance_log_service=attendance_log_service,
    )
