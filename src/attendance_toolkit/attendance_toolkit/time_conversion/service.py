from __future__ import annotations

from datetime import datetime, tzinfo
from typing import Any, Callable, Mapping

from ..common.datetime_utils import now_utc
from ..core.constants import DEFAULT_LOCALE
from .durations import DurationSummary, duration_seconds, duration_summary, is_today
from .formatting import (
    to_local_date_string,
    to_local_datetime_string,
    to_local_time_string,
    to_local_weekday_string,
)
from .parsing import current_utc_iso, normalize_to_utc


class TimeDisplayService:
    """Binds a default locale, display zone and clock to the time helpers."""

    def __init__(
        self,
        *,
        default_locale: str = DEFAULT_LOCALE,
        tz: tzinfo | None = None,
        clock: Callable[[], datetime] = now_utc,
    ):
        self._default_locale = default_locale
        self._tz = tz
        self._clock = clock

    @property
    def tz(self) -> tzinfo | None:
        return self._tz

    @property
    def default_locale(self) -> str:
        return self._default_locale

    def now(self) -> datetime:
        return self._clock()

    def current_utc_iso(self) -> str:
        return current_utc_iso(now=self._clock())

    def time(self, raw: Any, locale: str | None = None, options: Mapping[str, Any] | None = None) -> str:
        return to_local_time_string(raw, locale or self._default_locale, options, tz=self._tz)

    def date(self, raw: Any, locale: str | None = None, options: Mapping[str, Any] | None = None) -> str:
        return to_local_date_string(raw, locale or self._default_locale, options, tz=self._tz)

    def date_time(self, raw: Any, locale: str | None = None) -> str:
        return to_local_datetime_string(raw, locale or self._default_locale, tz=self._tz)

    def weekday(self, raw: Any, locale: str | None = None) -> str:
        return to_local_weekday_string(raw, locale or self._default_locale, tz=self._tz)

    def duration_seconds(self, start_raw: Any, end_raw: Any = None) -> int:
        return duration_seconds(start_raw, end_raw, now=self._clock())

    def duration_summary(self, start_raw: Any, end_raw: Any) -> DurationSummary:
        return duration_summary(start_raw, end_raw)

    def is_today(self, raw: Any) -> bool:
        return is_today(raw, now=self._clock(), tz=self._tz)

    def convert(self, raw: Any, locale: str | None = None) -> dict:
        """Every display form of one timestamp, as served by the API."""
        return {
            "utc": normalize_to_utc(raw),
            "time": self.time(raw, locale),
            "date": self.date(raw, locale),
            "datetime": self.date_time(raw, locale),
            "weekday": self.weekday(raw, locale),
            "is_today": self.is_today(raw),
        }
