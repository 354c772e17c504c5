from datetime import datetime, timezone
from zoneinfo import ZoneInfo

from src.attendance_toolkit.attendance_toolkit.time_conversion.locale import resolve_locale
from src.attendance_toolkit.attendance_toolkit.time_conversion.service import TimeDisplayService


def fixed_clock():
    return datetime(2024, 1, 1, 18, 0, tzinfo=timezone.utc)


def make_service(tz="UTC", locale="en-US") -> TimeDisplayService:
    return TimeDisplayService(default_locale=locale, tz=ZoneInfo(tz), clock=fixed_clock)


def test_resolve_locale_prefers_arabic_setting():
    assert resolve_locale("ar", "en-GB") == "ar-EG"


def test_resolve_locale_uses_client_language_then_default():
    assert resolve_locale(None, "fr-FR") == "fr-FR"
    assert resolve_locale("en", None) == "en-US"
    assert resolve_locale() == "en-US"


def test_convert_returns_every_display_form():
    svc = make_service()
    result = svc.convert("2024-01-01T15:05:00")

    assert result["utc"] == "2024-01-01T15:05:00Z"
    assert " ".join(result["time"].split()) == "3:05 PM"
    assert result["date"] == "Jan 1, 2024"
    assert result["weekday"] == "Monday"
    assert result["is_today"] is True


def test_convert_invalid_value_uses_sentinels():
    result = make_service().convert("garbage")

    assert result["time"] == "—"
    assert result["date"] == "—"
    assert result["datetime"] == "—"
    assert result["is_today"] is False


def test_service_uses_injected_clock_for_open_durations():
    svc = make_service()
    assert svc.duration_seconds("2024-01-01T17:00:00Z") == 3600
    assert svc.current_utc_iso() == "2024-01-01T18:00:00.000Z"


def test_service_is_today_uses_display_zone():
    # 18:00 UTC is already 2 January in Tokyo
    svc = make_service(tz="Asia/Tokyo")
    assert svc.is_today("2024-01-01T12:00:00Z") is False
    assert svc.is_today("2024-01-01T16:00:00Z") is True


def test_explicit_locale_overrides_default():
    svc = make_service(locale="ar-EG")
    assert svc.date("2024-01-01T15:05:00Z", "en-US") == "Jan 1, 2024"
    assert svc.date("2024-01-01T15:05:00Z") != "Jan 1, 2024"
