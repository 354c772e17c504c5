from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest

from src.attendance_toolkit.attendance_toolkit.time_conversion.parsing import (
    current_utc_iso,
    normalize_to_utc,
    parse_utc,
)


def test_normalize_appends_z_when_timezone_missing():
    assert normalize_to_utc("2024-01-01T10:00:00") == "2024-01-01T10:00:00Z"


@pytest.mark.parametrize(
    "value",
    [
        "2024-01-01T10:00:00Z",
        "2024-01-01T10:00:00+02:00",
        "2024-01-01T10:00:00+0200",
        "2024-01-01T10:00:00-05",
    ],
)
def test_normalize_keeps_explicit_offsets(value):
    assert normalize_to_utc(value) == value


def test_normalize_trims_whitespace():
    assert normalize_to_utc("  2024-01-01T10:00:00Z  ") == "2024-01-01T10:00:00Z"
    assert normalize_to_utc(" 2024-01-01T10:00:00 ") == "2024-01-01T10:00:00Z"


@pytest.mark.parametrize("value", [None, "", "   ", 123, ["2024-01-01"]])
def test_normalize_rejects_blank_and_non_strings(value):
    assert normalize_to_utc(value) is None


@pytest.mark.parametrize(
    "value",
    ["2024-01-01T10:00:00", "2024-01-01T10:00:00.250", "2024-01-01T10:00:00+02:00", "2024-01-01"],
)
def test_normalize_is_idempotent(value):
    once = normalize_to_utc(value)
    assert normalize_to_utc(once) == once


def test_parse_treats_bare_timestamp_as_utc():
    assert parse_utc("2024-01-01T10:00:00") == datetime(2024, 1, 1, 10, 0, tzinfo=timezone.utc)


def test_parse_honours_offset():
    parsed = parse_utc("2024-01-01T10:00:00+02:00")
    assert parsed.utcoffset() == timedelta(hours=2)
    assert parsed == datetime(2024, 1, 1, 8, 0, tzinfo=timezone.utc)


def test_parse_date_only_is_utc_midnight():
    assert parse_utc("2024-03-05") == datetime(2024, 3, 5, tzinfo=timezone.utc)


@pytest.mark.parametrize("value", [None, "", "garbage", "2024-13-45T99:00:00", 42])
def test_parse_returns_none_for_bad_input(value):
    assert parse_utc(value) is None


def test_current_utc_iso_uses_millisecond_z_format():
    now = datetime(2024, 1, 1, 10, 0, 0, 123456, tzinfo=timezone.utc)
    assert current_utc_iso(now=now) == "2024-01-01T10:00:00.123Z"


def test_current_utc_iso_converts_other_offsets():
    now = datetime(2024, 1, 1, 12, 0, tzinfo=timezone(timedelta(hours=2)))
    assert current_utc_iso(now=now) == "2024-01-01T10:00:00.000Z"
