"""Locale-aware display of UTC timestamps in the viewer's timezone.

Formatting options use the same vocabulary as the browser's ``Intl``
date-time option bag (``{"hour": "numeric", "minute": "2-digit",
"hour12": True}``) so values coming from the dashboard can be passed
straight through. They are translated to a CLDR skeleton and rendered with
Babel.
"""
from __future__ import annotations

import logging
import re
from datetime import datetime, tzinfo
from typing import Any, Mapping

from babel import Locale, UnknownLocaleError
from babel.dates import format_date, format_datetime, get_datetime_format, match_skeleton

from ..common.datetime_utils import load_timezone, to_local
from ..core.constants import (
    DEFAULT_DATE_OPTIONS,
    DEFAULT_DATETIME_OPTIONS,
    DEFAULT_LOCALE,
    DEFAULT_TIME_OPTIONS,
    PLACEHOLDER,
    WEEKDAY_OPTIONS,
)
from .parsing import parse_utc

logger = logging.getLogger(__name__)

_DATE_FIELDS = {
    "weekday": {"narrow": "EEEEE", "short": "E", "long": "EEEE"},
    "year": {"numeric": "y", "2-digit": "yy"},
    "month": {"numeric": "M", "2-digit": "MM", "short": "MMM", "long": "MMMM", "narrow": "MMMMM"},
    "day": {"numeric": "d", "2-digit": "dd"},
}
_TIME_FIELDS = {
    "minute": {"numeric": "m", "2-digit": "mm"},
    "second": {"numeric": "s", "2-digit": "ss"},
}
_HOUR_WIDTHS = {"numeric": 1, "2-digit": 2}


def _load_locale(tag: str | None) -> Locale:
    try:
        return Locale.parse(tag or DEFAULT_LOCALE, sep="-")
    except (UnknownLocaleError, ValueError, TypeError):
        logger.debug("unknown locale %r, using %s", tag, DEFAULT_LOCALE)
        return Locale.parse(DEFAULT_LOCALE, sep="-")


def _uses_12_hour_clock(locale: Locale) -> bool:
    return "h" in locale.time_formats["short"].pattern


def _field(options: Mapping[str, Any], name: str, widths: Mapping[str, str]) -> str:
    value = options.get(name)
    if value is None:
        return ""
    if value not in widths:
        raise ValueError(f"invalid value {value!r} for option {name!r}")
    return widths[value]


def build_skeletons(options: Mapping[str, Any], locale: Locale) -> tuple[str, str]:
    """Translate an Intl-style option bag into (date skeleton, time skeleton)."""
    date_skeleton = "".join(_field(options, name, widths) for name, widths in _DATE_FIELDS.items())

    time_skeleton = ""
    hour = options.get("hour")
    if hour is not None:
        if hour not in _HOUR_WIDTHS:
            raise ValueError(f"invalid value {hour!r} for option 'hour'")
        hour12 = options.get("hour12")
        if hour12 is None:
            hour12 = _uses_12_hour_clock(locale)
        time_skeleton = ("h" if hour12 else "H") * _HOUR_WIDTHS[hour]
    time_skeleton += "".join(_field(options, name, widths) for name, widths in _TIME_FIELDS.items())
    return date_skeleton, time_skeleton


_FIELD_KINDS = {
    "y": "year",
    "M": "month",
    "L": "month",
    "d": "day",
    "E": "weekday",
    "c": "weekday",
    "e": "weekday",
    "h": "hour",
    "H": "hour",
    "K": "hour",
    "k": "hour",
    "m": "minute",
    "s": "second",
}
# Numeric time fields keep the locale's padding when a narrower width is asked for.
_WIDEN_ONLY = {"hour", "minute", "second"}
_PATTERN_TOKEN = re.compile(r"'[^']*'|([A-Za-z])\1*")


def adjust_pattern(pattern: str, skeleton: str) -> str:
    """Resize the fields of a matched CLDR pattern to the widths requested in `skeleton`.

    Babel's skeleton matching picks the closest available pattern but keeps
    its field widths, so ``yMMMMd`` would render as ``MMM d, y``. This resizes
    each field to the requested width, as ICU's pattern generator does.
    """
    wanted = {
        _FIELD_KINDS[m.group(1)]: len(m.group(0))
        for m in _PATTERN_TOKEN.finditer(skeleton)
        if m.group(1) in _FIELD_KINDS
    }

    def resize(match: re.Match) -> str:
        char = match.group(1)
        kind = _FIELD_KINDS.get(char)
        if kind not in wanted:
            return match.group(0)
        width = wanted[kind]
        if kind in _WIDEN_ONLY:
            width = max(width, len(match.group(0)))
        elif kind == "weekday":
            # widths 1-2 of c/e are numeric
            width = max(width, 3)
        return char * width

    return _PATTERN_TOKEN.sub(resize, pattern)


# Zero digit of CLDR numbering systems whose ten digits are contiguous code points.
_NATIVE_ZERO = {
    "arab": "٠",
    "arabext": "۰",
    "beng": "০",
    "deva": "०",
    "mymr": "၀",
}


def localize_digits(text: str, locale: Locale) -> str:
    """Swap ASCII digits for the locale's native ones (``2024`` -> ``٢٠٢٤`` in ar-EG)."""
    zero = _NATIVE_ZERO.get(locale.default_numbering_system)
    if zero is None:
        return text
    return text.translate({ord("0") + i: ord(zero) + i for i in range(10)})


def _render(value: datetime, skeleton: str, locale: Locale) -> str:
    matched = match_skeleton(skeleton, locale.datetime_skeletons)
    pattern = str(locale.datetime_skeletons[matched]) if matched else skeleton
    return format_datetime(value, adjust_pattern(pattern, skeleton), locale=locale)


def format_instant(
    instant: datetime,
    locale: str | None = DEFAULT_LOCALE,
    options: Mapping[str, Any] | None = None,
    *,
    tz: tzinfo | None = None,
) -> str:
    """Format an aware instant in the viewer's zone according to `options`."""
    options = dict(options or DEFAULT_DATETIME_OPTIONS)
    babel_locale = _load_locale(locale)

    zone_name = options.pop("timeZone", None)
    if zone_name:
        tz = load_timezone(zone_name) or tz
    local = to_local(instant, tz)

    date_skeleton, time_skeleton = build_skeletons(options, babel_locale)
    if date_skeleton and time_skeleton:
        glue = get_datetime_format("medium", locale=babel_locale)
        text = (
            glue.replace("'", "")
            .replace("{0}", _render(local, time_skeleton, babel_locale))
            .replace("{1}", _render(local, date_skeleton, babel_locale))
        )
    elif date_skeleton or time_skeleton:
        text = _render(local, date_skeleton or time_skeleton, babel_locale)
    else:
        text = format_date(local, "medium", locale=babel_locale)
    return localize_digits(text, babel_locale)


def _merged(defaults: Mapping[str, Any], options: Mapping[str, Any] | None) -> dict:
    merged = dict(defaults)
    merged.update(options or {})
    return merged


def to_local_time_string(
    raw: Any,
    locale: str | None = DEFAULT_LOCALE,
    options: Mapping[str, Any] | None = None,
    *,
    tz: tzinfo | None = None,
) -> str:
    """Local time of a UTC timestamp, e.g. ``3:05 PM``; ``—`` if missing or invalid."""
    if not raw:
        return PLACEHOLDER
    instant = parse_utc(raw)
    if instant is None:
        return PLACEHOLDER
    return format_instant(instant, locale, _merged(DEFAULT_TIME_OPTIONS, options), tz=tz)


def to_local_date_string(
    raw: Any,
    locale: str | None = DEFAULT_LOCALE,
    options: Mapping[str, Any] | None = None,
    *,
    tz: tzinfo | None = None,
) -> str:
    """Local date of a UTC timestamp, e.g. ``Jan 1, 2024``; ``—`` if missing or invalid."""
    if not raw:
        return PLACEHOLDER
    instant = parse_utc(raw)
    if instant is None:
        return PLACEHOLDER
    return format_instant(instant, locale, _merged(DEFAULT_DATE_OPTIONS, options), tz=tz)


def to_local_datetime_string(raw: Any, locale: str | None = DEFAULT_LOCALE, *, tz: tzinfo | None = None) -> str:
    if not raw:
        return PLACEHOLDER
    instant = parse_utc(raw)
    if instant is None:
        return PLACEHOLDER
    return format_instant(instant, locale, DEFAULT_DATETIME_OPTIONS, tz=tz)


def to_local_weekday_string(raw: Any, locale: str | None = DEFAULT_LOCALE, *, tz: tzinfo | None = None) -> str:
    """Long weekday name (``Monday``) of a UTC timestamp in the viewer's zone."""
    return to_local_date_string(raw, locale, WEEKDAY_OPTIONS, tz=tz)
