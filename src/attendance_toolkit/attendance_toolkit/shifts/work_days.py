"""Conversion between day names and the backend's WorkDay enum values."""
from __future__ import annotations

from typing import Any, Callable

from ..core.enums import WorkDay

# Display order: Saturday first.
DAY_ORDER = [day.name.lower() for day in sorted(WorkDay)]

Translator = Callable[[str, str], str | None]


def day_names_to_values(day_names: Any) -> list[int]:
    """['monday', 'Tuesday'] -> [3, 4]; unknown names are dropped."""
    if not isinstance(day_names, (list, tuple)):
        return []
    values = []
    for name in day_names:
        if not isinstance(name, str):
            continue
        day = WorkDay.__members__.get(name.upper())
        if day is not None:
            values.append(int(day))
    return values


def values_to_day_names(values: Any) -> list[str]:
    """[3, 4] -> ['monday', 'tuesday']. A single int is accepted as well."""
    if not isinstance(values, (list, tuple)):
        if isinstance(values, int) and not isinstance(values, bool) and 0 < values <= 7:
            return [WorkDay(values).name.lower()]
        return []
    names = []
    for value in values:
        try:
            names.append(WorkDay(value).name.lower())
        except ValueError:
            continue
    return names


def format_work_days(work_days: Any, translate: Translator | None = None) -> str:
    """Human label for a shift's work days, e.g. ``Sunday, Monday``; ``-`` when empty."""
    if not work_days:
        return "-"

    names = values_to_day_names(work_days)
    if not names:
        return "-"

    def label(name: str) -> str:
        default = name.capitalize()
        if translate is None:
            return default
        return translate(f"shifts.days.{name}", default) or default

    return ", ".join(label(name) for name in sorted(names, key=DAY_ORDER.index))
