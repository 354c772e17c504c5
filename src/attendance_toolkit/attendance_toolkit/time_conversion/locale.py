from __future__ import annotations

from ..core.constants import ARABIC_LOCALE, DEFAULT_LOCALE


def resolve_locale(preferred_language: str | None = None, accept_language: str | None = None) -> str:
    """Pick the display locale for a viewer.

    An explicit ``ar`` language preference wins and maps to ``ar-EG``;
    otherwise the client's best accepted language is used, falling back to
    ``en-US``.
    """
    if preferred_language == "ar":
        return ARABIC_LOCALE
    return accept_language or DEFAULT_LOCALE
