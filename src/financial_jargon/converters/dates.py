from __future__ import annotations

from datetime import date

from babel import Locale, UnknownLocaleError
from babel.dates import get_month_names

from ..errors import InvalidArgumentError
from .tables import MONTH_BY_MONTH_OF_YEAR, MONTH_CODE, SHORT_MONTH_BY_MONTH_OF_YEAR, lookup

# POSIX names for the untranslated locale
_NEUTRAL_LOCALES = frozenset(("C", "POSIX"))


def month_char_from_date(d: date) -> str:
    """Map a calendar month to the futures month letter."""
    return lookup(MONTH_CODE, d.month, "month")


def month_number_from_date(d: date) -> str:
    """Return MM (01-12)."""
    return f"{d.month:02d}"


def short_month_from_date(d: date) -> str:
    return lookup(SHORT_MONTH_BY_MONTH_OF_YEAR, d.month, "month")


def month_from_date(d: date, locale: str | None = None) -> str:
    """
    Full month name for the date's month.

    With locale=None (or "C"/"POSIX") the fixed English names are used. Otherwise
    the stand-alone wide name comes from the CLDR data shipped with Babel
    (e.g. "de_DE.UTF-8" -> "Dezember"); the process locale is never touched.
    """
    if not locale or locale.split(".", 1)[0] in _NEUTRAL_LOCALES:
        return lookup(MONTH_BY_MONTH_OF_YEAR, d.month, "month")
    try:
        loc = Locale.parse(locale)
    except (UnknownLocaleError, ValueError):
        raise InvalidArgumentError(f"Unsupported locale: {locale!r}") from None
    return get_month_names("wide", context="stand-alone", locale=loc)[d.month]
