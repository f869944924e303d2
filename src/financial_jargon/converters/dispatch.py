from __future__ import annotations

from collections.abc import Callable
from enum import Enum

from . import months


class MonthForm(str, Enum):
    CHAR = "char"  # F..Z
    SHORT = "short"  # Jan..Dec
    NAME = "name"  # January..December
    NUMBER = "number"  # 01..12


_CONVERTERS: dict[tuple[MonthForm, MonthForm], Callable[[str], str]] = {
    (MonthForm.CHAR, MonthForm.SHORT): months.short_month_from_month_char,
    (MonthForm.CHAR, MonthForm.NAME): months.month_from_month_char,
    (MonthForm.CHAR, MonthForm.NUMBER): months.month_number_from_month_char,
    (MonthForm.SHORT, MonthForm.CHAR): months.month_char_from_short_month,
    (MonthForm.SHORT, MonthForm.NAME): months.month_from_short_month,
    (MonthForm.SHORT, MonthForm.NUMBER): months.month_number_from_short_month,
    (MonthForm.NAME, MonthForm.CHAR): months.month_char_from_month,
    (MonthForm.NAME, MonthForm.SHORT): months.short_month_from_month,
    (MonthForm.NAME, MonthForm.NUMBER): months.month_number_from_month,
    (MonthForm.NUMBER, MonthForm.CHAR): months.month_char_from_month_number,
    (MonthForm.NUMBER, MonthForm.SHORT): months.short_month_from_month_number,
    (MonthForm.NUMBER, MonthForm.NAME): months.month_from_month_number,
}


def convert_month(value: str, source: MonthForm | str, target: MonthForm | str) -> str:
    """
    Convert a month between representations, e.g.
    convert_month("z", "char", "name") -> "December".

    Converting to the same form returns the normalized value (via the month number).
    """
    src = MonthForm(source)
    dst = MonthForm(target)
    if src is dst:
        if src is MonthForm.NUMBER:
            return _CONVERTERS[(MonthForm.CHAR, MonthForm.NUMBER)](
                _CONVERTERS[(MonthForm.NUMBER, MonthForm.CHAR)](value)
            )
        return _CONVERTERS[(MonthForm.NUMBER, dst)](_CONVERTERS[(src, MonthForm.NUMBER)](value))
    return _CONVERTERS[(src, dst)](value)
