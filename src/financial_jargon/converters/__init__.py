from __future__ import annotations

from .dates import month_char_from_date, month_from_date, month_number_from_date, short_month_from_date
from .dispatch import MonthForm, convert_month
from .exchanges import exchange_name_from_code
from .months import (
    month_char_from_month,
    month_char_from_month_number,
    month_char_from_short_month,
    month_from_month_char,
    month_from_month_number,
    month_from_short_month,
    month_number_from_month,
    month_number_from_month_char,
    month_number_from_short_month,
    short_month_from_month,
    short_month_from_month_char,
    short_month_from_month_number,
)
from .validation import validate_abbreviation, validate_padded_month_number

__all__ = [
    "MonthForm",
    "convert_month",
    "exchange_name_from_code",
    "month_char_from_date",
    "month_char_from_month",
    "month_char_from_month_number",
    "month_char_from_short_month",
    "month_from_date",
    "month_from_month_char",
    "month_from_month_number",
    "month_from_short_month",
    "month_number_from_date",
    "month_number_from_month",
    "month_number_from_month_char",
    "month_number_from_short_month",
    "short_month_from_date",
    "short_month_from_month",
    "short_month_from_month_char",
    "short_month_from_month_number",
    "validate_abbreviation",
    "validate_padded_month_number",
]
