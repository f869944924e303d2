from __future__ import annotations

from ..errors import InvalidArgumentError


def validate_abbreviation(abbreviation: str) -> str:
    """
    Check that a month abbreviation is three characters long.

    Only the first character is uppercased; the rest is returned as given, so
    "dec" becomes "Dec" but "DEC" stays "DEC" (and will not match the tables).
    """
    if len(abbreviation) == 3:
        return abbreviation[0].upper() + abbreviation[1:]
    raise InvalidArgumentError(
        f"The abbreviation {abbreviation!r} is {len(abbreviation)} long and it needs to be 3 letters long"
    )


def validate_padded_month_number(month_number: str) -> str:
    """Return a 1 or 2 character month number as a two character string ("3" -> "03")."""
    if not month_number or len(month_number) > 2:
        raise InvalidArgumentError(
            f"The month number {month_number!r} is {len(month_number)} long and it must be 1 or 2 characters long"
        )
    if len(month_number) == 1:
        month_number = f"0{month_number}"
    return month_number.upper()


def capitalize_first(month: str) -> str:
    """Uppercase the first character of a month name, leaving the rest untouched."""
    if not month:
        raise InvalidArgumentError("Month name must not be empty")
    return month[0].upper() + month[1:]
