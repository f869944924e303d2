from __future__ import annotations

import pytest

from financial_jargon import InvalidArgumentError, validate_abbreviation, validate_padded_month_number
from financial_jargon.converters.validation import capitalize_first


def test_abbreviation_uppercases_first_char_only() -> None:
    assert validate_abbreviation("dec") == "Dec"
    assert validate_abbreviation("Dec") == "Dec"
    # rest of the string is left alone
    assert validate_abbreviation("dEC") == "DEC"


@pytest.mark.parametrize("bad", ["December", "de", ""])
def test_abbreviation_wrong_length(bad: str) -> None:
    with pytest.raises(InvalidArgumentError):
        validate_abbreviation(bad)


def test_invalid_argument_is_value_error() -> None:
    with pytest.raises(ValueError):
        validate_abbreviation("January")


def test_padded_month_number() -> None:
    assert validate_padded_month_number("3") == "03"
    assert validate_padded_month_number("03") == "03"
    assert validate_padded_month_number("12") == "12"


@pytest.mark.parametrize("bad", ["", "123"])
def test_padded_month_number_wrong_length(bad: str) -> None:
    with pytest.raises(InvalidArgumentError):
        validate_padded_month_number(bad)


def test_capitalize_first() -> None:
    assert capitalize_first("december") == "December"
    assert capitalize_first("dECEMBER") == "DECEMBER"
    with pytest.raises(InvalidArgumentError):
        capitalize_first("")
