from __future__ import annotations

import pytest

from financial_jargon import MonthForm, NotFoundError, convert_month


def test_convert_month_pairs() -> None:
    assert convert_month("z", "char", "name") == "December"
    assert convert_month("Dec", MonthForm.SHORT, MonthForm.CHAR) == "Z"
    assert convert_month("4", "number", "name") == "April"
    assert convert_month("march", "name", "number") == "03"


def test_convert_month_same_form_normalizes() -> None:
    assert convert_month("z", "char", "char") == "Z"
    assert convert_month("7", "number", "number") == "07"
    assert convert_month("december", "name", "name") == "December"


def test_convert_month_unknown_form() -> None:
    with pytest.raises(ValueError):
        convert_month("Z", "letter", "name")


def test_convert_month_miss() -> None:
    with pytest.raises(NotFoundError):
        convert_month("A", "char", "name")
