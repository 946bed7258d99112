from datetime import datetime

import pytest

from commerce_cms.formatting import format_currency, format_date, ordinal


@pytest.mark.parametrize("day,expected", [
    (1, "1st"), (2, "2nd"), (3, "3rd"), (4, "4th"),
    (11, "11th"), (12, "12th"), (13, "13th"),
    (21, "21st"), (22, "22nd"), (23, "23rd"), (31, "31st"),
])
def test_ordinal(day, expected):
    assert ordinal(day) == expected


def test_format_date():
    assert format_date(datetime(2026, 10, 19, 8, 30)) == "October 19th, 2026"


def test_format_currency():
    assert format_currency(0) == "$0.00"
    assert format_currency(1234.5) == "$1,234.50"
    assert format_currency(-3) == "-$3.00"
