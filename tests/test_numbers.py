import math

import pytest

from profitscope.services.numbers import (
    format_currency,
    format_percentage,
    parse_amount,
    to_half_width,
)


def test_to_half_width():
    assert to_half_width("１２３,４５6") == "123,456"


@pytest.mark.parametrize(
    "text, expected",
    [
        ("１０００", 1000.0),
        ("12.5", 12.5),
        ("-30", -30.0),
        (" 7 ", 7.0),
        ("", 0.0),
        ("abc", 0.0),
        (None, 0.0),
        ("inf", 0.0),
        ("nan", 0.0),
        ("12abc", 12.0),
        ("1_000", 1.0),
        ("1e3", 1000.0),
        (".5", 0.5),
        ("1e999", 0.0),
    ],
)
def test_parse_amount(text, expected):
    assert parse_amount(text) == expected


@pytest.mark.parametrize(
    "value, expected",
    [
        (0, "￥0"),
        (1234567, "￥1,234,567"),
        (1234.5, "￥1,235"),
        (-2500, "-￥2,500"),
        (math.inf, "計算不可"),
        (-math.inf, "計算不可"),
        (math.nan, "計算不可"),
    ],
)
def test_format_currency(value, expected):
    assert format_currency(value) == expected


def test_format_percentage():
    assert format_percentage(60) == "60.00%"
    assert format_percentage(-3.14159) == "-3.14%"
