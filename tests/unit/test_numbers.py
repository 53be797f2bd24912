#!/usr/bin/env python3
"""Unit tests for pt-BR number parsing and display helpers."""

import math

import pytest

from daily_pulse.utils.numbers import (
    format_brl,
    format_date_br,
    format_pct,
    next_entry_date,
    parse_number_pt_br,
    round_half_away_from_zero,
)


@pytest.mark.parametrize(
    "text, expected",
    [
        ("3300", 3300.0),
        ("3300,50", 3300.5),
        ("3.300,50", 3300.5),
        ("1.234.567,89", 1234567.89),
        (" 3 300,5 ", 3300.5),
        ("3.5", 3.5),
        ("0", 0.0),
    ],
)
def test_parse_number_pt_br(text, expected) -> None:
    assert parse_number_pt_br(text) == pytest.approx(expected)


@pytest.mark.parametrize("text", ["", "   ", None, "abc", "1,2,3", "R$ 10", "nan", "inf"])
def test_parse_number_pt_br_rejects_garbage(text) -> None:
    assert math.isnan(parse_number_pt_br(text))


@pytest.mark.parametrize(
    "value, expected",
    [(2.5, 3), (0.5, 1), (12.4, 12), (12.5, 13), (-2.5, -3), (0.0, 0), (49.09, 49)],
)
def test_round_half_away_from_zero(value, expected) -> None:
    assert round_half_away_from_zero(value) == expected


def test_format_pct() -> None:
    assert format_pct(12.5) == "13%"
    assert format_pct(-49.09) == "-49%"


@pytest.mark.parametrize(
    "value, expected",
    [
        (1234.56, "R$ 1.234,56"),
        (0, "R$ 0,00"),
        (30000.0, "R$ 30.000,00"),
        (1234567.891, "R$ 1.234.567,89"),
        (-15.5, "-R$ 15,50"),
    ],
)
def test_format_brl(value, expected) -> None:
    assert format_brl(value) == expected


def test_format_date_br() -> None:
    assert format_date_br("2024-03-05") == "05/03/2024"


def test_next_entry_date_rolls_over_month_and_year() -> None:
    assert next_entry_date("2024-03-05") == "2024-03-06"
    assert next_entry_date("2024-01-31") == "2024-02-01"
    assert next_entry_date("2024-12-31") == "2025-01-01"
    assert next_entry_date("2024-02-28", days=2) == "2024-03-01"
