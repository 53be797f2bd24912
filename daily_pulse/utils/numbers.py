"""
Number and date helpers for pt-BR input and display.

Owners type amounts the Brazilian way ("3.300,50"); these helpers turn that
text into floats and format computed values back for display.
"""

import math
import re
from datetime import date, timedelta
from decimal import Decimal, ROUND_HALF_UP
from typing import Optional

_PLAIN_NUMBER = re.compile(r"^[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?$")


def parse_number_pt_br(value: Optional[str]) -> float:
    """Parse a user-typed number, accepting comma decimals.

    If the text holds both "." and ",", dots are thousands separators and
    the comma is the decimal separator. A lone comma is the decimal
    separator. Blank or malformed text yields NaN so the caller can decide
    how to report it.
    """
    if value is None:
        return math.nan

    text = re.sub(r"\s", "", str(value))
    if not text:
        return math.nan

    if "." in text and "," in text:
        normalized = text.replace(".", "").replace(",", ".", 1)
    else:
        normalized = text.replace(",", ".", 1)

    if not _PLAIN_NUMBER.match(normalized):
        return math.nan
    return float(normalized)


def round_half_away_from_zero(value: float) -> int:
    """Round to the nearest integer, ties away from zero (2.5 -> 3, -2.5 -> -3)."""
    return int(Decimal(repr(value)).quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def format_pct(value: float) -> str:
    return f"{round_half_away_from_zero(value)}%"


def format_brl(value: float) -> str:
    """Format an amount as Brazilian reais, e.g. ``R$ 1.234,56``."""
    quantized = Decimal(repr(value)).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)
    sign = "-" if quantized < 0 else ""
    us_style = f"{abs(quantized):,.2f}"
    # swap separators: 1,234.56 -> 1.234,56
    br_style = us_style.replace(",", "_").replace(".", ",").replace("_", ".")
    return f"{sign}R$ {br_style}"


def format_date_br(iso: str) -> str:
    """``2024-03-05`` -> ``05/03/2024``."""
    year, month, day = iso.split("-")
    return f"{day}/{month}/{year}"


def next_entry_date(iso: str, days: int = 1) -> str:
    """ISO date ``days`` calendar days after ``iso``."""
    return (date.fromisoformat(iso) + timedelta(days=days)).isoformat()
