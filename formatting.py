"""Display formatting for currency, percentages and counts."""

from __future__ import annotations

import math
from typing import Any

CURRENCY_SYMBOL = "₹"

_CURRENCY_UNITS = (
    (1_000_000_000, "B"),
    (1_000_000, "M"),
    (1_000, "K"),
)


def _as_number(value: Any) -> float | None:
    if value is None:
        return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    if math.isnan(number):
        return None
    return number


def _grouped(number: float) -> str:
    # Thousands separators with up to three fraction digits.
    if number.is_integer():
        return f"{int(number):,}"
    return f"{number:,.3f}".rstrip("0").rstrip(".")


def format_currency(value: Any) -> str:
    """Abbreviate to K/M/B with one decimal from a thousand upwards."""
    number = _as_number(value)
    if number is None:
        return f"{CURRENCY_SYMBOL}0"
    for threshold, suffix in _CURRENCY_UNITS:
        if number >= threshold:
            return f"{CURRENCY_SYMBOL}{number / threshold:.1f}{suffix}"
    return f"{CURRENCY_SYMBOL}{_grouped(number)}"


def format_percentage(value: Any) -> str:
    number = _as_number(value)
    if number is None:
        return "0.0%"
    return f"{number:.1f}%"


def format_number(value: Any) -> str:
    number = _as_number(value)
    if number is None:
        return "0"
    return _grouped(number)
