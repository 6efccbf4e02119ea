"""Column alias resolution and typed accessors for loosely structured rows."""

from __future__ import annotations

import math
from typing import Any, Iterable, Mapping, Sequence

import pandas as pd

RowRecord = Mapping[str, Any]

FIELD_ALIASES: dict[str, tuple[str, ...]] = {
    "amount": ("amount_inr", "amount"),
    "status": ("status", "transaction_status"),
    "payment_method": ("payment_method", "payment_mode"),
    "merchant_id": ("merchant_id",),
    "category": ("merchant_category", "category"),
    "sentiment": ("sentiment_score", "sentiment"),
    "nps_score": ("nps_score", "nps"),
    "is_fraud": ("is_fraud", "fraud_flag", "fraud"),
    "is_chargeback": ("is_chargeback", "chargeback"),
    "is_refund": ("is_refund", "refund_flag", "refund"),
    "dispute_days": ("dispute_days",),
    "timestamp": ("timestamp", "transaction_date", "date"),
}

NUMERIC_FIELDS = frozenset({"amount", "sentiment", "nps_score", "dispute_days"})

_TRUE_STRINGS = {"true", "yes", "y", "1"}


def is_empty(value: Any) -> bool:
    """Return True for absent, null, NaN/NaT and blank-string values."""
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    try:
        return bool(pd.isna(value))
    except (TypeError, ValueError):
        return False


def to_number(value: Any) -> float | None:
    """Parse a finite number from a scalar, or None when it is not numeric."""
    if is_empty(value) or pd.api.types.is_bool(value):
        return None
    if isinstance(value, str):
        text = value.strip().replace(",", "")
        try:
            number = float(text)
        except ValueError:
            return None
    elif pd.api.types.is_number(value):
        number = float(value)
    else:
        return None
    if not math.isfinite(number):
        return None
    return number


def to_text(value: Any) -> str:
    """Render a categorical value as a trimmed label ("" when empty)."""
    if is_empty(value):
        return ""
    if pd.api.types.is_float(value) and float(value).is_integer():
        return str(int(value))
    return str(value).strip()


def is_truthy_flag(value: Any) -> bool:
    """Match the boolean-ish encodings used for fraud/chargeback/refund flags."""
    if is_empty(value):
        return False
    if pd.api.types.is_bool(value):
        return bool(value)
    if isinstance(value, str):
        return value.strip().lower() in _TRUE_STRINGS
    number = to_number(value)
    return number == 1.0


def has_value(value: Any, numeric: bool = False) -> bool:
    if numeric:
        return to_number(value) is not None
    return not is_empty(value)


def resolve_field(
    rows: Sequence[RowRecord],
    aliases: Iterable[str],
    numeric: bool = False,
) -> tuple[str | None, int]:
    """Pick the first alias holding at least one usable value across all rows.

    Resolution is dataset-wide: the winning alias is used for every row, and
    rows where it is empty fall back to a default rather than to the next
    alias. Returns ``(alias, present_count)`` or ``(None, 0)``.
    """
    for alias in aliases:
        present = sum(1 for row in rows if has_value(row.get(alias), numeric=numeric))
        if present > 0:
            return alias, present
    return None, 0


def resolve_fields(
    rows: Sequence[RowRecord],
    aliases: Mapping[str, Sequence[str]] | None = None,
) -> dict[str, str | None]:
    """Resolve every logical field in the alias table once for the dataset."""
    table = FIELD_ALIASES if aliases is None else aliases
    resolved: dict[str, str | None] = {}
    for field_name, candidates in table.items():
        alias, _ = resolve_field(rows, candidates, numeric=field_name in NUMERIC_FIELDS)
        resolved[field_name] = alias
    return resolved


def row_text(row: RowRecord, column: str | None, default: str = "") -> str:
    if column is None:
        return default
    return to_text(row.get(column)) or default


def row_number(row: RowRecord, column: str | None, default: float | None = 0.0) -> float | None:
    if column is None:
        return default
    number = to_number(row.get(column))
    return default if number is None else number


def row_flag(row: RowRecord, column: str | None) -> bool:
    if column is None:
        return False
    return is_truthy_flag(row.get(column))
