"""Aggregation helpers for payment KPIs, monthly trends and distributions."""

from __future__ import annotations

import datetime
import logging
import math
from collections import Counter
from typing import Any, Iterable, Mapping, Sequence

import pandas as pd

from field_resolver import (
    FIELD_ALIASES,
    RowRecord,
    is_empty,
    row_flag,
    row_number,
    row_text,
)
from models import CategoryTotal, MonthBucket, ScalarMetrics

logger = logging.getLogger(__name__)

MONTH_ORDER = (
    "Jan",
    "Feb",
    "Mar",
    "Apr",
    "May",
    "Jun",
    "Jul",
    "Aug",
    "Sep",
    "Oct",
    "Nov",
    "Dec",
)

# Fixed fee rate used to estimate revenue from volume.
REVENUE_PROXY_FEE_RATE = 0.02

SUCCESS_STATUSES = frozenset({"success", "completed", "approved"})
DEFAULT_LABEL = "Other"


def round_half_up(value: float, digits: int = 0) -> float:
    """Round with halves going up (2.5 -> 3, -2.5 -> -2)."""
    scale = 10**digits
    return math.floor(value * scale + 0.5) / scale


def _rate(count: int, total: int) -> float:
    return float(count / total * 100.0) if total else 0.0


def row_timestamp_value(row: RowRecord, aliases: Sequence[str] = FIELD_ALIASES["timestamp"]) -> Any:
    """Return the first non-empty timestamp candidate of a single row."""
    for alias in aliases:
        value = row.get(alias)
        if not is_empty(value):
            return value
    return None


def parse_timestamp(value: Any) -> pd.Timestamp | None:
    """Parse a date-like scalar; numbers are epoch milliseconds."""
    if is_empty(value) or pd.api.types.is_bool(value):
        return None
    try:
        if isinstance(value, (pd.Timestamp, datetime.datetime, datetime.date)):
            parsed = pd.Timestamp(value)
        elif pd.api.types.is_number(value):
            parsed = pd.to_datetime(value, unit="ms", errors="coerce")
        else:
            parsed = pd.to_datetime(str(value).strip(), errors="coerce")
    except (ValueError, OverflowError):
        return None
    if pd.isna(parsed):
        return None
    return parsed


def build_monthly(
    rows: Sequence[RowRecord],
    amount_field: str | None,
    timestamp_aliases: Sequence[str] = FIELD_ALIASES["timestamp"],
) -> tuple[MonthBucket, ...]:
    """Bucket volume, count and revenue proxy into the twelve calendar months.

    Rows without a parseable date are left out. Months with no rows come
    back as zero buckets, always in Jan..Dec order.
    """
    records: list[dict[str, Any]] = []
    skipped = 0
    for row in rows:
        stamp = parse_timestamp(row_timestamp_value(row, timestamp_aliases))
        if stamp is None:
            skipped += 1
            continue
        amount = float(row_number(row, amount_field))
        records.append(
            {
                "Month": MONTH_ORDER[stamp.month - 1],
                "Volume": amount,
                "Revenue": amount * REVENUE_PROXY_FEE_RATE,
            }
        )

    if skipped:
        logger.warning("Excluded %d row(s) without a parseable date from monthly data.", skipped)

    if records:
        work = pd.DataFrame(records)
        grouped = work.groupby("Month").agg(
            Volume=("Volume", "sum"),
            Transactions=("Volume", "size"),
            Revenue=("Revenue", "sum"),
        )
    else:
        grouped = pd.DataFrame(columns=["Volume", "Transactions", "Revenue"], dtype=float)

    if len(grouped) < 2:
        logger.warning(
            "Monthly data spans %d distinct month(s); the trend will show at most one point.",
            len(grouped),
        )
    grouped = grouped.reindex(list(MONTH_ORDER)).fillna(0.0)

    return tuple(
        MonthBucket(
            month=str(month),
            volume=float(values["Volume"]),
            count=int(values["Transactions"]),
            revenue_proxy=float(values["Revenue"]),
        )
        for month, values in grouped.iterrows()
    )


def nps_score(values: Iterable[float | None]) -> int:
    """Net promoter score from 1..10 ratings (promoters >= 6, detractors <= 5).

    Out-of-range ratings are discarded. No valid ratings gives 0.
    """
    valid = [value for value in values if value is not None and 1 <= value <= 10]
    if not valid:
        return 0
    promoters = sum(1 for value in valid if value >= 6)
    detractors = sum(1 for value in valid if value <= 5)
    return int(round_half_up((promoters - detractors) / len(valid) * 100))


def sentiment_score(values: Iterable[float | None]) -> float:
    """Average -1..1 sentiment mapped onto a 0..5 scale with one decimal."""
    valid = [value for value in values if value is not None and -1 <= value <= 1]
    if not valid:
        return 0.0
    average = sum(valid) / len(valid)
    return round_half_up((average + 1) / 2 * 5, 1)


def merchant_activity(merchant_ids: Iterable[str]) -> tuple[int, float]:
    """Return distinct merchant count and the share with repeat activity."""
    counts = Counter(merchant for merchant in merchant_ids if merchant)
    active = len(counts)
    retained = sum(1 for count in counts.values() if count > 1)
    return active, _rate(retained, active)


def scalar_metrics(rows: Sequence[RowRecord], fields: Mapping[str, str | None]) -> ScalarMetrics:
    """Dataset-wide totals and rates over the resolved fields."""
    total_count = len(rows)
    amount_field = fields.get("amount")
    status_field = fields.get("status")

    total_volume = float(sum(row_number(row, amount_field) for row in rows))
    successful = sum(1 for row in rows if row_text(row, status_field).lower() in SUCCESS_STATUSES)
    fraud = sum(1 for row in rows if row_flag(row, fields.get("is_fraud")))
    chargebacks = sum(1 for row in rows if row_flag(row, fields.get("is_chargeback")))
    refunds = sum(1 for row in rows if row_flag(row, fields.get("is_refund")))

    dispute_field = fields.get("dispute_days")
    dispute_days = sum(row_number(row, dispute_field) for row in rows)
    active, retention = merchant_activity(row_text(row, fields.get("merchant_id")) for row in rows)

    return ScalarMetrics(
        total_volume=total_volume,
        total_count=total_count,
        successful_count=successful,
        success_rate=_rate(successful, total_count),
        fraud_rate=_rate(fraud, total_count),
        chargeback_rate=_rate(chargebacks, total_count),
        refund_rate=_rate(refunds, total_count),
        nps_score=nps_score(row_number(row, fields.get("nps_score"), None) for row in rows),
        sentiment_score=sentiment_score(row_number(row, fields.get("sentiment"), None) for row in rows),
        customer_retention=retention,
        active_merchants=active,
        dispute_resolution_time=float(dispute_days / total_count) if total_count else 0.0,
    )


def payment_method_distribution(rows: Sequence[RowRecord], method_field: str | None) -> dict[str, str]:
    """Share of rows per payment method as one-decimal percentage strings."""
    counts = Counter(row_text(row, method_field, DEFAULT_LABEL) for row in rows)
    total = len(rows)
    if not total:
        return {}
    return {method: f"{count / total * 100:.1f}" for method, count in counts.items()}


def top_categories(
    rows: Sequence[RowRecord],
    category_field: str | None,
    amount_field: str | None,
    limit: int = 5,
) -> tuple[CategoryTotal, ...]:
    """Largest categories by summed amount; ties keep first-seen order."""
    if not rows:
        return ()
    work = pd.DataFrame(
        {
            "Category": [row_text(row, category_field, DEFAULT_LABEL) for row in rows],
            "Amount": [float(row_number(row, amount_field)) for row in rows],
        }
    )
    totals = work.groupby("Category", sort=False)["Amount"].sum()
    ranked = sorted(totals.items(), key=lambda item: item[1], reverse=True)
    return tuple(
        CategoryTotal(name=str(name), volume=float(volume))
        for name, volume in ranked[: max(int(limit), 1)]
    )
