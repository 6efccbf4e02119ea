"""
Report assembly: one pass of each aggregator over the decoded rows.

Usage:
    from parsing import load_rows
    from report import compute_report

    report = compute_report(load_rows(uploaded_file))
    if report is not None:
        payload = report.as_dict()

``compute_report`` returns None for empty input. Missing columns never
raise; every dependent metric degrades to 0, "Other" or a configured
constant. Volume scales, revenue split, onboarded merchants, churn,
settlement time, uptime and compliance are derived from constants in
ReportConfig rather than measured from the file.
"""

from __future__ import annotations

import dataclasses
import logging
from typing import Any, Callable, Sequence

from analytics import (
    build_monthly,
    payment_method_distribution,
    round_half_up,
    scalar_metrics,
    top_categories,
)
from field_resolver import RowRecord, resolve_fields
from models import (
    CustomerSentiments,
    MarketTrends,
    MerchantStats,
    MetricsReport,
    ProductPerformance,
    RevenueSplit,
    TransactionStats,
    VolumeScales,
)
from report_config import DEFAULT_REPORT_CONFIG, ReportConfig

logger = logging.getLogger(__name__)

TraceCallback = Callable[[str, dict[str, Any]], None]


def _no_trace(event: str, payload: dict[str, Any]) -> None:
    return None


def compute_report(
    rows: Sequence[RowRecord] | None,
    config: ReportConfig | None = None,
    trace: TraceCallback | None = None,
) -> MetricsReport | None:
    """
    Derive the full metrics report from decoded rows.

    Args:
        rows: Row mappings from the decoder. Never mutated.
        config: Constants for the non-measured figures. Defaults apply when None.
        trace: Optional ``trace(event, payload)`` callback receiving the
            intermediate values behind each section.

    Returns:
        MetricsReport, or None when there are no rows.
    """
    if not rows:
        logger.info("No rows to analyse; no report produced.")
        return None

    rows = list(rows)
    config = config or DEFAULT_REPORT_CONFIG
    emit = trace or _no_trace

    fields = resolve_fields(rows)
    logger.debug("Resolved fields: %s", fields)
    emit("fields_resolved", {"fields": dict(fields)})

    monthly = build_monthly(rows, fields["amount"])
    emit("monthly", {"buckets": [bucket.as_dict() for bucket in monthly]})

    scalars = scalar_metrics(rows, fields)
    logger.debug("Scalar metrics: %s", scalars)
    emit("scalars", dataclasses.asdict(scalars))

    payment_methods = payment_method_distribution(rows, fields["payment_method"])
    categories = top_categories(
        rows,
        fields["category"],
        fields["amount"],
        limit=config.top_categories_limit,
    )
    emit(
        "categorical",
        {
            "payment_methods": dict(payment_methods),
            "top_categories": [item.as_dict() for item in categories],
        },
    )

    total_volume = scalars.total_volume
    total_count = scalars.total_count
    product = ProductPerformance(
        tpv=VolumeScales(
            monthly=total_volume / 12,
            quarterly=total_volume / 4,
            yearly=total_volume,
        ),
        revenue=RevenueSplit(
            payment_gateway=total_volume * config.payment_gateway_rate,
            credit_bnpl=total_volume * config.credit_bnpl_rate,
            value_added_services=total_volume * config.value_added_services_rate,
        ),
        transactions=TransactionStats(
            total=total_count,
            successful=scalars.successful_count,
            success_rate=scalars.success_rate,
        ),
        average_transaction_value=total_volume / total_count if total_count else 0.0,
        payment_methods=payment_methods,
        refund_rate=scalars.refund_rate,
        chargeback_rate=scalars.chargeback_rate,
        settlement_time=config.settlement_time_hours,
    )
    sentiments = CustomerSentiments(
        merchants=MerchantStats(
            active=scalars.active_merchants,
            onboarded=int(round_half_up(scalars.active_merchants * config.onboarded_multiplier)),
            churn_rate=config.churn_rate,
        ),
        top_categories=categories,
        customer_retention=scalars.customer_retention,
        nps=scalars.nps_score,
        sentiment_score=scalars.sentiment_score,
    )
    trends = MarketTrends(
        fraud_rate=scalars.fraud_rate,
        dispute_resolution_time=scalars.dispute_resolution_time,
        system_uptime=config.system_uptime,
        compliance_score=config.compliance_score,
    )

    report = MetricsReport(
        product_performance=product,
        customer_sentiments=sentiments,
        market_trends=trends,
        monthly_data=monthly,
        resolved_fields=dict(fields),
    )
    resolved_count = sum(1 for column in fields.values() if column is not None)
    logger.info(
        "Computed report for %d row(s); %d of %d fields resolved.",
        total_count,
        resolved_count,
        len(fields),
    )
    emit("report", report.as_dict())
    return report
