"""Modular Streamlit page renderers."""

from __future__ import annotations

import pandas as pd
import streamlit as st

from formatting import format_currency, format_number, format_percentage
from metric_guide import METRIC_GUIDE
from models import MetricsReport


def monthly_frame(report: MetricsReport) -> pd.DataFrame:
    """Twelve-row month table in calendar order, indexed by month."""
    frame = pd.DataFrame(
        [
            {
                "Month": bucket.month,
                "TPV": bucket.volume,
                "Transactions": bucket.count,
                "Revenue": bucket.revenue_proxy,
            }
            for bucket in report.monthly_data
        ]
    )
    # Keep Jan..Dec order in charts instead of alphabetical.
    frame["Month"] = pd.Categorical(frame["Month"], categories=list(frame["Month"]), ordered=True)
    return frame.set_index("Month")


def payment_method_frame(report: MetricsReport) -> pd.DataFrame:
    shares = report.product_performance.payment_methods
    frame = pd.DataFrame(
        {"Method": list(shares.keys()), "SharePct": [float(value) for value in shares.values()]}
    )
    return frame.set_index("Method")


def category_frame(report: MetricsReport) -> pd.DataFrame:
    frame = pd.DataFrame(
        [
            {"Segment": item.name, "TPV": item.volume}
            for item in report.customer_sentiments.top_categories
        ],
        columns=["Segment", "TPV"],
    )
    return frame.set_index("Segment")


def resolved_fields_frame(report: MetricsReport) -> pd.DataFrame:
    return pd.DataFrame(
        [
            {"Field": field_name, "Column": column or "(not found)"}
            for field_name, column in report.resolved_fields.items()
        ]
    )


def render_product_performance(report: MetricsReport) -> None:
    product = report.product_performance
    st.header("Product Performance")
    st.caption("Monthly and quarterly TPV are the file total spread evenly, not measured periods.")

    rows = [
        [
            ("TPV (monthly)", format_currency(product.tpv.monthly)),
            ("TPV (quarterly)", format_currency(product.tpv.quarterly)),
            ("TPV (yearly)", format_currency(product.tpv.yearly)),
            ("Avg transaction", format_currency(product.average_transaction_value)),
        ],
        [
            ("Transactions", format_number(product.transactions.total)),
            ("Successful", format_number(product.transactions.successful)),
            ("Success rate", format_percentage(product.transactions.success_rate)),
            ("Settlement time", f"{product.settlement_time:g}h"),
        ],
        [
            ("Gateway revenue", format_currency(product.revenue.payment_gateway)),
            ("Credit / BNPL revenue", format_currency(product.revenue.credit_bnpl)),
            ("Value-added services", format_currency(product.revenue.value_added_services)),
            ("Chargeback rate", format_percentage(product.chargeback_rate)),
        ],
    ]
    for row in rows:
        cols = st.columns(4)
        for idx, (label, value) in enumerate(row):
            cols[idx].metric(label, value)

    left, right = st.columns(2)
    with left:
        st.markdown("### Payment methods (%)")
        st.bar_chart(payment_method_frame(report)[["SharePct"]])
    with right:
        st.markdown("### Refunds")
        st.metric("Refund rate", format_percentage(product.refund_rate))


def render_customer_sentiments(report: MetricsReport) -> None:
    sentiments = report.customer_sentiments
    st.header("Customer Sentiments")

    c1, c2, c3 = st.columns(3)
    c1.metric("Active merchants", format_number(sentiments.merchants.active))
    c2.metric("Onboarded (est.)", format_number(sentiments.merchants.onboarded))
    c3.metric("Churn rate", format_percentage(sentiments.merchants.churn_rate))

    c4, c5, c6 = st.columns(3)
    c4.metric("Retention", format_percentage(sentiments.customer_retention))
    c5.metric("NPS", f"{sentiments.nps:+d}")
    c6.metric("Sentiment", f"{sentiments.sentiment_score:.1f} / 5")

    st.markdown("### Top segments by TPV")
    segments = category_frame(report)
    if segments.empty:
        st.info("No category data in this file.")
    else:
        st.bar_chart(segments[["TPV"]])


def render_market_trends(report: MetricsReport) -> None:
    trends = report.market_trends
    st.header("Market Trends")
    st.caption("Uptime and compliance are placeholder figures, not read from the file.")

    c1, c2, c3, c4 = st.columns(4)
    c1.metric("Fraud rate", format_percentage(trends.fraud_rate))
    c2.metric("Dispute resolution", f"{trends.dispute_resolution_time:.1f} days")
    c3.metric("System uptime", format_percentage(trends.system_uptime))
    c4.metric("Compliance score", format_percentage(trends.compliance_score))

    monthly = monthly_frame(report)
    a, b = st.columns(2)
    with a:
        st.markdown("### Monthly TPV")
        st.area_chart(monthly[["TPV"]])
    with b:
        st.markdown("### Monthly transactions")
        st.bar_chart(monthly[["Transactions"]])

    st.markdown("### Monthly table")
    st.dataframe(monthly, use_container_width=True)


def render_detected_columns(report: MetricsReport) -> None:
    st.header("Detected Columns")
    st.caption("Column used for each metric. Rows empty in that column count as 0 or Other.")
    st.dataframe(resolved_fields_frame(report), use_container_width=True, hide_index=True)


def render_metric_guide() -> None:
    st.header("Metric Guide")
    st.caption("Definitions and formulas behind each KPI.")
    st.dataframe(pd.DataFrame(METRIC_GUIDE), use_container_width=True, height=680)
