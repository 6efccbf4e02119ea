"""PaymentPulse Streamlit entrypoint with modular page navigation."""

from __future__ import annotations

import dataclasses
import json
import logging

import streamlit as st

from dashboard_views import (
    render_customer_sentiments,
    render_detected_columns,
    render_market_trends,
    render_metric_guide,
    render_product_performance,
)
from models import MetricsReport
from parsing import SUPPORTED_EXTENSIONS, load_rows
from report import compute_report
from report_config import ReportConfig, ReportConfigError, config_from_mapping, load_report_config

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)
logger = logging.getLogger("app")

st.set_page_config(page_title="PaymentPulse", page_icon="\U0001f4b3", layout="wide")


def _inject_styles() -> None:
    st.markdown(
        """
        <style>
        .hero {
            margin-bottom: 0.6rem;
            padding: 1rem 1.2rem;
            border: 1px solid rgba(30, 80, 145, 0.23);
            border-radius: 14px;
            background: rgba(255,255,255,0.82);
        }
        .hero h1 {
            margin: 0;
        }
        .hero p {
            margin: 0.35rem 0 0 0;
            color: #244674;
        }
        [data-testid="stMetric"] {
            background: rgba(255,255,255,0.90);
            border: 1px solid rgba(45, 88, 162, 0.25);
            border-radius: 12px;
            padding: 0.45rem 0.6rem;
        }
        </style>
        """,
        unsafe_allow_html=True,
    )


def _render_header() -> None:
    st.markdown(
        """
        <div class="hero">
          <h1>PaymentPulse</h1>
          <p>Payment KPIs from a single transaction export. Navigate by sections from the sidebar.</p>
        </div>
        """,
        unsafe_allow_html=True,
    )


def _parse_json_dict(json_text: str, fallback: dict) -> dict:
    try:
        parsed = json.loads(json_text)
    except json.JSONDecodeError:
        return fallback
    if not isinstance(parsed, dict):
        return fallback
    return parsed


def _report_config() -> ReportConfig:
    base = load_report_config()
    defaults = dataclasses.asdict(base)
    with st.sidebar.expander("Report constants (JSON)", expanded=False):
        raw_json = st.text_area(
            "Non-measured figures",
            value=json.dumps(defaults, indent=2),
            key="config_json",
            height=240,
        )
    try:
        return config_from_mapping(_parse_json_dict(raw_json, defaults), base=base)
    except ReportConfigError as exc:
        st.sidebar.error(str(exc))
        return base


def _prepare_report(config: ReportConfig) -> MetricsReport | None:
    st.sidebar.header("Data Setup")
    uploaded_file = st.sidebar.file_uploader(
        "Upload transactions",
        type=[ext.replace(".", "") for ext in SUPPORTED_EXTENSIONS],
        help="Only the first sheet of a workbook is analysed.",
    )

    if uploaded_file is None:
        st.info("Upload a spreadsheet or CSV export from the sidebar to start.")
        return None

    try:
        rows = load_rows(uploaded_file)
    except ValueError as exc:
        logger.warning("Upload rejected: %s", exc)
        st.error(f"Could not read file: {exc}")
        return None

    report = compute_report(rows, config=config)
    if report is None:
        st.warning("The file has no data rows.")
        return None

    st.sidebar.success(f"Loaded {len(rows):,} rows from {uploaded_file.name}.")
    st.sidebar.download_button(
        "Download report (JSON)",
        data=json.dumps(report.as_dict(), indent=2, ensure_ascii=False),
        file_name="payment_report.json",
        mime="application/json",
    )
    return report


def main() -> None:
    _inject_styles()
    _render_header()

    view = st.sidebar.radio(
        "Navigate",
        [
            "Product Performance",
            "Customer Sentiments",
            "Market Trends",
            "Detected Columns",
            "Metric Guide",
        ],
    )

    if view == "Metric Guide":
        render_metric_guide()
        return

    try:
        config = _report_config()
    except ReportConfigError as exc:
        st.error(f"Invalid report configuration: {exc}")
        return

    report = _prepare_report(config)
    if report is None:
        return

    if view == "Product Performance":
        render_product_performance(report)
    elif view == "Customer Sentiments":
        render_customer_sentiments(report)
    elif view == "Market Trends":
        render_market_trends(report)
    elif view == "Detected Columns":
        render_detected_columns(report)


if __name__ == "__main__":
    main()
