from analytics import MONTH_ORDER
from dashboard_views import (
    category_frame,
    monthly_frame,
    payment_method_frame,
    resolved_fields_frame,
)
from metric_guide import METRIC_GUIDE
from report import compute_report


def _report():
    return compute_report(
        [
            {"date": "2024-02-01", "amount": 10, "payment_method": "UPI", "category": "Food"},
            {"date": "2024-11-01", "amount": 30, "payment_method": "Card", "category": "Travel"},
        ]
    )


def test_monthly_frame_keeps_calendar_order() -> None:
    out = monthly_frame(_report())

    assert [str(month) for month in out.index] == list(MONTH_ORDER)
    assert float(out.loc["Nov", "TPV"]) == 30.0
    assert int(out.loc["Feb", "Transactions"]) == 1


def test_payment_method_frame_converts_shares_to_numbers() -> None:
    out = payment_method_frame(_report())

    assert out.loc["UPI", "SharePct"] == 50.0
    assert out["SharePct"].sum() == 100.0


def test_category_frame_orders_by_volume() -> None:
    out = category_frame(_report())

    assert list(out.index) == ["Travel", "Food"]


def test_resolved_fields_frame_marks_missing_columns() -> None:
    out = resolved_fields_frame(_report()).set_index("Field")

    assert out.loc["amount", "Column"] == "amount"
    assert out.loc["nps_score", "Column"] == "(not found)"


def test_metric_guide_entries_are_complete() -> None:
    for entry in METRIC_GUIDE:
        assert set(entry) == {"Metric", "Meaning", "Formula", "Source"}
        assert entry["Source"] in {"Measured", "Configured", "Approximation"}
