import math

from field_resolver import (
    FIELD_ALIASES,
    is_empty,
    is_truthy_flag,
    resolve_field,
    resolve_fields,
    row_number,
    row_text,
    to_number,
    to_text,
)


def test_resolve_field_prefers_earlier_alias_across_dataset() -> None:
    rows = [{"amount_inr": 100}, {"amount": 250}]

    alias, present = resolve_field(rows, FIELD_ALIASES["amount"], numeric=True)

    assert alias == "amount_inr"
    assert present == 1


def test_resolve_field_skips_alias_that_is_always_empty() -> None:
    rows = [
        {"amount_inr": "", "amount": 5},
        {"amount_inr": None, "amount": 7},
    ]

    assert resolve_field(rows, FIELD_ALIASES["amount"], numeric=True) == ("amount", 2)


def test_resolve_field_numeric_requires_parseable_values() -> None:
    rows = [{"amount_inr": "n/a", "amount": "12"}]

    assert resolve_field(rows, ["amount_inr", "amount"], numeric=True) == ("amount", 1)
    assert resolve_field(rows, ["amount_inr", "amount"], numeric=False) == ("amount_inr", 1)


def test_resolve_field_returns_none_when_nothing_matches() -> None:
    assert resolve_field([{"foo": 1}], ["bar", "baz"]) == (None, 0)


def test_resolve_fields_covers_every_logical_field() -> None:
    out = resolve_fields([{"merchant_category": "Travel", "nps": 9, "fraud_flag": "Y"}])

    assert set(out) == set(FIELD_ALIASES)
    assert out["category"] == "merchant_category"
    assert out["nps_score"] == "nps"
    assert out["is_fraud"] == "fraud_flag"
    assert out["amount"] is None
    assert out["status"] is None


def test_is_empty_handles_blank_and_missing_values() -> None:
    assert is_empty(None)
    assert is_empty("   ")
    assert is_empty(float("nan"))
    assert not is_empty(0)
    assert not is_empty(False)


def test_to_number_parses_numeric_strings_only() -> None:
    assert to_number("1,250.50") == 1250.5
    assert to_number(7) == 7.0
    assert to_number(" 3 ") == 3.0
    assert to_number(True) is None
    assert to_number("abc") is None
    assert to_number(math.inf) is None
    assert to_number(float("nan")) is None


def test_to_text_normalizes_labels() -> None:
    assert to_text(101.0) == "101"
    assert to_text(101) == "101"
    assert to_text("  UPI ") == "UPI"
    assert to_text(None) == ""


def test_is_truthy_flag_accepts_common_encodings() -> None:
    for value in [True, "TRUE", "true", "yes", "Y", 1, "1", " 1 "]:
        assert is_truthy_flag(value), value
    for value in [False, "no", "N", 0, "0", None, "", "maybe"]:
        assert not is_truthy_flag(value), value


def test_row_accessors_fall_back_to_defaults() -> None:
    row = {"payment_method": "", "amount": "oops"}

    assert row_text(row, None, "Other") == "Other"
    assert row_text(row, "payment_method", "Other") == "Other"
    assert row_number(row, "amount") == 0.0
    assert row_number(row, "amount", None) is None
    assert row_number(row, None) == 0.0
