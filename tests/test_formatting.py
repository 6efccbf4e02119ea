from formatting import format_currency, format_number, format_percentage


def test_format_currency_abbreviates_large_values() -> None:
    assert format_currency(1500) == "₹1.5K"
    assert format_currency(2_500_000) == "₹2.5M"
    assert format_currency(3_000_000_000) == "₹3.0B"


def test_format_currency_small_and_missing_values() -> None:
    assert format_currency(999) == "₹999"
    assert format_currency(12.5) == "₹12.5"
    assert format_currency(None) == "₹0"
    assert format_currency(float("nan")) == "₹0"
    assert format_currency("abc") == "₹0"


def test_format_percentage_fixes_one_decimal() -> None:
    assert format_percentage(45) == "45.0%"
    assert format_percentage("66.7") == "66.7%"
    assert format_percentage(12.34) == "12.3%"
    assert format_percentage(None) == "0.0%"


def test_format_number_groups_thousands() -> None:
    assert format_number(1234567) == "1,234,567"
    assert format_number(1234.5) == "1,234.5"
    assert format_number(None) == "0"
