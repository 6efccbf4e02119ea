from pathlib import Path

import pytest

from report_config import (
    CONFIG_ENV_VAR,
    DEFAULT_REPORT_CONFIG,
    ReportConfigError,
    config_from_mapping,
    load_report_config,
)


def test_load_report_config_defaults_without_path(monkeypatch) -> None:
    monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)

    config = load_report_config()

    assert config == DEFAULT_REPORT_CONFIG
    assert config.payment_gateway_rate == 0.015
    assert config.credit_bnpl_rate == 0.008
    assert config.value_added_services_rate == 0.005
    assert config.onboarded_multiplier == 1.2
    assert config.top_categories_limit == 5


def test_load_report_config_reads_yaml_overrides(tmp_path: Path) -> None:
    path = tmp_path / "report.yaml"
    path.write_text("churn_rate: 3.1\ntop_categories_limit: 3\n", encoding="utf-8")

    config = load_report_config(path)

    assert config.churn_rate == 3.1
    assert config.top_categories_limit == 3
    assert config.system_uptime == DEFAULT_REPORT_CONFIG.system_uptime


def test_load_report_config_accepts_nested_report_block(tmp_path: Path) -> None:
    path = tmp_path / "settings.yaml"
    path.write_text("report:\n  compliance_score: 90\n", encoding="utf-8")

    assert load_report_config(str(path)).compliance_score == 90.0


def test_load_report_config_uses_environment_variable(tmp_path: Path, monkeypatch) -> None:
    path = tmp_path / "env.yaml"
    path.write_text("settlement_time_hours: 48\n", encoding="utf-8")
    monkeypatch.setenv(CONFIG_ENV_VAR, str(path))

    assert load_report_config().settlement_time_hours == 48.0


def test_load_report_config_missing_file_raises(tmp_path: Path) -> None:
    with pytest.raises(ReportConfigError, match="not found"):
        load_report_config(tmp_path / "missing.yaml")


def test_load_report_config_rejects_non_mapping(tmp_path: Path) -> None:
    path = tmp_path / "list.yaml"
    path.write_text("- 1\n- 2\n", encoding="utf-8")

    with pytest.raises(ReportConfigError, match="mapping"):
        load_report_config(path)


def test_config_from_mapping_rejects_unknown_keys() -> None:
    with pytest.raises(ReportConfigError, match="Unknown"):
        config_from_mapping({"fee_rate": 0.03})


def test_config_from_mapping_rejects_non_numeric_values() -> None:
    with pytest.raises(ReportConfigError, match="must be a number"):
        config_from_mapping({"churn_rate": "high"})
    with pytest.raises(ReportConfigError, match="must be a number"):
        config_from_mapping({"churn_rate": True})
    with pytest.raises(ReportConfigError, match="at least 1"):
        config_from_mapping({"top_categories_limit": 0})


def test_load_report_config_rejects_malformed_yaml(tmp_path: Path) -> None:
    path = tmp_path / "broken.yaml"
    path.write_text("churn_rate: [1, 2\n", encoding="utf-8")

    with pytest.raises(ReportConfigError, match="Invalid YAML"):
        load_report_config(path)


def test_config_from_mapping_rejects_fractional_category_limit() -> None:
    with pytest.raises(ReportConfigError, match="whole number"):
        config_from_mapping({"top_categories_limit": 2.7})

    assert config_from_mapping({"top_categories_limit": 3.0}).top_categories_limit == 3
