"""Override-able constants used when assembling the metrics report."""

from __future__ import annotations

import dataclasses
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

CONFIG_ENV_VAR = "PAYMENTPULSE_CONFIG"


class ReportConfigError(ValueError):
    """Raised when a report configuration file cannot be used."""


@dataclass(frozen=True)
class ReportConfig:
    """Allocation weights and placeholder figures that are not measured from data."""

    # Revenue split as fractions of total payment volume.
    payment_gateway_rate: float = 0.015
    credit_bnpl_rate: float = 0.008
    value_added_services_rate: float = 0.005
    # Onboarded merchants are estimated from the active count.
    onboarded_multiplier: float = 1.2
    churn_rate: float = 5.2
    settlement_time_hours: float = 24
    system_uptime: float = 99.95
    compliance_score: float = 98.5
    top_categories_limit: int = 5


DEFAULT_REPORT_CONFIG = ReportConfig()


def _coerce_overrides(raw: dict[str, Any]) -> dict[str, Any]:
    known = {f.name: f for f in dataclasses.fields(ReportConfig)}
    unknown = sorted(set(raw) - set(known))
    if unknown:
        raise ReportConfigError(f"Unknown report config keys: {unknown}. Available: {sorted(known)}")

    out: dict[str, Any] = {}
    for key, value in raw.items():
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise ReportConfigError(f"Report config value for '{key}' must be a number, got {value!r}")
        if key == "top_categories_limit":
            if not float(value).is_integer():
                raise ReportConfigError(f"top_categories_limit must be a whole number, got {value!r}")
            out[key] = int(value)
        else:
            out[key] = float(value)
    if out.get("top_categories_limit", 1) < 1:
        raise ReportConfigError("top_categories_limit must be at least 1")
    return out


def config_from_mapping(raw: dict[str, Any], base: ReportConfig = DEFAULT_REPORT_CONFIG) -> ReportConfig:
    """Layer validated overrides over a base config."""
    return dataclasses.replace(base, **_coerce_overrides(raw))


def load_report_config(path: str | os.PathLike[str] | None = None) -> ReportConfig:
    """
    Load report constants from YAML.

    Args:
        path: YAML file. Falls back to the PAYMENTPULSE_CONFIG environment
            variable; with neither set the defaults are returned.

    Returns:
        A ReportConfig with file values layered over the defaults.
    """
    if path is None:
        path = os.environ.get(CONFIG_ENV_VAR) or None
    if path is None:
        return DEFAULT_REPORT_CONFIG

    target = Path(path).expanduser()
    if not target.exists():
        raise ReportConfigError(f"Configuration file not found: {target}")

    try:
        payload = yaml.safe_load(target.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as exc:
        raise ReportConfigError(f"Invalid YAML in {target}: {exc}") from exc
    if isinstance(payload, dict) and isinstance(payload.get("report"), dict):
        payload = payload["report"]
    if not isinstance(payload, dict):
        raise ReportConfigError(f"Configuration file must contain a mapping: {target}")

    return config_from_mapping(payload)
