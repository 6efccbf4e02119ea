"""
Headless entry point: decode one transaction file and print the report as JSON.

Usage:
    paymentpulse-report transactions.csv
    paymentpulse-report transactions.xlsx --config report.yaml --trace
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import Any

from parsing import load_rows
from report import compute_report
from report_config import load_report_config

logger = logging.getLogger("report_cli")


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Compute payment KPIs from a spreadsheet or CSV export."
    )
    parser.add_argument("path", help="Transaction file (.csv, .tsv, .txt, .xlsx, .xls).")
    parser.add_argument(
        "--config",
        default=None,
        help="YAML file overriding report constants. Defaults to $PAYMENTPULSE_CONFIG.",
    )
    parser.add_argument(
        "--trace",
        action="store_true",
        default=False,
        help="Log the intermediate values behind each report section.",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
    )
    return parser.parse_args(argv)


def _log_trace(event: str, payload: dict[str, Any]) -> None:
    logger.info("trace %s: %s", event, json.dumps(payload, default=str))


def main(argv: list[str] | None = None) -> int:
    args = _parse_args(argv)
    logging.basicConfig(
        level=logging.INFO if args.trace else getattr(logging, args.log_level),
        format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
    )

    try:
        config = load_report_config(args.config)
        rows = load_rows(args.path)
    except ValueError as exc:
        logger.error("%s", exc)
        return 1

    report = compute_report(rows, config=config, trace=_log_trace if args.trace else None)
    if report is None:
        logger.error("No data rows in %s.", args.path)
        return 1

    print(json.dumps(report.as_dict(), indent=2, ensure_ascii=False))
    return 0


if __name__ == "__main__":
    sys.exit(main())
