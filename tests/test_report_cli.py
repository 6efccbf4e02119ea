import json
from pathlib import Path

from report_cli import main


def test_main_prints_report_json(tmp_path: Path, capsys) -> None:
    path = tmp_path / "payments.csv"
    path.write_text(
        "timestamp,amount,status,payment_method\n"
        "2024-03-01,100,success,UPI\n"
        "2024-04-01,50,failed,Card\n",
        encoding="utf-8",
    )

    assert main([str(path)]) == 0

    payload = json.loads(capsys.readouterr().out)
    assert payload["productPerformance"]["tpv"]["yearly"] == 150.0
    assert payload["productPerformance"]["transactions"]["successRate"] == 50.0
    assert payload["productPerformance"]["paymentMethods"] == {"UPI": "50.0", "Card": "50.0"}
    assert len(payload["monthlyData"]) == 12


def test_main_applies_config_file(tmp_path: Path, capsys) -> None:
    data = tmp_path / "payments.csv"
    data.write_text("merchant_id,amount\nA,10\nA,20\n", encoding="utf-8")
    config = tmp_path / "report.yaml"
    config.write_text("churn_rate: 1.5\n", encoding="utf-8")

    assert main([str(data), "--config", str(config), "--trace"]) == 0

    payload = json.loads(capsys.readouterr().out)
    assert payload["customerSentiments"]["merchants"]["churnRate"] == 1.5
    assert payload["customerSentiments"]["customerRetention"] == 100.0


def test_main_fails_for_unreadable_input(tmp_path: Path) -> None:
    assert main([str(tmp_path / "missing.csv")]) == 1
    assert main([str(tmp_path / "notes.pdf")]) == 1


def test_main_fails_for_file_without_rows(tmp_path: Path) -> None:
    path = tmp_path / "empty.csv"
    path.write_text("amount,status\n", encoding="utf-8")

    assert main([str(path)]) == 1


def test_main_fails_for_malformed_config(tmp_path: Path) -> None:
    data = tmp_path / "payments.csv"
    data.write_text("amount\n10\n", encoding="utf-8")
    config = tmp_path / "broken.yaml"
    config.write_text("churn_rate: [1, 2\n", encoding="utf-8")

    assert main([str(data), "--config", str(config)]) == 1
