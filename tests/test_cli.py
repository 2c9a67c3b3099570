import json
import logging
from pathlib import Path

import pytest
from typer.testing import CliRunner

from laundry_reports.cli import app
from tests.helpers.reports import (
    ATTENDANT_ROWS,
    SELF_SERVICE_ROWS,
    attendant_document,
    self_service_document,
)

runner = CliRunner()


@pytest.fixture
def reports(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> tuple[Path, Path]:
    # Keep load_dotenv from picking up a developer's .env.
    monkeypatch.chdir(tmp_path)
    self_service = tmp_path / "self.csv"
    attendant = tmp_path / "attendant.csv"
    self_service.write_text(self_service_document(SELF_SERVICE_ROWS), encoding="utf-8")
    attendant.write_text(attendant_document(ATTENDANT_ROWS), encoding="utf-8")
    return self_service, attendant


def test_parse_json(reports):
    self_service, _ = reports
    result = runner.invoke(app, ["parse", "--csv-path", str(self_service), "--json"])
    assert result.exit_code == 0, result.output
    data = json.loads(result.stdout)
    assert data["metadata"]["reportType"] == "SELF_SERVICE"
    assert data["metadata"]["unitName"] == "LAVANDERIA CENTRO"
    assert [t["cycleType"] for t in data["transactions"]] == ["WASH", "DRY", "WASH"]


def test_parse_table(reports):
    _, attendant = reports
    result = runner.invoke(app, ["parse", "--csv-path", str(attendant)])
    assert result.exit_code == 0, result.output
    assert "LAVANDERIA SUL" in result.output
    assert "Transactions: 2" in result.output


def test_parse_warns_on_slot_mismatch(reports):
    _, attendant = reports
    result = runner.invoke(
        app, ["parse", "--csv-path", str(attendant), "--expect", "self-service"]
    )
    assert result.exit_code == 0
    assert "Warning" in result.output


def test_parse_missing_file(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    monkeypatch.chdir(tmp_path)
    result = runner.invoke(app, ["parse", "--csv-path", str(tmp_path / "missing.csv")])
    assert result.exit_code == 1
    assert "File not found" in result.output


def test_summary_both_reports(reports):
    self_service, attendant = reports
    result = runner.invoke(
        app, ["summary", "--self-service", str(self_service), "--attendant", str(attendant)]
    )
    assert result.exit_code == 0, result.output
    assert "self-service summary" in result.output
    assert "attendant summary" in result.output
    assert "Revenue" in result.output


def test_summary_requires_a_report(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    monkeypatch.chdir(tmp_path)
    result = runner.invoke(app, ["summary"])
    assert result.exit_code == 1


def test_summary_unknown_format_has_no_transactions(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    monkeypatch.chdir(tmp_path)
    p = tmp_path / "x.csv"
    p.write_text("a,b,c\n1,2,3\n", encoding="utf-8")
    result = runner.invoke(app, ["summary", "--self-service", str(p)])
    assert result.exit_code == 1
    assert "no transactions" in result.output


def test_log_level_option_configures_package_logger(reports):
    self_service, _ = reports
    result = runner.invoke(app, ["--log-level", "debug", "parse", "--csv-path", str(self_service)])
    assert result.exit_code == 0, result.output
    assert logging.getLogger("laundry_reports").level == logging.DEBUG


def test_unknown_log_level_is_a_usage_error(reports):
    self_service, _ = reports
    result = runner.invoke(app, ["--log-level", "loud", "parse", "--csv-path", str(self_service)])
    assert result.exit_code == 2
