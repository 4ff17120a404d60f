"""Smoke tests for the Typer CLI."""

import json

import pytest
from typer.testing import CliRunner

from decparse.__main__ import app
from decparse.settings import FORMAT_VAR, REPORT_PATH_VAR

runner = CliRunner()


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    monkeypatch.delenv(FORMAT_VAR, raising=False)
    monkeypatch.delenv(REPORT_PATH_VAR, raising=False)


def test_help_shows_commands():
    result = runner.invoke(app, ["--help"])
    assert result.exit_code == 0
    for command in ("samples", "decimal", "expr", "check", "report"):
        assert command in result.output


def test_version_option():
    result = runner.invoke(app, ["--version"])
    assert result.exit_code == 0
    assert "decparse" in result.output


def test_samples_always_succeed():
    result = runner.invoke(app, ["samples"])
    assert result.exit_code == 0
    assert "rejected" in result.output
    assert "valid" in result.output


def test_samples_json():
    result = runner.invoke(app, ["samples", "--kind", "decimal", "--format", "json"])
    assert result.exit_code == 0
    payload = json.loads(result.stdout)
    assert [p["input"] for p in payload][:3] == ["123", "-456", "+789"]
    assert [p["accepted"] for p in payload] == [True] * 6 + [False] * 4


def test_samples_invalid_kind():
    result = runner.invoke(app, ["samples", "--kind", "bogus"])
    assert result.exit_code == 1


def test_decimal_json():
    result = runner.invoke(app, ["decimal", "--format", "json", "--", "-123.45", "+7"])
    assert result.exit_code == 0
    payload = json.loads(result.stdout)
    assert payload[0]["value"] == {"kind": "decimal", "sign": "negative", "whole": "123", "fraction": "45"}
    assert payload[1]["value"] == {"kind": "whole", "sign": "positive", "value": "7"}


def test_decimal_rejection_exits_1():
    result = runner.invoke(app, ["decimal", "123", "abc"])
    assert result.exit_code == 1
    assert "rejected" in result.output


def test_expr_json():
    result = runner.invoke(app, ["expr", "-f", "json", "100 - -50"])
    assert result.exit_code == 0
    value = json.loads(result.stdout)[0]["value"]
    assert value["kind"] == "operation"
    assert value["operator"] == "-"
    assert value["right"] == {"kind": "whole", "sign": "negative", "value": "50"}


def test_expr_tree():
    result = runner.invoke(app, ["expr", "--format", "tree", "10.5 + 20.3"])
    assert result.exit_code == 0
    assert "Operation" in result.output


def test_expr_trace():
    result = runner.invoke(app, ["expr", "--trace", "1 + + 2"])
    assert result.exit_code == 1
    assert "skip" in result.output


def test_format_from_environment(monkeypatch):
    monkeypatch.setenv(FORMAT_VAR, "json")
    result = runner.invoke(app, ["expr", "2 * 3"])
    assert result.exit_code == 0
    assert json.loads(result.stdout)[0]["value"]["operator"] == "*"


def test_invalid_format():
    result = runner.invoke(app, ["expr", "--format", "xml", "1"])
    assert result.exit_code == 1
    assert "Invalid format" in result.output


def test_check_file(tmp_path):
    inputs = tmp_path / "inputs.txt"
    inputs.write_text("10.5 + 20.3\n\n-25.5 / 5\n", encoding="utf-8")
    result = runner.invoke(app, ["check", str(inputs), "--format", "json"])
    assert result.exit_code == 0
    payload = json.loads(result.stdout)
    assert [p["input"] for p in payload] == ["10.5 + 20.3", "-25.5 / 5"]


def test_check_stdin_with_rejection():
    result = runner.invoke(app, ["check", "-"], input="1 + 2\n12.3.4\n")
    assert result.exit_code == 1


def test_check_missing_file(tmp_path):
    result = runner.invoke(app, ["check", str(tmp_path / "missing.txt")])
    assert result.exit_code == 1
    assert "Cannot read" in result.output


def test_report_from_samples(tmp_path):
    out = tmp_path / "report.md"
    result = runner.invoke(app, ["report", "--output", str(out)])
    assert result.exit_code == 0
    text = out.read_text(encoding="utf-8")
    assert "built-in samples" in text
    assert "`100 - -50`" in text


def test_report_path_from_environment(monkeypatch, tmp_path):
    inputs = tmp_path / "inputs.txt"
    inputs.write_text("3 * 4\n", encoding="utf-8")
    out = tmp_path / "env-report.md"
    monkeypatch.setenv(REPORT_PATH_VAR, str(out))
    result = runner.invoke(app, ["report", str(inputs)])
    assert result.exit_code == 0
    assert "**1/1** inputs accepted." in out.read_text(encoding="utf-8")
