"""Tests for environment-driven CLI defaults."""

from pathlib import Path

from decparse.settings import FORMAT_VAR, REPORT_PATH_VAR, OutputFormat, default_format, default_report_path


def test_format_defaults_to_table(monkeypatch):
    monkeypatch.delenv(FORMAT_VAR, raising=False)
    assert default_format() is OutputFormat.TABLE


def test_format_from_environment(monkeypatch):
    monkeypatch.setenv(FORMAT_VAR, " JSON ")
    assert default_format() is OutputFormat.JSON


def test_unknown_format_falls_back_to_table(monkeypatch):
    monkeypatch.setenv(FORMAT_VAR, "yaml")
    assert default_format() is OutputFormat.TABLE


def test_report_path(monkeypatch, tmp_path):
    monkeypatch.delenv(REPORT_PATH_VAR, raising=False)
    assert default_report_path() == Path("PARSE_REPORT.md")
    monkeypatch.setenv(REPORT_PATH_VAR, str(tmp_path / "r.md"))
    assert default_report_path() == tmp_path / "r.md"
