"""Tests for the romcalc command-line interface."""

import json

import pytest
from typer.testing import CliRunner

from romcalc.__main__ import app
from romcalc.config import Settings, load_settings

runner = CliRunner()


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep ROMCALC_* settings from the outer environment out of the tests."""
    for key in ("ROMCALC_ECHO", "ROMCALC_TRACE", "ROMCALC_FAIL_FAST"):
        monkeypatch.delenv(key, raising=False)


@pytest.fixture
def expressions_file(tmp_path):
    path = tmp_path / "input.txt"
    path.write_text("II+III*II\n(II+III\nX/III\n", encoding="utf-8")
    return path


# --- eval ---

def test_eval():
    result = runner.invoke(app, ["eval", "(II + III) * II"])
    assert result.exit_code == 0
    assert result.stdout.strip() == "X"


def test_eval_joins_arguments():
    result = runner.invoke(app, ["eval", "II", "+", "III"])
    assert result.stdout.strip() == "V"


def test_eval_leading_minus_after_separator():
    result = runner.invoke(app, ["eval", "--", "-V*IV"])
    assert result.exit_code == 0
    assert result.stdout.strip() == "-XX"


def test_eval_error():
    result = runner.invoke(app, ["eval", "V/Z"])
    assert result.exit_code == 1
    assert result.stdout.strip() == "error: Division by zero"


# --- postfix ---

def test_postfix():
    result = runner.invoke(app, ["postfix", "II+III*II"])
    assert result.exit_code == 0
    assert result.stdout.strip() == "II III II * +"


def test_postfix_error():
    result = runner.invoke(app, ["postfix", "II+@"])
    assert result.exit_code == 1
    assert result.stdout.strip() == "error: Bad symbol on position 4"


# --- run ---

def test_run_stdin():
    result = runner.invoke(app, ["run"], input="I+I\nMM*II\n\n")
    assert result.exit_code == 0
    assert result.stdout.splitlines() == ["II", "error: Roman number overflow", "Z"]


def test_run_file(expressions_file):
    result = runner.invoke(app, ["run", str(expressions_file)])
    assert result.exit_code == 0
    assert result.stdout.splitlines() == [
        "VIII",
        "error: Invalid bracket sequence in expression",
        "III",
    ]


def test_run_missing_file(tmp_path):
    result = runner.invoke(app, ["run", str(tmp_path / "nope.txt")])
    assert result.exit_code == 2


def test_run_echo(expressions_file):
    result = runner.invoke(app, ["run", "--echo", str(expressions_file)])
    assert result.stdout.splitlines()[0] == "II+III*II = VIII"


def test_run_echo_from_env(expressions_file, monkeypatch):
    monkeypatch.setenv("ROMCALC_ECHO", "1")
    result = runner.invoke(app, ["run", str(expressions_file)])
    assert result.stdout.splitlines()[2] == "X/III = III"


def test_run_flag_overrides_env(expressions_file, monkeypatch):
    monkeypatch.setenv("ROMCALC_ECHO", "1")
    result = runner.invoke(app, ["run", "--no-echo", str(expressions_file)])
    assert result.stdout.splitlines()[0] == "VIII"


def test_run_fail_fast(expressions_file):
    result = runner.invoke(app, ["run", "--fail-fast", str(expressions_file)])
    assert result.exit_code == 1
    assert result.stdout.splitlines() == [
        "VIII",
        "error: Invalid bracket sequence in expression",
    ]


def test_run_json(expressions_file):
    result = runner.invoke(app, ["run", "--json", str(expressions_file)])
    rows = [json.loads(line) for line in result.stdout.splitlines()]
    assert rows[0]["result"] == "VIII"
    assert rows[0]["postfix"] == "II III II * +"
    assert rows[1]["error"] == "Invalid bracket sequence in expression"
    assert rows[2]["line"] == 3


def test_run_table(expressions_file):
    result = runner.invoke(app, ["run", "--table", str(expressions_file)])
    assert result.exit_code == 0
    assert "2 ok, 1 error(s)" in result.output


# --- config ---

def test_load_settings_defaults():
    assert load_settings({}) == Settings()


@pytest.mark.parametrize("raw", ["1", "true", "YES", " on "])
def test_load_settings_truthy(raw):
    settings = load_settings({"ROMCALC_TRACE": raw})
    assert settings.trace
    assert not settings.echo


def test_load_settings_falsy():
    assert not load_settings({"ROMCALC_FAIL_FAST": "0"}).fail_fast


def test_override_keeps_unset_fields():
    settings = Settings(echo=True).override(trace=True)
    assert settings == Settings(echo=True, trace=True, fail_fast=False)
