"""Tests for the selectorkit CLI commands."""
from __future__ import annotations

import json

import pytest
from click.testing import CliRunner

from selectorkit import __version__
from selectorkit.cli.main import cli


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    for name in ("SELECTORKIT_LOG_LEVEL", "SELECTORKIT_ROT13_MESSAGE", "SELECTORKIT_JSON_INDENT"):
        monkeypatch.delenv(name, raising=False)


# ---------------------------------------------------------------------------
# CLI group
# ---------------------------------------------------------------------------


class TestCLIGroup:
    def test_help_lists_commands(self) -> None:
        result = CliRunner().invoke(cli, ["--help"])
        assert result.exit_code == 0
        assert "build" in result.output
        assert "rot13" in result.output
        assert "rect" in result.output

    def test_version(self) -> None:
        result = CliRunner().invoke(cli, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output

    def test_log_level_option(self) -> None:
        result = CliRunner().invoke(cli, ["--log-level", "debug", "rot13", "abc"])
        assert result.exit_code == 0
        assert "nop" in result.output

    def test_bad_env_config_is_reported(self, monkeypatch) -> None:
        monkeypatch.setenv("SELECTORKIT_JSON_INDENT", "wide")
        result = CliRunner().invoke(cli, ["rot13", "abc"])
        assert result.exit_code == 1
        assert not isinstance(result.exception, ValueError)
        assert "Error: SELECTORKIT_JSON_INDENT must be an integer" in result.output

    def test_rot13_logs_command(self, caplog) -> None:
        with caplog.at_level("INFO", logger="selectorkit"):
            result = CliRunner().invoke(cli, ["rot13", "abc"])
        assert result.exit_code == 0
        assert "Encoding 3 character(s)" in caplog.text


# ---------------------------------------------------------------------------
# build command
# ---------------------------------------------------------------------------


class TestBuildCommand:
    def test_all_fragments(self) -> None:
        result = CliRunner().invoke(
            cli,
            [
                "build",
                "--element", "div",
                "--id", "main",
                "--class", "a",
                "--class", "b",
                "--attr", "data-x",
                "--pseudo-class", "hover",
                "--pseudo-element", "after",
            ],
        )
        assert result.exit_code == 0
        assert result.output.strip() == "div#main.a.b[data-x]:hover::after"

    def test_attribute_with_quotes(self) -> None:
        result = CliRunner().invoke(
            cli, ["build", "--element", "a", "--attr", 'href$=".png"', "--pseudo-class", "focus"]
        )
        assert result.exit_code == 0
        assert result.output.strip() == 'a[href$=".png"]:focus'

    def test_no_fragments_is_usage_error(self) -> None:
        result = CliRunner().invoke(cli, ["build"])
        assert result.exit_code == 2
        assert "at least one selector fragment" in result.output

    def test_out_of_order_fragments_fail(self) -> None:
        result = CliRunner().invoke(cli, ["build", "--class", "container", "--element", "div"])
        assert result.exit_code == 1
        assert "Error: Selector parts should be arranged in the following order" in result.output
        assert "element, id, class, attribute, pseudo-class, pseudo-element" in result.output

    def test_pseudo_element_before_id_fails(self) -> None:
        result = CliRunner().invoke(cli, ["build", "--pseudo-element", "after", "--id", "main"])
        assert result.exit_code == 1

    def test_empty_element_counts_as_given(self) -> None:
        result = CliRunner().invoke(cli, ["build", "--element", "", "--class", "x"])
        assert result.exit_code == 0
        assert result.output == ".x\n"

    def test_single_empty_element(self) -> None:
        result = CliRunner().invoke(cli, ["build", "--element", ""])
        assert result.exit_code == 0
        assert result.output == "\n"


# ---------------------------------------------------------------------------
# rot13 command
# ---------------------------------------------------------------------------


class TestRot13Command:
    def test_default_message(self) -> None:
        result = CliRunner().invoke(cli, ["rot13"])
        assert result.exit_code == 0
        assert result.output == "Jul qvq gur puvpxra pebff gur ebnq?\n"

    def test_argument(self) -> None:
        result = CliRunner().invoke(cli, ["rot13", "Hello"])
        assert result.output == "Uryyb\n"

    def test_configured_message(self, monkeypatch) -> None:
        monkeypatch.setenv("SELECTORKIT_ROT13_MESSAGE", "abc")
        result = CliRunner().invoke(cli, ["rot13"])
        assert result.output == "nop\n"


# ---------------------------------------------------------------------------
# rect command
# ---------------------------------------------------------------------------


class TestRectCommand:
    def test_json_output(self) -> None:
        result = CliRunner().invoke(cli, ["rect", "10", "20"])
        assert result.exit_code == 0
        assert json.loads(result.output) == {"width": 10.0, "height": 20.0}

    def test_area(self) -> None:
        result = CliRunner().invoke(cli, ["rect", "10", "20", "--area"])
        assert result.exit_code == 0
        assert result.output == "200\n"

    def test_indent_from_env(self, monkeypatch) -> None:
        monkeypatch.setenv("SELECTORKIT_JSON_INDENT", "2")
        result = CliRunner().invoke(cli, ["rect", "1", "2"])
        assert result.output == '{\n  "width": 1.0,\n  "height": 2.0\n}\n'

    def test_invalid_number(self) -> None:
        result = CliRunner().invoke(cli, ["rect", "wide", "2"])
        assert result.exit_code == 2
