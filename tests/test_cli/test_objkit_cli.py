"""Tests for the objkit CLI commands."""
from __future__ import annotations

from click.testing import CliRunner

from objkit import __version__
from objkit.cli.main import cli


# ---------------------------------------------------------------------------
# CLI group
# ---------------------------------------------------------------------------


class TestCLIGroup:
    def test_cli_group_help(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["--help"])
        assert result.exit_code == 0
        assert "CSS selector builder" in result.output

    def test_cli_lists_commands(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["--help"])
        for name in ("selector", "combine", "area", "decode"):
            assert name in result.output

    def test_version(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output


# ---------------------------------------------------------------------------
# selector / combine
# ---------------------------------------------------------------------------


class TestSelectorCommand:
    def test_compound(self) -> None:
        runner = CliRunner()
        result = runner.invoke(
            cli,
            ["selector", "--element", "a", "--attr", 'href$=".png"', "--pseudo-class", "focus"],
        )
        assert result.exit_code == 0
        assert result.output.strip() == 'a[href$=".png"]:focus'

    def test_repeated_classes(self) -> None:
        runner = CliRunner()
        result = runner.invoke(
            cli, ["selector", "--id", "main", "--class", "container", "--class", "editable"]
        )
        assert result.exit_code == 0
        assert result.output.strip() == "#main.container.editable"

    def test_empty_string_values_reach_builder(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["selector", "--id", "", "--pseudo-element", ""])
        assert result.exit_code == 0
        assert result.output.strip() == "#::"

    def test_empty(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["selector"])
        assert result.exit_code == 0
        assert result.output.strip() == ""


class TestCombineCommand:
    def test_combine(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["combine", "div", "+", "span"])
        assert result.exit_code == 0
        assert result.output.strip() == "div + span"


# ---------------------------------------------------------------------------
# area / decode
# ---------------------------------------------------------------------------


class TestAreaCommand:
    def test_area(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["area", "10", "20"])
        assert result.exit_code == 0
        assert result.output.strip() == "200"

    def test_fractional(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["area", "2.5", "2"])
        assert result.output.strip() == "5"


class TestDecodeCommand:
    def test_decode_rectangle(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["decode", "rectangle", '{"height":20,"width":10}'])
        assert result.exit_code == 0
        lines = result.output.strip().splitlines()
        assert lines[0] == "Rectangle(width=10, height=20)"
        assert lines[1] == '{"width":10,"height":20}'

    def test_unknown_tag(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["decode", "circle", "{}"])
        assert result.exit_code == 1
        assert "Decode error" in result.output

    def test_bad_json(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["decode", "rectangle", "{oops"])
        assert result.exit_code == 1
        assert "Decode error" in result.output

    def test_verbose_flag(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["-v", "decode", "rectangle", "[1, 2]"])
        assert result.exit_code == 0
        assert "Rectangle(width=1, height=2)" in result.output


# ---------------------------------------------------------------------------
# logging setup
# ---------------------------------------------------------------------------


class TestLoggingSetup:
    def test_no_logging_config_without_verbose(self, monkeypatch) -> None:
        calls: list[dict] = []
        monkeypatch.setattr(
            "objkit.cli.main.logging.basicConfig", lambda **kw: calls.append(kw)
        )
        runner = CliRunner()
        result = runner.invoke(cli, ["area", "2", "3"])
        assert result.exit_code == 0
        assert calls == []

    def test_verbose_configures_debug(self, monkeypatch) -> None:
        calls: list[dict] = []
        monkeypatch.setattr(
            "objkit.cli.main.logging.basicConfig", lambda **kw: calls.append(kw)
        )
        runner = CliRunner()
        result = runner.invoke(cli, ["--verbose", "area", "2", "3"])
        assert result.exit_code == 0
        assert len(calls) == 1
        assert calls[0]["level"] == "DEBUG"
