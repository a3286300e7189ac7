"""Tests for the cssbuild CLI commands."""

from __future__ import annotations

from click.testing import CliRunner

from cssbuild import __version__
from cssbuild.cli.main import cli
from cssbuild.config import CssBuildConfig


# ---------------------------------------------------------------------------
# CLI group
# ---------------------------------------------------------------------------


class TestCLIGroup:
    def test_help(self) -> None:
        result = CliRunner().invoke(cli, ["--help"])
        assert result.exit_code == 0
        assert "assemble CSS selectors" in result.output
        assert "build" in result.output
        assert "categories" in result.output

    def test_version(self) -> None:
        result = CliRunner().invoke(cli, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output


# ---------------------------------------------------------------------------
# build command
# ---------------------------------------------------------------------------


class TestBuildCommand:
    def test_compound(self) -> None:
        result = CliRunner().invoke(
            cli, ["build", "element=a", 'attr=href$=".png"', "pseudo-class=focus"]
        )
        assert result.exit_code == 0
        assert result.output == 'a[href$=".png"]:focus\n'

    def test_combinators_fold_left(self) -> None:
        result = CliRunner().invoke(
            cli,
            [
                "build",
                "element=div",
                "id=main",
                "combinator=+",
                "element=table",
                "combinator=~",
                "class=row",
            ],
        )
        assert result.exit_code == 0
        assert result.output == "div#main + table ~ .row\n"

    def test_order_error(self) -> None:
        result = CliRunner().invoke(cli, ["build", "id=main", "element=div"])
        assert result.exit_code == 1
        assert "Error: Selector parts should be arranged" in result.output

    def test_duplicate_error(self) -> None:
        result = CliRunner().invoke(cli, ["build", "element=div", "element=span"])
        assert result.exit_code == 1
        assert "should not occur more then one time" in result.output

    def test_unknown_category(self) -> None:
        result = CliRunner().invoke(cli, ["build", "tag=div"])
        assert result.exit_code == 1
        assert "Unknown selector part category" in result.output

    def test_malformed_token(self) -> None:
        result = CliRunner().invoke(cli, ["build", "div"])
        assert result.exit_code == 2

    def test_dangling_combinator(self) -> None:
        result = CliRunner().invoke(cli, ["build", "element=div", "combinator=>"])
        assert result.exit_code == 2
        assert "no right operand" in result.output

    def test_leading_combinator(self) -> None:
        result = CliRunner().invoke(cli, ["build", "combinator=>", "element=div"])
        assert result.exit_code == 2
        assert "no left operand" in result.output

    def test_requires_tokens(self) -> None:
        result = CliRunner().invoke(cli, ["build"])
        assert result.exit_code == 2


# ---------------------------------------------------------------------------
# categories command
# ---------------------------------------------------------------------------


class TestCategoriesCommand:
    def test_lists_in_order(self) -> None:
        result = CliRunner().invoke(cli, ["categories"])
        assert result.exit_code == 0
        lines = result.output.splitlines()
        assert lines[0] == "1. element: value (once)"
        assert lines[3] == "4. attribute: [value]"
        assert lines[5] == "6. pseudo_element: ::value (once)"


# ---------------------------------------------------------------------------
# Config
# ---------------------------------------------------------------------------


class TestConfig:
    def test_defaults(self, monkeypatch) -> None:
        monkeypatch.delenv("CSSBUILD_LOG_LEVEL", raising=False)
        config = CssBuildConfig.from_env()
        assert config == CssBuildConfig()
        assert config.log_level == "WARNING"

    def test_env_override(self, monkeypatch) -> None:
        monkeypatch.setenv("CSSBUILD_LOG_LEVEL", "debug")
        assert CssBuildConfig.from_env().log_level == "DEBUG"

    def test_log_level_option(self) -> None:
        result = CliRunner().invoke(cli, ["--log-level", "debug", "build", "id=x"])
        assert result.exit_code == 0
        assert result.output.endswith("#x\n")
