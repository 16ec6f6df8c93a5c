"""Tests for the less-theme CLI commands."""
from __future__ import annotations

import importlib
import json

import pytest
from click.testing import CliRunner

from less_theme.cli import cli

from tests.fakes import FakeCompiler

# The package re-exports the ``generate`` command under the module's name.
generate_module = importlib.import_module("less_theme.cli.generate")


@pytest.fixture
def patched_compiler(monkeypatch):
    compiler = FakeCompiler()
    monkeypatch.setattr(generate_module, "LesscCompiler", lambda **kwargs: compiler)
    return compiler


def _base_args(project) -> list[str]:
    return ["generate", "--styles-dir", str(project.styles_dir), "--var-file", str(project.var_file)]


# ---------------------------------------------------------------------------
# CLI group
# ---------------------------------------------------------------------------


class TestCLIGroup:
    def test_help_lists_commands(self) -> None:
        result = CliRunner().invoke(cli, ["--help"])
        assert result.exit_code == 0
        assert "runtime-overridable theme" in result.output
        for command in ("generate", "vars", "serve"):
            assert command in result.output

    def test_version(self) -> None:
        result = CliRunner().invoke(cli, ["--version"])
        assert result.exit_code == 0
        assert "less-theme" in result.output


# ---------------------------------------------------------------------------
# vars command
# ---------------------------------------------------------------------------


class TestVarsCommand:
    VARS = "@primary-color: #1890ff;\n@link-color: @primary-color;\n@font-size-base: 14px;\n"

    def test_lists_declarations(self, tmp_path) -> None:
        var_file = tmp_path / "vars.less"
        var_file.write_text(self.VARS)
        result = CliRunner().invoke(cli, ["vars", str(var_file)])
        assert result.exit_code == 0
        assert result.output.splitlines() == [
            "@primary-color: #1890ff",
            "@link-color: @primary-color",
            "@font-size-base: 14px",
        ]

    def test_json(self, tmp_path) -> None:
        var_file = tmp_path / "vars.less"
        var_file.write_text(self.VARS)
        result = CliRunner().invoke(cli, ["vars", str(var_file), "--json"])
        assert result.exit_code == 0
        assert json.loads(result.output)["@link-color"] == "@primary-color"

    def test_colors_only(self, tmp_path) -> None:
        var_file = tmp_path / "vars.less"
        var_file.write_text(self.VARS)
        result = CliRunner().invoke(cli, ["vars", str(var_file), "--colors", "--json"])
        assert result.exit_code == 0
        assert list(json.loads(result.output)) == ["@primary-color", "@link-color"]

    def test_missing_file(self, tmp_path) -> None:
        result = CliRunner().invoke(cli, ["vars", str(tmp_path / "nope.less")])
        assert result.exit_code == 2


# ---------------------------------------------------------------------------
# generate command
# ---------------------------------------------------------------------------


class TestGenerateCommand:
    def test_prints_theme(self, project, patched_compiler) -> None:
        result = CliRunner().invoke(cli, [*_base_args(project), "--theme-variable", "@primary-color"])
        assert result.exit_code == 0, result.output
        assert result.output == "@primary-color: #1890ff;\n.btn {color: @primary-color;}\n"

    def test_writes_output_file(self, project, patched_compiler) -> None:
        target = project.root / "public" / "color.less"
        result = CliRunner().invoke(
            cli,
            [*_base_args(project), "--theme-variable", "@primary-color", "--output", str(target)],
        )
        assert result.exit_code == 0, result.output
        assert "Theme written to" in result.output
        assert target.read_text().startswith("@primary-color: #1890ff;\n")

    def test_replacement(self, project, patched_compiler) -> None:
        result = CliRunner().invoke(
            cli,
            [
                *_base_args(project),
                "--theme-variable", "@primary-color",
                "--replace", "@primary-color=#ff0000",
            ],
        )
        assert result.exit_code == 0, result.output
        assert result.output.splitlines()[0] == "@primary-color: #ff0000;"

    def test_compiler_options_coerced(self, project, patched_compiler) -> None:
        result = CliRunner().invoke(
            cli,
            [*_base_args(project), "--option", "js=false", "--option", "math=always"],
        )
        assert result.exit_code == 0, result.output
        assert patched_compiler.calls[0]["options"] == {"js": False, "math": "always"}

    def test_bad_replacement(self, project, patched_compiler) -> None:
        result = CliRunner().invoke(cli, [*_base_args(project), "--replace", "no-equals-sign"])
        assert result.exit_code == 2
        assert "NAME=VALUE" in result.output

    def test_compile_failure(self, project, patched_compiler) -> None:
        project.var_file.write_text("@primary-color: #1890ff;\n.unclosed {\n")
        result = CliRunner().invoke(cli, [*_base_args(project), "--theme-variable", "@primary-color"])
        assert result.exit_code == 1
        assert "Compilation failed" in result.output
        assert "Unrecognised input" in result.output

    def test_missing_styles_dir(self, project, patched_compiler) -> None:
        result = CliRunner().invoke(
            cli,
            ["generate", "--styles-dir", str(project.root / "nope"), "--var-file", str(project.var_file)],
        )
        assert result.exit_code == 2


# ---------------------------------------------------------------------------
# serve command
# ---------------------------------------------------------------------------


class TestServeCommand:
    def test_serve_help_shows_options(self) -> None:
        result = CliRunner().invoke(cli, ["serve", "--help"])
        assert result.exit_code == 0
        assert "Start the theme preview server" in result.output
        for option in ("--host", "--port", "--debug", "--styles-dir"):
            assert option in result.output
