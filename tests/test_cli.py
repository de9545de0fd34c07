"""Tests for the command-line interface."""

import pytest
from typer.testing import CliRunner

from groupdata import __version__
from groupdata.cli import app


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


class TestCli:
    def test_no_arguments_prints_help_and_fails(self, runner):
        result = runner.invoke(app, [])

        assert result.exit_code == 1
        assert "generate" in result.stdout

    def test_version(self, runner):
        result = runner.invoke(app, ["--version"])

        assert result.exit_code == 0
        assert __version__ in result.stdout

    def test_generate_prints_catalog(self, runner, idl_file):
        result = runner.invoke(app, ["generate", str(idl_file), "--api-name", "Sample API"])

        assert result.exit_code == 0
        assert result.stdout.startswith('        "Sample API": {\n')
        assert '"interfaces": [ "Foo" ]' in result.stdout
        assert '"callbacks":  [ "Handler" ]' in result.stdout

    def test_gen_alias(self, runner, idl_file):
        result = runner.invoke(app, ["gen", str(idl_file)])

        assert result.exit_code == 0
        assert '"API NAME HERE": {' in result.stdout

    def test_generate_without_sources_is_a_usage_error(self, runner):
        result = runner.invoke(app, ["generate"])

        assert result.exit_code != 0

    @pytest.mark.parametrize("mode", ["type", "TYPE"])
    def test_callback_mode_is_case_insensitive(self, runner, idl_file, mode):
        result = runner.invoke(app, ["generate", str(idl_file), "-c", mode])

        assert result.exit_code == 0
        assert '"callbacks"' not in result.stdout
        assert '"Handler"' in result.stdout

    def test_invalid_callback_mode(self, runner, idl_file):
        result = runner.invoke(app, ["generate", str(idl_file), "-c", "sometimes"])

        assert result.exit_code != 0

    def test_output_file(self, runner, idl_file, tmp_path):
        output = tmp_path / "GroupData.txt"

        result = runner.invoke(app, ["generate", str(idl_file), "-o", str(output), "-c", "ignore"])

        assert result.exit_code == 0
        assert '"API NAME HERE"' not in result.stdout
        text = output.read_text(encoding="utf-8")
        assert text.endswith("        }\n")
        assert "Handler" not in text

    def test_failed_source_does_not_change_exit_code(self, runner, idl_file, tmp_path):
        result = runner.invoke(app, ["generate", str(tmp_path / "missing.webidl"), str(idl_file)])

        assert result.exit_code == 0
        assert '"interfaces": [ "Foo" ]' in result.stdout

    def test_sources_file(self, runner, idl_file, tmp_path):
        listing = tmp_path / "sources.txt"
        listing.write_text(f"# local IDL\n{idl_file}\n", encoding="utf-8")

        result = runner.invoke(app, ["generate", "--sources-file", str(listing)])

        assert result.exit_code == 0
        assert '"dictionaries": [ "Bar" ]' in result.stdout
