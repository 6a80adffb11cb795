"""CLI smoke tests."""

from click.testing import CliRunner
from class_json_sampler.cli import cli


def test_cli_displays_help() -> None:
    runner = CliRunner()
    result = runner.invoke(cli, ["--help"])

    assert result.exit_code == 0
    assert "convert" in result.output
    assert "list-types" in result.output
    assert "generate-config" in result.output


def test_convert_help_lists_catalog_options() -> None:
    runner = CliRunner()
    result = runner.invoke(cli, ["convert", "--help"])

    assert result.exit_code == 0
    assert "--catalog" in result.output
    assert "--config" in result.output
    assert "--output" in result.output
