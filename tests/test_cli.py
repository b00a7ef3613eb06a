"""Tests for the root vrule CLI."""

from pathlib import Path

import pytest
from click.testing import CliRunner

from vrule import __version__
from vrule.cli import cli


def test_cli_help(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["--help"])
    assert result.exit_code == 0
    assert "vrule" in result.output
    assert "check" in result.output
    assert "lint" in result.output


def test_cli_version(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["--version"])
    assert result.exit_code == 0
    assert __version__ in result.output


@pytest.mark.usefixtures("project_root")
def test_cli_no_args(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, [])
    assert result.exit_code == 0
    assert "Usage" in result.output


# --- Global flags ---


@pytest.mark.parametrize("flag", ["--json", "-q", "-v", "--log-json"])
def test_global_flag_accepted(cli_runner: CliRunner, flag: str) -> None:
    result = cli_runner.invoke(cli, [flag, "--version"])
    assert result.exit_code == 0


def test_config_option_accepted(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["-c", "/tmp/test.toml", "--version"])
    assert result.exit_code == 0


def test_config_option_is_used(cli_runner: CliRunner, project_root: Path) -> None:
    (project_root / "conf").mkdir()
    (project_root / "conf" / "custom.toml").write_text('[check]\nrule = "Num"\n')
    (project_root / "s.json").write_text(
        '{"definitions": {"Num": {"object": {"fields": {"n": "number"}}}}}'
    )
    (project_root / "a.json").write_text('{"n": 1}')

    result = cli_runner.invoke(
        cli, ["-c", "conf/custom.toml", "--json", "check", "a.json", "-s", "s.json"]
    )

    assert result.exit_code == 0, result.output


def test_verbose_shows_timing(cli_runner: CliRunner, project_root: Path) -> None:
    (project_root / "s.json").write_text('{"root": "number"}')
    (project_root / "a.json").write_text("3")

    result = cli_runner.invoke(cli, ["-v", "check", "a.json", "-s", "s.json"])

    assert result.exit_code == 0
    assert "duration_ms:" in result.output
