"""Tests for the lint CLI command."""

from __future__ import annotations

import json
from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest
from click.testing import CliRunner

from vrule.cli import cli

WriteJson = Callable[[str, Any], Path]


@pytest.mark.usefixtures("project_root")
class TestLintCommand:
    def test_valid_schema(
        self, cli_runner: CliRunner, write_json: WriteJson, tagged_schema: dict[str, Any]
    ) -> None:
        write_json("schema.json", tagged_schema)

        result = cli_runner.invoke(cli, ["lint", "schema.json"])

        assert result.exit_code == 0
        assert result.output.startswith("OK: lint")
        assert "root: Value" in result.output
        assert "Value = union(Str | Num)" in result.output

    def test_json_output(
        self, cli_runner: CliRunner, write_json: WriteJson, tagged_schema: dict[str, Any]
    ) -> None:
        write_json("schema.json", tagged_schema)

        result = cli_runner.invoke(cli, ["--json", "lint", "schema.json"])

        data = json.loads(result.output)
        assert data["ok"] is True
        assert data["data"]["definitions"]["Num"] == "object{type, numValue}"

    def test_yaml_schema(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        (tmp_path / "schema.yaml").write_text(
            "root: {ref: Nest}\n"
            "definitions:\n"
            "  Nest:\n"
            "    object:\n"
            "      fields: {nest: {ref: Nest}}\n"
            "      optional: [nest]\n",
            encoding="utf-8",
        )

        result = cli_runner.invoke(cli, ["lint", "schema.yaml"])

        assert result.exit_code == 0
        assert "Nest = object{nest?}" in result.output

    def test_invalid_schema(self, cli_runner: CliRunner, write_json: WriteJson) -> None:
        write_json("schema.json", {"root": {"tuple": ["string", "strnig"]}})

        result = cli_runner.invoke(cli, ["lint", "schema.json"])

        assert result.exit_code == 1
        assert "NG: lint - unknown rule name 'strnig'" in result.output
        assert "at: root.tuple[1]" in result.output

    def test_unreadable_schema(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "lint", "missing.json"])

        assert result.exit_code == 1
        assert json.loads(result.output)["error"]["code"] == "DOCUMENT_ERROR"


EXAMPLES_COMMANDS: list[tuple[list[str], list[str]]] = [
    (["check", "--examples"], ["vrule check config.yaml --schema schema.yaml"]),
    (["lint", "--examples"], ["vrule lint schema.yaml"]),
]


@pytest.mark.parametrize(("args", "keywords"), EXAMPLES_COMMANDS)
def test_examples_flag(cli_runner: CliRunner, args: list[str], keywords: list[str]) -> None:
    result = cli_runner.invoke(cli, args)
    assert result.exit_code == 0
    assert "Examples for" in result.output
    for keyword in keywords:
        assert keyword in result.output
