"""Tests for human and JSON rendering of ServiceResults."""

import json

from vrule.output.console import create_console, get_output, style_for_outcome
from vrule.output.formatters import OutputSettings, format_result
from vrule.services.result import ServiceResult


def _check_result(*, failed: bool = False) -> ServiceResult:
    data = {
        "schema": "schema.json",
        "rule": "root",
        "results": [
            {"path": "a.json", "outcome": "ok"},
            {"path": "b.json", "outcome": "ng" if failed else "ok"},
        ],
        "passed": 1 if failed else 2,
        "failed": 1 if failed else 0,
    }
    if failed:
        return ServiceResult.failure("check", "NG", "1 of 2 document(s) did not pass", data=data)
    return ServiceResult(ok=True, op="check", data=data, meta={"duration_ms": 1.5})


class TestJsonOutput:
    def test_dumps_full_result(self) -> None:
        output = format_result(_check_result(), settings=OutputSettings(json_output=True))
        parsed = json.loads(output)
        assert parsed["ok"] is True
        assert parsed["op"] == "check"
        assert parsed["data"]["passed"] == 2
        assert parsed["meta"] == {"duration_ms": 1.5}

    def test_failure_includes_error(self) -> None:
        output = format_result(
            _check_result(failed=True), settings=OutputSettings(json_output=True)
        )
        parsed = json.loads(output)
        assert parsed["ok"] is False
        assert parsed["error"]["code"] == "NG"


class TestHumanOutput:
    def test_check_success(self) -> None:
        output = format_result(_check_result())
        lines = output.splitlines()
        assert lines[0] == "OK: check"
        assert "schema: schema.json" in lines[1]
        assert "rule: root" in lines[1]
        assert "OK    a.json" in output
        assert "passed: 2" in output
        assert "duration_ms" not in output

    def test_check_failure(self) -> None:
        output = format_result(_check_result(failed=True))
        assert output.startswith("NG: check - 1 of 2 document(s) did not pass")
        assert "NG    b.json" in output
        assert "failed: 1" in output

    def test_error_entry_message(self) -> None:
        result = ServiceResult(
            ok=False,
            op="check",
            data={"results": [{"path": "x.json", "outcome": "error", "message": "Invalid JSON"}]},
        )
        output = format_result(result)
        assert "ERROR x.json (Invalid JSON)" in output
        assert output.startswith("NG: check - Unknown error")

    def test_location_line(self) -> None:
        result = ServiceResult.failure(
            "lint", "SCHEMA_ERROR", "unknown rule name 'strnig'", location="root.array"
        )
        assert format_result(result).splitlines() == [
            "NG: lint - unknown rule name 'strnig'",
            "  at: root.array",
        ]

    def test_lint(self) -> None:
        result = ServiceResult(
            ok=True,
            op="lint",
            data={"schema": "s.json", "root": "Node", "definitions": {"Node": "object{nest?}"}},
        )
        output = format_result(result)
        assert "root: Node" in output
        assert "Node = object{nest?}" in output

    def test_lint_without_root(self) -> None:
        result = ServiceResult(ok=True, op="lint", data={"root": None, "definitions": {}})
        assert "root: -" in format_result(result)

    def test_generic_renderer(self) -> None:
        result = ServiceResult(ok=True, op="other", data={"count": 2, "names": ["a", "b"]})
        output = format_result(result)
        assert "count: 2" in output
        assert 'names: ["a","b"]' in output

    def test_markup_is_escaped(self) -> None:
        result = ServiceResult(ok=True, op="other", data={"value": "[bold]x[/bold]"})
        assert "[bold]x[/bold]" in format_result(result)


class TestModes:
    def test_quiet_keeps_status_line_only(self) -> None:
        output = format_result(_check_result(), settings=OutputSettings(quiet=True))
        assert output == "OK: check"

    def test_verbose_shows_meta(self) -> None:
        output = format_result(_check_result(), settings=OutputSettings(verbose=True))
        assert "duration_ms: 1.5" in output


class TestConsole:
    def test_plain_output_in_tests(self) -> None:
        console = create_console(no_color=True)
        console.print("[vrule.ok]OK[/]")
        assert get_output(console) == "OK\n"

    def test_outcome_styles(self) -> None:
        assert style_for_outcome("ok") == "vrule.ok"
        assert style_for_outcome("ng") == "vrule.ng"
        assert style_for_outcome("error") == "vrule.error"
        assert style_for_outcome("other") == ""
