"""Format ServiceResults for the terminal or for machines.

``--json`` dumps the ServiceResult as-is. Otherwise results are rendered
with Rich: a status line, then an operation-specific body (per-document
outcomes for ``check``, declared rules for ``lint``, key/value pairs for
anything else). ``--quiet`` keeps only the status line.
"""

from __future__ import annotations

import json as _json
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from rich.markup import escape

from vrule.output.console import create_console, get_output, style_for_outcome

if TYPE_CHECKING:
    from rich.console import Console

    from vrule.services.result import ServiceResult


@dataclass(frozen=True)
class OutputSettings:
    """Rendering switches taken from the global CLI flags."""

    json_output: bool = False
    quiet: bool = False
    verbose: bool = False


def _render_check(console: Console, data: dict[str, Any]) -> None:
    console.print(
        f"  [vrule.key]schema:[/] [vrule.path]{escape(str(data.get('schema', '')))}[/]"
        f"  [vrule.key]rule:[/] [vrule.rule]{escape(str(data.get('rule', '')))}[/]"
    )
    for entry in data.get("results", []):
        outcome = str(entry.get("outcome", ""))
        style = style_for_outcome(outcome) or "vrule.key"
        line = f"  [{style}]{outcome.upper():<5}[/] {escape(str(entry.get('path', '')))}"
        if entry.get("message"):
            line += f" [vrule.key]({escape(str(entry['message']))})[/]"
        console.print(line)
    if "passed" in data:
        console.print(
            f"  [vrule.key]passed:[/] {data['passed']}"
            f"  [vrule.key]failed:[/] {data['failed']}"
        )


def _render_lint(console: Console, data: dict[str, Any]) -> None:
    root = data.get("root")
    console.print(f"  [vrule.key]root:[/] [vrule.rule]{escape(str(root)) if root else '-'}[/]")
    for name, description in data.get("definitions", {}).items():
        console.print(f"  [vrule.rule]{escape(name)}[/] [vrule.key]=[/] {escape(str(description))}")


def _render_generic(console: Console, data: dict[str, Any]) -> None:
    for key, value in data.items():
        if isinstance(value, (dict, list)):
            value = _json.dumps(value, separators=(",", ":"))
        console.print(f"  [vrule.key]{escape(str(key))}:[/] {escape(str(value))}")


_RENDERERS = {
    "check": _render_check,
    "lint": _render_lint,
}


def format_result(result: ServiceResult, *, settings: OutputSettings | None = None) -> str:
    """Format a ServiceResult for display."""
    settings = settings or OutputSettings()
    if settings.json_output:
        return result.model_dump_json(indent=2)

    console = create_console()
    if result.ok:
        console.print(f"[vrule.ok]OK[/]: [vrule.op]{escape(result.op)}[/]")
    else:
        message = result.error.message if result.error else "Unknown error"
        console.print(f"[vrule.ng]NG[/]: [vrule.op]{escape(result.op)}[/] - {escape(message)}")
        if result.error and result.error.detail.get("location"):
            console.print(f"  [vrule.key]at:[/] {escape(str(result.error.detail['location']))}")

    if not settings.quiet and result.data:
        _RENDERERS.get(result.op, _render_generic)(console, result.data)
    if settings.verbose and result.meta:
        for key, value in result.meta.items():
            console.print(f"  [vrule.key]{escape(key)}:[/] {value}")
    return get_output(console).rstrip("\n")
