"""Command: compile a schema document and list its rules."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from vrule.commands._base import VruleCommand

if TYPE_CHECKING:
    from vrule.commands._context import AppContext


@click.command(
    cls=VruleCommand,
    examples="""\
  vrule lint schema.yaml
  vrule --json lint schema.json""",
)
@click.argument("schema", type=click.Path(dir_okay=False, path_type=Path))
@click.pass_obj
def lint(app: AppContext, schema: Path) -> None:
    """Check that SCHEMA compiles and show the rules it declares."""
    from vrule.services.check import CheckService

    app.load_plugins()
    app.emit(CheckService(app.settings).lint(schema))
