"""Command: validate data documents against a schema."""

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
  vrule check config.yaml --schema schema.yaml
  vrule check a.json b.json --schema schema.json --rule Node
  vrule --json check settings.toml""",
)
@click.argument(
    "data",
    nargs=-1,
    required=True,
    type=click.Path(dir_okay=False, path_type=Path),
)
@click.option(
    "-s",
    "--schema",
    "schema_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Schema document (defaults to [check] schema_path).",
)
@click.option("-r", "--rule", default=None, help="Definition to check against (default: root).")
@click.pass_obj
def check(
    app: AppContext,
    data: tuple[Path, ...],
    schema_path: Path | None,
    rule: str | None,
) -> None:
    """Validate DATA documents (JSON, TOML, or YAML) against a schema rule."""
    from vrule.services.check import CheckService

    app.load_plugins()
    app.emit(CheckService(app.settings).check(list(data), schema_path=schema_path, rule=rule))
