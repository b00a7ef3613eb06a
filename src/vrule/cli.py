"""``vrule`` command-line entry point."""

from __future__ import annotations

import click

from vrule import __version__
from vrule.commands import register_commands
from vrule.commands._context import AppContext
from vrule.config.settings import VruleSettings


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="vrule")
@click.option("--json", "json_output", is_flag=True, help="Print results as JSON.")
@click.option("-q", "--quiet", is_flag=True, help="Print the status line only.")
@click.option("-v", "--verbose", is_flag=True, help="Debug logging and timing details.")
@click.option("--log-json", is_flag=True, help="Write logs to stderr as JSON lines.")
@click.option("-c", "--config", "config_path", default=None, help="Use this vrule.toml.")
@click.pass_context
def cli(ctx: click.Context, config_path: str | None, **flags: bool) -> None:
    """vrule: validate untyped data against composable rules."""
    ctx.obj = AppContext(VruleSettings.from_cli(config_path=config_path, **flags))
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
