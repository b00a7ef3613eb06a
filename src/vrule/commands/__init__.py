"""Subcommand modules for vrule.

register_commands() imports commands lazily so ``vrule --help`` stays fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all standalone commands on the root CLI group."""
    from vrule.commands.check import check
    from vrule.commands.lint import lint

    cli.add_command(check)
    cli.add_command(lint)
