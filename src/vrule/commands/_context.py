"""AppContext, the object every command receives via ``@click.pass_obj``.

The root group builds it once per invocation. It owns logging setup,
lazy plugin loading, and the single place where results are printed and
turned into exit codes.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from vrule.config.logging import configure_logging
from vrule.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from vrule.config.settings import VruleSettings
    from vrule.plugins.manager import PluginManager
    from vrule.services.result import ServiceResult


class AppContext:
    """Per-invocation state shared by all subcommands.

    Plugins load only when a command asks for them, so ``--help`` and
    ``--version`` never import plugin code.
    """

    def __init__(self, settings: VruleSettings) -> None:
        self.settings = settings
        self._plugins: PluginManager | None = None
        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    @property
    def output_settings(self) -> OutputSettings:
        return OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
        )

    def load_plugins(self) -> PluginManager:
        """Load plugins on first call (unless ``[plugins] enabled = false``)."""
        if self._plugins is None:
            from vrule.plugins.manager import PluginManager

            self._plugins = PluginManager()
            if self.settings.plugins.enabled:
                self._plugins.discover_and_load(local_dir=self.settings.plugin_dir)
        return self._plugins

    def emit(self, result: ServiceResult) -> None:
        """Print *result*: stdout on success, stderr plus exit code 1 on failure.

        Plugin load failures are appended to ``result.warnings``. They are
        part of the JSON payload, or ``WARNING:`` lines on stderr otherwise.
        """
        if self._plugins is not None and self._plugins.warnings:
            result = result.model_copy(
                update={"warnings": [*result.warnings, *self._plugins.warnings]}
            )
        click.echo(format_result(result, settings=self.output_settings), err=not result.ok)
        if not self.settings.json_output:
            for warning in result.warnings:
                click.echo(f"WARNING: {warning}", err=True)
        if not result.ok:
            raise SystemExit(1)
