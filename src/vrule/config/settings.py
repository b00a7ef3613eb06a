"""Unified settings: CLI flags, ``VRULE_*`` env vars, and ``vrule.toml``.

Sources, highest priority first:

1. keyword arguments (the global CLI flags)
2. environment variables, ``VRULE_CHECK__RULE`` style for nested keys
3. the discovered (or ``--config``) TOML file
4. defaults on the section models
"""

from __future__ import annotations

from contextvars import ContextVar
from pathlib import Path
from typing import Any

from pydantic import Field
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

from vrule.config.discovery import find_config, read_toml
from vrule.config.models import CheckConfig, PluginsConfig

# Parsed TOML for the VruleSettings currently being built by from_cli().
_pending_toml: ContextVar[dict[str, Any] | None] = ContextVar("_pending_toml", default=None)


class TomlSettingsSource(PydanticBaseSettingsSource):
    """Settings source backed by an already-parsed ``vrule.toml`` table."""

    def __init__(self, settings_cls: type[BaseSettings], data: dict[str, Any] | None) -> None:
        super().__init__(settings_cls)
        self._data = data or {}

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        return self._data.get(field_name), field_name, field_name in self._data

    def __call__(self) -> dict[str, Any]:
        return self._data


class VruleSettings(BaseSettings):
    """Frozen settings object handed to every command.

    Attributes:
        project_root: Directory of the config file in use, else the CWD.
            Relative paths from the config resolve against it.
        config_path: The TOML file that was read, if any.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "VRULE_",
        "env_nested_delimiter": "__",
    }

    project_root: Path = Field(default_factory=Path.cwd)
    config_path: Path | None = None

    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    log_json: bool = False

    check: CheckConfig = Field(default_factory=CheckConfig)
    plugins: PluginsConfig = Field(default_factory=PluginsConfig)

    @property
    def plugin_dir(self) -> Path:
        """``[plugins] local_dir`` resolved against the project root."""
        path = Path(self.plugins.local_dir)
        return path if path.is_absolute() else self.project_root / path

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        toml_source = TomlSettingsSource(settings_cls, _pending_toml.get())
        return init_settings, env_settings, toml_source

    @classmethod
    def from_cli(
        cls,
        *,
        config_path: str | None = None,
        project_root: Path | None = None,
        **cli_flags: Any,
    ) -> VruleSettings:
        """Build settings for one CLI invocation.

        An explicit *config_path* that does not exist is ignored, the same
        as having no config file at all.

        Raises:
            click.ClickException: If the config file is not valid TOML.
        """
        if config_path:
            candidate = Path(config_path)
            toml_path = candidate if candidate.is_file() else None
        else:
            toml_path = find_config(project_root)

        if project_root is None:
            project_root = toml_path.parent if toml_path is not None else Path.cwd()

        token = _pending_toml.set(read_toml(toml_path) if toml_path is not None else None)
        try:
            return cls(project_root=project_root, config_path=toml_path, **cli_flags)
        finally:
            _pending_toml.reset(token)
