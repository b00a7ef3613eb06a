"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults live here, ``vrule.toml`` only holds overrides.
"""

from __future__ import annotations

from pydantic import BaseModel, Field


class CheckConfig(BaseModel):
    """[check] section."""

    model_config = {"frozen": True}

    schema_path: str | None = None
    rule: str | None = None


class PluginsConfig(BaseModel):
    """[plugins] section."""

    model_config = {"frozen": True}

    enabled: bool = True
    local_dir: str = ".vrule/plugins"


class VruleConfig(BaseModel):
    """Root of ``vrule.toml``."""

    model_config = {"frozen": True}

    check: CheckConfig = Field(default_factory=CheckConfig)
    plugins: PluginsConfig = Field(default_factory=PluginsConfig)
