"""Locate and read ``vrule.toml``.

The file is found by walking up from the working directory, the way git
finds ``.git/``. ``VRULE_CONFIG`` names a file directly and skips the walk.
"""

from __future__ import annotations

import os
import tomllib
from pathlib import Path
from typing import Any

import click

from vrule.config.models import VruleConfig

CONFIG_FILENAME = "vrule.toml"
CONFIG_ENV_VAR = "VRULE_CONFIG"


def find_config(start: Path | None = None) -> Path | None:
    """Return the nearest ``vrule.toml`` at or above *start* (default: CWD).

    When ``VRULE_CONFIG`` is set, return that path if it is a file and
    None otherwise.
    """
    override = os.environ.get(CONFIG_ENV_VAR)
    if override:
        path = Path(override)
        return path if path.is_file() else None

    here = (start or Path.cwd()).resolve()
    return next(
        (d / CONFIG_FILENAME for d in (here, *here.parents) if (d / CONFIG_FILENAME).is_file()),
        None,
    )


def read_toml(path: Path) -> dict[str, Any]:
    """Parse the TOML file at *path*.

    Raises:
        click.ClickException: If the file is not valid TOML.
    """
    try:
        return tomllib.loads(path.read_text(encoding="utf-8"))
    except tomllib.TOMLDecodeError as exc:
        msg = f"Invalid TOML in {path}: {exc}"
        raise click.ClickException(msg) from exc


def load_config(path: Path | None = None, cwd: Path | None = None) -> VruleConfig:
    """Validate the config file into a VruleConfig.

    Without *path*, the file is discovered from *cwd*; with no file at all
    the result is the all-defaults config.
    """
    path = path or find_config(cwd)
    if path is None:
        return VruleConfig()
    return VruleConfig.model_validate(read_toml(path))
