"""Document loading for schema and data files.

The format is chosen by file suffix: ``.json``, ``.toml``, ``.yaml``/``.yml``.
YAML is read with ruamel.yaml's safe loader, so documents come back as
plain dicts, lists, and scalars.
"""

from __future__ import annotations

import json
import tomllib
from pathlib import Path
from typing import Any

from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError

from vrule.core.errors import DocumentError

SUPPORTED_SUFFIXES: tuple[str, ...] = (".json", ".toml", ".yaml", ".yml")


def _parse_json(raw: str) -> Any:
    return json.loads(raw)


def _parse_toml(raw: str) -> Any:
    return tomllib.loads(raw)


def _parse_yaml(raw: str) -> Any:
    return YAML(typ="safe").load(raw)


_PARSERS = {
    ".json": _parse_json,
    ".toml": _parse_toml,
    ".yaml": _parse_yaml,
    ".yml": _parse_yaml,
}


def load_document(path: Path) -> Any:
    """Read and parse the document at *path*.

    Raises:
        DocumentError: If the suffix is unsupported, the file cannot be
            read, or its contents do not parse.
    """
    parser = _PARSERS.get(path.suffix.lower())
    if parser is None:
        expected = ", ".join(SUPPORTED_SUFFIXES)
        msg = f"Unsupported document type {path.suffix!r} (expected one of: {expected})"
        raise DocumentError(msg, path)

    try:
        raw = path.read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        raise DocumentError(f"Cannot read file: not UTF-8 text ({exc.reason})", path) from exc
    except OSError as exc:
        raise DocumentError(f"Cannot read file: {exc.strerror or exc}", path) from exc

    try:
        return parser(raw)
    except (ValueError, YAMLError) as exc:
        raise DocumentError(f"Invalid {path.suffix.lstrip('.').upper()}: {exc}", path) from exc
