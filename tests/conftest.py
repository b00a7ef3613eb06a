"""Shared pytest fixtures for vrule tests."""

from __future__ import annotations

import json
import logging
from collections.abc import Callable, Generator
from pathlib import Path
from typing import Any

import pytest
from click.testing import CliRunner

from vrule.schema.registry import RULE_REGISTRY

WriteJson = Callable[[str, Any], Path]


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture(autouse=True)
def _restore_registry() -> Generator[None]:
    """Drop rules registered by a test so registrations never leak."""
    snapshot = dict(RULE_REGISTRY)
    yield
    RULE_REGISTRY.clear()
    RULE_REGISTRY.update(snapshot)


@pytest.fixture(autouse=True)
def _restore_logging() -> Generator[None]:
    """Restore root and vrule logger state after CLI runs reconfigure logging."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    vrule_logger = logging.getLogger("vrule")
    vrule_level = vrule_logger.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    vrule_logger.setLevel(vrule_level)


@pytest.fixture
def write_json(tmp_path: Path) -> WriteJson:
    """Write *payload* as JSON to ``tmp_path / name`` and return the path."""

    def _write(name: str, payload: Any) -> Path:
        path = tmp_path / name
        path.write_text(json.dumps(payload), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def tagged_schema() -> dict[str, Any]:
    """Schema document for a tagged union of string and number payloads."""
    return {
        "root": {"ref": "Value"},
        "definitions": {
            "Str": {
                "object": {"fields": {"type": {"literal": "str"}, "strValue": "string"}},
            },
            "Num": {
                "object": {"fields": {"type": {"literal": "num"}, "numValue": "number"}},
            },
            "Value": {"union": [{"ref": "Str"}, {"ref": "Num"}]},
        },
    }


@pytest.fixture
def project_root(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Temporary working directory isolated from any real vrule.toml."""
    monkeypatch.delenv("VRULE_CONFIG", raising=False)
    monkeypatch.chdir(tmp_path)
    return tmp_path
