"""CheckService — validate documents against schema files.

Loads a schema document, compiles it, and runs the selected rule over
each data document. Schema and document problems come back as failed
ServiceResults with a structured error code:

- ``NO_SCHEMA``: no schema path given and none configured.
- ``DOCUMENT_ERROR``: the schema file could not be read or parsed.
- ``SCHEMA_ERROR``: the schema did not compile, or the rule is missing.
- ``NG``: at least one data document did not pass.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Sequence
from pathlib import Path
from typing import TYPE_CHECKING, Any

from vrule.core.errors import DocumentError, SchemaError
from vrule.core.outcome import is_ok
from vrule.core.rule import Rule, rule_name
from vrule.schema.compiler import CompiledSchema, compile_schema
from vrule.schema.loader import load_document
from vrule.services.result import ServiceResult

if TYPE_CHECKING:
    from vrule.config.settings import VruleSettings

logger = logging.getLogger(__name__)


class CheckService:
    """Schema-driven validation of files on disk."""

    def __init__(self, settings: VruleSettings) -> None:
        self._settings = settings

    def resolve_schema_path(self, schema_path: Path | None) -> Path | None:
        """Return *schema_path*, or the configured ``[check] schema_path`` if None.

        Configured paths are relative to the project root.
        """
        if schema_path is not None:
            return schema_path
        configured = self._settings.check.schema_path
        if configured is None:
            return None
        path = Path(configured)
        return path if path.is_absolute() else self._settings.project_root / path

    def check(
        self,
        data_paths: Sequence[Path],
        *,
        schema_path: Path | None = None,
        rule: str | None = None,
    ) -> ServiceResult:
        """Validate every document in *data_paths* against one schema rule."""
        op = "check"
        start = time.perf_counter()

        resolved = self.resolve_schema_path(schema_path)
        if resolved is None:
            return ServiceResult.failure(
                op,
                "NO_SCHEMA",
                "No schema given; pass --schema or set [check] schema_path in vrule.toml",
            )

        rule_key = rule if rule is not None else self._settings.check.rule
        loaded = self._load_schema(op, resolved)
        if isinstance(loaded, ServiceResult):
            return loaded
        try:
            target = loaded.get(rule_key)
        except SchemaError as exc:
            return ServiceResult.failure(op, "SCHEMA_ERROR", str(exc), schema=str(resolved))

        results = [self._check_one(target, path) for path in data_paths]
        passed = sum(1 for entry in results if entry["outcome"] == "ok")
        failed = len(results) - passed
        data = {
            "schema": str(resolved),
            "rule": rule_key or "root",
            "results": results,
            "passed": passed,
            "failed": failed,
        }
        meta = {"duration_ms": round((time.perf_counter() - start) * 1000, 2)}
        logger.info(
            "Checked %d document(s) against %s: %d passed, %d failed",
            len(results),
            rule_name(target),
            passed,
            failed,
        )

        if failed:
            result = ServiceResult.failure(
                op,
                "NG",
                f"{failed} of {len(results)} document(s) did not pass",
                data=data,
            )
            return result.model_copy(update={"meta": meta})
        return ServiceResult(ok=True, op=op, data=data, meta=meta)

    def lint(self, schema_path: Path) -> ServiceResult:
        """Compile *schema_path* and report the rules it declares."""
        op = "lint"
        loaded = self._load_schema(op, schema_path)
        if isinstance(loaded, ServiceResult):
            return loaded

        definitions: dict[str, str] = {}
        for name, compiled in loaded.definitions.items():
            definitions[name] = rule_name(compiled)
        data: dict[str, Any] = {
            "schema": str(schema_path),
            "root": rule_name(loaded.root) if loaded.root is not None else None,
            "definitions": definitions,
        }
        return ServiceResult(ok=True, op=op, data=data)

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    @staticmethod
    def _load_schema(op: str, path: Path) -> CompiledSchema | ServiceResult:
        try:
            document = load_document(path)
        except DocumentError as exc:
            return ServiceResult.failure(op, "DOCUMENT_ERROR", exc.message, path=str(path))
        try:
            compiled = compile_schema(document)
        except SchemaError as exc:
            return ServiceResult.failure(
                op,
                "SCHEMA_ERROR",
                exc.message,
                schema=str(path),
                location=exc.location,
            )
        logger.debug("Loaded schema %s", path)
        return compiled

    @staticmethod
    def _check_one(target: Rule[Any], path: Path) -> dict[str, Any]:
        try:
            document = load_document(path)
        except DocumentError as exc:
            return {"path": str(path), "outcome": "error", "message": exc.message}
        outcome = target.validate(document)
        return {"path": str(path), "outcome": "ok" if is_ok(outcome) else "ng"}
