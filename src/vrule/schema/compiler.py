"""Compile declarative schema documents into rule trees.

A schema document is plain data (usually loaded from JSON, TOML, or YAML)::

    root: {ref: Node}
    definitions:
      Node:
        object:
          fields:
            name: string
            children: {array: {ref: Node}}
          optional: [children]

Node forms:

- ``"<name>"`` — a rule from the named registry (``string``, ``null``, ...).
- ``{literal: value}`` — exact string, number, or boolean.
- ``{array: node}`` / ``{dictionary: node}``
- ``{tuple: [node, ...]}`` / ``{union: [node, ...]}``
- ``{object: {fields: {name: node}, optional: [name, ...]}}``
- ``{ref: Name}`` — a definition, compiled through a lazy rule so that
  forward and recursive references work.

Every ``ref`` to the same definition shares one lazy rule, so each
definition is resolved once per compiled schema.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from typing import Any

from vrule.core.errors import SchemaError
from vrule.core.kinds import ValueKind, is_boolean, is_number, is_string
from vrule.core.rule import Rule
from vrule.rules.composite import (
    LazyRule,
    array_of,
    dictionary_of,
    lazy,
    object_literal,
    tuple_of,
    union_of,
)
from vrule.rules.literals import literal
from vrule.schema.registry import RULE_REGISTRY

logger = logging.getLogger(__name__)

DOCUMENT_KEYS = frozenset({"root", "definitions"})
OBJECT_KEYS = frozenset({"fields", "optional"})
NODE_FORMS = ("literal", "array", "dictionary", "tuple", "union", "object", "ref")


@dataclass(frozen=True)
class CompiledSchema:
    """Rules compiled from one schema document.

    Attributes:
        root: Rule for the document's ``root`` node, if it declares one.
        definitions: Compiled rule per definition name, in document order.
    """

    root: Rule[Any] | None = None
    definitions: dict[str, Rule[Any]] = field(default_factory=dict)

    def get(self, name: str | None = None) -> Rule[Any]:
        """Return the rule named *name*, or the root rule when *name* is None.

        Raises:
            SchemaError: If the requested rule does not exist.
        """
        if name is None:
            if self.root is None:
                msg = "Schema has no root rule; pick a definition by name"
                raise SchemaError(msg)
            return self.root
        if name not in self.definitions:
            msg = f"Schema has no definition named {name!r}"
            raise SchemaError(msg)
        return self.definitions[name]


class _Compiler:
    """Single-use walker that turns one document into rules."""

    def __init__(self, registry: Mapping[str, Rule[Any]]) -> None:
        self._registry = registry
        self._compiled: dict[str, Rule[Any]] = {}
        self._cells: dict[str, LazyRule[Any]] = {}

    def compile(self, document: Any) -> CompiledSchema:
        if not isinstance(document, Mapping):
            msg = "Schema document must be a mapping with 'root' and/or 'definitions'"
            raise SchemaError(msg)
        unknown = set(document) - DOCUMENT_KEYS
        if unknown:
            msg = f"Unknown top-level keys: {', '.join(sorted(map(str, unknown)))}"
            raise SchemaError(msg)
        if "root" not in document and "definitions" not in document:
            msg = "Schema document declares neither 'root' nor 'definitions'"
            raise SchemaError(msg)

        definitions = document.get("definitions", {})
        if not isinstance(definitions, Mapping):
            raise SchemaError("must be a mapping of name to rule", "definitions")

        for name in definitions:
            location = f"definitions.{name}"
            if not isinstance(name, str) or not name:
                raise SchemaError("definition names must be non-empty strings", location)
            if name in self._registry:
                raise SchemaError(f"definition shadows the registered rule {name!r}", location)
            self._cells[name] = lazy(self._resolver(name), name=name)

        self._check_alias_cycles(definitions)

        for name, node in definitions.items():
            self._compiled[name] = self._node(node, f"definitions.{name}")

        root = self._node(document["root"], "root") if "root" in document else None
        logger.debug(
            "Compiled schema: root=%s definitions=%d",
            "yes" if root is not None else "no",
            len(self._compiled),
        )
        return CompiledSchema(root=root, definitions=dict(self._compiled))

    def _resolver(self, name: str) -> Callable[[], Rule[Any]]:
        def resolve() -> Rule[Any]:
            return self._compiled[name]

        return resolve

    def _check_alias_cycles(self, definitions: Mapping[str, Any]) -> None:
        """Reject definitions that only refer to each other in a loop."""
        for start in definitions:
            seen = [start]
            node = definitions[start]
            while _is_ref(node):
                target = node["ref"]
                if target == start:
                    chain = " -> ".join([*seen, target])
                    raise SchemaError(f"reference cycle: {chain}", f"definitions.{start}")
                if target in seen or target not in definitions:
                    break
                seen.append(target)
                node = definitions[target]

    def _node(self, node: Any, location: str) -> Rule[Any]:
        if isinstance(node, str):
            if node not in self._registry:
                raise SchemaError(f"unknown rule name {node!r}", location)
            return self._registry[node]

        if not isinstance(node, Mapping):
            raise SchemaError("expected a rule name or a single-key mapping", location)
        if len(node) != 1:
            keys = ", ".join(sorted(map(str, node))) or "none"
            raise SchemaError(f"rule mapping must have exactly one key (got: {keys})", location)

        ((form, body),) = node.items()
        child = f"{location}.{form}"
        if form == "literal":
            return self._literal(body, child)
        if form == "array":
            return array_of(self._node(body, child))
        if form == "dictionary":
            return dictionary_of(self._node(body, child))
        if form == "tuple":
            return tuple_of(*self._node_list(body, child))
        if form == "union":
            return union_of(*self._node_list(body, child))
        if form == "object":
            return self._object(body, child)
        if form == "ref":
            return self._ref(body, child)
        raise SchemaError(
            f"unknown rule form {form!r} (expected one of: {', '.join(NODE_FORMS)})",
            location,
        )

    def _node_list(self, body: Any, location: str) -> list[Rule[Any]]:
        if not isinstance(body, list):
            raise SchemaError("expected a list of rules", location)
        return [self._node(item, f"{location}[{i}]") for i, item in enumerate(body)]

    def _literal(self, value: Any, location: str) -> Rule[Any]:
        if is_boolean(value):
            return literal(ValueKind.BOOLEAN, value)
        if is_number(value):
            return literal(ValueKind.NUMBER, value)
        if is_string(value):
            return literal(ValueKind.STRING, value)
        raise SchemaError(f"literal must be a string, number, or boolean, not {value!r}", location)

    def _object(self, body: Any, location: str) -> Rule[Any]:
        if not isinstance(body, Mapping):
            raise SchemaError("expected a mapping with 'fields' and 'optional'", location)
        unknown = set(body) - OBJECT_KEYS
        if unknown:
            raise SchemaError(f"unknown keys: {', '.join(sorted(map(str, unknown)))}", location)

        fields = body.get("fields", {})
        if not isinstance(fields, Mapping):
            raise SchemaError("must be a mapping of field name to rule", f"{location}.fields")
        field_rules: dict[str, Rule[Any]] = {}
        for name, field_node in fields.items():
            if not isinstance(name, str):
                raise SchemaError(f"field name {name!r} is not a string", f"{location}.fields")
            field_rules[name] = self._node(field_node, f"{location}.fields.{name}")

        optional = body.get("optional")
        if optional is not None:
            if not isinstance(optional, list) or not all(isinstance(k, str) for k in optional):
                raise SchemaError("must be a list of field names", f"{location}.optional")
            undeclared = [key for key in optional if key not in field_rules]
            if undeclared:
                raise SchemaError(
                    f"not declared in fields: {', '.join(undeclared)}",
                    f"{location}.optional",
                )
        return object_literal(field_rules, optional)

    def _ref(self, target: Any, location: str) -> Rule[Any]:
        if not isinstance(target, str):
            raise SchemaError("ref must name a definition", location)
        cell = self._cells.get(target)
        if cell is None:
            raise SchemaError(f"unknown definition {target!r}", location)
        return cell


def _is_ref(node: Any) -> bool:
    return isinstance(node, Mapping) and len(node) == 1 and isinstance(node.get("ref"), str)


def compile_schema(
    document: Any,
    *,
    registry: Mapping[str, Rule[Any]] | None = None,
) -> CompiledSchema:
    """Compile a schema *document* into rules.

    Args:
        document: Parsed schema document (see module docstring).
        registry: Named rules available to bare-string nodes. Defaults to
            the global registry, including plugin-registered rules.

    Raises:
        SchemaError: If the document is malformed; ``location`` points at
            the offending node.
    """
    return _Compiler(RULE_REGISTRY if registry is None else registry).compile(document)
