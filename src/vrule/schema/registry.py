"""Named rule registry used by schema documents.

A bare string node in a schema (``"string"``, ``"email"``) names a rule in
this registry. Built-in names cover every primitive and boolean literal
rule; plugins add their own via the ``register_rules`` hook.
"""

from __future__ import annotations

from typing import Any

from vrule.core.rule import Rule
from vrule.rules.literals import rule_false, rule_true
from vrule.rules.primitives import (
    rule_bigint,
    rule_boolean,
    rule_null,
    rule_number,
    rule_string,
    rule_symbol,
    rule_undefined,
)


def _builtin_rule_map() -> dict[str, Rule[Any]]:
    return {
        "string": rule_string,
        "number": rule_number,
        "boolean": rule_boolean,
        "bigint": rule_bigint,
        "symbol": rule_symbol,
        "undefined": rule_undefined,
        "null": rule_null,
        "true": rule_true,
        "false": rule_false,
    }


# Populated with built-ins at module load time.
RULE_REGISTRY: dict[str, Rule[Any]] = {}


def get_rule(name: str) -> Rule[Any]:
    """Look up a registered rule by name.

    Raises:
        KeyError: If no rule is registered under *name*.
    """
    if name in RULE_REGISTRY:
        return RULE_REGISTRY[name]
    msg = f"No rule registered under name={name!r}"
    raise KeyError(msg)


def register_rule(name: str, rule: Rule[Any]) -> None:
    """Register a named rule for use in schema documents.

    Built-in names are reserved. Registering the same rule object twice
    under one name is a no-op; a different rule under a taken name is not.
    """
    normalized_name = name.strip()
    if not normalized_name:
        msg = "Rule name must not be empty"
        raise ValueError(msg)

    if not isinstance(rule, Rule):
        msg = f"Rule {normalized_name!r} must expose validate(data)"
        raise TypeError(msg)

    if normalized_name in _builtin_rule_map():
        msg = f"Rule {normalized_name!r} conflicts with a built-in rule"
        raise ValueError(msg)

    existing = RULE_REGISTRY.get(normalized_name)
    if existing is not None and existing is not rule:
        msg = f"Rule {normalized_name!r} is already registered"
        raise ValueError(msg)

    RULE_REGISTRY[normalized_name] = rule


def unregister_rule(name: str) -> None:
    """Remove a plugin-registered rule. Built-in rules cannot be removed."""
    if name in _builtin_rule_map():
        msg = f"Rule {name!r} is built in and cannot be unregistered"
        raise ValueError(msg)
    RULE_REGISTRY.pop(name, None)


def registered_names() -> list[str]:
    """Return all registered rule names, built-ins first."""
    return list(RULE_REGISTRY)


def _register_builtins() -> None:
    RULE_REGISTRY.update(_builtin_rule_map())


_register_builtins()
