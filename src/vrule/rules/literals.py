"""Literal rules — exact string, number, and boolean values.

A literal rule first checks the base kind, then equality with the expected
value. The base-kind check keeps ``True`` from matching ``num_literal(1)``
even though ``True == 1`` in Python.
"""

from __future__ import annotations

from typing import Any

from vrule.core.kinds import KIND_PREDICATES, ValueKind
from vrule.core.outcome import Outcome, make_ng, make_ok
from vrule.core.rule import FnRule, make_rule

LITERAL_KINDS: frozenset[ValueKind] = frozenset(
    {ValueKind.STRING, ValueKind.NUMBER, ValueKind.BOOLEAN}
)


def _build_literal(kind: ValueKind, expected: Any) -> FnRule[Any]:
    is_kind = KIND_PREDICATES[kind]

    def validate(data: Any) -> Outcome:
        if not is_kind(data):
            return make_ng()
        if data != expected:
            return make_ng()
        return make_ok(data)

    return make_rule(validate, name=f"literal({expected!r})")


rule_true: FnRule[bool] = _build_literal(ValueKind.BOOLEAN, True)
rule_false: FnRule[bool] = _build_literal(ValueKind.BOOLEAN, False)


def literal(kind: ValueKind | str, expected: Any) -> FnRule[Any]:
    """Build a rule accepting exactly *expected*, which must be of *kind*.

    Boolean literals resolve to the shared ``rule_true`` / ``rule_false``.

    Raises:
        TypeError: If *kind* is not string, number, or boolean, or if
            *expected* is not of *kind*.
    """
    try:
        resolved = ValueKind(kind)
    except ValueError:
        resolved = None
    if resolved not in LITERAL_KINDS:
        msg = f"Literal rules support string, number, and boolean kinds, not {kind!r}"
        raise TypeError(msg)
    if not KIND_PREDICATES[resolved](expected):
        msg = f"Literal value {expected!r} is not of kind {resolved}"
        raise TypeError(msg)
    if resolved is ValueKind.BOOLEAN:
        return rule_true if expected else rule_false
    return _build_literal(resolved, expected)


def str_literal(expected: str) -> FnRule[str]:
    """Build a rule accepting exactly the string *expected*."""
    return literal(ValueKind.STRING, expected)


def num_literal(expected: int | float) -> FnRule[int | float]:
    """Build a rule accepting exactly the number *expected*."""
    return literal(ValueKind.NUMBER, expected)


def bool_literal(expected: bool) -> FnRule[bool]:
    """Build a rule accepting exactly *expected*.

    Returns the shared ``rule_true`` or ``rule_false`` instance.
    """
    return literal(ValueKind.BOOLEAN, expected)
