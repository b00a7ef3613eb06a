"""Composite rule builders — array, dictionary, tuple, object, union, lazy.

Composite rules call ``validate`` on their children and stop at the first
child ``Ng``. They never catch anything a child raises, never collect more
than one failure, and on success return the input object itself.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable, Iterable, Mapping
from contextvars import ContextVar
from typing import Any, Generic, TypeVar

from vrule.core.kinds import is_keyed, is_sequence
from vrule.core.outcome import Outcome, is_ng, is_ok, make_ng, make_ok
from vrule.core.rule import FnRule, Rule, ensure, make_rule, meets, rule_name

T = TypeVar("T")

logger = logging.getLogger(__name__)


def array_of(element_rule: Rule[T]) -> FnRule[list[T]]:
    """Build a rule for a sequence whose every element passes *element_rule*."""

    def validate(data: Any) -> Outcome:
        if not is_sequence(data):
            return make_ng()
        for element in data:
            if is_ng(element_rule.validate(element)):
                return make_ng()
        return make_ok(data)

    return make_rule(validate, name=f"array({rule_name(element_rule)})")


def dictionary_of(element_rule: Rule[T]) -> FnRule[dict[str, T]]:
    """Build a rule for a string-keyed mapping whose values pass *element_rule*.

    Any string key is allowed; only the values are constrained.
    """

    def validate(data: Any) -> Outcome:
        if not is_keyed(data):
            return make_ng()
        for key, value in data.items():
            if not isinstance(key, str):
                return make_ng()
            if is_ng(element_rule.validate(value)):
                return make_ng()
        return make_ok(data)

    return make_rule(validate, name=f"dictionary({rule_name(element_rule)})")


def tuple_of(*element_rules: Rule[Any]) -> FnRule[list[Any]]:
    """Build a rule for a fixed-length sequence, one rule per position.

    The sequence length must equal the number of rules exactly.
    """
    rules = tuple(element_rules)

    def validate(data: Any) -> Outcome:
        if not is_sequence(data):
            return make_ng()
        if len(data) != len(rules):
            return make_ng()
        for element, element_rule in zip(data, rules, strict=True):
            if is_ng(element_rule.validate(element)):
                return make_ng()
        return make_ok(data)

    return make_rule(validate, name=f"tuple({', '.join(rule_name(r) for r in rules)})")


def object_literal(
    field_rules: Mapping[str, Rule[Any]],
    optional_keys: Iterable[str] | None = None,
) -> FnRule[dict[str, Any]]:
    """Build a rule for a closed mapping with named fields.

    Every key in the data must be declared in *field_rules* and its value
    must pass that field's rule. Every declared key must be present unless
    it is listed in *optional_keys*; an optional key that is present is
    still checked against its rule.

    Raises:
        TypeError: If a field name is not a string.
        ValueError: If an optional key is not a declared field.
    """
    fields: dict[str, Rule[Any]] = dict(field_rules)
    for key in fields:
        if not isinstance(key, str):
            msg = f"Object field names must be strings, got {key!r}"
            raise TypeError(msg)

    optional = frozenset(optional_keys) if optional_keys is not None else frozenset()
    unknown = optional - fields.keys()
    if unknown:
        msg = f"Optional keys are not declared fields: {', '.join(sorted(map(str, unknown)))}"
        raise ValueError(msg)

    required = tuple(key for key in fields if key not in optional)

    def validate(data: Any) -> Outcome:
        if not is_keyed(data):
            return make_ng()
        for key, value in data.items():
            field_rule = fields.get(key) if isinstance(key, str) else None
            if field_rule is None:
                return make_ng()
            if is_ng(field_rule.validate(value)):
                return make_ng()
        for key in required:
            if key not in data:
                return make_ng()
        return make_ok(data)

    labels = [f"{key}?" if key in optional else key for key in fields]
    return make_rule(validate, name=f"object{{{', '.join(labels)}}}")


def union_of(*case_rules: Rule[Any]) -> FnRule[Any]:
    """Build a rule accepting data that passes any of *case_rules*.

    Cases are tried in order and the first match wins, so list overlapping
    cases from most to least specific. With no cases, everything fails.
    """
    rules = tuple(case_rules)

    def validate(data: Any) -> Outcome:
        for case_rule in rules:
            if is_ok(case_rule.validate(data)):
                return make_ok(data)
        return make_ng()

    return make_rule(validate, name=f"union({' | '.join(rule_name(r) for r in rules)})")


# (lazy rule id, data id) pairs currently being validated on this call stack.
_active_lazy: ContextVar[set[tuple[int, int]] | None] = ContextVar(
    "_active_lazy", default=None
)


class LazyRule(Generic[T]):
    """A rule built on first use by a zero-argument factory.

    This is how recursive shapes are written: the factory may refer to the
    rule being defined, because it only runs once that definition is done.

    INVARIANT: The factory runs at most once per LazyRule. First use is
    serialized by a lock, so concurrent first calls still build one rule.
    If the factory raises, the cell stays empty and the next call retries.

    Re-entering the same LazyRule for the same data object while it is
    still being validated (cyclic data, left-recursive definitions) yields
    ``Ng`` instead of recursing without end.
    """

    __slots__ = ("_factory", "_lock", "_rule", "name")

    def __init__(self, factory: Callable[[], Rule[T]], *, name: str | None = None) -> None:
        self._factory = factory
        self._lock = threading.RLock()
        self._rule: Rule[T] | None = None
        self.name = name or "lazy"

    @property
    def resolved(self) -> bool:
        """Whether the factory has already produced the inner rule."""
        return self._rule is not None

    def resolve(self) -> Rule[T]:
        """Return the inner rule, running the factory on first call."""
        rule = self._rule
        if rule is not None:
            return rule
        with self._lock:
            rule = self._rule
            if rule is None:
                rule = self._factory()
                if not isinstance(rule, Rule):
                    msg = f"Lazy rule factory for {self.name} returned {rule!r}, not a rule"
                    raise TypeError(msg)
                self._rule = rule
                logger.debug("Resolved lazy rule %s to %s", self.name, rule_name(rule))
        return rule

    def validate(self, data: Any) -> Outcome:
        rule = self.resolve()
        active = _active_lazy.get()
        token = None
        if active is None:
            active = set()
            token = _active_lazy.set(active)
        marker = (id(self), id(data))
        if marker in active:
            return make_ng()
        active.add(marker)
        try:
            return rule.validate(data)
        finally:
            active.discard(marker)
            if token is not None:
                _active_lazy.reset(token)

    def meet(self, data: Any) -> bool:
        return meets(self, data)

    def ensure(self, data: Any) -> T:
        return ensure(self, data)

    def __repr__(self) -> str:
        state = "resolved" if self.resolved else "pending"
        return f"<LazyRule {self.name} ({state})>"


def lazy(factory: Callable[[], Rule[T]], *, name: str | None = None) -> LazyRule[T]:
    """Build a rule whose definition is deferred until first validation.

    Example::

        node = object_literal({"nest": lazy(lambda: node)}, optional_keys=["nest"])
    """
    return LazyRule(factory, name=name)
