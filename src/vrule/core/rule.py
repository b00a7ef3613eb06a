"""Rule — the single-operation validation contract.

A rule is anything with ``validate(data) -> Outcome``. Callers never look
inside a rule; composite rules only call ``validate`` on their children.
``make_rule`` is the extension point: it wraps any validate function as a
conforming rule, and every built-in rule is constructed through it.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, Generic, Protocol, TypeAlias, TypeVar, runtime_checkable

from vrule.core.errors import RuleViolation
from vrule.core.outcome import Outcome, is_ok

T = TypeVar("T")
T_co = TypeVar("T_co", covariant=True)

Validate: TypeAlias = Callable[[Any], Outcome]


@runtime_checkable
class Rule(Protocol[T_co]):
    """Anything exposing ``validate(data) -> Outcome``.

    The type parameter names the type an ``Ok`` outcome narrows data to;
    it exists for type checkers only.
    """

    def validate(self, data: Any) -> Outcome: ...


def rule_name(rule: Rule[Any]) -> str:
    """Return a display name for *rule* (its ``name`` attribute, or its repr)."""
    name = getattr(rule, "name", None)
    return name if isinstance(name, str) else repr(rule)


def meets(rule: Rule[Any], data: Any) -> bool:
    """Return True when *rule* accepts *data*."""
    return is_ok(rule.validate(data))


def ensure(rule: Rule[T], data: Any) -> T:
    """Return the accepted value (for built-in rules, *data* itself).

    Raises:
        RuleViolation: If *rule* rejects *data*.
    """
    outcome = rule.validate(data)
    if not is_ok(outcome):
        raise RuleViolation(rule_name(rule))
    return outcome.value


class FnRule(Generic[T]):
    """A rule backed by a plain validate function.

    The function must be pure and must not mutate its input. It is not
    shielded: whatever it raises reaches the caller of ``validate``.
    """

    __slots__ = ("_validate", "name")

    def __init__(self, validate: Validate, *, name: str | None = None) -> None:
        self._validate = validate
        self.name = name or getattr(validate, "__name__", "rule")

    def validate(self, data: Any) -> Outcome:
        return self._validate(data)

    def meet(self, data: Any) -> bool:
        return meets(self, data)

    def ensure(self, data: Any) -> T:
        return ensure(self, data)

    def __repr__(self) -> str:
        return f"<Rule {self.name}>"


def make_rule(validate: Validate, *, name: str | None = None) -> FnRule[Any]:
    """Wrap *validate* as a rule.

    Args:
        validate: Function taking any value and returning an ``Outcome``.
        name: Display name used in reprs, logs and CLI output. Defaults to
            the function's ``__name__``.
    """
    return FnRule(validate, name=name)
