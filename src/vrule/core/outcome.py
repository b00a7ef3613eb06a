"""Outcome — the two-variant result every rule returns.

INVARIANT: Every ``validate`` call returns exactly one of ``Ok`` or ``Ng``.
``Ok.value`` is the very object that was validated (never a copy).
``Ng`` carries no payload: no path, no message, no cause.
"""

from __future__ import annotations

from typing import Any, Literal, TypeAlias, TypeGuard

from pydantic import BaseModel


class Ok(BaseModel):
    """Accepted outcome carrying the validated value."""

    model_config = {"frozen": True}

    kind: Literal["ok"] = "ok"
    value: Any = None


class Ng(BaseModel):
    """Rejected ("no good") outcome."""

    model_config = {"frozen": True}

    kind: Literal["ng"] = "ng"


Outcome: TypeAlias = Ok | Ng

# Ng has no fields beyond its tag, so one frozen instance serves every failure.
_NG = Ng()


def make_ok(value: Any) -> Ok:
    """Wrap *value* in an ``Ok`` outcome."""
    return Ok(value=value)


def make_ng() -> Ng:
    """Return the ``Ng`` outcome."""
    return _NG


def is_ok(outcome: Outcome) -> TypeGuard[Ok]:
    return outcome.kind == "ok"


def is_ng(outcome: Outcome) -> TypeGuard[Ng]:
    return outcome.kind == "ng"
