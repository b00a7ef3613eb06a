"""Fixed rules for each scalar kind.

Each rule runs one kind predicate from :mod:`vrule.core.kinds` and returns
``Ok(data)`` on a match, ``Ng`` otherwise.
"""

from __future__ import annotations

from collections.abc import Callable
from enum import Enum
from typing import Any

from vrule.core.kinds import (
    is_bigint,
    is_boolean,
    is_null,
    is_number,
    is_string,
    is_symbol,
    is_undefined,
)
from vrule.core.outcome import Outcome, make_ng, make_ok
from vrule.core.rule import FnRule, make_rule


def _kind_rule(name: str, predicate: Callable[[Any], bool]) -> FnRule[Any]:
    def validate(data: Any) -> Outcome:
        return make_ok(data) if predicate(data) else make_ng()

    return make_rule(validate, name=name)


rule_string: FnRule[str] = _kind_rule("string", is_string)
rule_number: FnRule[int | float] = _kind_rule("number", is_number)
rule_boolean: FnRule[bool] = _kind_rule("boolean", is_boolean)
rule_bigint: FnRule[int] = _kind_rule("bigint", is_bigint)
rule_symbol: FnRule[Enum] = _kind_rule("symbol", is_symbol)
rule_undefined: FnRule[Any] = _kind_rule("undefined", is_undefined)
# Accepts UNDEFINED as well as None.
rule_null: FnRule[None] = _kind_rule("null", is_null)
