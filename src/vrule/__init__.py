"""vrule — composable runtime validation rules for untyped data."""

from vrule.core.errors import DocumentError, RuleViolation, SchemaError, VruleError
from vrule.core.kinds import UNDEFINED, ValueKind
from vrule.core.outcome import Ng, Ok, Outcome, is_ng, is_ok, make_ng, make_ok
from vrule.core.rule import FnRule, Rule, ensure, make_rule, meets
from vrule.rules.composite import (
    LazyRule,
    array_of,
    dictionary_of,
    lazy,
    object_literal,
    tuple_of,
    union_of,
)
from vrule.rules.literals import (
    bool_literal,
    literal,
    num_literal,
    rule_false,
    rule_true,
    str_literal,
)
from vrule.rules.primitives import (
    rule_bigint,
    rule_boolean,
    rule_null,
    rule_number,
    rule_string,
    rule_symbol,
    rule_undefined,
)

__version__ = "0.3.0"

__all__ = [
    "__version__",
    # Outcomes
    "Ok",
    "Ng",
    "Outcome",
    "make_ok",
    "make_ng",
    "is_ok",
    "is_ng",
    # Rule contract
    "Rule",
    "FnRule",
    "make_rule",
    "meets",
    "ensure",
    # Kinds
    "UNDEFINED",
    "ValueKind",
    # Primitive rules
    "rule_string",
    "rule_number",
    "rule_boolean",
    "rule_bigint",
    "rule_symbol",
    "rule_undefined",
    "rule_null",
    # Literal rules
    "literal",
    "str_literal",
    "num_literal",
    "bool_literal",
    "rule_true",
    "rule_false",
    # Composite rules
    "array_of",
    "dictionary_of",
    "tuple_of",
    "object_literal",
    "union_of",
    "lazy",
    "LazyRule",
    # Errors
    "VruleError",
    "RuleViolation",
    "SchemaError",
    "DocumentError",
]
