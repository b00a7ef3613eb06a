"""Runtime value kinds and their predicates.

The scalar kinds follow a dynamically-typed data model:

- number and bigint both accept Python ints (ints are arbitrary precision);
  number also accepts floats. ``bool`` is never a number.
- symbol is an ``enum.Enum`` member, Python's named opaque atom.
- undefined is the ``UNDEFINED`` sentinel, standing in for an absent value.
- null is ``None`` *or* ``UNDEFINED`` (loose equality, kept on purpose).
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from enum import Enum, StrEnum
from typing import Any, Final


class _Undefined:
    """Type of the ``UNDEFINED`` sentinel."""

    _instance: _Undefined | None = None

    def __new__(cls) -> _Undefined:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "UNDEFINED"

    def __bool__(self) -> bool:
        return False

    def __copy__(self) -> _Undefined:
        return self

    def __deepcopy__(self, memo: dict[int, Any]) -> _Undefined:
        return self

    def __reduce__(self) -> str:
        return "UNDEFINED"


UNDEFINED: Final = _Undefined()


class ValueKind(StrEnum):
    """Scalar kinds a primitive rule can check."""

    STRING = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"
    BIGINT = "bigint"
    SYMBOL = "symbol"
    UNDEFINED = "undefined"
    NULL = "null"


def is_string(value: Any) -> bool:
    return isinstance(value, str)


def is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def is_boolean(value: Any) -> bool:
    return isinstance(value, bool)


def is_bigint(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def is_symbol(value: Any) -> bool:
    return isinstance(value, Enum)


def is_undefined(value: Any) -> bool:
    return value is UNDEFINED


def is_null(value: Any) -> bool:
    """True for ``None`` and for ``UNDEFINED``."""
    return value is None or value is UNDEFINED


def is_sequence(value: Any) -> bool:
    """True for ordered sequence containers (``list`` and ``tuple``)."""
    return isinstance(value, (list, tuple))


def is_keyed(value: Any) -> bool:
    """True for keyed containers (any ``Mapping``)."""
    return isinstance(value, Mapping)


KIND_PREDICATES: dict[ValueKind, Callable[[Any], bool]] = {
    ValueKind.STRING: is_string,
    ValueKind.NUMBER: is_number,
    ValueKind.BOOLEAN: is_boolean,
    ValueKind.BIGINT: is_bigint,
    ValueKind.SYMBOL: is_symbol,
    ValueKind.UNDEFINED: is_undefined,
    ValueKind.NULL: is_null,
}


def matches_kind(value: Any, kind: ValueKind | str) -> bool:
    """Check whether *value* is of the scalar *kind*.

    Raises:
        ValueError: If *kind* is not a known ``ValueKind``.
    """
    return KIND_PREDICATES[ValueKind(kind)](value)
