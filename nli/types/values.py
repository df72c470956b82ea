"""Value kinds and kind inspection for runtime values."""

from __future__ import annotations

from enum import Enum

from nli import Value
from nli.types.closure import Builtin, Closure
from nli.types.fraction import Number
from nli.types.null import NullType


class ValueKind(Enum):
    NUMBER = "number"
    STRING = "string"
    NULL = "null"
    LIST = "list"
    DICTIONARY = "dictionary"
    CLOSURE = "closure"


def kind_of(value: Value) -> ValueKind | None:
    """Return the kind of a runtime value, or None for a foreign object."""
    match value:
        case Number():
            return ValueKind.NUMBER
        case bytes():
            return ValueKind.STRING
        case NullType():
            return ValueKind.NULL
        case list():
            return ValueKind.LIST
        case dict():
            return ValueKind.DICTIONARY
        case Closure() | Builtin():
            return ValueKind.CLOSURE
    return None


def kind_name(value: Value) -> str:
    kind = kind_of(value)
    return kind.name if kind is not None else type(value).__name__
