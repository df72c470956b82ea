"""Operand checks shared by the operator handlers."""

from __future__ import annotations

from nli import Value
from nli.errors import EvalError
from nli.types.fraction import Number
from nli.types.values import ValueKind, kind_of, kind_name


def expect(op: str, value: Value, *kinds: ValueKind) -> Value:
    """Return `value` if it is one of `kinds`, else raise EvalError."""
    if kind_of(value) not in kinds:
        wanted = " or ".join(k.name for k in kinds)
        raise EvalError(f"'{op}' expects {wanted}, got {kind_name(value)}")
    return value


def as_integer(op: str, value: Value) -> int:
    """The integer a NUMBER denotes; unreduced forms such as 4/2 are accepted."""
    expect(op, value, ValueKind.NUMBER)
    n, d = value.numerator, value.denominator
    if d == 0 or n % d != 0:
        raise EvalError(f"'{op}' expects an integer, got {Number(n, d)}")
    return n // d


def as_count(op: str, value: Value) -> int:
    n = as_integer(op, value)
    if n < 0:
        raise EvalError(f"'{op}' expects a non-negative count, got {n}")
    return n
