"""Exact rational arithmetic for NLI numbers.

A NUMBER is a numerator/denominator pair of Python ints. There is no floating
point anywhere in the language, and a zero denominator is an ordinary value:
the `@` literal is 1/0 and arithmetic simply carries it along.

Reduction rules:
- literals and the results of + and - are reduced to lowest terms;
- * and / cross-cancel their operands but never reduce the product;
- comparisons are exact cross-multiplications and yield 0 or 1.
"""

from __future__ import annotations

from dataclasses import dataclass

from nli.errors import EvalError


@dataclass(frozen=True, slots=True)
class Number:
    numerator: int
    denominator: int

    def __str__(self) -> str:
        if self.denominator == 1:
            return str(self.numerator)
        return f"{self.numerator} / {self.denominator}"


def gcd(a: int, b: int) -> int:
    while b:
        a, b = b, a % b
    return abs(a)


def simplify(n: int, d: int) -> tuple[int, int]:
    """Reduce n/d by gcd(|n|, |d|); a zero gcd leaves the pair unchanged."""
    g = gcd(abs(n), abs(d)) or 1
    return n // g, d // g


def debool(x: object) -> Number:
    return Number(1 if x else 0, 1)


def deint(x: int) -> Number:
    return Number(x, 1)


def _mul(a: Number, b: Number) -> Number:
    n1, d1 = simplify(a.numerator, b.denominator)
    n2, d2 = simplify(b.numerator, a.denominator)
    return Number(n1 * n2, d2 * d1)


def _add(a: Number, b: Number) -> Number:
    n, d = simplify(
        a.numerator * b.denominator + b.numerator * a.denominator,
        a.denominator * b.denominator,
    )
    return Number(n, d)


def _eq(a: Number, b: Number) -> bool:
    return a.numerator * b.denominator == b.numerator * a.denominator


def _lt(a: Number, b: Number) -> bool:
    return a.numerator * b.denominator < b.numerator * a.denominator


def operate(op: str, a: Number, b: Number) -> Number:
    """Apply a binary arithmetic or comparison operator to two numbers."""
    match op:
        case "*":
            return _mul(a, b)
        case "/":
            return _mul(a, Number(b.denominator, b.numerator))
        case "+":
            return _add(a, b)
        case "-":
            return _add(a, Number(-b.numerator, b.denominator))
        case "=":
            return debool(_eq(a, b))
        case "<":
            return debool(_lt(a, b))
        case ">":
            return debool(_lt(b, a))
        case "<=":
            return debool(_eq(a, b) or _lt(a, b))
        case ">=":
            return debool(_eq(b, a) or _lt(b, a))
    raise EvalError(f"Unknown numeric operator {op!r}")
