"""Operators over STRING, LIST and DICTIONARY values.

    a .. b   concatenate two STRINGs
    a ++ b   concatenate two LISTs
    a // b   merge two DICTIONARYs, b wins on collisions
    a -- n   length of a minus n
    a .> f   map f over a LIST, or over a DICTIONARY's values by sorted key
    s /< n   drop n bytes from the start of s
    s /> n   drop n bytes from the end of s
"""

from nli import Branch, EvaluatorFn, Value
from nli.evaluation.apply import apply
from nli.evaluation.operators.checks import as_count, expect
from nli.types.environment import Environment
from nli.types.fraction import deint, operate
from nli.types.values import ValueKind


def concat_strings(left: Branch, right: Branch, env: Environment, evaluate_fn: EvaluatorFn) -> Value:
    a = expect("..", evaluate_fn(left, env), ValueKind.STRING)
    b = expect("..", evaluate_fn(right, env), ValueKind.STRING)
    return a + b


def concat_lists(left: Branch, right: Branch, env: Environment, evaluate_fn: EvaluatorFn) -> Value:
    a = expect("++", evaluate_fn(left, env), ValueKind.LIST)
    b = expect("++", evaluate_fn(right, env), ValueKind.LIST)
    return [*a, *b]


def merge_dicts(left: Branch, right: Branch, env: Environment, evaluate_fn: EvaluatorFn) -> Value:
    a = expect("//", evaluate_fn(left, env), ValueKind.DICTIONARY)
    b = expect("//", evaluate_fn(right, env), ValueKind.DICTIONARY)
    return {**a, **b}


def length_minus(left: Branch, right: Branch, env: Environment, evaluate_fn: EvaluatorFn) -> Value:
    a = expect("--", evaluate_fn(left, env), ValueKind.STRING, ValueKind.LIST, ValueKind.DICTIONARY)
    b = expect("--", evaluate_fn(right, env), ValueKind.NUMBER)
    return operate("-", deint(len(a)), b)


def map_op(left: Branch, right: Branch, env: Environment, evaluate_fn: EvaluatorFn) -> Value:
    a = expect(".>", evaluate_fn(left, env), ValueKind.LIST, ValueKind.DICTIONARY)
    fn = expect(".>", evaluate_fn(right, env), ValueKind.CLOSURE)
    if isinstance(a, dict):
        keys = sorted(a, key=lambda k: k.encode("utf-8"))
        return [apply(fn, a[k], evaluate_fn) for k in keys]
    return [apply(fn, x, evaluate_fn) for x in a]


def trim_start(left: Branch, right: Branch, env: Environment, evaluate_fn: EvaluatorFn) -> Value:
    s = expect("/<", evaluate_fn(left, env), ValueKind.STRING)
    n = as_count("/<", evaluate_fn(right, env))
    return s[n:]


def trim_end(left: Branch, right: Branch, env: Environment, evaluate_fn: EvaluatorFn) -> Value:
    s = expect("/>", evaluate_fn(left, env), ValueKind.STRING)
    n = as_count("/>", evaluate_fn(right, env))
    return s[:max(len(s) - n, 0)]
