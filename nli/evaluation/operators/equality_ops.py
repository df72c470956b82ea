from nli import Branch, EvaluatorFn, Value
from nli.types.environment import Environment
from nli.types.fraction import debool, operate
from nli.types.values import ValueKind, kind_of


def kind_equals(left: Branch, right: Branch, env: Environment, evaluate_fn: EvaluatorFn) -> Value:
    """a ~= b: 1 if both operands are the same kind of value."""
    a = evaluate_fn(left, env)
    b = evaluate_fn(right, env)
    return debool(kind_of(a) is kind_of(b))


def deep_equals(left: Branch, right: Branch, env: Environment, evaluate_fn: EvaluatorFn) -> Value:
    """a = b: defined for STRING and NUMBER pairs only; every other pairing is 0."""
    a = evaluate_fn(left, env)
    b = evaluate_fn(right, env)
    kind = kind_of(a)
    if kind is not kind_of(b):
        return debool(False)
    if kind is ValueKind.STRING:
        return debool(a == b)
    if kind is ValueKind.NUMBER:
        return operate("=", a, b)
    return debool(False)
