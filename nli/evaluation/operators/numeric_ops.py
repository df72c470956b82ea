from nli import Branch, EvaluatorFn, Value
from nli.evaluation.operators.checks import expect
from nli.types.environment import Environment
from nli.types.fraction import operate
from nli.types.values import ValueKind


def _numeric(op: str):
    def numeric_op(left: Branch, right: Branch, env: Environment, evaluate_fn: EvaluatorFn) -> Value:
        a = expect(op, evaluate_fn(left, env), ValueKind.NUMBER)
        b = expect(op, evaluate_fn(right, env), ValueKind.NUMBER)
        return operate(op, a, b)

    numeric_op.__name__ = f"numeric_{op}"
    return numeric_op


NUMERIC_OPERATORS = {op: _numeric(op) for op in ("+", "-", "*", "/", "<", ">", "<=", ">=")}
