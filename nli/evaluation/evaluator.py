"""Core tree-walking evaluator for NLI.

`evaluate(node, env)` is a pure recursive function of the node and the
environment. Operators are dispatched through the OPERATORS registry with
their operand nodes unevaluated, since `.` treats a bare WORD on its right
as a literal key.
"""

from __future__ import annotations

from nli import Branch, Value
from nli.errors import EvalError
from nli.evaluation.apply import apply
from nli.evaluation.operators import OPERATORS
from nli.types.branch import (
    Application,
    Combination,
    DictionaryNode,
    Expression,
    Function,
    ListNode,
)
from nli.types.closure import Closure
from nli.types.environment import Environment
from nli.types.null import Null
from nli.types.token import Token, TokenKind
from nli.types.values import kind_name


def evaluate(node: Branch, env: Environment) -> Value:
    match node:
        case Expression(child=child):
            return evaluate(child, env)

        case Combination(operator=op, left=left, right=right):
            handler = OPERATORS.get(op)
            if handler is None:
                raise EvalError(f"Unknown operator '{op}'")
            return handler(left, right, env, evaluate)

        case Application(function=function, argument=argument):
            fn = evaluate(function, env)
            arg = evaluate(argument, env)
            return apply(fn, arg, evaluate)

        case Function(parameter=parameter, body=body):
            return Closure(parameter, body, env)

        case ListNode(elements=elements):
            return [evaluate(element, env) for element in elements]

        case DictionaryNode(entries=entries):
            result: dict[str, Value] = {}
            for key, value in entries:
                result[dictionary_key(key, env)] = evaluate(value, env)
            return result

        case Token(kind=TokenKind.WORD, payload=name):
            return env.lookup(name)

        case Token(kind=TokenKind.NUMBER | TokenKind.STRING, payload=payload):
            return payload

        case Token(kind=TokenKind.NULL):
            return Null

    raise EvalError(f"Cannot evaluate {node!r}")


def dictionary_key(key: Branch, env: Environment) -> str:
    """A WORD key is its own text; any other key must evaluate to a STRING."""
    if isinstance(key, Token) and key.kind is TokenKind.WORD:
        return key.payload
    value = evaluate(key, env)
    if not isinstance(value, bytes):
        raise EvalError(f"Dictionary key must be a STRING, not {kind_name(value)}")
    return value.decode("utf-8", errors="replace")
