from nli import Branch, EvaluatorFn, Value
from nli.errors import EvalError
from nli.evaluation.operators.checks import as_integer
from nli.types.environment import Environment
from nli.types.fraction import Number
from nli.types.null import Null
from nli.types.token import Token, TokenKind
from nli.types.values import kind_name


def member_key(right: Branch, env: Environment, evaluate_fn: EvaluatorFn) -> int | str:
    """A bare WORD is a literal key; otherwise NUMBER -> index, STRING -> key."""
    if isinstance(right, Token) and right.kind is TokenKind.WORD:
        return right.payload
    key = evaluate_fn(right, env)
    if isinstance(key, Number):
        return as_integer(".", key)
    if isinstance(key, bytes):
        return key.decode("utf-8", errors="replace")
    raise EvalError(f"'.' cannot index with {kind_name(key)}")


def member_access(
    left: Branch, right: Branch, env: Environment, evaluate_fn: EvaluatorFn
) -> Value:
    """a.b: index a STRING or LIST, or look up a DICTIONARY key; absent -> Null."""
    target = evaluate_fn(left, env)
    key = member_key(right, env, evaluate_fn)

    match target:
        case bytes():
            if isinstance(key, int) and 0 <= key < len(target):
                return target[key:key + 1]
            return Null
        case list():
            if isinstance(key, int) and 0 <= key < len(target):
                return target[key]
            return Null
        case dict():
            return target.get(str(key), Null)

    raise EvalError(f"'.' cannot index into {kind_name(target)}")
