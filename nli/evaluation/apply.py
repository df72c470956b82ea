"""Application engine for NLI.

Centralizes closure invocation so the evaluator and the operators that call
functions (map, `.>`) share one definition:
- user closures evaluate their body in the captured environment, extended
  with the argument when the closure names a parameter;
- builtins are host Python callables invoked with the argument value;
- anything else is not applicable.
"""

from nli import Value, EvaluatorFn
from nli.errors import EvalError
from nli.types.closure import Builtin, Closure
from nli.types.values import kind_name


def apply(fn: Value, argument: Value, evaluate_fn: EvaluatorFn) -> Value:
    """Invoke `fn` with an already-evaluated `argument`."""
    if isinstance(fn, Builtin):
        return fn.fn(argument)
    if isinstance(fn, Closure):
        return evaluate_fn(fn.body, fn.extend_env(argument))
    raise EvalError(f"Cannot apply non-closure {kind_name(fn)}")
