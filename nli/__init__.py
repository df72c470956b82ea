# Core type aliases for the NLI data model.
# Runtime values use plain Python types where one fits:
#   NUMBER -> nli.types.fraction.Number, STRING -> bytes, NULL -> nli.types.null.Null,
#   LIST -> list, DICTIONARY -> dict[str, Value], CLOSURE -> nli.types.closure.Closure or Builtin.
#
# Naming guidance:
# - Branch: use in reader/parser code to denote nodes of the expression tree.
# - Value:  use in evaluator/runtime code to denote evaluated values.

from typing import Any, Callable

# Runtime value alias
Value = Any
# Expression-tree node alias (a Token leaf or one of nli.types.branch)
Branch = Any

# Evaluator function type: (node, environment) -> Value
EvaluatorFn = Callable[..., Value]
