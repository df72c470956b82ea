"""Registry of binary operators for the NLI evaluator.

Maps operator text to a handler `(left, right, env, evaluate_fn) -> Value`.
Handlers receive their operand nodes unevaluated and decide themselves what
to evaluate. Precedence lives in the parser; this table only covers meaning.
"""

from nli.evaluation.operators.access_op import member_access
from nli.evaluation.operators.sequence_ops import (
    concat_strings,
    concat_lists,
    merge_dicts,
    length_minus,
    map_op,
    trim_start,
    trim_end,
)
from nli.evaluation.operators.bitwise_ops import shift_left, shift_right, bit_and, bit_or, bit_xor
from nli.evaluation.operators.numeric_ops import NUMERIC_OPERATORS
from nli.evaluation.operators.equality_ops import deep_equals, kind_equals

OPERATORS = {
    ".": member_access,
    ".>": map_op,
    "/<": trim_start,
    "/>": trim_end,
    "--": length_minus,
    "++": concat_lists,
    "..": concat_strings,
    "//": merge_dicts,
    **NUMERIC_OPERATORS,
    "<<": shift_left,
    ">>": shift_right,
    "=": deep_equals,
    "~=": kind_equals,
    "&": bit_and,
    "|": bit_or,
    "^": bit_xor,
}
