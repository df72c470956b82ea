"""Bit operations over fixed-length byte buffers.

Buffers are big-endian: byte 0 is the most significant. Shifts keep the
buffer length, carry bits across byte boundaries and fill with zeros.
"""

from nli import Branch, EvaluatorFn, Value
from nli.errors import EvalError
from nli.evaluation.operators.checks import as_count, expect
from nli.types.environment import Environment
from nli.types.values import ValueKind


def shift_bytes(buf: bytes, n: int, left: bool) -> bytes:
    size = len(buf)
    whole, bits = divmod(n, 8)
    res = bytearray(size)

    # move whole bytes
    for i in range(size):
        source = size - i - 1 if left else i
        dest = source - whole if left else source + whole
        if dest < 0 or dest >= size:
            break
        res[dest] = buf[source]

    # then the remaining bits, carrying into the neighbouring byte
    carry = 0
    for i in range(size):
        p = size - i - 1 if left else i
        v = res[p]
        if left:
            res[p] = ((v << bits) & 0xFF) | carry
            carry = v >> (8 - bits)
        else:
            res[p] = (v >> bits) | carry
            carry = (v << (8 - bits)) & 0xFF
    return bytes(res)


def shift_left(left: Branch, right: Branch, env: Environment, evaluate_fn: EvaluatorFn) -> Value:
    buf = expect("<<", evaluate_fn(left, env), ValueKind.STRING)
    return shift_bytes(buf, as_count("<<", evaluate_fn(right, env)), left=True)


def shift_right(left: Branch, right: Branch, env: Environment, evaluate_fn: EvaluatorFn) -> Value:
    buf = expect(">>", evaluate_fn(left, env), ValueKind.STRING)
    return shift_bytes(buf, as_count(">>", evaluate_fn(right, env)), left=False)


BYTEWISE = {
    "&": lambda x, y: x & y,
    "|": lambda x, y: x | y,
    "^": lambda x, y: x ^ y,
}


def _bytewise(op: str):
    combine = BYTEWISE[op]

    def bytewise_op(left: Branch, right: Branch, env: Environment, evaluate_fn: EvaluatorFn) -> Value:
        a = expect(op, evaluate_fn(left, env), ValueKind.STRING)
        b = expect(op, evaluate_fn(right, env), ValueKind.STRING)
        if len(a) != len(b):
            raise EvalError(f"'{op}' expects buffers of equal length, got {len(a)} and {len(b)}")
        return bytes(combine(x, y) for x, y in zip(a, b))

    return bytewise_op


bit_and = _bytewise("&")
bit_or = _bytewise("|")
bit_xor = _bytewise("^")
