"""Canonical text rendering of NLI values."""

from __future__ import annotations

from nli import Value
from nli.types.closure import Builtin, Closure
from nli.types.fraction import Number
from nli.types.null import NullType

STRING_ESCAPES = (
    ("\\", "\\\\"),
    ('"', '\\"'),
    ("\n", "\\n"),
    ("\t", "\\t"),
)


def pretty_string(raw: bytes) -> str:
    text = raw.decode("utf-8", errors="replace")
    for old, new in STRING_ESCAPES:
        text = text.replace(old, new)
    return f'"{text}"'


def pretty(value: Value, tab: int = 0) -> str:
    """Render `value`; `tab` is the indent level of the enclosing dictionary."""
    match value:
        case Number(numerator=n, denominator=1):
            return str(n)
        case Number(numerator=n, denominator=d):
            return f"{n} / {d}"
        case bytes():
            return pretty_string(value)
        case NullType():
            return "_"
        case dict():
            tabs = "\t" * tab
            lines = ["{\n"]
            for key, item in value.items():
                lines.append(f"{tabs}\t{pretty_string(key.encode('utf-8'))}: {pretty(item, tab + 1)},\n")
            lines.append(f"{tabs}}}")
            return "".join(lines)
        case list():
            return "[" + ", ".join(pretty(item, tab) for item in value) + "]"
        case Closure() | Builtin():
            return "(\\x)"
    return "(# UNKNOWN #)"
