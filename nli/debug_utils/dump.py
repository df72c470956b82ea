"""Raw structural dumps of values, tokens and expression trees.

These are for inspection only: the shape is not part of the language and
may change. Colours follow the same ANSI scheme for every dump.
"""

from __future__ import annotations

from typing import Optional

from nli import Branch, Value
from nli.config import get_color_enabled
from nli.types.branch import (
    Application,
    Combination,
    DictionaryNode,
    Expression,
    Function,
    ListNode,
)
from nli.types.closure import Builtin, Closure
from nli.types.fraction import Number
from nli.types.null import NullType
from nli.types.token import Token

# ----------------- ANSI colors -----------------
RESET = "\033[0m"
COLOR_KIND = "\033[94m"
COLOR_NUMBER = "\033[93m"
COLOR_STRING = "\033[92m"
COLOR_CLOSURE = "\033[95m"
COLOR_OPERATOR = "\033[96m"

INDENT = "  "


def _paint(text: str, color: str, enabled: bool) -> str:
    return f"{color}{text}{RESET}" if enabled else text


def _use_color(color: Optional[bool]) -> bool:
    return get_color_enabled() if color is None else color


# ----------------- values -----------------
def dump(value: Value, color: Optional[bool] = None) -> str:
    """Kind-tagged, indented rendering of a runtime value."""
    enabled = _use_color(color)
    lines: list[str] = []
    _dump_value(value, 0, lines, enabled, prefix="")
    return "\n".join(lines)


def _dump_value(value: Value, depth: int, lines: list[str], c: bool, prefix: str) -> None:
    pad = INDENT * depth + prefix
    match value:
        case Number(numerator=n, denominator=d):
            lines.append(f"{pad}{_paint('NUMBER', COLOR_KIND, c)} {_paint(f'{n}/{d}', COLOR_NUMBER, c)}")
        case bytes():
            lines.append(f"{pad}{_paint('STRING', COLOR_KIND, c)} {_paint(repr(value), COLOR_STRING, c)}")
        case NullType():
            lines.append(f"{pad}{_paint('NULL', COLOR_KIND, c)}")
        case list():
            lines.append(f"{pad}{_paint('LIST', COLOR_KIND, c)} ({len(value)})")
            for item in value:
                _dump_value(item, depth + 1, lines, c, prefix="")
        case dict():
            lines.append(f"{pad}{_paint('DICTIONARY', COLOR_KIND, c)} ({len(value)})")
            for key, item in value.items():
                _dump_value(item, depth + 1, lines, c, prefix=f"{key!r}: ")
        case Builtin():
            lines.append(f"{pad}{_paint('CLOSURE', COLOR_KIND, c)} {_paint(f'<builtin {value.name}>', COLOR_CLOSURE, c)}")
        case Closure():
            label = "\\" + (value.parameter if value.parameter is not None else "_")
            lines.append(f"{pad}{_paint('CLOSURE', COLOR_KIND, c)} {_paint(label, COLOR_CLOSURE, c)}")
        case _:
            lines.append(f"{pad}<foreign {type(value).__name__}>")


# ----------------- tokens -----------------
def dump_tokens(tokens: list[Token], color: Optional[bool] = None) -> str:
    enabled = _use_color(color)
    return "\n".join(
        f"{_paint(tok.kind.name, COLOR_KIND, enabled)} {tok.payload!r}" if tok.payload is not None
        else _paint(tok.kind.name, COLOR_KIND, enabled)
        for tok in tokens
    )


# ----------------- expression trees -----------------
def dump_tree(node: Branch, color: Optional[bool] = None) -> str:
    enabled = _use_color(color)
    lines: list[str] = []
    _dump_node(node, 0, lines, enabled)
    return "\n".join(lines)


def _dump_node(node: Branch, depth: int, lines: list[str], c: bool) -> None:
    pad = INDENT * depth
    match node:
        case Expression(child=child):
            lines.append(f"{pad}EXPRESSION")
            _dump_node(child, depth + 1, lines, c)
        case Combination(operator=op, left=left, right=right):
            lines.append(f"{pad}COMBINATION {_paint(op, COLOR_OPERATOR, c)}")
            _dump_node(left, depth + 1, lines, c)
            _dump_node(right, depth + 1, lines, c)
        case Application(function=function, argument=argument):
            lines.append(f"{pad}APPLICATION")
            _dump_node(function, depth + 1, lines, c)
            _dump_node(argument, depth + 1, lines, c)
        case Function(parameter=parameter, body=body):
            label = "\\" + (parameter or "_")
            lines.append(f"{pad}FUNCTION {_paint(label, COLOR_CLOSURE, c)}")
            _dump_node(body, depth + 1, lines, c)
        case ListNode(elements=elements):
            lines.append(f"{pad}LIST ({len(elements)})")
            for element in elements:
                _dump_node(element, depth + 1, lines, c)
        case DictionaryNode(entries=entries):
            lines.append(f"{pad}DICTIONARY ({len(entries)})")
            for key, value in entries:
                lines.append(f"{pad}{INDENT}KEY")
                _dump_node(key, depth + 2, lines, c)
                lines.append(f"{pad}{INDENT}VALUE")
                _dump_node(value, depth + 2, lines, c)
        case Token():
            lines.append(pad + dump_tokens([node], color=c))
        case _:
            lines.append(f"{pad}<unknown {node!r}>")
