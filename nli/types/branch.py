"""Expression-tree nodes produced by the parser.

Leaves are the lexer's Tokens themselves (WORD, OPERATOR, NUMBER, STRING, NULL);
the classes below are the composite nodes. Every node is immutable once built so
closure bodies can share sub-trees freely.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from nli import Branch


@dataclass(frozen=True, slots=True)
class Expression:
    """A parenthesised (or top-level) expression wrapping exactly one child."""
    child: Branch


@dataclass(frozen=True, slots=True)
class Combination:
    operator: str
    left: Branch
    right: Branch


@dataclass(frozen=True, slots=True)
class Application:
    function: Branch
    argument: Branch


@dataclass(frozen=True, slots=True)
class Function:
    """Lambda literal; `parameter` is None when the function ignores its argument."""
    parameter: Optional[str]
    body: Expression


@dataclass(frozen=True, slots=True)
class ListNode:
    elements: tuple[Expression, ...]


@dataclass(frozen=True, slots=True)
class DictionaryNode:
    # (key, value): the key is the bare child of the parsed key expression
    entries: tuple[tuple[Branch, Expression], ...]
