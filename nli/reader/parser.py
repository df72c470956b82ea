"""
  NLI Parser

Three mutually recursive rules over a flat token list, each returning
`(node, next_index)`:

    - pexp:  an expression, terminated (not consumed) by ) ] } , :
    - plist: the elements of a [...] literal
    - pdict: the entries of a {...} literal

An expression is first collected as a flat sequence of branches and then
folded by operator precedence, tightest tier first. Juxtaposed non-operator
branches fold into left-associative applications on every pass, so function
application binds tighter than any operator.
"""

from __future__ import annotations

from nli import Branch
from nli.errors import ParseError
from nli.types.branch import (
    Application,
    Combination,
    DictionaryNode,
    Expression,
    Function,
    ListNode,
)
from nli.types.token import NULL_TOKEN, Token, TokenKind


PRECEDENCE: list[tuple[str, ...]] = [
    (".",),
    (".>",),
    ("/<", "/>"),
    ("--",),
    ("++", "..", "//"),
    ("*", "/"),
    ("+", "-"),
    ("<<", ">>"),
    ("<=", ">=", "<", ">"),
    ("=", "~="),
    ("&", "|", "^"),
]

KNOWN_OPERATORS = frozenset(op for tier in PRECEDENCE for op in tier)

TERMINATORS = frozenset(")]},:")

CLOSERS = {"(": ")", "[": "]", "{": "}"}


def _is_operator(branch: Branch) -> bool:
    return isinstance(branch, Token) and branch.kind is TokenKind.OPERATOR


def _is_null(branch: Branch) -> bool:
    return isinstance(branch, Token) and branch.kind is TokenKind.NULL


class TokenStream:
    def __init__(self, tokens: list[Token]):
        self.tokens = tokens

    def peek(self, i: int) -> Token:
        """Token at `i`; running off the end is a structural error."""
        if i >= len(self.tokens):
            raise ParseError("Unexpected end of input")
        return self.tokens[i]

    def expect_closer(self, i: int, closer: str) -> None:
        tok = self.tokens[i] if i < len(self.tokens) else None
        if tok is None or not tok.is_(TokenKind.BRACKET, closer):
            found = "end of input" if tok is None else repr(tok.payload)
            raise ParseError(f"Expected '{closer}' but found {found}")

    # ------------------------
    # [ ... ]
    # ------------------------
    def plist(self, i: int) -> tuple[ListNode, int]:
        elements: list[Expression] = []
        while True:
            element, i = self.pexp(i)
            end = self.peek(i).is_(TokenKind.BRACKET, "]")
            # an empty or NULL slot before `]` closes the list: [], [a, b,] and [a, _]
            if end and _is_null(element.child):
                break
            elements.append(element)
            if end:
                break
            # one separator: a comma or any other stray terminator
            i += 1
        return ListNode(tuple(elements)), i

    # ------------------------
    # { ... }
    # ------------------------
    def pdict(self, i: int) -> tuple[DictionaryNode, int]:
        entries: list[tuple[Branch, Expression]] = []
        while True:
            key_expr, i = self.pexp(i)
            key = key_expr.child
            tok = self.peek(i)
            end = tok.is_(TokenKind.BRACKET, "}")

            if end and _is_null(key):
                break

            # {x} is shorthand for {x: x}
            if end or tok.is_(TokenKind.SPECIAL, ","):
                entries.append((key, key_expr))
                if end:
                    break
                i += 1
                continue

            if not tok.is_(TokenKind.SPECIAL, ":"):
                raise ParseError(f"Expected ':' after dictionary key but found {tok.payload!r}")

            value, i = self.pexp(i + 1)
            entries.append((key, value))
            if self.peek(i).is_(TokenKind.BRACKET, "}"):
                break
            i += 1
        return DictionaryNode(tuple(entries)), i

    # ------------------------
    # expressions
    # ------------------------
    def pexp(self, i: int) -> tuple[Expression, int]:
        branches: list[Branch] = []
        tokens = self.tokens

        while i < len(tokens):
            tok = tokens[i]

            if tok.kind in (TokenKind.BRACKET, TokenKind.SPECIAL) and tok.payload in TERMINATORS:
                break

            if tok.kind is TokenKind.BRACKET:
                opener = tok.payload
                if opener == "(":
                    node, i = self.pexp(i + 1)
                elif opener == "[":
                    node, i = self.plist(i + 1)
                else:
                    node, i = self.pdict(i + 1)
                self.expect_closer(i, CLOSERS[opener])
                branches.append(node)
            elif tok.is_(TokenKind.SPECIAL, "\\"):
                # The token after `\` is always consumed; only a WORD names the parameter
                slot = self.peek(i + 1)
                parameter = slot.payload if slot.kind is TokenKind.WORD else None
                body, i = self.pexp(i + 2)
                branches.append(Function(parameter, body))
                # the body ran to this expression's terminator
                break
            else:
                branches.append(tok)
            i += 1

        return Expression(self.resolve(branches)), i

    def resolve(self, branches: list[Branch]) -> Branch:
        """Fold a flat branch sequence into a single node by precedence."""
        for tier in PRECEDENCE:
            x = 1
            while x < len(branches):
                current = branches[x]
                if _is_operator(current):
                    if current.payload in tier:
                        if x + 1 >= len(branches):
                            raise ParseError(f"Operator '{current.payload}' is missing its right operand")
                        left, right = branches[x - 1], branches[x + 1]
                        if _is_operator(left) or _is_operator(right):
                            raise ParseError(f"Operator '{current.payload}' is missing an operand")
                        branches[x - 1:x + 2] = [Combination(current.payload, left, right)]
                        continue
                elif not _is_operator(branches[x - 1]):
                    branches[x - 1:x + 1] = [Application(branches[x - 1], current)]
                    continue
                x += 1

        if not branches:
            return NULL_TOKEN
        if len(branches) > 1 or _is_operator(branches[0]):
            stray = next((b for b in branches if _is_operator(b)), None)
            if stray is not None and stray.payload not in KNOWN_OPERATORS:
                raise ParseError(f"Unknown operator '{stray.payload}'")
            raise ParseError("Operator is missing an operand")
        return branches[0]


def parse(tokens: list[Token]) -> Expression:
    """Parse a whole program (a single expression) from its tokens."""
    stream = TokenStream(tokens)
    tree, i = stream.pexp(0)
    if i < len(tokens):
        raise ParseError(f"Unexpected {tokens[i].payload!r} at token {i}")
    return tree
