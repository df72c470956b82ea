"""
  NLI Lexer

- Single left-to-right scan with a "current token kind" accumulator
- Emits a flat list of Tokens:

    - ( ) [ ] { }           -> BRACKET, one token each
    - \\ : ,                -> SPECIAL, one token each
    - + - * / < > = . ~ & | ^ runs -> OPERATOR
    - any other run         -> WORD
    - "..."                 -> STRING (raw UTF-8 bytes, \\n and \\t escapes)
    - digits [.] digits     -> NUMBER (exact fraction, `_` digit separators)
    - _                     -> NULL
    - @                     -> NUMBER 1/0
    - #...#                 -> comment, dropped (\\ escapes inside)
"""

from __future__ import annotations

from typing import Optional

from nli.errors import LexError
from nli.types.fraction import Number, simplify
from nli.types.token import Token, TokenKind


WHITESPACE = frozenset(" \t\r\n")
BRACKETS = frozenset("()[]{}")
SPECIALS = frozenset("\\:,")
OPERATOR_CHARS = frozenset("+-*/<>=.~&|^")
DIGITS = frozenset("0123456789")

STRING_ESCAPES: dict[str, str] = {
    "n": "\n",
    "t": "\t",
}


class _Lexer:
    def __init__(self, source: str):
        self.source = source
        self.pos = 0
        self.tokens: list[Token] = []
        self.text = ""
        self.kind: Optional[TokenKind] = None

    def end_token(self) -> None:
        if self.text:
            self.tokens.append(Token(self.kind, self.text))
        self.text = ""
        self.kind = None

    def accumulate(self, kind: TokenKind, c: str) -> None:
        if self.kind is not kind:
            self.end_token()
            self.kind = kind
        self.text += c

    def skip_comment(self) -> None:
        """Skip past the closing `#`; pos starts on the opening one."""
        source, start = self.source, self.pos
        self.pos += 1
        while self.pos < len(source):
            c = source[self.pos]
            if c == "\\":
                self.pos += 2
                continue
            if c == "#":
                return
            self.pos += 1
        raise LexError(f"Unterminated comment starting at {start}")

    def read_string(self) -> bytes:
        """Read a string literal; pos starts on the opening quote, ends on the closing one."""
        source, start = self.source, self.pos
        self.pos += 1
        chars: list[str] = []
        while self.pos < len(source):
            c = source[self.pos]
            if c == "\\":
                if self.pos + 1 >= len(source):
                    break
                self.pos += 1
                escaped = source[self.pos]
                chars.append(STRING_ESCAPES.get(escaped, escaped))
            elif c == '"':
                return "".join(chars).encode("utf-8")
            else:
                chars.append(c)
            self.pos += 1
        raise LexError(f"Unterminated string starting at {start}")

    def read_number(self) -> Number:
        """Read a numeric literal; pos ends on its last consumed character."""
        source = self.source
        digits = ""
        fraction_digits: Optional[int] = None
        last = self.pos
        while self.pos < len(source):
            c = source[self.pos]
            if c == "." and fraction_digits is None:
                fraction_digits = 0
            elif c in DIGITS:
                digits += c
                if fraction_digits is not None:
                    fraction_digits += 1
            elif c != "_":
                break
            last = self.pos
            self.pos += 1
        self.pos = last
        # A trailing `.` belongs to whatever follows (e.g. the `.` operator)
        if source[last] == ".":
            self.pos -= 1
        n, d = simplify(int(digits), 10 ** (fraction_digits or 0))
        return Number(n, d)

    def run(self) -> list[Token]:
        source = self.source
        while self.pos < len(source):
            c = source[self.pos]

            if c == "#":
                self.skip_comment()
            elif c == '"':
                self.end_token()
                self.tokens.append(Token(TokenKind.STRING, self.read_string()))
            elif c in WHITESPACE:
                self.end_token()
            elif c in BRACKETS:
                self.end_token()
                self.tokens.append(Token(TokenKind.BRACKET, c))
            elif c in SPECIALS:
                self.end_token()
                self.tokens.append(Token(TokenKind.SPECIAL, c))
            elif c == "_":
                self.end_token()
                self.tokens.append(Token(TokenKind.NULL))
            elif c == "@":
                self.end_token()
                self.tokens.append(Token(TokenKind.NUMBER, Number(1, 0)))
            elif c in DIGITS:
                self.end_token()
                self.tokens.append(Token(TokenKind.NUMBER, self.read_number()))
            elif c in OPERATOR_CHARS:
                self.accumulate(TokenKind.OPERATOR, c)
            else:
                self.accumulate(TokenKind.WORD, c)

            self.pos += 1

        self.end_token()
        return self.tokens


def lex(source: str) -> list[Token]:
    """Convert source text into a flat list of Tokens, in scan order."""
    return _Lexer(source).run()
