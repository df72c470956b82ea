from __future__ import annotations

from enum import Enum
from typing import NamedTuple, Optional, Union

from nli.types.fraction import Number


class TokenKind(Enum):
    BRACKET = "bracket"
    SPECIAL = "special"
    OPERATOR = "operator"
    WORD = "word"
    # terminal value kinds
    NUMBER = "number"
    STRING = "string"
    NULL = "null"


class Token(NamedTuple):
    kind: TokenKind
    payload: Optional[Union[str, bytes, Number]] = None

    def is_(self, kind: TokenKind, payload: str) -> bool:
        """True if this is a `kind` token with exactly the text `payload`."""
        return self.kind is kind and self.payload == payload

    def __repr__(self) -> str:
        if self.kind is TokenKind.NULL:
            return "Token(NULL)"
        return f"Token({self.kind.name}, {self.payload!r})"


NULL_TOKEN = Token(TokenKind.NULL)
