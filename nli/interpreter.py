from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Mapping

from nli import Value
from nli.builtin.env_builtin import Emitter, register
from nli.config import get_recursion_limit
from nli.errors import EvalError, ParseError
from nli.evaluation.evaluator import evaluate
from nli.reader.lexer import lex
from nli.reader.parser import parse
from nli.types.branch import Expression
from nli.types.environment import Environment
from nli.types.token import Token

logger = logging.getLogger(__name__)


class Interpreter:
    """
    Orchestrates lexing, parsing and evaluating NLI programs.
    Holds the initial environment (host builtins) shared by every program run.
    """

    def __init__(
        self,
        builtins: Mapping[str, Value] | None = None,
        *,
        emit: Emitter = print,
        json_compat: bool = False,
        with_host_builtins: bool = True,
    ):
        bindings: dict[str, Value] = {}
        if with_host_builtins:
            register(bindings, emit=emit, json_compat=json_compat)
        if builtins:
            bindings.update(builtins)
        self.env: Environment = Environment(bindings)

        limit = get_recursion_limit()
        if limit > sys.getrecursionlimit():
            sys.setrecursionlimit(limit)

    def lex(self, code: str) -> list[Token]:
        tokens = lex(code)
        logger.debug("lexed %d tokens", len(tokens))
        return tokens

    def parse(self, code: str) -> Expression:
        tokens = self.lex(code)
        try:
            return parse(tokens)
        except RecursionError:
            raise ParseError("Maximum nesting depth exceeded") from None

    def eval(self, code: str) -> Value:
        """Evaluate a program and return its single result value."""
        tree = self.parse(code)
        logger.debug("evaluating program")
        try:
            result = evaluate(tree, self.env)
        except RecursionError:
            raise EvalError("Maximum recursion depth exceeded") from None
        logger.debug("evaluation finished")
        return result

    def run_file(self, path: str | Path) -> Value:
        source = Path(path).read_text(encoding="utf-8")
        logger.debug("running %s", path)
        return self.eval(source)


def interpret(code: str, builtins: Mapping[str, Value] | None = None) -> Value:
    """One-shot helper: evaluate `code` against `builtins` only (no host builtins)."""
    return Interpreter(builtins, with_host_builtins=False).eval(code)
