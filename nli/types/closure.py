"""Closure values: user lambdas and host-provided builtins."""

from __future__ import annotations

from typing import Callable, Optional

from nli import Value
from nli.types.branch import Expression
from nli.types.environment import Environment


class Closure:
    """A first-class function with an optional parameter, body, and captured env."""

    __slots__ = ("parameter", "body", "env")

    def __init__(self, parameter: Optional[str], body: Expression, env: Environment):
        self.parameter: Optional[str] = parameter
        self.body: Expression = body
        # Captured by reference; extend_env never mutates it
        self.env: Environment = env

    def __repr__(self) -> str:
        return f"Closure(\\{self.parameter or '_'})"

    def extend_env(self, argument: Value) -> Environment:
        """Environment for evaluating the body with `argument` bound.

        A parameterless closure discards the argument and runs in its
        captured environment as-is.
        """
        if self.parameter is None:
            return self.env
        return self.env.extend(self.parameter, argument)


class Builtin:
    """A closure implemented by the host as a Python callable of one argument."""

    __slots__ = ("name", "fn")

    def __init__(self, name: str, fn: Callable[[Value], Value]):
        self.name = name
        self.fn = fn

    def __repr__(self) -> str:
        return f"Builtin({self.name})"
