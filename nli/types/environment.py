"""Runtime environment for NLI.

An Environment maps names to evaluated values and links to an `outer` frame.
It is persistent: nothing ever rebinds a name in an existing frame. Calling a
closure produces a new single-binding frame on top of the captured one, so
closures sharing a captured environment never observe each other's calls.
"""

from __future__ import annotations

from io import StringIO
from typing import Mapping, Optional

from nli import Value
from nli.types.null import Null


class Environment:
    """Parent-linked, copy-on-extend mapping from names to values."""

    __slots__ = ("vars", "outer")

    def __init__(
        self, bindings: Mapping[str, Value] | None = None, outer: Optional[Environment] = None
    ):
        # Snapshot the host mapping so later host-side mutation cannot leak in
        self.vars: dict[str, Value] = dict(bindings) if bindings else {}
        self.outer: Environment | None = outer

    def extend(self, name: str, value: Value) -> Environment:
        """Return a new environment shadowing `name`; `self` is left untouched."""
        return Environment({name: value}, outer=self)

    def find(self, name: str) -> Optional[Environment]:
        """Find the nearest environment in the chain that binds `name`."""
        env: Optional[Environment] = self
        while env is not None:
            if name in env.vars:
                return env
            env = env.outer
        return None

    def lookup(self, name: str) -> Value:
        """Look up the value bound to `name`; unbound names evaluate to Null."""
        env = self.find(name)
        if env is None:
            return Null
        return env.vars[name]

    def __contains__(self, name: str) -> bool:
        return self.find(name) is not None

    def _write_vars(self, buffer: StringIO) -> None:
        """Write this frame's variables into the buffer in a compact form."""
        buffer.write("{")
        first = True
        for k, v in self.vars.items():
            if not first:
                buffer.write(", ")
            buffer.write(f"{k}: {v!r}")
            first = False
        buffer.write("}")

    def __str__(self) -> str:
        """Human-readable single-frame view with an indicator for parent."""
        with StringIO() as buffer:
            self._write_vars(buffer)
            if self.outer is not None:
                buffer.write(" -> ...")
            return buffer.getvalue()

    def __repr__(self) -> str:
        """Detailed chain representation for debugging purposes."""
        chain = []
        env: Optional[Environment] = self
        while env is not None:
            with StringIO() as frame:
                env._write_vars(frame)
                chain.append(frame.getvalue())
            env = env.outer
        return "<Environment chain: " + " -> ".join(chain) + ">"
