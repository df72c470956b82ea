"""Host builtins for the NLI runtime environment.

The core reserves no names; everything here is installed by the host into
the initial binding table. Side effects are injected: TEE writes through the
`emit` callable it is registered with, never through a hidden global.
"""
from __future__ import annotations

from typing import Callable, MutableMapping

from nli import Value
from nli.debug_utils.dump import dump
from nli.types.closure import Builtin
from nli.types.fraction import debool
from nli.types.null import Null

Emitter = Callable[[str], object]


def make_tee(emit: Emitter) -> Builtin:
    """TEE x: emit the raw dump of x and return x unchanged."""
    def tee(value: Value) -> Value:
        emit(dump(value))
        return value
    return Builtin("TEE", tee)


def json_names() -> dict[str, Value]:
    """Names that let JSON documents evaluate as NLI programs."""
    return {
        "true": debool(True),
        "false": debool(False),
        "null": Null,
    }


def register(bindings: MutableMapping[str, Value], emit: Emitter = print, json_compat: bool = False) -> None:
    """Install the host builtins into `bindings` (the initial name table)."""
    bindings["TEE"] = make_tee(emit)
    if json_compat:
        bindings.update(json_names())
