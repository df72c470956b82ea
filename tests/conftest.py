import pytest

from nli.interpreter import Interpreter


@pytest.fixture(autouse=True)
def _plain_dumps(monkeypatch):
    # Raw dumps are compared as text; keep ANSI colours out of them
    monkeypatch.delenv("NLI_COLOR", raising=False)


@pytest.fixture
def emitted():
    """Lines written by the TEE builtin."""
    return []


@pytest.fixture
def interp(emitted):
    """Interpreter with host builtins whose output is captured in `emitted`."""
    return Interpreter(emit=emitted.append)
