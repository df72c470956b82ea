from nli.types.environment import Environment
from nli.types.fraction import Number
from nli.types.null import Null


def test_lookup_and_missing_names():
    env = Environment({"a": Number(1, 1)})
    assert env.lookup("a") == Number(1, 1)
    assert env.lookup("missing") is Null
    assert "a" in env
    assert "missing" not in env


def test_extend_does_not_mutate_parent():
    root = Environment({"a": Number(1, 1)})
    child = root.extend("a", Number(2, 1))
    sibling = root.extend("b", Number(3, 1))

    assert root.lookup("a") == Number(1, 1)
    assert child.lookup("a") == Number(2, 1)
    assert sibling.lookup("a") == Number(1, 1)
    assert sibling.lookup("b") == Number(3, 1)
    assert child.lookup("b") is Null
    assert root.vars == {"a": Number(1, 1)}


def test_host_mapping_is_snapshotted():
    table = {"a": Number(1, 1)}
    env = Environment(table)
    table["a"] = Number(9, 1)
    assert env.lookup("a") == Number(1, 1)


def test_chain_and_reprs():
    env = Environment({"a": Null}).extend("b", Null)
    assert env.outer.outer is None
    assert env.find("a") is env.outer
    assert str(env) == "{b: Null} -> ..."
    assert repr(env) == "<Environment chain: {b: Null} -> {a: Null}>"
