from __future__ import annotations


class NullType:
    """The NULL value, written `_` in source."""

    __slots__ = ()

    def __repr__(self): return "Null"
    def __bool__(self): return False

    # NULL is equal only to NULL
    def __eq__(self, other):
        return isinstance(other, NullType)

    def __hash__(self):
        return hash(NullType)


Null = NullType()
