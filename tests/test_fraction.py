import pytest
from hypothesis import given, assume, strategies as st

from nli.errors import EvalError
from nli.types.fraction import Number, gcd, simplify, operate, debool, deint


@pytest.mark.parametrize(
    "n,d,expected",
    [
        (6, 8, (3, 4)),
        (-6, 8, (-3, 4)),
        (6, -8, (3, -4)),
        (0, 5, (0, 1)),
        (0, 0, (0, 0)),
        (5, 0, (1, 0)),
        (7, 1, (7, 1)),
    ]
)
def test_simplify(n, d, expected):
    assert simplify(n, d) == expected


@pytest.mark.parametrize(
    "op,a,b,expected",
    [
        ("+", Number(1, 3), Number(1, 6), Number(1, 2)),
        ("-", Number(1, 2), Number(1, 3), Number(1, 6)),
        ("*", Number(2, 3), Number(3, 4), Number(1, 2)),
        ("/", Number(1, 2), Number(1, 4), Number(2, 1)),
        ("=", Number(1, 2), Number(2, 4), Number(1, 1)),
        ("=", Number(1, 2), Number(1, 3), Number(0, 1)),
        ("<", Number(1, 3), Number(1, 2), Number(1, 1)),
        ("<", Number(1, 2), Number(1, 2), Number(0, 1)),
        (">", Number(1, 3), Number(1, 2), Number(0, 1)),
        ("<=", Number(1, 2), Number(1, 2), Number(1, 1)),
        ("<=", Number(2, 1), Number(1, 1), Number(0, 1)),
        (">=", Number(2, 1), Number(1, 1), Number(1, 1)),
        (">=", Number(1, 1), Number(2, 1), Number(0, 1)),
    ]
)
def test_operate(op, a, b, expected):
    assert operate(op, a, b) == expected


def test_multiplication_does_not_reduce_its_product():
    assert operate("*", Number(2, 4), Number(1, 1)) == Number(2, 4)
    assert operate("/", Number(2, 4), Number(1, 1)) == Number(2, 4)


def test_addition_reduces():
    assert operate("+", Number(2, 4), Number(0, 1)) == Number(1, 2)


def test_zero_denominator_propagates():
    infinity = Number(1, 0)
    assert operate("+", infinity, Number(1, 1)) == Number(1, 0)
    assert operate("/", Number(1, 1), Number(0, 1)) == Number(1, 0)
    # a zero denominator cancels the other numerator down to its sign
    assert operate("*", infinity, Number(3, 1)) == Number(1, 0)
    assert operate("*", infinity, Number(-3, 2)) == Number(-1, 0)
    assert operate("*", Number(3, 2), infinity) == Number(1, 0)
    assert operate("*", Number(0, 1), infinity) == Number(0, 0)


def test_unknown_operator():
    with pytest.raises(EvalError):
        operate("%", Number(1, 1), Number(1, 1))


def test_debool_and_deint():
    assert debool(True) == Number(1, 1)
    assert debool(0) == Number(0, 1)
    assert deint(42) == Number(42, 1)


# -------------------------------
# Strategies
# -------------------------------
ints = st.integers(min_value=-10**6, max_value=10**6)
nonzero = ints.filter(lambda x: x != 0)
positive = st.integers(min_value=1, max_value=10**6)


@st.composite
def fractions(draw, allow_zero=True):
    n = draw(ints if allow_zero else nonzero)
    d = draw(positive)
    return Number(*simplify(n, d))


# -------------------------------
# Hypothesis tests
# -------------------------------
@given(ints, nonzero)
def test_simplify_lowest_terms(n, d):
    n2, d2 = simplify(n, d)
    assert gcd(abs(n2), abs(d2)) in (0, 1)
    assert n2 * d == n * d2


@given(fractions(), fractions())
def test_addition_commutes(a, b):
    assert operate("+", a, b) == operate("+", b, a)


@given(fractions(), fractions())
def test_multiplication_commutes(a, b):
    assert operate("*", a, b) == operate("*", b, a)


@given(fractions(), fractions(allow_zero=False))
def test_divide_undoes_multiply(a, b):
    assume(b.numerator != 0)
    back = operate("/", operate("*", a, b), b)
    assert operate("=", back, a) == Number(1, 1)


@given(fractions(), fractions())
def test_exactly_one_ordering_holds(a, b):
    outcomes = [operate(op, a, b).numerator for op in ("<", "=", ">")]
    assert sorted(outcomes) == [0, 0, 1]
