import pytest

from nli.errors import ParseError
from nli.reader.lexer import lex
from nli.reader.parser import PRECEDENCE, parse
from nli.types.branch import (
    Application,
    Combination,
    DictionaryNode,
    Expression,
    Function,
    ListNode,
)
from nli.types.fraction import Number
from nli.types.token import NULL_TOKEN, Token, TokenKind


def w(name):
    return Token(TokenKind.WORD, name)


def n(value):
    return Token(TokenKind.NUMBER, Number(value, 1))


def p(source):
    return parse(lex(source))


@pytest.mark.parametrize(
    "source,expected",
    [
        ("", NULL_TOKEN),
        ("x", w("x")),
        ("1 + 2", Combination("+", n(1), n(2))),
        ("2 + 3 * 4", Combination("+", n(2), Combination("*", n(3), n(4)))),
        ("2 * 3 + 4", Combination("+", Combination("*", n(2), n(3)), n(4))),
        ("a - b - c", Combination("-", Combination("-", w("a"), w("b")), w("c"))),
        ("(2 + 3) * 4", Combination("*", Expression(Combination("+", n(2), n(3))), n(4))),
        ("f x", Application(w("f"), w("x"))),
        ("f x y", Application(Application(w("f"), w("x")), w("y"))),
        ("f 3 + 1", Combination("+", Application(w("f"), n(3)), n(1))),
        ("f a.b", Combination(".", Application(w("f"), w("a")), w("b"))),
        ("a.b c", Application(Combination(".", w("a"), w("b")), w("c"))),
        ("a = b & c", Combination("&", Combination("=", w("a"), w("b")), w("c"))),
        ("a .. b // c", Combination("//", Combination("..", w("a"), w("b")), w("c"))),
        ("1 < 2 = 1", Combination("=", Combination("<", n(1), n(2)), n(1))),
    ]
)
def test_expression_folding(source, expected):
    assert p(source) == Expression(expected)


def test_precedence_table():
    assert PRECEDENCE == [
        (".",),
        (".>",),
        ("/<", "/>"),
        ("--",),
        ("++", "..", "//"),
        ("*", "/"),
        ("+", "-"),
        ("<<", ">>"),
        ("<=", ">=", "<", ">"),
        ("=", "~="),
        ("&", "|", "^"),
    ]


@pytest.mark.parametrize(
    "source,expected",
    [
        ("\\x x", Function("x", Expression(w("x")))),
        ("\\_ 1", Function(None, Expression(n(1)))),
        ("\\x x + 1", Function("x", Expression(Combination("+", w("x"), n(1))))),
        ("\\x \\y x", Function("x", Expression(Function("y", Expression(w("x")))))),
    ]
)
def test_function_literals(source, expected):
    assert p(source) == Expression(expected)


def test_function_body_stops_at_closing_bracket():
    tree = p("(\\x x) 5")
    assert tree == Expression(Application(Expression(Function("x", Expression(w("x")))), n(5)))


def test_function_applied_to_function():
    tree = p("f \\x x")
    assert tree == Expression(Application(w("f"), Function("x", Expression(w("x")))))


@pytest.mark.parametrize(
    "source,expected",
    [
        ("[]", ()),
        ("[1]", (Expression(n(1)),)),
        ("[1, 2]", (Expression(n(1)), Expression(n(2)))),
        ("[1, 2,]", (Expression(n(1)), Expression(n(2)))),
        ("[f x, 2]", (Expression(Application(w("f"), w("x"))), Expression(n(2)))),
        ("[_]", ()),
        ("[1, _]", (Expression(n(1)),)),
        ("[_, 1]", (Expression(NULL_TOKEN), Expression(n(1)))),
        ("[[]]", (Expression(ListNode(())),)),
    ]
)
def test_lists(source, expected):
    assert p(source) == Expression(ListNode(expected))


@pytest.mark.parametrize(
    "source,expected",
    [
        ("{}", ()),
        ("{a: 1}", ((w("a"), Expression(n(1))),)),
        ("{a: 1, b: 2}", ((w("a"), Expression(n(1))), (w("b"), Expression(n(2))))),
        ("{x}", ((w("x"), Expression(w("x"))),)),
        ("{x, y: 2}", ((w("x"), Expression(w("x"))), (w("y"), Expression(n(2))))),
        ('{"k": 1}', ((Token(TokenKind.STRING, b"k"), Expression(n(1))),)),
    ]
)
def test_dictionaries(source, expected):
    assert p(source) == Expression(DictionaryNode(expected))


@pytest.mark.parametrize(
    "source",
    [
        "(1",
        "(1]",
        "[1",
        "[1)",
        "{a: 1",
        "{a )}",
        "1 +",
        "+ 1",
        "1 + * 2",
        "1 +++ 2",
        "1)",
        "1, 2",
        "\\",
    ]
)
def test_structural_errors(source):
    with pytest.raises(ParseError):
        p(source)
