import pytest
from hypothesis import given, strategies as st

from linsl.errors import LinslSyntaxError, LinslUnbalancedParens
from linsl.reader.parser import lex, read, parse_atom, TokenStream
from linsl.types.symbol import Symbol


@pytest.mark.parametrize(
    "source,expected",
    [
        ("a", [("atom", "a", 0)]),
        ("(a 1)", [("lparen", "(", 0), ("atom", "a", 1), ("atom", "1", 3), ("rparen", ")", 4)]),
        ("()", [("lparen", "(", 0), ("rparen", ")", 1)]),
        ("; comment\n a", [("atom", "a", 11)]),
        ("(+ 1 2) ; trailing", [("lparen", "(", 0), ("atom", "+", 1), ("atom", "1", 3), ("atom", "2", 5), ("rparen", ")", 6)]),
        ("   ", []),
        ("#t#f", [("atom", "#t#f", 0)]),
    ]
)
def test_lexer_basic(source, expected):
    assert list(lex(source)) == expected


@pytest.mark.parametrize(
    "token, expected",
    [
        ("#t", True),
        ("#f", False),
        ("123", 123.0),
        ("-45", -45.0),
        ("+7", 7.0),
        ("3.14", 3.14),
        ("abc", Symbol("abc")),
        ("empty?", Symbol("empty?")),
        ("-", Symbol("-")),
        ("1.", Symbol("1.")),
        (".5", Symbol(".5")),
        ("1.2.3", Symbol("1.2.3")),
        ("#true", Symbol("#true")),
    ]
)
def test_parse_atom(token, expected):
    result = parse_atom(token)
    assert result == expected
    assert type(result) is type(expected)


def test_read_program():
    assert read("(define x 1) (car (quote ())) #t") == [
        [Symbol("define"), Symbol("x"), 1.0],
        [Symbol("car"), [Symbol("quote"), []]],
        True,
    ]


def test_read_empty_source():
    assert read("") == []
    assert read("; nothing here") == []


def test_read_nested():
    assert read("(a (b (c)) ())") == [[Symbol("a"), [Symbol("b"), [Symbol("c")]], []]]


@pytest.mark.parametrize(
    "source, opening, closing",
    [
        ("(", 1, 0),
        ("(1 (2", 2, 0),
        ("())", 1, 2),
    ]
)
def test_unbalanced_parens(source, opening, closing):
    with pytest.raises(LinslUnbalancedParens) as exc:
        read(source)
    assert (exc.value.opening, exc.value.closing) == (opening, closing)


def test_parens_in_comments_are_ignored():
    assert read("(a) ; (((") == [[Symbol("a")]]


def test_stray_closing_paren_reports_position():
    with pytest.raises(LinslSyntaxError) as exc:
        read("1 ) (")
    assert not isinstance(exc.value, LinslUnbalancedParens)
    assert exc.value.position == 2


def test_token_stream_is_incremental():
    stream = TokenStream(lex("1 (2) 3"))
    assert stream.parse_expr() == 1.0
    assert stream.parse_expr() == [2.0]
    assert stream.parse_expr() == 3.0
    assert stream.parse_expr() is None


@given(st.integers(min_value=-10**9, max_value=10**9))
def test_integer_atoms_read_as_floats(n):
    (value,) = read(str(n))
    assert isinstance(value, float)
    assert value == n


@given(st.integers(min_value=0, max_value=10**6), st.integers(min_value=0, max_value=999))
def test_decimal_atoms(whole, frac):
    source = f"{whole}.{frac:03d}"
    assert read(source) == [float(source)]
