import pytest

from linsl.printer import to_string
from linsl.types.symbol import Symbol


@pytest.mark.parametrize(
    "value,expected",
    [
        (True, "#t"),
        (False, "#f"),
        (3.0, "3"),
        (-5.0, "-5"),
        (0.5, "0.5"),
        (0.0, "0"),
        (Symbol("abc"), "abc"),
        ([], "()"),
        ([1.0, [2.0, Symbol("x")], []], "(1 (2 x) ())"),
    ]
)
def test_to_string(value, expected):
    assert to_string(value) == expected


@pytest.mark.parametrize(
    "source,expected",
    [
        ("(lambda (x) (+ x 5))", "(lambda (x) (+ x 5))"),
        ("(macro (a b) b)", "(macro (a b) b)"),
        ("(lambda () #t)", "(lambda () #t)"),
        ("car", "<primitive car>"),
        ("(quote (+ 1 2))", "(+ 1 2)"),
        ("(inv 4)", "0.25"),
    ]
)
def test_printed_results(run, source, expected):
    assert to_string(run(source)) == expected


def test_procedure_str_uses_printer(run):
    fn = run("(lambda (x) x)")
    assert str(fn) == "(lambda (x) x)"
    assert repr(fn) == "(lambda (x) x)"
