"""The built-in primitives.

Precisely as much as is needed to define everything else in Linsl itself. Every
primitive receives its operands already evaluated, left to right.
"""

from __future__ import annotations

from linsl import Expression
from linsl.errors import LinslTypeError, LinslDivisionError
from linsl.types.symbol import Symbol
from linsl.types.procedure import Primitive
from linsl.printer import to_string


def is_number(value: Expression) -> bool:
    # bool is an int subclass but never a Number
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _number(name: str, value: Expression) -> float:
    if not is_number(value):
        raise LinslTypeError(f"{name} expects numbers, found '{to_string(value)}'")
    return float(value)


def _list(name: str, value: Expression) -> list:
    if not isinstance(value, list):
        raise LinslTypeError(f"{name} expects a list, found '{to_string(value)}'")
    return value


# -------------------------------
# Arithmetic
# -------------------------------
def add(args: list[Expression]) -> float:
    """Sum of the (numeric) arguments."""
    return sum((_number("+", x) for x in args), 0.0)


def neg(args: list[Expression]) -> float:
    return -_number("neg", args[0])


def mul(args: list[Expression]) -> float:
    """Product of the (numeric) arguments."""
    result = 1.0
    for x in args:
        result *= _number("*", x)
    return result


def inv(args: list[Expression]) -> float:
    """Multiplicative inverse of a (numeric) argument."""
    num = _number("inv", args[0])
    if num == 0:
        raise LinslDivisionError("Cannot invert 0")
    return 1.0 / num


# -------------------------------
# Comparison
# -------------------------------
def eq(args: list[Expression]) -> bool:
    """Equality of two numbers or two booleans."""
    a, b = args
    if isinstance(a, bool) and isinstance(b, bool):
        return a == b
    if is_number(a) and is_number(b):
        return float(a) == float(b)
    raise LinslTypeError(
        f"= compares two numbers or two booleans, found '{to_string(a)}' and '{to_string(b)}'"
    )


def gt(args: list[Expression]) -> bool:
    a, b = args
    return _number(">", a) > _number(">", b)


# -------------------------------
# List operations
# -------------------------------
def car(args: list[Expression]) -> Expression:
    """First element of a list; the empty list for an empty list."""
    xs = _list("car", args[0])
    return xs[0] if xs else []


def cdr(args: list[Expression]) -> list:
    """All but the first element of a list."""
    return _list("cdr", args[0])[1:]


def is_empty(args: list[Expression]) -> bool:
    return isinstance(args[0], list) and not args[0]


PRIMITIVES: dict[Symbol, Primitive] = {
    Symbol(p.name): p
    for p in (
        Primitive("+", None, add),
        Primitive("neg", 1, neg),
        Primitive("*", None, mul),
        Primitive("inv", 1, inv),
        Primitive("=", 2, eq),
        Primitive(">", 2, gt),
        Primitive("car", 1, car),
        Primitive("cdr", 1, cdr),
        Primitive("empty?", 1, is_empty),
    )
}
