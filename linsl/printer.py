"""Render Linsl values back into source syntax."""

from __future__ import annotations

from linsl import Expression
from linsl.types.procedure import Procedure, Primitive


def format_number(value: float) -> str:
    # Integral floats print without a fractional part: 3, -5, 0.5
    if float(value).is_integer():
        return str(int(value))
    return repr(float(value))


def to_string(expr: Expression) -> str:
    if isinstance(expr, bool):
        return "#t" if expr else "#f"
    if isinstance(expr, (int, float)):
        return format_number(expr)
    if isinstance(expr, list):
        return "(" + " ".join(to_string(x) for x in expr) + ")"
    if isinstance(expr, Procedure):
        params = " ".join(str(p) for p in expr.params)
        return f"({expr.keyword} ({params}) {to_string(expr.body)})"
    if isinstance(expr, Primitive):
        return repr(expr)
    return str(expr)
