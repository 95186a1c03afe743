"""Special forms: lambda and macro.

Both take a parameter list and a single body form and capture the current
environment by reference; neither evaluates the body at creation time.
"""

from __future__ import annotations

from linsl import EvaluatorFn
from linsl import Expression
from linsl.errors import LinslSyntaxError, LinslTypeError
from linsl.types.environment import Environment
from linsl.types.symbol import Symbol
from linsl.types.procedure import Closure, Macro
from linsl.printer import to_string
from linsl.evaluation.reserved import is_reserved


def _params_and_body(keyword: str, tail: list[Expression]) -> tuple[list[Symbol], Expression]:
    if len(tail) != 2:
        raise LinslSyntaxError(
            f"{keyword} must be given two expressions, found {len(tail)}"
        )

    params, body = tail
    if not isinstance(params, list):
        raise LinslTypeError(f"Expected list of symbols, found '{to_string(params)}'")
    for p in params:
        if not isinstance(p, Symbol):
            raise LinslTypeError(f"Expected symbol, found '{to_string(p)}'")
        if is_reserved(p):
            raise LinslTypeError(f"Cannot use reserved symbol '{p}' as a parameter")

    return list(params), body


def lambda_form(
    tail: list[Expression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
    expand_macros: bool,
) -> Closure:
    """(lambda (p1 p2 ...) body)"""
    params, body = _params_and_body("lambda", tail)
    return Closure(params, body, env)


def macro_form(
    tail: list[Expression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
    expand_macros: bool,
) -> Macro:
    """(macro (p1 p2 ...) body)"""
    params, body = _params_and_body("macro", tail)
    return Macro(params, body, env)
