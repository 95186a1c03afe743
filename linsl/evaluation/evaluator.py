"""Core evaluator for the Linsl interpreter.

Plain structural recursion: every call either returns a value or raises a
LinslError. There is no trampoline, so a non-terminating recursive definition
ends in the host's RecursionError, which is not caught here.
"""

from __future__ import annotations

from linsl import Expression
from linsl.builtins import PRIMITIVES
from linsl.errors import LinslTypeError
from linsl.types.environment import Environment
from linsl.types.symbol import Symbol
from linsl.types.procedure import Procedure, Primitive
from linsl.evaluation.apply import apply
from linsl.evaluation.special_forms import SPECIAL_FORMS


def evaluate(
    expr: Expression, env: Environment, expand_macros: bool = False
) -> Expression:
    """Evaluate `expr` in `env` and return the resulting expression."""
    match expr:
        case bool() | int() | float() | Procedure() | Primitive():
            return expr

        case Symbol():
            primitive = PRIMITIVES.get(expr)
            if primitive is not None:
                return primitive
            return env.lookup(expr)

        case []:
            return expr

        case [Symbol() as head, *operands] if head in SPECIAL_FORMS:
            return SPECIAL_FORMS[head](operands, env, evaluate, expand_macros)

        case [head, *operands]:
            fn = evaluate(head, env, expand_macros)
            return apply(fn, operands, env, evaluate, expand_macros)

    raise LinslTypeError(f"Not an expression: {expr!r}")
