from linsl import EvaluatorFn
from linsl import Expression
from linsl.errors import LinslSyntaxError, LinslTypeError
from linsl.types.environment import Environment
from linsl.types.symbol import Symbol
from linsl.printer import to_string
from linsl.evaluation.reserved import is_reserved


def define_form(
    tail: list[Expression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
    expand_macros: bool,
) -> Expression:
    """
    (define name value)
    The value is evaluated before the binding exists; the result is the bound value.
    """
    if len(tail) != 2:
        raise LinslSyntaxError(f"define must have two forms, found {len(tail)}")

    name, val_expr = tail
    if not isinstance(name, Symbol):
        raise LinslTypeError(f"First define form must be a symbol, found '{to_string(name)}'")
    if is_reserved(name):
        raise LinslTypeError(f"Cannot redefine reserved symbol '{name}'")

    value = evaluate_fn(val_expr, env, expand_macros)
    return env.define(name, value)
