from linsl import EvaluatorFn
from linsl import Expression
from linsl.errors import LinslSyntaxError
from linsl.types.environment import Environment


def quote_form(
    tail: list[Expression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
    expand_macros: bool,
) -> Expression:
    """(quote expr) returns expr exactly as written."""
    if len(tail) != 1:
        raise LinslSyntaxError(f"quote takes exactly one expression, found {len(tail)}")
    return tail[0]
