from linsl import EvaluatorFn
from linsl import Expression
from linsl.errors import LinslSyntaxError, LinslTypeError
from linsl.types.environment import Environment
from linsl.printer import to_string


def if_form(
    tail: list[Expression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
    expand_macros: bool,
) -> Expression:
    if len(tail) != 3:
        raise LinslSyntaxError(f"Expected 3 arguments to if, found {len(tail)}")

    test_form, then_form, else_form = tail
    test = evaluate_fn(test_form, env, expand_macros)
    # No truthiness: only a Bool selects a branch
    if not isinstance(test, bool):
        raise LinslTypeError(f"Non-boolean condition: '{to_string(test)}'")

    return evaluate_fn(then_form if test else else_form, env, expand_macros)
