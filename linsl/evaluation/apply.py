"""Application engine for Linsl.

Centralizes how each kind of applicable value consumes its operand forms:
- Primitive: operands evaluated left to right in the caller's environment.
- Closure:   operands evaluated likewise, then bound in a frame parented at the
             closure's captured environment.
- Macro:     operands bound unevaluated; the body is evaluated once and its
             result is the value of the call. With `expand_macros` the result
             is treated as an expansion and evaluated again in the caller's
             environment.
"""

from linsl import Expression, EvaluatorFn
from linsl.errors import LinslTypeError
from linsl.types.environment import Environment
from linsl.types.procedure import Closure, Macro, Primitive
from linsl.printer import to_string


def evaluate_operands(
    operands: list[Expression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
    expand_macros: bool,
) -> list[Expression]:
    return [evaluate_fn(form, env, expand_macros) for form in operands]


def apply(
    head: Expression,
    operands: list[Expression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
    expand_macros: bool = False,
) -> Expression:
    """Apply an evaluated head to its raw operand forms."""
    match head:
        case Primitive():
            return head(evaluate_operands(operands, env, evaluate_fn, expand_macros))
        case Closure():
            args = evaluate_operands(operands, env, evaluate_fn, expand_macros)
            return evaluate_fn(head.body, head.extend_env(args), expand_macros)
        case Macro():
            expansion = evaluate_fn(head.body, head.extend_env(list(operands)), expand_macros)
            if expand_macros:
                return evaluate_fn(expansion, env, expand_macros)
            return expansion
        case _:
            raise LinslTypeError(f"Not applicable: '{to_string(head)}'")
