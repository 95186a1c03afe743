# Core type aliases for Linsl's data model.
# Expressions are plain Python values rather than wrapper objects:
#
#   Number  -> float
#   Bool    -> bool
#   Symbol  -> linsl.types.symbol.Symbol
#   List    -> list (the empty list is the self-evaluating sentinel)
#   Closure / Macro / Primitive -> linsl.types.procedure
#
# The same representation is used for code (forms) and runtime values.

from typing import Any, Callable

# Runtime value alias
Expression = Any

# Evaluator function type handed to special forms
EvaluatorFn = Callable[..., Expression]
