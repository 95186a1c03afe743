from linsl.types.symbol import Symbol
from linsl.types.environment import Environment
from linsl.types.procedure import Procedure, Closure, Macro, Primitive

__all__ = [
    "Symbol",
    "Environment",
    "Procedure",
    "Closure",
    "Macro",
    "Primitive",
]
