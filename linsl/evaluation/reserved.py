"""Head symbols recognized lexically before any environment lookup."""

from linsl.builtins import PRIMITIVES
from linsl.types.symbol import Symbol

DEFINE = Symbol("define")
IF = Symbol("if")
LAMBDA = Symbol("lambda")
MACRO = Symbol("macro")
QUOTE = Symbol("quote")

SPECIAL_FORM_NAMES = frozenset((DEFINE, IF, LAMBDA, MACRO, QUOTE))


def is_reserved(name: Symbol) -> bool:
    return name in SPECIAL_FORM_NAMES or name in PRIMITIVES
