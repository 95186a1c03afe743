"""Applicable values: user closures and macros, and the built-in primitives."""

from __future__ import annotations

from typing import Callable, Optional

from linsl import Expression
from linsl.errors import LinslArityError
from linsl.types.environment import Environment
from linsl.types.symbol import Symbol


class Procedure:
    """Parameters, a body and the environment captured at creation time."""

    __slots__ = ("params", "body", "env")

    keyword = "lambda"

    def __init__(self, params: list[Symbol], body: Expression, env: Environment):
        self.params: list[Symbol] = params
        self.body: Expression = body
        self.env: Environment = env

    def extend_env(self, args: list[Expression]) -> Environment:
        """
        Bind `args` to the formal parameters in a fresh frame parented at the
        captured environment (not the caller's), and return that frame.
        """
        if len(args) != len(self.params):
            raise LinslArityError(
                f"{self.keyword} expects {len(self.params)} argument(s), got {len(args)}"
            )
        frame = self.env.extend()
        frame.update(dict(zip(self.params, args)))
        return frame

    def __str__(self) -> str:
        from linsl.printer import to_string
        return to_string(self)

    def __repr__(self) -> str:
        return str(self)


class Closure(Procedure):
    """A function value created by `lambda`; arguments are evaluated eagerly."""

    __slots__ = ()


class Macro(Procedure):
    """A value created by `macro`; parameters bind to unevaluated operand forms."""

    __slots__ = ()

    keyword = "macro"


class Primitive:
    """A built-in operation. `arity` is None for variadic primitives."""

    __slots__ = ("name", "arity", "fn")

    def __init__(
        self,
        name: str,
        arity: Optional[int],
        fn: Callable[[list[Expression]], Expression],
    ):
        self.name = name
        self.arity = arity
        self.fn = fn

    def __call__(self, args: list[Expression]) -> Expression:
        if self.arity is not None and len(args) != self.arity:
            raise LinslArityError(
                f"{self.name} expects {self.arity} argument(s), got {len(args)}"
            )
        return self.fn(args)

    def __repr__(self) -> str:
        return f"<primitive {self.name}>"
