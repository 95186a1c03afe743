"""Runtime environment for Linsl.

An Environment is one frame of bindings from Symbols to evaluated values plus an
`outer` link to its parent frame. Lookups walk the chain from the innermost frame
outward; definitions only ever touch the frame they are made in, so a child frame
can shadow but never mutate its ancestors.
"""

from __future__ import annotations

from io import StringIO
from typing import Optional

from linsl import Expression
from linsl.errors import LinslNameError, LinslTypeError
from linsl.types.symbol import Symbol


class Environment:
    """Hierarchical mapping from Symbols to Linsl values."""

    __slots__ = ("vars", "outer")

    def __init__(self, outer: Optional[Environment] = None):
        self.vars: dict[Symbol, Expression] = {}
        self.outer: Environment | None = outer

    def extend(self) -> Environment:
        """Return a new, empty child frame whose parent is this frame."""
        return Environment(outer=self)

    def define(self, name: Symbol, value: Expression) -> Expression:
        """Bind `name` to `value` in this frame and return the value.

        An existing binding of the same name in this frame is overwritten;
        bindings in outer frames are shadowed, not modified.
        """
        if not isinstance(name, Symbol):
            raise LinslTypeError(f"Cannot define {name!r}: not a symbol")
        self.vars[name] = value
        return value

    def find(self, symbol: Symbol) -> Optional[Environment]:
        """Find the nearest environment in the chain that binds `symbol`."""
        env: Optional[Environment] = self
        while env is not None:
            if symbol in env.vars:
                return env
            env = env.outer
        return None

    def lookup(self, name: Symbol) -> Expression:
        """Look up the value bound to `name`, innermost frame first.

        Raises LinslNameError if no frame in the chain binds it.
        """
        env = self.find(name)
        if env is None:
            raise LinslNameError(f"Undefined symbol '{name}'")
        return env.vars[name]

    def update(self, mapping: dict[Symbol, Expression]) -> None:
        """Bulk-define a mapping of Symbol -> value in the current frame."""
        for k, v in mapping.items():
            self.define(k, v)

    def __contains__(self, name: Symbol) -> bool:
        return self.find(name) is not None

    def _write_vars(self, buffer: StringIO) -> None:
        """Write this frame's variables into the buffer in a compact form."""
        buffer.write("{")
        buffer.write(", ".join(f"{k}: {v!r}" for k, v in self.vars.items()))
        buffer.write("}")

    def __str__(self) -> str:
        """Single-frame view with an indicator for the parent."""
        with StringIO() as buffer:
            self._write_vars(buffer)
            if self.outer is not None:
                buffer.write(" -> ...")
            return buffer.getvalue()

    def __repr__(self) -> str:
        """Whole-chain representation for debugging."""
        chain = []
        env: Optional[Environment] = self
        while env is not None:
            with StringIO() as env_buf:
                env._write_vars(env_buf)
                chain.append(env_buf.getvalue())
            env = env.outer
        return f"<Environment chain: {' -> '.join(chain)}>"
