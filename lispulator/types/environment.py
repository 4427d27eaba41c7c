"""Runtime environment for LISPulator.

The Environment stores bindings of Symbols to Expression values. The
interpreter keeps a single global frame; the `outer` link is the seam for
nested scopes and is always None for the global frame.
"""

from __future__ import annotations

from typing import Optional

from lispulator.errors import LispulatorTypeError, LispulatorUnboundSymbol
from lispulator.types.expression import Expression
from lispulator.types.symbol import Symbol


class Environment:
    """Mapping from Symbols to Expression values with an optional parent frame."""

    __slots__ = ("vars", "outer")

    def __init__(self, outer: Optional[Environment] = None):
        self.vars: dict[Symbol, Expression] = {}
        self.outer: Environment | None = outer

    def define(self, name: Symbol, value: Expression) -> None:
        """Bind `name` to `value` in this frame.

        Raises LispulatorTypeError if `name` is not a Symbol.
        """
        if not isinstance(name, Symbol):
            raise LispulatorTypeError(f"cannot define {name} as a symbol")
        self.vars[name] = value

    def find(self, symbol: Symbol) -> Optional[Environment]:
        """Find the nearest environment in the chain that contains `symbol`."""
        env: Optional[Environment] = self
        while env is not None:
            if symbol in env.vars:
                return env
            env = env.outer
        return None

    def set(self, name: Symbol, value: Expression) -> None:
        """Update an existing binding for `name` in the environment chain.

        Raises LispulatorUnboundSymbol if the symbol is not found.
        """
        env = self.find(name)
        if env is None:
            raise LispulatorUnboundSymbol(f"unexpected symbol: {name}")
        env.vars[name] = value

    def lookup(self, name: Symbol) -> Expression:
        """Look up the value bound to `name`.

        Raises LispulatorUnboundSymbol if not found.
        """
        env = self.find(name)
        if env is None:
            raise LispulatorUnboundSymbol(f"unexpected symbol: {name}")
        return env.vars[name]

    def update(self, mapping: dict[Symbol, Expression]) -> None:
        """Bulk-define a mapping of Symbol -> value in the current frame."""
        for k, v in mapping.items():
            self.define(k, v)

    def __contains__(self, name: Symbol) -> bool:
        return self.find(name) is not None
