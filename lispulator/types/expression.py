"""The expression data model shared by the parser and the evaluator.

An expression is one of four variants:

    - Symbol   -> an identifier, resolved through the environment
    - Number   -> a self-evaluating 64-bit float
    - List     -> the only compound form, an ordered tuple of expressions
    - Function -> a boxed host callable, only ever produced by lookups

Every variant is immutable, so a bound value can be handed out without
copying and a parsed tree can never be shared or made cyclic by mutation.

Rendering with ``str()`` (or ``display``) is the value printer used by the
REPL. Lists render with commas between elements, ``(1,2,3)``, which is not
the input syntax.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from decimal import Decimal
from typing import TYPE_CHECKING, Callable, Sequence, Union

from lispulator.types.symbol import Symbol

if TYPE_CHECKING:
    from lispulator.types.environment import Environment


@dataclass(frozen=True)
class Number:
    value: float

    def __str__(self) -> str:
        v = self.value
        if math.isnan(v):
            return "NaN"
        if math.isinf(v):
            return "inf" if v > 0 else "-inf"
        # Shortest round-trip digits, never in exponent form
        text = format(Decimal(repr(v)), "f")
        if "." in text:
            text = text.rstrip("0").rstrip(".")
        return text


@dataclass(frozen=True)
class List:
    elements: tuple[Expression, ...] = ()

    def __post_init__(self):
        if not isinstance(self.elements, tuple):
            object.__setattr__(self, "elements", tuple(self.elements))

    def __str__(self) -> str:
        return "(" + ",".join(str(e) for e in self.elements) + ")"


@dataclass(frozen=True)
class Function:
    """A native operation bound in the environment.

    ``fn`` receives the environment and the already evaluated arguments
    and returns an Expression, raising a LispulatorError on failure.
    """

    name: str
    fn: Callable[[Environment, Sequence[Expression]], Expression]

    def __call__(self, env: Environment, args: Sequence[Expression]) -> Expression:
        return self.fn(env, args)

    def __str__(self) -> str:
        return "Function {}"


Expression = Union[Symbol, Number, List, Function]


def display(expr: Expression) -> str:
    return str(expr)
