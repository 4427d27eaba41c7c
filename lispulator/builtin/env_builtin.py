"""Built-in functions for the LISPulator runtime environment.

Every builtin follows the same contract: it receives the environment and
the already evaluated arguments, and returns an Expression or raises a
LispulatorError. Arithmetic and comparison coerce their arguments with
`parse_list_of_floats` first.
"""
from __future__ import annotations

import functools
import logging
import math
import operator
from typing import Callable, Sequence

from lispulator.errors import LispulatorArityError, LispulatorTypeError
from lispulator.types.environment import Environment
from lispulator.types.expression import Expression, Function, Number
from lispulator.types.symbol import FALSE, TRUE, Symbol

logger = logging.getLogger(__name__)


def parse_single_float(expr: Expression) -> float:
    if isinstance(expr, Number):
        return expr.value
    raise LispulatorTypeError("expected a number")


def parse_list_of_floats(args: Sequence[Expression]) -> list[float]:
    return [parse_single_float(a) for a in args]


def _first_and_rest(args: Sequence[Expression]) -> tuple[float, list[float]]:
    floats = parse_list_of_floats(args)
    if not floats:
        raise LispulatorArityError("requires at least one number")
    return floats[0], floats[1:]


def _fold_sum(floats: Sequence[float]) -> float:
    # Plain left fold; builtin sum() compensates rounding on newer Pythons
    return functools.reduce(operator.add, floats, 0.0)


def _divide(a: float, b: float) -> float:
    """IEEE-754 division: a zero divisor gives inf, -inf or nan."""
    if b == 0.0:
        if a == 0.0 or math.isnan(a):
            return math.nan
        return math.copysign(math.inf, a) * math.copysign(1.0, b)
    return a / b


# -------------------------------
# Arithmetic
# -------------------------------
def add(env: Environment, args: Sequence[Expression]) -> Number:
    return Number(_fold_sum(parse_list_of_floats(args)))


def sub(env: Environment, args: Sequence[Expression]) -> Number:
    first, rest = _first_and_rest(args)
    return Number(first - _fold_sum(rest))


def mul(env: Environment, args: Sequence[Expression]) -> Number:
    return Number(math.prod(parse_list_of_floats(args), start=1.0))


def div(env: Environment, args: Sequence[Expression]) -> Number:
    first, rest = _first_and_rest(args)
    if not rest:
        return Number(_divide(1.0, first))
    return Number(_divide(first, math.prod(rest, start=1.0)))


# -------------------------------
# Comparison
# -------------------------------
def monotonic(check: Callable[[float, float], bool]) -> Callable[[Environment, Sequence[Expression]], Symbol]:
    """Build a predicate that holds when `check` holds for every adjacent pair."""

    def predicate(env: Environment, args: Sequence[Expression]) -> Symbol:
        first, rest = _first_and_rest(args)
        floats = [first, *rest]
        return TRUE if all(check(a, b) for a, b in zip(floats, floats[1:])) else FALSE

    return predicate


equals = monotonic(operator.eq)
lt = monotonic(operator.lt)
lte = monotonic(operator.le)
gt = monotonic(operator.gt)
gte = monotonic(operator.ge)


# -------------------------------
# Registration
# -------------------------------
BUILTINS: dict[str, Callable[[Environment, Sequence[Expression]], Expression]] = {
    "+": add,
    "-": sub,
    "*": mul,
    "/": div,
    "=": equals,
    "<": lt,
    "<=": lte,
    ">": gt,
    ">=": gte,
}


def register(env: Environment) -> None:
    env.update({Symbol(name): Function(name, fn) for name, fn in BUILTINS.items()})
    logger.debug("Registered %d builtins", len(BUILTINS))
