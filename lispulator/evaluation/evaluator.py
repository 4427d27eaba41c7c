"""Tree-walking evaluator for LISPulator.

Reduces an expression against an Environment. Lists are applications: the
head is evaluated first and must yield a Function, then the arguments are
evaluated left to right and handed to the function. There is no tail-call
elimination, so nesting is bounded by an explicit depth limit.
"""

from __future__ import annotations

from typing import Optional

from lispulator.config import get_max_depth
from lispulator.errors import (
    LispulatorDepthError,
    LispulatorSyntaxError,
    LispulatorTypeError,
)
from lispulator.types.environment import Environment
from lispulator.types.expression import Expression, Function, List, Number
from lispulator.types.symbol import Symbol


def evaluate(
    expr: Expression, env: Environment, max_depth: Optional[int] = None
) -> Expression:
    if max_depth is None:
        max_depth = get_max_depth()
    try:
        return evaluate0(expr, env, max_depth, 0)
    except RecursionError as ex:
        raise LispulatorDepthError(
            "maximum nesting depth exceeded for this interpreter"
        ) from ex


def evaluate0(
    expr: Expression, env: Environment, max_depth: int, depth: int
) -> Expression:
    if depth > max_depth:
        raise LispulatorDepthError(f"maximum nesting depth of {max_depth} exceeded")

    match expr:
        case Symbol():
            return env.lookup(expr)
        case Number():
            return expr
        case List(elements=()):
            raise LispulatorSyntaxError("list is empty")
        case List(elements=(head, *tail_args)):
            fn = evaluate0(head, env, max_depth, depth + 1)
            if not isinstance(fn, Function):
                raise LispulatorTypeError("initial form must be a function")
            # A failing argument propagates before later ones are evaluated
            args = []
            for arg in tail_args:
                args.append(evaluate0(arg, env, max_depth, depth + 1))
            return fn(env, tuple(args))
        case Function():
            raise LispulatorTypeError("unexpected form")

    raise LispulatorTypeError("unexpected form")
