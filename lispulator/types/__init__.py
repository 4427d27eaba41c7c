from lispulator.types.symbol import Symbol, TRUE, FALSE
from lispulator.types.expression import Number, List, Function, Expression, display
from lispulator.types.environment import Environment

__all__ = [
    "Symbol",
    "TRUE",
    "FALSE",
    "Number",
    "List",
    "Function",
    "Expression",
    "display",
    "Environment",
]
