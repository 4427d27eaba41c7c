# Core public API for LISPulator.
# Expressions are immutable objects (Symbol, Number, List, Function);
# an Environment maps Symbols to them and persists across evaluations.

from lispulator.errors import (
    LispulatorError,
    LispulatorTokenizeError,
    LispulatorSyntaxError,
    LispulatorDepthError,
    LispulatorUnboundSymbol,
    LispulatorTypeError,
    LispulatorArityError,
)
from lispulator.types import Symbol, Number, List, Function, Expression, Environment, display
from lispulator.interpreter import Interpreter, evaluate_line

__all__ = [
    "LispulatorError",
    "LispulatorTokenizeError",
    "LispulatorSyntaxError",
    "LispulatorDepthError",
    "LispulatorUnboundSymbol",
    "LispulatorTypeError",
    "LispulatorArityError",
    "Symbol",
    "Number",
    "List",
    "Function",
    "Expression",
    "Environment",
    "display",
    "Interpreter",
    "evaluate_line",
]
