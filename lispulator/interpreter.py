from __future__ import annotations

import logging
from typing import Optional

from lispulator.config import get_max_depth, is_strict
from lispulator.errors import LispulatorSyntaxError
from lispulator.evaluation.evaluator import evaluate
from lispulator.reader.parser import parse
from lispulator.reader.tokenizer import tokenize
from lispulator.types.environment import Environment
from lispulator.types.expression import Expression
from lispulator.builtin.env_builtin import register

logger = logging.getLogger(__name__)


def evaluate_line(
    text: str,
    env: Environment,
    *,
    max_depth: Optional[int] = None,
    strict: Optional[bool] = None,
) -> Expression:
    """Tokenize, parse and evaluate the first expression on one line of text."""
    if max_depth is None:
        max_depth = get_max_depth()
    if strict is None:
        strict = is_strict()
    expr, rest = parse(tokenize(text), max_depth)
    if rest:
        if strict:
            raise LispulatorSyntaxError(f"unexpected trailing tokens: {' '.join(rest)}")
        logger.debug("Ignoring %d trailing token(s): %s", len(rest), rest)
    return evaluate(expr, env, max_depth)


class Interpreter:
    """
    Holds the global Environment across calls, so every line is evaluated
    against the same builtins and bindings.
    """

    def __init__(
        self,
        env: Environment | None = None,
        *,
        max_depth: Optional[int] = None,
        strict: Optional[bool] = None,
    ):
        if env is None:
            env = Environment()
            register(env)
        self.env: Environment = env
        self.max_depth: int = max_depth if max_depth is not None else get_max_depth()
        self.strict: bool = strict if strict is not None else is_strict()

    def eval(self, code: str) -> Expression:
        return evaluate_line(code, self.env, max_depth=self.max_depth, strict=self.strict)
