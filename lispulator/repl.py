"""
Interactive driver for LISPulator.

Reads one line at a time, evaluates it and prints either

    Result => <value>
    Error! => <message>

A bad line never ends the session; end of input does, with exit status 0.
"""
from __future__ import annotations

import logging
import sys
from typing import Optional, TextIO

from lispulator.config import get_log_level, get_prompt
from lispulator.errors import LispulatorError
from lispulator.interpreter import Interpreter
from lispulator.types.expression import display

logger = logging.getLogger(__name__)


class Repl:
    def __init__(
        self,
        interp: Interpreter | None = None,
        stdin: TextIO | None = None,
        stdout: TextIO | None = None,
        prompt: Optional[str] = None,
    ):
        self.interp = interp if interp is not None else Interpreter()
        self.stdin = stdin if stdin is not None else sys.stdin
        self.stdout = stdout if stdout is not None else sys.stdout
        self.prompt = prompt if prompt is not None else get_prompt()

    def respond(self, line: str) -> str:
        """Evaluate one line and render the reply the REPL prints for it."""
        try:
            result = self.interp.eval(line)
        except LispulatorError as ex:
            logger.debug("Evaluation of %r failed: %s", line, ex)
            return f"Error! => {ex.message}"
        return f"Result => {display(result)}"

    def run(self) -> int:
        while True:
            print(self.prompt, file=self.stdout, flush=True)
            try:
                line = self.stdin.readline()
            except KeyboardInterrupt:
                return 0
            if not line:  # EOF
                return 0
            print(self.respond(line), file=self.stdout, flush=True)


def main() -> int:
    logging.basicConfig(
        level=get_log_level(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    return Repl().run()
