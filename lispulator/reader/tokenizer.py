from __future__ import annotations

from lispulator.errors import LispulatorTokenizeError


def tokenize(text: str) -> list[str]:
    """Split one line of source into '(' , ')' and atom tokens."""
    if not isinstance(text, str):
        raise LispulatorTokenizeError("expected text to tokenize")
    return text.replace("(", " ( ").replace(")", " ) ").split()
