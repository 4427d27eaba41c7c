from __future__ import annotations
import logging
import os

logger = logging.getLogger(__name__)

DEFAULT_MAX_DEPTH = 200
DEFAULT_PROMPT = "LISPulator >"
DEFAULT_LOG_LEVEL = "WARNING"

_TRUTHY = frozenset({"1", "true", "yes", "on"})


def value_from_env(var: str, default: str) -> str:
    raw = os.environ.get(var)
    if raw is None or not raw.strip():
        return default
    return raw.strip()


def get_max_depth() -> int:
    raw = value_from_env("LISPULATOR_MAX_DEPTH", str(DEFAULT_MAX_DEPTH))
    try:
        depth = int(raw)
    except ValueError:
        logger.warning("Ignoring LISPULATOR_MAX_DEPTH=%r, not an integer", raw)
        return DEFAULT_MAX_DEPTH
    if depth < 1:
        logger.warning("Ignoring LISPULATOR_MAX_DEPTH=%r, must be positive", raw)
        return DEFAULT_MAX_DEPTH
    return depth


def is_strict() -> bool:
    """Whether tokens left after the first complete expression are rejected."""
    return value_from_env("LISPULATOR_STRICT", "").lower() in _TRUTHY


def get_prompt() -> str:
    # Not stripped: trailing spaces in a prompt are meaningful
    return os.environ.get("LISPULATOR_PROMPT") or DEFAULT_PROMPT


def get_log_level() -> str:
    level = value_from_env("LISPULATOR_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper()
    if not isinstance(logging.getLevelName(level), int):
        logger.warning("Ignoring LISPULATOR_LOG_LEVEL=%r, unknown level", level)
        return DEFAULT_LOG_LEVEL
    return level
