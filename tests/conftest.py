import pytest

from lispulator.types.environment import Environment
from lispulator.builtin.env_builtin import register
from lispulator.interpreter import Interpreter

# Tests must not pick up LISPULATOR_* settings from the developer's shell.
_CONFIG_VARS = (
    "LISPULATOR_MAX_DEPTH",
    "LISPULATOR_STRICT",
    "LISPULATOR_PROMPT",
    "LISPULATOR_LOG_LEVEL",
)


@pytest.fixture(autouse=True)
def _clean_config(monkeypatch):
    for var in _CONFIG_VARS:
        monkeypatch.delenv(var, raising=False)


@pytest.fixture
def env():
    """Fresh environment with builtins loaded."""
    e = Environment()
    register(e)
    return e


@pytest.fixture
def interp():
    return Interpreter()
