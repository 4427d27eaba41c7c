import logging

import pytest

from lispulator.errors import (
    LispulatorDepthError,
    LispulatorError,
    LispulatorSyntaxError,
    LispulatorTypeError,
    LispulatorUnboundSymbol,
)
from lispulator.interpreter import Interpreter, evaluate_line
from lispulator.types.expression import Number


programs = [
    ("(+ 1 2 3)", Number(6.0)),
    ("(- 10 1 2 3)", Number(4.0)),
    ("(+ (- 5 2) 1)", Number(4.0)),
    ("  ( +   1   2 )  \n", Number(3.0)),
    ("42", Number(42.0)),
]


@pytest.mark.parametrize("source, expected", programs)
def test_eval(interp, source, expected):
    assert interp.eval(source) == expected


@pytest.mark.parametrize(
    "source, error, message",
    [
        ("()", LispulatorSyntaxError, "list is empty"),
        ("(+ 1 2", LispulatorSyntaxError, "no closing `)`"),
        (")", LispulatorSyntaxError, "unexpected `)`"),
        ("", LispulatorSyntaxError, "unable to get token"),
        ("(foo 1 2)", LispulatorUnboundSymbol, "unexpected symbol: foo"),
        ("(1 2 3)", LispulatorTypeError, "initial form must be a function"),
        ("(+ 1 (foo))", LispulatorUnboundSymbol, "unexpected symbol: foo"),
        ("((+) 1)", LispulatorTypeError, "initial form must be a function"),
        ("(+ 1 -)", LispulatorTypeError, "expected a number"),
    ]
)
def test_eval_errors(interp, source, error, message):
    with pytest.raises(error) as excinfo:
        interp.eval(source)
    assert excinfo.value.message == message
    assert isinstance(excinfo.value, LispulatorError)


def test_environment_persists_across_lines(interp):
    env = interp.env
    interp.eval("(+ 1 2)")
    with pytest.raises(LispulatorUnboundSymbol):
        interp.eval("(bar)")
    assert interp.env is env
    assert interp.eval("(- 3 1)") == Number(2.0)


def test_trailing_tokens_ignored_by_default(interp, caplog):
    with caplog.at_level(logging.DEBUG, logger="lispulator.interpreter"):
        assert interp.eval("(+ 1 2) (foo) )") == Number(3.0)
    assert "Ignoring 4 trailing token(s)" in caplog.text


def test_trailing_tokens_rejected_when_strict():
    interp = Interpreter(strict=True)
    with pytest.raises(LispulatorSyntaxError, match="unexpected trailing tokens: 4 5"):
        interp.eval("(+ 1 2) 4 5")


def test_strict_from_environment(monkeypatch):
    monkeypatch.setenv("LISPULATOR_STRICT", "yes")
    with pytest.raises(LispulatorSyntaxError):
        Interpreter().eval("1 2")


def test_max_depth(env):
    deep = "(+ " * 6 + "1" + ")" * 6
    assert evaluate_line(deep, env, max_depth=6) == Number(1.0)
    with pytest.raises(LispulatorDepthError):
        evaluate_line(deep, env, max_depth=5)


def test_max_depth_from_environment(monkeypatch):
    monkeypatch.setenv("LISPULATOR_MAX_DEPTH", "3")
    interp = Interpreter()
    assert interp.max_depth == 3
    with pytest.raises(LispulatorDepthError):
        interp.eval("(+ (+ (+ (+ 1))))")


def test_deep_nesting_within_default_limit(interp):
    depth = interp.max_depth
    source = "(+ " * depth + "1" + ")" * depth
    assert interp.eval(source) == Number(1.0)
    with pytest.raises(LispulatorDepthError):
        interp.eval("(+ " + source + ")")


def test_host_stack_exhaustion_becomes_depth_error(env):
    deep = "(+ " * 5000 + "1" + ")" * 5000
    with pytest.raises(LispulatorDepthError, match="exceeded for this interpreter"):
        evaluate_line(deep, env, max_depth=100000)
