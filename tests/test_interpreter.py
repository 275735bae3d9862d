import logging

import pytest

from sheq import top_interp as package_top_interp
from sheq.builtin.primitives import NOT_IMPLEMENTED, PrimitiveTable
from sheq.config import flag_from_env, strict_primitives
from sheq.interpreter import Interpreter, top_interp
from sheq.types.ast import AppC, IdC, IfC, LambdaC, NumC, StringC
from sheq.types.errors import SheqArityError, SheqPrimitiveError, SheqUnboundIdentifier
from sheq.types.values import NumV


def prim(name, *args):
    return AppC(IdC(name), list(args))


@pytest.mark.parametrize(
    "expr,expected",
    [
        (NumC(10.0), "10"),
        (StringC("Hello world!"), "Hello world!"),
        (AppC(LambdaC(["x"], prim("+", NumC(1.0), IdC("x"))), [NumC(15.0)]), "16"),
        (prim("*", prim("-", NumC(10.0), NumC(5.0)), NumC(8.0)), "40"),
        (IfC(prim("<=", NumC(5.0), NumC(10.0)), NumC(1.0), NumC(2.0)), "1"),
        (IdC("true"), "true"),
        (IdC("+"), "#<primop>"),
        (LambdaC(["x"], IdC("x")), "#<procedure>"),
        (prim("/", NumC(7.0), NumC(2.0)), "3.5"),
        (prim("substring", StringC("abcdef"), NumC(1.0), NumC(3.0)), "bc"),
        (prim("equal?", StringC("a"), StringC("a")), "true"),
        (prim("error", StringC("boom")), NOT_IMPLEMENTED),
    ],
)
def test_top_interp(interp, expr, expected):
    assert interp.top_interp(expr) == expected


def test_module_level_top_interp(monkeypatch):
    monkeypatch.delenv("SHEQ_STRICT_PRIMITIVES", raising=False)
    assert top_interp(NumC(10.0)) == "10"
    assert package_top_interp(StringC("x")) == "x"


def test_interp_returns_value(interp):
    assert interp.interp(prim("+", NumC(2.0), NumC(2.0))) == NumV(4.0)


def test_errors_propagate_to_caller(interp):
    with pytest.raises(SheqUnboundIdentifier):
        interp.top_interp(IdC("undefined"))
    with pytest.raises(SheqArityError):
        interp.top_interp(AppC(LambdaC(["a", "b"], IdC("a")), [NumC(1.0)]))


def test_interpreter_is_reusable_after_error(interp):
    with pytest.raises(SheqUnboundIdentifier):
        interp.top_interp(IdC("undefined"))
    assert interp.top_interp(NumC(3.0)) == "3"


def test_strict_interpreter_raises_on_mismatch():
    interp = Interpreter(strict=True)
    with pytest.raises(SheqPrimitiveError):
        interp.top_interp(prim("+", NumC(1.0), StringC("x")))


def test_strict_from_environment(monkeypatch):
    monkeypatch.setenv("SHEQ_STRICT_PRIMITIVES", "yes")
    assert Interpreter().primitives.strict is True
    # An explicit argument wins over the environment
    assert Interpreter(strict=False).primitives.strict is False


def test_explicit_table_is_used():
    table = PrimitiveTable(strict=True)
    interp = Interpreter(table)
    assert interp.primitives is table
    with pytest.raises(ValueError):
        Interpreter(table, strict=False)


@pytest.mark.parametrize(
    "raw,expected",
    [("1", True), ("TRUE", True), (" on ", True), ("0", False), ("no", False), ("", False)],
)
def test_flag_from_env(monkeypatch, raw, expected):
    monkeypatch.setenv("SHEQ_TEST_FLAG", raw)
    assert flag_from_env("SHEQ_TEST_FLAG", not expected) is expected


def test_flag_from_env_rejects_garbage(monkeypatch):
    monkeypatch.setenv("SHEQ_STRICT_PRIMITIVES", "maybe")
    with pytest.raises(ValueError):
        strict_primitives()


def test_strict_defaults_off(monkeypatch):
    monkeypatch.delenv("SHEQ_STRICT_PRIMITIVES", raising=False)
    assert strict_primitives() is False


def test_debug_logging(interp, caplog):
    with caplog.at_level(logging.DEBUG, logger="sheq"):
        interp.top_interp(AppC(LambdaC(["x"], prim("strlen", IdC("x"))), [NumC(1.0)]))
    messages = [r.getMessage() for r in caplog.records]
    assert any(m.startswith("evaluating {{lambda (x)") for m in messages)
    assert any("applying closure (x)" in m for m in messages)
    assert any("primitive strlen has no rule" in m for m in messages)
