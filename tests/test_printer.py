import math

import pytest
from hypothesis import given, strategies as st

from sheq.evaluation.evaluator import evaluate
from sheq.printer import format_number, serialize
from sheq.types.ast import IdC, NumC, StringC
from sheq.types.environment import Environment
from sheq.types.values import BoolV, CloV, NumV, PrimV, StringV


@pytest.mark.parametrize(
    "n,text",
    [
        (10.0, "10"),
        (0.0, "0"),
        (-0.0, "-0"),
        (-3.0, "-3"),
        (0.5, "0.5"),
        (3.14, "3.14"),
        (-2.25, "-2.25"),
        (1e21, "1000000000000000000000"),
        (1e-7, "0.0000001"),
        (123456789012.0, "123456789012"),
        (math.inf, "inf"),
        (-math.inf, "-inf"),
        (math.nan, "NaN"),
    ],
)
def test_format_number(n, text):
    assert format_number(n) == text


@pytest.mark.parametrize(
    "value,text",
    [
        (NumV(40.0), "40"),
        (BoolV(True), "true"),
        (BoolV(False), "false"),
        (StringV("Hello world!"), "Hello world!"),
        (StringV(""), ""),
        (StringV('with "quotes"'), 'with "quotes"'),
        (PrimV("+"), "#<primop>"),
        (PrimV("not-a-real-primitive"), "#<primop>"),
    ],
)
def test_serialize(value, text):
    assert serialize(value) == text


def test_serialize_closure_ignores_internals():
    env = Environment.of([("x", NumV(1.0))])
    assert serialize(CloV(("x",), IdC("x"), env)) == "#<procedure>"
    assert serialize(CloV((), StringC("body"), Environment.empty())) == "#<procedure>"


@given(st.floats(allow_nan=False, allow_infinity=False))
def test_number_text_reads_back_exactly(n):
    text = serialize(evaluate(NumC(n), Environment.empty()))
    assert float(text) == n
    assert "e" not in text
    assert not text.endswith(".0")


@given(st.integers(min_value=-(2 ** 53), max_value=2 ** 53))
def test_integral_numbers_have_no_fraction(i):
    assert format_number(float(i)) == str(i)


@given(st.text())
def test_strings_serialize_verbatim(s):
    assert serialize(evaluate(StringC(s), Environment.empty())) == s
