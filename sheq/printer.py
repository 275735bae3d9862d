"""Rendering of runtime values to their external string form."""

from __future__ import annotations

import math
from decimal import Decimal
from typing import assert_never

from sheq.types.values import BoolV, CloV, NumV, PrimV, StringV, Value


def format_number(n: float) -> str:
    """Positional decimal text for a float: no trailing ".0", never exponent notation.

    10.0 -> "10", 0.5 -> "0.5", 1e21 -> "1000000000000000000000",
    1e-7 -> "0.0000001", and "inf", "-inf", "NaN" for non-finite values.
    """
    if math.isnan(n):
        return "NaN"
    if math.isinf(n):
        return "inf" if n > 0 else "-inf"
    text = repr(float(n))
    if "e" in text:
        text = format(Decimal(text), "f")
    if text.endswith(".0"):
        text = text[:-2]
    return text


def serialize(value: Value) -> str:
    match value:
        case NumV(n):
            return format_number(n)
        case BoolV(b):
            return "true" if b else "false"
        case StringV(s):
            return s
        case CloV():
            return "#<procedure>"
        case PrimV():
            return "#<primop>"
        case _:
            assert_never(value)
