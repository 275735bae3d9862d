"""Primitive operators for the SHEQ runtime.

Each handler receives the already-evaluated argument tuple and returns a
Value, or None when it has no rule for that argument shape. A
PrimitiveTable turns None into the "Not implemented" sentinel string, or
into SheqPrimitiveError when the table is strict.
"""
from __future__ import annotations

import logging
import math
from types import MappingProxyType
from typing import Callable, Iterator, Mapping, Optional

from sheq.types.errors import SheqPrimitiveError
from sheq.types.values import BoolV, CloV, NumV, PrimV, StringV, Value

logger = logging.getLogger(__name__)

NOT_IMPLEMENTED = "Not implemented"

PrimitiveFn = Callable[[tuple[Value, ...]], Optional[Value]]


# -------------------------------
# Arithmetic
# -------------------------------
def add(args: tuple[Value, ...]) -> Optional[Value]:
    match args:
        case (NumV(a), NumV(b)):
            return NumV(a + b)
    return None


def sub(args: tuple[Value, ...]) -> Optional[Value]:
    match args:
        case (NumV(a), NumV(b)):
            return NumV(a - b)
    return None


def mul(args: tuple[Value, ...]) -> Optional[Value]:
    match args:
        case (NumV(a), NumV(b)):
            return NumV(a * b)
    return None


def ieee_divide(a: float, b: float) -> float:
    """Float division with IEEE-754 results for a zero divisor instead of ZeroDivisionError."""
    if b != 0:
        return a / b
    if a == 0 or math.isnan(a):
        return math.nan
    return math.copysign(math.inf, a) * math.copysign(1.0, b)


def div(args: tuple[Value, ...]) -> Optional[Value]:
    """(/ a b). Dividing by zero yields an infinity or nan, as float arithmetic does."""
    match args:
        case (NumV(a), NumV(b)):
            return NumV(ieee_divide(a, b))
    return None


# -------------------------------
# Comparison
# -------------------------------
def less_equal(args: tuple[Value, ...]) -> Optional[Value]:
    match args:
        case (NumV(a), NumV(b)):
            return BoolV(a <= b)
    return None


def equal(args: tuple[Value, ...]) -> Optional[Value]:
    """(equal? a b) => true for equal numbers, strings or booleans; functions never compare equal."""
    match args:
        case (CloV() | PrimV(), _) | (_, CloV() | PrimV()):
            return BoolV(False)
        case (NumV(a), NumV(b)):
            return BoolV(a == b)
        case (StringV(a), StringV(b)):
            return BoolV(a == b)
        case (BoolV(a), BoolV(b)):
            return BoolV(a == b)
        case (_, _):
            return BoolV(False)
    return None


# -------------------------------
# Strings
# -------------------------------
def strlen(args: tuple[Value, ...]) -> Optional[Value]:
    match args:
        case (StringV(s),):
            return NumV(float(len(s)))
    return None


def substring(args: tuple[Value, ...]) -> Optional[Value]:
    """(substring s start stop) with integral 0 <= start <= stop <= (strlen s)."""
    match args:
        case (StringV(s), NumV(start), NumV(stop)):
            if not (start.is_integer() and stop.is_integer()):
                return None
            if not 0 <= start <= stop <= len(s):
                return None
            return StringV(s[int(start):int(stop)])
    return None


def error(args: tuple[Value, ...]) -> Optional[Value]:
    # Reserved: the name is bound but no argument shape is handled yet.
    return None


_STANDARD_HANDLERS: dict[str, PrimitiveFn] = {
    "+": add,
    "-": sub,
    "*": mul,
    "/": div,
    "<=": less_equal,
    "substring": substring,
    "strlen": strlen,
    "equal?": equal,
    "error": error,
}


class PrimitiveTable:
    """Immutable mapping of operator names to handlers.

    Built once and passed explicitly to the evaluator; nothing consults a
    process-wide registry. With `strict=True`, an unhandled name or argument
    shape raises SheqPrimitiveError rather than producing the sentinel.
    """

    __slots__ = ("_handlers", "strict")

    def __init__(self, handlers: Mapping[str, PrimitiveFn] | None = None, strict: bool = False):
        self._handlers: Mapping[str, PrimitiveFn] = MappingProxyType(
            dict(_STANDARD_HANDLERS if handlers is None else handlers)
        )
        self.strict: bool = strict

    @property
    def names(self) -> tuple[str, ...]:
        return tuple(self._handlers)

    def __contains__(self, name: object) -> bool:
        return name in self._handlers

    def __iter__(self) -> Iterator[str]:
        return iter(self._handlers)

    def __len__(self) -> int:
        return len(self._handlers)

    def dispatch(self, name: str, args: tuple[Value, ...] | list[Value]) -> Value:
        args = tuple(args)
        handler = self._handlers.get(name)
        result = handler(args) if handler is not None else None
        if result is not None:
            return result
        if self.strict:
            raise SheqPrimitiveError(name, args)
        logger.debug("primitive %s has no rule for %d argument(s); returning sentinel", name, len(args))
        return StringV(NOT_IMPLEMENTED)

    def __repr__(self) -> str:
        return f"<PrimitiveTable {' '.join(self._handlers)}{' strict' if self.strict else ''}>"


STANDARD_PRIMITIVES = PrimitiveTable()


def dispatch(name: str, args: tuple[Value, ...] | list[Value], table: PrimitiveTable = STANDARD_PRIMITIVES) -> Value:
    return table.dispatch(name, args)
