"""Runtime values produced by the evaluator."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Union

from sheq.types.ast import Expression

if TYPE_CHECKING:
    from sheq.types.environment import Environment


@dataclass(frozen=True, slots=True)
class NumV:
    n: float

    def __post_init__(self):
        object.__setattr__(self, "n", float(self.n))


@dataclass(frozen=True, slots=True)
class BoolV:
    b: bool


@dataclass(frozen=True, slots=True)
class StringV:
    s: str


@dataclass(frozen=True, slots=True)
class CloV:
    """A closure: parameters, the body node itself, and the defining environment."""

    params: tuple[str, ...]
    body: Expression
    # Excluded from eq/repr: chains are long and compared by identity anyway
    env: Environment = field(compare=False, repr=False)

    def __str__(self) -> str:
        from sheq.debug_utils.pprint import format_expr

        return f"(λ ({' '.join(self.params)}) {format_expr(self.body)})"


@dataclass(frozen=True, slots=True)
class PrimV:
    """Reference to a primitive operator, resolved by name at dispatch time."""

    name: str


Value = Union[NumV, BoolV, StringV, CloV, PrimV]


def kind_of(value: Value) -> str:
    """Short human-readable name of a value's variant, used in error messages."""
    match value:
        case NumV():
            return "number"
        case BoolV():
            return "boolean"
        case StringV():
            return "string"
        case CloV():
            return "closure"
        case PrimV():
            return "primop"
    return type(value).__name__
