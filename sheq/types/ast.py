"""Expression nodes for SHEQ.

Every node is a frozen dataclass that owns its children. Sequences handed to
`LambdaC` and `AppC` are frozen into tuples so a tree can never be mutated
after construction.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from sheq.types.errors import SheqSyntaxError

# Reserved words of the surface syntax; none may be used as an identifier.
KEYWORDS: tuple[str, ...] = ("if", "let", "in", "end", "lambda", ":", "=")


def check_identifier(name: str) -> str:
    """Return `name` unchanged, or raise SheqSyntaxError if it is reserved."""
    if not isinstance(name, str) or not name:
        raise SheqSyntaxError(f"invalid identifier {name!r}")
    if name in KEYWORDS:
        raise SheqSyntaxError(f"keyword {name} cannot be used as an identifier")
    return name


@dataclass(frozen=True, slots=True)
class NumC:
    n: float

    def __post_init__(self):
        object.__setattr__(self, "n", float(self.n))


@dataclass(frozen=True, slots=True)
class IdC:
    name: str

    def __post_init__(self):
        check_identifier(self.name)


@dataclass(frozen=True, slots=True)
class StringC:
    s: str


@dataclass(frozen=True, slots=True)
class IfC:
    condition: Expression
    then_: Expression
    else_: Expression


@dataclass(frozen=True, slots=True)
class LambdaC:
    args: tuple[str, ...]
    body: Expression

    def __post_init__(self):
        args = tuple(check_identifier(a) for a in self.args)
        seen: set[str] = set()
        for a in args:
            if a in seen:
                raise SheqSyntaxError(f"duplicate parameter {a} in lambda")
            seen.add(a)
        object.__setattr__(self, "args", args)


@dataclass(frozen=True, slots=True)
class AppC:
    fun: Expression
    args: tuple[Expression, ...] = ()

    def __post_init__(self):
        object.__setattr__(self, "args", tuple(self.args))


Expression = Union[NumC, IdC, StringC, IfC, LambdaC, AppC]
