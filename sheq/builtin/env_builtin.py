"""Construction of the SHEQ global environment."""
from __future__ import annotations

from sheq.builtin.primitives import PrimitiveTable, STANDARD_PRIMITIVES
from sheq.types.environment import Environment
from sheq.types.values import BoolV, PrimV, Value

BOOLEAN_LITERALS: dict[str, Value] = {
    "true": BoolV(True),
    "false": BoolV(False),
}


def register(primitives: PrimitiveTable = STANDARD_PRIMITIVES) -> list[tuple[str, Value]]:
    """Return the global bindings: one PrimV per primitive name, then the boolean literals."""
    bindings: list[tuple[str, Value]] = [(name, PrimV(name)) for name in primitives]
    bindings.extend(BOOLEAN_LITERALS.items())
    return bindings


def global_env(primitives: PrimitiveTable = STANDARD_PRIMITIVES) -> Environment:
    return Environment.of(register(primitives))
