from __future__ import annotations
import os

_TRUTHY = {"1", "true", "yes", "on"}
_FALSY = {"0", "false", "no", "off", ""}


def flag_from_env(var: str, default: bool) -> bool:
    raw = os.environ.get(var)
    if raw is None:
        return default
    value = raw.strip().lower()
    if value in _TRUTHY:
        return True
    if value in _FALSY:
        return False
    raise ValueError(f"{var} must be one of {sorted(_TRUTHY | _FALSY - {''})}, got {raw!r}")


def strict_primitives() -> bool:
    # When set, primitive shape mismatches raise instead of returning the sentinel
    return flag_from_env('SHEQ_STRICT_PRIMITIVES', False)
