"""Application engine for SHEQ.

Centralizes what happens once the function position and the arguments of
an application have been evaluated:
- A PrimV dispatches by name into the primitive table.
- A CloV extends its captured environment (not the caller's) with the
  arguments and evaluates its body there. Arity is checked by the extension.
- Anything else is not callable.
"""

from __future__ import annotations

import logging

from sheq import EvaluatorFn
from sheq.builtin.primitives import PrimitiveTable
from sheq.types.errors import SheqNotCallable
from sheq.types.values import CloV, PrimV, Value, kind_of

logger = logging.getLogger(__name__)


def apply_closure(
    fn: CloV,
    args: list[Value],
    primitives: PrimitiveTable,
    evaluate_fn: EvaluatorFn,
) -> Value:
    new_env = fn.env.extend(fn.params, args)
    logger.debug("applying closure (%s) to %d argument(s)", " ".join(fn.params), len(args))
    return evaluate_fn(fn.body, new_env, primitives)


def apply(
    head: Value,
    args: list[Value],
    primitives: PrimitiveTable,
    evaluate_fn: EvaluatorFn,
) -> Value:
    """Apply either a closure or a primitive reference; raise SheqNotCallable otherwise."""
    match head:
        case PrimV(name):
            return primitives.dispatch(name, args)
        case CloV():
            return apply_closure(head, args, primitives, evaluate_fn)
    raise SheqNotCallable(head, kind_of(head))
