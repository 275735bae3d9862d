from __future__ import annotations

import logging

from sheq import config
from sheq.builtin.env_builtin import global_env
from sheq.builtin.primitives import PrimitiveTable
from sheq.debug_utils.pprint import format_expr
from sheq.evaluation.evaluator import evaluate
from sheq.printer import serialize
from sheq.types.ast import Expression
from sheq.types.environment import Environment
from sheq.types.values import Value

logger = logging.getLogger(__name__)


class Interpreter:
    """
    Evaluates SHEQ expression trees against a global environment built once
    at construction: every primitive name plus the `true`/`false` literals.
    """

    def __init__(
        self,
        primitives: PrimitiveTable | None = None,
        *,
        strict: bool | None = None,
    ):
        if primitives is None:
            if strict is None:
                strict = config.strict_primitives()
            primitives = PrimitiveTable(strict=strict)
        elif strict is not None and strict != primitives.strict:
            raise ValueError("strict conflicts with the supplied primitive table")
        self.primitives: PrimitiveTable = primitives
        self.env: Environment = global_env(primitives)

    def interp(self, expr: Expression) -> Value:
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("evaluating %s", format_expr(expr, max_depth=4))
        return evaluate(expr, self.env, self.primitives)

    def top_interp(self, expr: Expression) -> str:
        """Evaluate `expr` in the global environment and serialize the result."""
        return serialize(self.interp(expr))


def top_interp(expr: Expression) -> str:
    return Interpreter().top_interp(expr)
