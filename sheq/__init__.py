# Core type aliases for the SHEQ data model.
# Expression nodes and runtime values are closed sets of frozen dataclasses
# (see sheq.types.ast and sheq.types.values); the aliases below name the unions.
#
# Naming guidance:
# - Expression: use in AST construction and evaluator dispatch.
# - Value:      use wherever an evaluated runtime value flows.

from typing import Callable

from sheq.types.ast import Expression, NumC, IdC, StringC, IfC, LambdaC, AppC, KEYWORDS
from sheq.types.values import Value, NumV, BoolV, StringV, CloV, PrimV
from sheq.types.environment import Environment, lookup, extend
from sheq.types.errors import (
    ErrorKind,
    SheqError,
    SheqUnboundIdentifier,
    SheqArityError,
    SheqTypeError,
    SheqNotCallable,
    SheqPrimitiveError,
    SheqSyntaxError,
)

# Evaluator function type: passed into special forms so they can recurse
EvaluatorFn = Callable[..., Value]

from sheq.builtin.primitives import PrimitiveTable, STANDARD_PRIMITIVES, NOT_IMPLEMENTED  # noqa: E402
from sheq.evaluation.evaluator import evaluate  # noqa: E402
from sheq.printer import serialize, format_number  # noqa: E402
from sheq.interpreter import Interpreter, top_interp  # noqa: E402
