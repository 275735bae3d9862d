from sheq import EvaluatorFn
from sheq.builtin.primitives import PrimitiveTable
from sheq.types.ast import IfC
from sheq.types.environment import Environment
from sheq.types.errors import SheqTypeError
from sheq.types.values import BoolV, Value


def if_form(
    expr: IfC,
    env: Environment,
    primitives: PrimitiveTable,
    evaluate_fn: EvaluatorFn,
) -> Value:
    cond = evaluate_fn(expr.condition, env, primitives)
    # No truthiness: only a boolean may select a branch
    if not isinstance(cond, BoolV):
        raise SheqTypeError(cond)

    if cond.b:
        return evaluate_fn(expr.then_, env, primitives)
    return evaluate_fn(expr.else_, env, primitives)
