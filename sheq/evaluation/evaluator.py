"""Core evaluator for the SHEQ interpreter.

A plain structurally-recursive walk: each call reduces one expression node
in one environment to a value. Nothing is mutated and there is no tail-call
elimination, so Python's recursion limit bounds nesting depth.
"""

from __future__ import annotations

from typing import assert_never

from sheq.builtin.primitives import PrimitiveTable, STANDARD_PRIMITIVES
from sheq.evaluation.apply import apply
from sheq.evaluation.special_forms import if_form, lambda_form
from sheq.types.ast import AppC, Expression, IdC, IfC, LambdaC, NumC, StringC
from sheq.types.environment import Environment
from sheq.types.values import NumV, StringV, Value


def evaluate(
    expr: Expression,
    env: Environment,
    primitives: PrimitiveTable = STANDARD_PRIMITIVES,
) -> Value:
    match expr:
        case NumC(n):
            return NumV(n)
        case StringC(s):
            return StringV(s)
        case IdC(name):
            return env.lookup(name)
        case IfC():
            return if_form(expr, env, primitives, evaluate)
        case LambdaC():
            return lambda_form(expr, env)
        case AppC(fun, arg_exprs):
            head = evaluate(fun, env, primitives)
            # Arguments run left to right in the caller's environment
            args = [evaluate(arg, env, primitives) for arg in arg_exprs]
            return apply(head, args, primitives, evaluate)
        case _:
            assert_never(expr)
