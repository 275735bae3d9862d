from sheq.types.ast import LambdaC
from sheq.types.environment import Environment
from sheq.types.values import CloV


def lambda_form(expr: LambdaC, env: Environment) -> CloV:
    # The body node is shared with the AST, and `env` is the defining environment
    return CloV(expr.args, expr.body, env)
