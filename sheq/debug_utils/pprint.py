"""Surface-syntax rendering of SHEQ expression trees, for logs and reprs."""
import json

from sheq.printer import format_number
from sheq.types.ast import AppC, Expression, IdC, IfC, LambdaC, NumC, StringC


def format_expr(expr: Expression, max_depth: int | None = None) -> str:
    """Render `expr` in brace syntax, e.g. {lambda (x) : {+ 1 x}}.

    Subtrees deeper than `max_depth` are elided as "...".
    """
    return _format(expr, 0, max_depth)


def _format(expr: Expression, depth: int, max_depth: int | None) -> str:
    if max_depth is not None and depth > max_depth:
        return "..."
    nested = depth + 1
    match expr:
        case NumC(n):
            return format_number(n)
        case StringC(s):
            return json.dumps(s, ensure_ascii=False)
        case IdC(name):
            return name
        case IfC(cond, then_, else_):
            parts = [_format(e, nested, max_depth) for e in (cond, then_, else_)]
            return "{if " + " ".join(parts) + "}"
        case LambdaC(args, body):
            return "{lambda (" + " ".join(args) + ") : " + _format(body, nested, max_depth) + "}"
        case AppC(fun, args):
            parts = [_format(fun, nested, max_depth)]
            parts.extend(_format(a, nested, max_depth) for a in args)
            return "{" + " ".join(parts) + "}"
    raise TypeError(f"not an expression node: {expr!r}")
