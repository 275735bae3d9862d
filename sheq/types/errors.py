from __future__ import annotations

from enum import Enum
from typing import Any


class ErrorKind(str, Enum):
    UNBOUND_IDENTIFIER = "unbound-identifier"
    ARITY_MISMATCH = "arity-mismatch"
    TYPE_ERROR = "type-error"
    NOT_CALLABLE = "not-callable"
    PRIMITIVE_MISMATCH = "primitive-mismatch"
    SYNTAX = "syntax"


class SheqError(Exception):
    """ Base class for all SHEQ errors"""

    kind: ErrorKind

    def __init__(self, message: str):
        super().__init__(f"SHEQ: {message}")


class SheqUnboundIdentifier(SheqError):
    """ Raised when an identifier has no binding in the environment"""

    kind = ErrorKind.UNBOUND_IDENTIFIER

    def __init__(self, name: str):
        super().__init__(f"unbound identifier {name}")
        self.name = name


class SheqArityError(SheqError):
    """ Raised when a closure is applied to the wrong number of arguments"""

    kind = ErrorKind.ARITY_MISMATCH

    def __init__(self, expected: int, got: int):
        super().__init__(f"arity mismatch, expected {expected} argument(s), got {got}")
        self.expected = expected
        self.got = got


class SheqTypeError(SheqError):
    """ Raised when a conditional's test does not produce a boolean"""

    kind = ErrorKind.TYPE_ERROR

    def __init__(self, value: Any):
        # Lazy import to avoid a cycle through sheq.types.values
        from sheq.printer import serialize

        super().__init__(f"if expected boolean, got {serialize(value)}")
        self.value = value


class SheqNotCallable(SheqError):
    """ Raised when the function position of an application is not a function"""

    kind = ErrorKind.NOT_CALLABLE

    def __init__(self, value: Any, value_kind: str):
        super().__init__(f"cannot apply non-function {value_kind}")
        self.value = value
        self.value_kind = value_kind


class SheqPrimitiveError(SheqError):
    """ Raised by strict primitive tables instead of returning the sentinel"""

    kind = ErrorKind.PRIMITIVE_MISMATCH

    def __init__(self, name: str, args: tuple):
        super().__init__(f"primitive {name} not implemented for {len(args)} argument(s)")
        self.name = name
        self.arguments = args


class SheqSyntaxError(SheqError):
    """ Raised when an AST node is malformed"""

    kind = ErrorKind.SYNTAX
