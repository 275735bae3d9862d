"""Runtime environment for SHEQ.

An Environment is an immutable frame of (name, value) bindings plus an
`outer` link to the environment it extends. Extending never touches the
base, so any number of closures may share a common ancestor chain while
each call grows its own short-lived child frame.
"""

from __future__ import annotations

from io import StringIO
from typing import Iterable, Iterator, Optional, Sequence

from sheq.types.errors import SheqArityError, SheqUnboundIdentifier
from sheq.types.values import Value


class Environment:
    """Persistent chain of binding frames; later bindings shadow earlier ones."""

    __slots__ = ("bindings", "outer", "_depth")

    def __init__(
        self,
        bindings: Iterable[tuple[str, Value]] = (),
        outer: Optional[Environment] = None,
    ):
        self.bindings: tuple[tuple[str, Value], ...] = tuple(bindings)
        self.outer: Environment | None = outer
        self._depth: int = 0 if outer is None else outer._depth + 1

    @classmethod
    def empty(cls) -> Environment:
        return cls()

    @classmethod
    def of(cls, bindings: Iterable[tuple[str, Value]]) -> Environment:
        """Build a single-frame environment from bindings listed oldest-first."""
        return cls(bindings)

    def lookup(self, name: str) -> Value:
        """Return the most recent binding of `name`.

        Scans this frame newest-first, then each outer frame in turn.
        Raises SheqUnboundIdentifier if no frame binds `name`.
        """
        env: Optional[Environment] = self
        while env is not None:
            for bound, value in reversed(env.bindings):
                if bound == name:
                    return value
            env = env.outer
        raise SheqUnboundIdentifier(name)

    def extend(self, params: Sequence[str], args: Sequence[Value]) -> Environment:
        """Return a child environment binding each of `params` to `args` in order.

        Raises SheqArityError when the two sequences differ in length.
        """
        if len(params) != len(args):
            raise SheqArityError(len(params), len(args))
        return Environment(zip(params, args), outer=self)

    def __contains__(self, name: object) -> bool:
        return any(bound == name for bound, _ in self)

    def __iter__(self) -> Iterator[tuple[str, Value]]:
        """Yield every binding, oldest first, including shadowed ones."""
        frames: list[Environment] = []
        env: Optional[Environment] = self
        while env is not None:
            frames.append(env)
            env = env.outer
        for frame in reversed(frames):
            yield from frame.bindings

    def __len__(self) -> int:
        return sum(1 for _ in self)

    def _write_bindings(self, buffer: StringIO) -> None:
        buffer.write("{")
        buffer.write(", ".join(f"{k}: {v!r}" for k, v in self.bindings))
        buffer.write("}")

    def __str__(self) -> str:
        """Single-frame view with an indicator for the parent."""
        with StringIO() as buffer:
            self._write_bindings(buffer)
            if self.outer is not None:
                buffer.write(" -> ...")
            return buffer.getvalue()

    def __repr__(self) -> str:
        return f"<Environment depth={self._depth} bindings={len(self.bindings)}>"


def lookup(env: Environment, name: str) -> Value:
    return env.lookup(name)


def extend(env: Environment, params: Sequence[str], args: Sequence[Value]) -> Environment:
    return env.extend(params, args)
