import pytest

from sheq.builtin.env_builtin import global_env
from sheq.builtin.primitives import PrimitiveTable
from sheq.interpreter import Interpreter


@pytest.fixture
def env():
    """Fresh global environment with primitives and boolean literals."""
    return global_env()


@pytest.fixture
def interp(monkeypatch):
    # Keep the outcome independent of the caller's shell
    monkeypatch.delenv("SHEQ_STRICT_PRIMITIVES", raising=False)
    return Interpreter()


@pytest.fixture
def strict_table():
    return PrimitiveTable(strict=True)
