import pytest

from linsl.config import Settings
from linsl.interpreter import Interpreter
from linsl.types.environment import Environment


@pytest.fixture
def env():
    """Fresh top-level environment."""
    return Environment()


@pytest.fixture
def interp():
    """Interpreter with default settings, independent of LINSL_* variables."""
    return Interpreter(Settings())


@pytest.fixture
def run(interp):
    """Evaluate source in a persistent interpreter and return the last result."""
    return interp.eval
