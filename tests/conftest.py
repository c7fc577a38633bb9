import io

import pytest

from shallot.types.environment import Environment
from shallot.builtin.env_builtin import register
from shallot.builtin.macro_builtin import register as register_macros
from shallot.interpreter import Interpreter


@pytest.fixture
def env():
    """Fresh global frame with builtins and builtin macros loaded."""
    e = Environment()
    register(e)
    register_macros(e)
    return e


@pytest.fixture
def out():
    """Output stream captured by the `print` primitive."""
    return io.StringIO()


@pytest.fixture
def interp(out):
    """Interpreter with the core prelude, printing into `out`."""
    return Interpreter(out=out)
