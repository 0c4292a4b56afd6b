import pytest

from minischeme.interpreter import Interpreter


@pytest.fixture
def interp():
    """Fresh interpreter with the builtin procedures loaded."""
    return Interpreter()
