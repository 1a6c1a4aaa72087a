# type: ignore
import pytest

from wordvm.runtime.console import BufferConsole


@pytest.fixture
def console():
    yield BufferConsole()
