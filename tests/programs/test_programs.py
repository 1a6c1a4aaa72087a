# type: ignore
import pytest

from wordvm.runtime.errors import ConsoleIOError, MachineHalted

import unit_utils


def test_hello():
    proc, console = unit_utils.run_file('programs/hello.sasm')
    assert console.output == 'Hello, world!\n'
    assert proc.stack == []


def test_stack_and_calls():
    proc, console = unit_utils.run_file('programs/stack.sasm')

    assert console.output == 'sx'
    assert proc.gp[:3] == [3, 2, 1]


def test_echo():
    _, console = unit_utils.run_file('programs/echo.sasm', input_text='ping\nrest')
    assert console.output == 'ping'


def test_echo_without_newline():
    with pytest.raises(ConsoleIOError):
        unit_utils.run_file('programs/echo.sasm', input_text='ping')


def test_countdown():
    proc, console = unit_utils.run_file('programs/countdown.sasm')

    assert console.output == '9876543210\n'
    assert proc.gp[0] == 0
