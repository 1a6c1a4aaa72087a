import sys
import logging as lg
from collections import deque
from typing import TextIO

from wordvm.runtime.errors import ConsoleIOError


class Console():
    ''' Character I/O seen by the IN and OUT instructions '''

    def read_char(self) -> str:
        raise NotImplementedError()

    def write_char(self, ch: str):
        raise NotImplementedError()


class StdConsole(Console):
    ''' Blocking console over text streams, stdin/stdout by default '''

    def __init__(self, stdin: TextIO | None = None, stdout: TextIO | None = None):
        self.stdin = stdin if stdin is not None else sys.stdin
        self.stdout = stdout if stdout is not None else sys.stdout

    def read_char(self) -> str:
        self.stdout.flush()

        try:
            ch = self.stdin.read(1)
        except (OSError, UnicodeDecodeError) as e:
            raise ConsoleIOError(f'Failed to read input: {e}') from e

        if not ch:
            raise ConsoleIOError('End of input stream')

        lg.debug(f'IN {ch!r}')
        return ch

    def write_char(self, ch: str):
        try:
            self.stdout.write(ch)
            self.stdout.flush()
        except OSError as e:
            raise ConsoleIOError(f'Failed to write output: {e}') from e


class BufferConsole(Console):
    def __init__(self, input_text: str = ''):
        self.pending = deque(input_text)
        self.written: list[str] = []

    def feed(self, text: str):
        self.pending.extend(text)

    def read_char(self) -> str:
        if not self.pending:
            raise ConsoleIOError('Input buffer exhausted')

        ch = self.pending.popleft()
        lg.debug(f'IN {ch!r}')
        return ch

    def write_char(self, ch: str):
        self.written.append(ch)

    @property
    def output(self) -> str:
        return ''.join(self.written)
