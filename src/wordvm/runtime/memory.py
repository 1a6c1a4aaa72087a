import logging as lg
from typing import Iterable

from wordvm.common.hwconf import CELL_MASK, MAX_ADDRESS
from wordvm.runtime.errors import MemoryOutOfRange


class Memory():
    ''' Growable word memory, code and data share one address space.

    Stores grow the backing list on demand (new cells are zero).
    Loads past the current extent fail, which is how the CPU detects
    that it walked off the end of the program.
    '''

    cells: list[int]

    def __init__(self, words: Iterable[int] = ()):
        self.cells = list(words)

        if len(self.cells) > MAX_ADDRESS + 1:
            raise MemoryOutOfRange(f'Image of {len(self.cells)} words exceeds address space')

        for word in self.cells:
            if not 0 <= word <= CELL_MASK:
                raise ValueError(f'Word {word} does not fit a memory cell')

    def __len__(self):
        return len(self.cells)

    def load(self, addr: int) -> int:
        if not 0 <= addr < len(self.cells):
            raise MemoryOutOfRange(f'Load from 0x{addr:X} beyond extent 0x{len(self.cells):X}')

        return self.cells[addr]

    def store(self, addr: int, word: int):
        if not 0 <= addr <= MAX_ADDRESS:
            raise MemoryOutOfRange(f'Store to 0x{addr:X} outside address space')

        if not 0 <= word <= CELL_MASK:
            raise ValueError(f'Word {word} does not fit a memory cell')

        if addr >= len(self.cells):
            grow = addr + 1 - len(self.cells)
            lg.debug(f'Memory grows by {grow} cells')
            self.cells.extend([0] * grow)

        self.cells[addr] = word

    def dump(self, start: int = 0, count: int | None = None) -> list[int]:
        end = len(self.cells) if count is None else start + count
        return self.cells[start:end]
