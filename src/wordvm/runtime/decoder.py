from dataclasses import dataclass, field

import wordvm.common.ops as ops
from wordvm.runtime.args import Argument, decode_arg
from wordvm.runtime.errors import InvalidOpcode, MemoryOutOfRange, MissingArgument, NoMoreInstructions
from wordvm.runtime.memory import Memory


@dataclass(frozen=True)
class Command:
    opcode: int
    args: tuple[Argument, ...] = field(default_factory=tuple)

    @property
    def info(self) -> ops.OpInfo:
        return ops.INFO[self.opcode]

    @property
    def size(self) -> int:
        return 1 + len(self.args)

    def next_pc(self, addr: int) -> int:
        return addr + self.size

    def __str__(self):
        return ' '.join([self.info.mnemonic] + [str(arg) for arg in self.args])


def fetch_opcode(memory: Memory, addr: int) -> int:
    try:
        opcode = memory.load(addr)
    except MemoryOutOfRange:
        raise NoMoreInstructions(f'No instruction at 0x{addr:X}')

    if opcode > ops.MAX_OPCODE:
        raise InvalidOpcode(opcode)

    return opcode


def decode(memory: Memory, addr: int) -> Command:
    opcode = fetch_opcode(memory, addr)
    args: list[Argument] = []

    for i in range(ops.arity(opcode)):
        try:
            raw = memory.load(addr + 1 + i)
        except MemoryOutOfRange:
            raise MissingArgument(opcode, i)

        args.append(decode_arg(raw))

    return Command(opcode, tuple(args))
