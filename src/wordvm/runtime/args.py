from dataclasses import dataclass
from typing import Sequence

from wordvm.common.hwconf import MAX_LITERAL, REGISTER_BASE, REGISTER_LAST, REGISTERS
from wordvm.runtime.errors import InvalidArgument, InvalidLiteral, InvalidRegister


@dataclass(frozen=True)
class Literal:
    value: int

    def __str__(self):
        return str(self.value)


@dataclass(frozen=True)
class Register:
    index: int

    def __str__(self):
        return 'abcdefgh'[self.index] if 0 <= self.index < REGISTERS else f'r{self.index}'


Argument = Literal | Register


def decode_arg(raw: int) -> Argument:
    if 0 <= raw <= MAX_LITERAL:
        return Literal(raw)

    if REGISTER_BASE <= raw <= REGISTER_LAST:
        return Register(raw - REGISTER_BASE)

    raise InvalidArgument(raw)


def encode_arg(arg: Argument) -> int:
    if isinstance(arg, Register):
        return REGISTER_BASE + arg.index

    return arg.value


def check_register(index: int) -> int:
    if not 0 <= index < REGISTERS:
        raise InvalidRegister(f'Invalid register {index}')

    return index


def resolve(arg: Argument, registers: Sequence[int]) -> int:
    if isinstance(arg, Literal):
        if not 0 <= arg.value <= MAX_LITERAL:
            raise InvalidLiteral(f'Invalid literal {arg.value}')

        return arg.value

    if isinstance(arg, Register):
        return registers[check_register(arg.index)]

    raise InvalidArgument(arg)


def resolve_all(args: Sequence[Argument], registers: Sequence[int]) -> list[int]:
    return [resolve(arg, registers) for arg in args]
