from dataclasses import dataclass


# Basic
HALT = 0x00   # stop
SET = 0x01    # b -> A
PUSH = 0x02   # a -> [stack]
POP = 0x03    # [stack] -> A
EQ = 0x04     # b == c -> A
GT = 0x05     # b > c -> A
JMP = 0x06    # goto a
JT = 0x07     # if a != 0 goto b
JF = 0x08     # if a == 0 goto b

# Arithmetic
ADD = 0x09    # b + c -> A
MULT = 0x0A   # b * c -> A
MOD = 0x0B    # b % c -> A
AND = 0x0C    # b & c -> A
OR = 0x0D     # b | c -> A
NOT = 0x0E    # ~b -> A

# Memory
RMEM = 0x0F   # M[b] -> A
WMEM = 0x10   # b -> M[a]

# Calls
CALL = 0x11   # push next pc; goto a
RET = 0x12    # goto [stack], halts on empty stack

# Console
OUT = 0x13    # a -> console
IN = 0x14     # console -> A

NOOP = 0x15

MAX_OPCODE = NOOP


@dataclass(frozen=True)
class OpInfo:
    mnemonic: str
    arity: int
    storage: bool   # first argument is a destination register, pc never branches


INFO: dict[int, OpInfo] = {
    HALT: OpInfo('halt', 0, False),
    SET: OpInfo('set', 2, True),
    PUSH: OpInfo('push', 1, False),
    POP: OpInfo('pop', 1, True),
    EQ: OpInfo('eq', 3, True),
    GT: OpInfo('gt', 3, True),
    JMP: OpInfo('jmp', 1, False),
    JT: OpInfo('jt', 2, False),
    JF: OpInfo('jf', 2, False),
    ADD: OpInfo('add', 3, True),
    MULT: OpInfo('mult', 3, True),
    MOD: OpInfo('mod', 3, True),
    AND: OpInfo('and', 3, True),
    OR: OpInfo('or', 3, True),
    NOT: OpInfo('not', 2, True),
    RMEM: OpInfo('rmem', 2, True),
    WMEM: OpInfo('wmem', 2, False),
    CALL: OpInfo('call', 1, False),
    RET: OpInfo('ret', 0, False),
    OUT: OpInfo('out', 1, False),
    IN: OpInfo('in', 1, True),
    NOOP: OpInfo('noop', 0, False),
}

BY_MNEMONIC: dict[str, int] = {info.mnemonic: op for op, info in INFO.items()}


def arity(op: int) -> int:
    return INFO[op].arity


def mnemonic(op: int) -> str:
    return INFO[op].mnemonic
