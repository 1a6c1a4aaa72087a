import logging as lg
from enum import Enum
from typing import Callable

import wordvm.common.ops as ops
from wordvm.common.hwconf import REGISTERS, WORD_MASK, WORD_MODULUS, MAX_LITERAL
from wordvm.runtime.args import Register, check_register, resolve_all
from wordvm.runtime.console import Console
from wordvm.runtime.decoder import Command, decode
from wordvm.runtime.errors import (
    Halt, MachineHalted, VMError, StackExhausted, ArithmeticFault, ConsoleIOError
)
from wordvm.runtime.memory import Memory


class State(Enum):
    RUNNING = 'running'
    HALTED = 'halted'
    ERRORED = 'errored'


class CPU():
    pc: int             # Address of the next instruction
    gp: list[int]       # General purpose registers
    stack: list[int]    # Data and return addresses
    state: State

    def __init__(self, memory: Memory, console: Console, trace: bool = False):
        self.memory = memory    # Ref. to memory
        self.console = console  # Ref. to console

        self.pc = 0
        self.gp = [0] * REGISTERS
        self.stack = []
        self.state = State.RUNNING
        self.steps = 0
        self.trace = trace

    # - Helpers - #

    def debug_dump(self):
        state = [f'PC:{self.pc:X}', f'SP:{len(self.stack)}']
        state.extend([f'{i}:{self.gp[i]:X}' for i in range(len(self.gp))])
        lg.debug(' '.join(state))

    def do_push(self, val: int):
        self.stack.append(val)

    def do_pop(self) -> int:
        if not self.stack:
            raise StackExhausted('Pop from an empty stack')

        return self.stack.pop()

    # - Storage operations: return the value for the destination register - #

    def mov(self, b: int) -> int:
        return b

    def pop(self) -> int:
        return self.do_pop()

    def eq(self, b: int, c: int) -> int:
        return 1 if b == c else 0

    def gt(self, b: int, c: int) -> int:
        return 1 if b > c else 0

    def add(self, b: int, c: int) -> int:
        return (b + c) % WORD_MODULUS

    def mult(self, b: int, c: int) -> int:
        return (b * c) % WORD_MODULUS

    def mod(self, b: int, c: int) -> int:
        if c == 0:
            raise ArithmeticFault('Modulo by zero')

        return b % c

    def band(self, b: int, c: int) -> int:
        return b & c

    def bor(self, b: int, c: int) -> int:
        return b | c

    def inv(self, b: int) -> int:
        return ~b & WORD_MASK

    def rmem(self, b: int) -> int:
        return self.memory.load(b)

    def inp(self) -> int:
        code = ord(self.console.read_char())

        if code > MAX_LITERAL:
            raise ConsoleIOError(f'Character code {code} does not fit a word')

        return code

    # - Control-flow operations: return the new pc - #

    def hlt(self, pc: int) -> int:
        raise MachineHalted('Halt instruction')

    def noop(self, pc: int) -> int:
        return pc

    def psh(self, pc: int, a: int) -> int:
        self.do_push(a)
        return pc

    def jmp(self, pc: int, a: int) -> int:
        return a

    def jt(self, pc: int, a: int, b: int) -> int:
        return b if a != 0 else pc

    def jf(self, pc: int, a: int, b: int) -> int:
        return b if a == 0 else pc

    def wmem(self, pc: int, a: int, b: int) -> int:
        self.memory.store(a, b)
        return pc

    def call(self, pc: int, a: int) -> int:
        self.do_push(pc)
        return a

    def ret(self, pc: int) -> int:
        if not self.stack:
            raise MachineHalted('Return on an empty stack')

        return self.do_pop()

    def out(self, pc: int, a: int) -> int:
        self.console.write_char(chr(a))
        return pc

    STORAGE_HANDLERS: dict[int, Callable[..., int]] = {
        ops.SET: mov,
        ops.POP: pop,
        ops.EQ: eq,
        ops.GT: gt,
        ops.ADD: add,
        ops.MULT: mult,
        ops.MOD: mod,
        ops.AND: band,
        ops.OR: bor,
        ops.NOT: inv,
        ops.RMEM: rmem,
        ops.IN: inp,
    }

    CONTROL_HANDLERS: dict[int, Callable[..., int]] = {
        ops.HALT: hlt,
        ops.RET: ret,
        ops.NOOP: noop,
        ops.PUSH: psh,
        ops.JMP: jmp,
        ops.JT: jt,
        ops.JF: jf,
        ops.WMEM: wmem,
        ops.CALL: call,
        ops.OUT: out,
    }

    # -- Implementation -- #

    def execute(self, cmd: Command, addr: int) -> int:
        next_pc = cmd.next_pc(addr)

        if cmd.info.storage:
            dest, *sources = cmd.args

            # Destination is a raw register index, never a resolved value
            index = check_register(dest.index if isinstance(dest, Register) else dest.value)
            values = resolve_all(sources, self.gp)
            self.gp[index] = self.STORAGE_HANDLERS[cmd.opcode](self, *values)
            return next_pc

        values = resolve_all(cmd.args, self.gp)
        return self.CONTROL_HANDLERS[cmd.opcode](self, next_pc, *values)

    def step(self) -> Command:
        if self.state is not State.RUNNING:
            raise VMError(f'Machine is {self.state.value}')

        addr = self.pc

        try:
            cmd = decode(self.memory, addr)

            if self.trace:
                lg.debug(f'{addr:04X}: {cmd}')

            self.pc = self.execute(cmd, addr)

        except MachineHalted:
            self.steps += 1
            self.state = State.HALTED
            raise

        except Halt:
            self.state = State.HALTED
            raise

        except VMError as e:
            e.pc = addr
            self.state = State.ERRORED
            raise

        self.steps += 1

        if self.trace:
            self.debug_dump()

        return cmd

    def run(self) -> Halt:
        try:
            while True:
                self.step()

        except Halt as h:
            lg.info(f'Stopped after {self.steps} steps: {h}')
            return h
