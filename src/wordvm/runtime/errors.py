class Halt(Exception):
    ''' Clean termination, never a failure '''
    pass


class MachineHalted(Halt):
    pass


class NoMoreInstructions(Halt):
    pass


class VMError(Exception):
    pc: int | None = None


class DecodeError(VMError):
    pass


class InvalidOpcode(DecodeError):
    def __init__(self, opcode: int):
        super().__init__(f'Invalid opcode {opcode}')
        self.opcode = opcode


class InvalidArgument(DecodeError):
    def __init__(self, raw: int):
        super().__init__(f'Invalid argument value {raw}')
        self.raw = raw


class MissingArgument(DecodeError):
    def __init__(self, opcode: int, index: int):
        super().__init__(f'Argument {index} is missing from opcode {opcode}')
        self.opcode = opcode
        self.index = index


class ResolveError(VMError):
    pass


class InvalidLiteral(ResolveError):
    pass


class InvalidRegister(ResolveError):
    pass


class StackExhausted(VMError):
    pass


class ArithmeticFault(VMError, ArithmeticError):
    pass


class MemoryOutOfRange(VMError, IndexError):
    pass


class ConsoleIOError(VMError, OSError):
    pass


class ImageError(VMError):
    pass
