import collections
import enum


class IntcodeError(Exception):
    pass


class InvalidOpcode(IntcodeError):
    def __init__(self, value, ptr):
        super(InvalidOpcode, self).__init__(
                'invalid opcode {} at address {}'.format(value, ptr))
        self.value = value
        self.ptr = ptr


class InputExhausted(IntcodeError):
    pass


class SegmentationFault(IntcodeError):
    def __init__(self, address):
        super(SegmentationFault, self).__init__(
                'invalid address {}'.format(address))
        self.address = address


class EngineHalted(IntcodeError):
    pass


class EngineBusy(IntcodeError):
    pass


class ProgramError(IntcodeError):
    pass


class Mode(enum.IntEnum):
    POSITION = 0
    IMMEDIATE = 1
    RELATIVE = 2


class Operand(collections.namedtuple("Operand", "mode value")):
    """
    A single instruction parameter: the raw cell value following the opcode
    and the addressing mode taken from the opcode's upper digits.

    """

    def __new__(cls, mode, value):
        return super(Operand, cls).__new__(cls, Mode(mode), int(value))

    def __str__(self):
        if self.mode == Mode.IMMEDIATE:
            return '#{}'.format(self.value)

        if self.mode == Mode.RELATIVE:
            return '[rb{:+d}]'.format(self.value)

        return '[{}]'.format(self.value)

    def address(self, base):
        if self.mode == Mode.RELATIVE:
            return base + self.value

        # immediate destinations fall back to position addressing
        return self.value

    def resolve(self, memory, base):
        if self.mode == Mode.IMMEDIATE:
            return self.value

        return memory.read(self.address(base))


class Effect(collections.namedtuple("Effect", "writes jump base output halt")):
    def __new__(cls, writes=(), jump=None, base=0, output=None, halt=False):
        return super(Effect, cls).__new__(
                cls,
                tuple(writes),
                jump,
                base,
                output,
                halt,
                )


class Memory(object):
    def __init__(self, program=()):
        self._ram = dict()
        self.load_program(program)

    def __len__(self):
        return max(self._ram) + 1 if self._ram else 0

    def __iter__(self):
        for index in range(len(self)):
            yield self.read(index)

    def __getitem__(self, index):
        return self.read(index)

    def read(self, index):
        if index < 0:
            raise SegmentationFault(index)

        return self._ram.get(index, 0)

    def write(self, index, value):
        if index < 0:
            raise SegmentationFault(index)

        self._ram[index] = int(value)

    def load_program(self, program):
        for index, value in enumerate(program):
            self.write(index, value)

    def snapshot(self):
        return tuple(self)
