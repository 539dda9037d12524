import collections

from .core import Effect


class Instruction(collections.namedtuple("Instruction", "mnemonic opcode operands")):
    """
    Each instruction occupies 1 + ARITY cells. The first cell holds the
    opcode in its two lowest decimal digits and one mode digit per parameter
    above that,

        CBAOO

        OO: opcode
        A:  mode of parameter 1
        B:  mode of parameter 2
        C:  mode of parameter 3

    Instructions that write to memory (WRITES) take their destination from
    the last parameter; every other parameter is read as a value.

    """

    ARITY = 0
    WRITES = False
    INPUT = False

    def __new__(cls, operands=()):
        operands = tuple(operands)
        assert len(operands) == cls.ARITY
        return super(Instruction, cls).__new__(
                cls,
                cls.MNEMONIC,
                cls.OPCODE,
                operands,
                )

    def __str__(self):
        return ' '.join([self.mnemonic] + [str(op) for op in self.operands])

    @classmethod
    def size(cls):
        return 1 + cls.ARITY

    @property
    def sources(self):
        if self.WRITES:
            return self.operands[:-1]

        return self.operands

    @property
    def destination(self):
        return self.operands[-1] if self.WRITES else None

    def execute(self, values, dest=None):
        raise NotImplementedError()


class Add(Instruction):
    MNEMONIC = "ADD"
    OPCODE = 1
    ARITY = 3
    WRITES = True

    def execute(self, values, dest=None):
        a, b = values
        return Effect(writes=[(dest, a + b)])


class Multiply(Instruction):
    MNEMONIC = "MUL"
    OPCODE = 2
    ARITY = 3
    WRITES = True

    def execute(self, values, dest=None):
        a, b = values
        return Effect(writes=[(dest, a * b)])


class Input(Instruction):
    MNEMONIC = "INP"
    OPCODE = 3
    ARITY = 1
    WRITES = True
    INPUT = True

    def execute(self, values, dest=None):
        value, = values
        return Effect(writes=[(dest, value)])


class Output(Instruction):
    MNEMONIC = "OUT"
    OPCODE = 4
    ARITY = 1

    def execute(self, values, dest=None):
        value, = values
        return Effect(output=value)


class JumpIfTrue(Instruction):
    MNEMONIC = "JNZ"
    OPCODE = 5
    ARITY = 2

    def execute(self, values, dest=None):
        cond, target = values
        return Effect(jump=target if cond != 0 else None)


class JumpIfFalse(Instruction):
    MNEMONIC = "JZ"
    OPCODE = 6
    ARITY = 2

    def execute(self, values, dest=None):
        cond, target = values
        return Effect(jump=target if cond == 0 else None)


class LessThan(Instruction):
    MNEMONIC = "LT"
    OPCODE = 7
    ARITY = 3
    WRITES = True

    def execute(self, values, dest=None):
        a, b = values
        return Effect(writes=[(dest, 1 if a < b else 0)])


class Equals(Instruction):
    MNEMONIC = "EQ"
    OPCODE = 8
    ARITY = 3
    WRITES = True

    def execute(self, values, dest=None):
        a, b = values
        return Effect(writes=[(dest, 1 if a == b else 0)])


class AdjustBase(Instruction):
    MNEMONIC = "ARB"
    OPCODE = 9
    ARITY = 1

    def execute(self, values, dest=None):
        delta, = values
        return Effect(base=delta)


class Halt(Instruction):
    MNEMONIC = "HLT"
    OPCODE = 99

    def execute(self, values, dest=None):
        return Effect(halt=True)


INSTRUCTIONS = (
        Add,
        Multiply,
        Input,
        Output,
        JumpIfTrue,
        JumpIfFalse,
        LessThan,
        Equals,
        AdjustBase,
        Halt,
        )
