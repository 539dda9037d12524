import asyncio
import enum
import inspect
import logging

from . import device
from . import opcode
from .core import EngineBusy
from .core import EngineHalted
from .core import IntcodeError
from .core import InvalidOpcode
from .core import Memory
from .core import Operand


logger = logging.getLogger(__name__)


class State(enum.Enum):
    RUNNING = 'running'
    AWAITING_INPUT = 'awaiting-input'
    HALTED = 'halted'
    FAULTED = 'faulted'


class Interpreter(object):
    def __init__(self, instructions=opcode.INSTRUCTIONS):
        self.opcodes = {op.OPCODE: op for op in instructions}

    def interpret(self, memory, ptr):
        data = memory.read(ptr)
        if data < 0:
            raise InvalidOpcode(data, ptr)

        # retrieve the opcode and the mode digits above it
        modes, code = divmod(data, 100)

        try:
            ins = self.opcodes[code]
        except KeyError:
            raise InvalidOpcode(data, ptr) from None

        operands = list()
        for index in range(ins.ARITY):
            modes, mode = divmod(modes, 10)
            try:
                operands.append(Operand(mode, memory.read(ptr + 1 + index)))
            except ValueError:
                raise InvalidOpcode(data, ptr) from None

        return ins(operands)


class Engine(object):
    """
    Runs a single program to completion. The engine copies the program into
    its own memory and is good for exactly one run; once it has halted or
    faulted a new engine has to be constructed.

    Input is pulled from `source` (anything with an async `read`, see
    intcode.device.as_source) and every output is pushed to `sink` as soon
    as it is produced, as well as being collected in `outputs`.

    Only one caller may drive an engine at a time; stepping an engine that
    is suspended on input raises EngineBusy.

    """

    def __init__(self, program, source=None, sink=None, name=None, interpreter=None):
        self.name = name or 'engine'
        self.memory = Memory(program)
        self.source = device.as_source(source)
        self.sink = sink
        self.interpreter = interpreter or Interpreter()
        self.outputs = list()
        self.state = State.RUNNING
        self.fault = None
        self.ptr = 0
        self.base = 0
        self.cycles = 0

    @property
    def halted(self):
        return self.state is State.HALTED

    async def step(self):
        if self.state in (State.HALTED, State.FAULTED):
            raise EngineHalted('{} is {}'.format(self.name, self.state.value))

        if self.state is State.AWAITING_INPUT:
            raise EngineBusy('{} is already waiting for input'.format(self.name))

        try:
            ins = self.interpreter.interpret(self.memory, self.ptr)
            logger.debug('{} @{}: {}'.format(self.name, self.ptr, ins))

            values = [op.resolve(self.memory, self.base) for op in ins.sources]
            if ins.INPUT:
                self.state = State.AWAITING_INPUT
                values.append(await self.source.read())
                self.state = State.RUNNING

            dest = None
            if ins.WRITES:
                dest = ins.destination.address(self.base)

            effect = ins.execute(values, dest)

            for address, value in effect.writes:
                self.memory.write(address, value)

            self.base += effect.base

            if effect.output is not None:
                await self.emit(effect.output)

        except IntcodeError as e:
            self.state = State.FAULTED
            self.fault = e
            logger.error('{} faulted at @{}: {}'.format(self.name, self.ptr, e))
            raise

        self.cycles += 1

        if effect.halt:
            self.state = State.HALTED
            return

        if effect.jump is not None:
            self.ptr = effect.jump
        else:
            self.ptr += ins.size()

    async def emit(self, value):
        if self.sink is not None:
            result = self.sink(value)
            if inspect.isawaitable(result):
                await result

        self.outputs.append(value)

    async def run(self):
        logger.info('{} run start'.format(self.name))

        while True:
            await self.step()
            if self.halted:
                break

        logger.info('{} run stop after {} cycles'.format(self.name, self.cycles))

        return self.outputs


def execute(program, inputs=None, sink=None):
    """Runs a program on a fresh engine and returns its outputs"""
    engine = Engine(program, source=inputs, sink=sink)
    return asyncio.run(engine.run())
