import asyncio
import unittest

from intcode import amplifier
from intcode.core import IntcodeError
from intcode.core import InvalidOpcode
from intcode.device import Channel
from intcode.interpreter import State


SERIES = [
        ([3, 15, 3, 16, 1002, 16, 10, 16, 1, 16, 15, 15, 4, 15, 99, 0, 0],
            (4, 3, 2, 1, 0), 43210),
        ([3, 23, 3, 24, 1002, 24, 10, 24, 1002, 23, -1, 23, 101, 5, 23, 23, 1,
            24, 23, 23, 4, 23, 99, 0, 0],
            (0, 1, 2, 3, 4), 54321),
        ([3, 31, 3, 32, 1002, 32, 10, 32, 1001, 31, -2, 31, 1007, 31, 0, 33,
            1002, 33, 7, 33, 1, 33, 31, 31, 1, 32, 31, 31, 4, 31, 99, 0, 0, 0],
            (1, 0, 4, 3, 2), 65210),
        ]

FEEDBACK = [
        ([3, 26, 1001, 26, -4, 26, 3, 27, 1002, 27, 2, 27, 1, 27, 26, 27, 4, 27,
            1001, 28, -1, 28, 1005, 28, 6, 99, 0, 0, 5],
            (9, 8, 7, 6, 5), 139629729),
        ([3, 52, 1001, 52, -5, 52, 3, 53, 1, 52, 56, 54, 1007, 54, 5, 55, 1005,
            55, 26, 1001, 54, -5, 54, 1105, 1, 12, 1, 53, 54, 53, 1008, 54, 0,
            55, 1001, 55, 1, 55, 2, 53, 55, 53, 4, 53, 1001, 56, -1, 56, 1005,
            56, 6, 99, 0, 0, 0, 0, 10],
            (9, 7, 8, 5, 6), 18216),
        ]


class TestPipeline(unittest.TestCase):
    def test_series(self):
        for program, phases, expected in SERIES:
            signal = asyncio.run(amplifier.pipeline(program, phases))
            self.assertEqual(signal, expected)

    def test_feedback(self):
        for program, phases, expected in FEEDBACK:
            signal = asyncio.run(amplifier.pipeline(program, phases, feedback=True))
            self.assertEqual(signal, expected)

    def test_series_max_signal(self):
        for program, phases, expected in SERIES:
            self.assertEqual(amplifier.max_signal(program), (expected, phases))

    def test_feedback_max_signal(self):
        for program, phases, expected in FEEDBACK:
            result = amplifier.max_signal(program, range(5, 10), feedback=True)
            self.assertEqual(result, (expected, phases))

    def test_fault_is_surfaced(self):
        # every amplifier reads its phase and a signal, only the first gets one
        program = [3, 0, 3, 0, 98]
        with self.assertRaises(InvalidOpcode):
            asyncio.run(amplifier.pipeline(program, range(5), feedback=True))

    def test_no_output(self):
        with self.assertRaises(IntcodeError):
            asyncio.run(amplifier.pipeline([3, 0, 3, 0, 99], [0]))

    def test_requires_phases(self):
        with self.assertRaises(ValueError):
            asyncio.run(amplifier.pipeline([99], []))


class TestBuild(unittest.IsolatedAsyncioTestCase):
    async def test_wiring(self):
        engines = amplifier.build([99], [5, 6, 7], signal=3, feedback=True)
        self.assertEqual(len(engines), 3)
        self.assertIs(engines[0].sink, engines[1].source)
        self.assertIs(engines[1].sink, engines[2].source)
        self.assertIs(engines[2].sink, engines[0].source)
        self.assertEqual(len(engines[0].source), 2)
        self.assertEqual(await engines[0].source.read(), 5)
        self.assertEqual(await engines[0].source.read(), 3)

    async def test_series_wiring(self):
        engines = amplifier.build([99], [5, 6], feedback=False)
        self.assertIsInstance(engines[0].sink, Channel)
        self.assertIsNone(engines[1].sink)

    async def test_siblings_cancelled_on_fault(self):
        engines = amplifier.build([3, 0, 3, 0, 98], range(3), feedback=True)
        with self.assertRaises(InvalidOpcode):
            await amplifier.run_all(engines)

        self.assertIs(engines[0].state, State.FAULTED)
        self.assertIs(engines[1].state, State.AWAITING_INPUT)
