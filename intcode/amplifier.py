import asyncio
import itertools
import logging

from .core import IntcodeError
from .device import Channel
from .interpreter import Engine


logger = logging.getLogger(__name__)


def build(program, phases, signal=0, feedback=False):
    """
    Creates one engine per phase setting. Each engine reads from its own
    channel, seeded with its phase; the first channel is also seeded with
    the initial signal. Outputs are forwarded to the next engine's channel,
    and with `feedback` the last engine feeds back into the first.

    """
    channels = [Channel([phase], name='amp{}'.format(i)) for i, phase in enumerate(phases)]
    channels[0].write(signal)

    engines = list()
    for i, channel in enumerate(channels):
        if i + 1 < len(channels):
            sink = channels[i + 1]
        elif feedback:
            sink = channels[0]
        else:
            sink = None

        engines.append(Engine(program, source=channel, sink=sink, name='amp{}'.format(i)))

    return engines


async def run_all(engines):
    tasks = [asyncio.ensure_future(engine.run()) for engine in engines]

    try:
        await asyncio.gather(*tasks)

    except Exception:
        # a faulted engine would leave its neighbours waiting on input
        for task in tasks:
            task.cancel()

        await asyncio.gather(*tasks, return_exceptions=True)
        raise


async def pipeline(program, phases, signal=0, feedback=False):
    phases = list(phases)
    if not phases:
        raise ValueError('at least one phase setting is required')

    engines = build(program, phases, signal=signal, feedback=feedback)
    await run_all(engines)

    outputs = engines[-1].outputs
    if not outputs:
        raise IntcodeError('{} produced no output'.format(engines[-1].name))

    logger.debug('phases {} -> {}'.format(phases, outputs[-1]))

    return outputs[-1]


async def search(program, phases, signal=0, feedback=False):
    """Returns the highest signal and the phase permutation producing it"""
    candidates = list(itertools.permutations(phases))
    results = await asyncio.gather(*[
        pipeline(program, candidate, signal=signal, feedback=feedback)
        for candidate in candidates
        ])

    best = max(zip(results, candidates), key=lambda pair: pair[0])
    logger.info('best signal {} from phases {}'.format(*best))

    return best


def max_signal(program, phases=range(5), signal=0, feedback=False):
    return asyncio.run(search(program, phases, signal=signal, feedback=feedback))
