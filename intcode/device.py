import asyncio
import collections
import inspect
import logging
import sys

from .core import InputExhausted


logger = logging.getLogger(__name__)


class Feed(object):
    """A fixed sequence of inputs that never waits for more"""

    def __init__(self, values=()):
        self._values = collections.deque(values)

    def __len__(self):
        return len(self._values)

    async def read(self):
        if not self._values:
            raise InputExhausted('no input remaining')

        return self._values.popleft()


class Channel(object):
    """
    An unbounded FIFO between a producer and an engine. Writes never block,
    so a channel can be handed to an upstream engine as its output sink; a
    read suspends until a value has been written or the channel is closed.

    """

    _CLOSED = object()

    def __init__(self, values=(), name=None):
        self.name = name
        self.closed = False
        self._queue = asyncio.Queue()
        for value in values:
            self.write(value)

    def __call__(self, value):
        self.write(value)

    def __len__(self):
        return self._queue.qsize()

    def write(self, value):
        if self.closed:
            raise InputExhausted('write to closed channel {}'.format(self.name))

        logger.debug('{} <- {}'.format(self.name, value))
        self._queue.put_nowait(value)

    def close(self):
        if not self.closed:
            self.closed = True
            self._queue.put_nowait(Channel._CLOSED)

    async def read(self):
        value = await self._queue.get()
        if value is Channel._CLOSED:
            # leave the marker in place for any other reader
            self._queue.put_nowait(value)
            raise InputExhausted('channel {} closed'.format(self.name))

        return value


class Callback(object):
    """Pulls inputs from a plain or async function; None means no more input"""

    def __init__(self, func):
        self.func = func

    async def read(self):
        value = self.func()
        if inspect.isawaitable(value):
            value = await value

        if value is None:
            raise InputExhausted('input function returned None')

        return value


def as_source(obj):
    if obj is None:
        return Feed()

    if hasattr(obj, 'read'):
        return obj

    if callable(obj):
        return Callback(obj)

    return Feed(obj)


class TerminalStdout(object):
    """
    An output sink that renders ASCII values as text and anything outside
    the ASCII range as a decimal number on its own line.

    """

    def __init__(self, stream=None):
        self.log = logging.getLogger('intcode.terminal')
        self.stream = stream if stream is not None else sys.stdout
        self.buf = list()

    def __call__(self, value):
        self.log.debug('read {}'.format(value))
        if 0 <= value < 128:
            self.buf.append(chr(value))
            if value == ord('\n'):
                self.flush()

        else:
            self.buf.append('{}\n'.format(value))
            self.flush()

    def flush(self):
        if self.buf:
            self.log.debug("write {}".format(self.buf))
            self.stream.write(''.join(self.buf))
            self.stream.flush()
            self.buf = list()
