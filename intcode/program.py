import logging
import re

from .core import ProgramError


logger = logging.getLogger(__name__)

_separator = re.compile(r'[,\s]+')


def is_comment(line):
    return not line or line.startswith('#')


def parse(text):
    """
    Converts the textual form of a program, integers separated by commas
    and/or whitespace, into an immutable program image. Blank lines and
    lines starting with '#' are ignored.

    """
    lines = [line.strip() for line in text.splitlines()]
    lines = [line for line in lines if not is_comment(line)]

    program = list()
    for token in _separator.split(' '.join(lines)):
        if not token:
            continue

        try:
            program.append(int(token))
        except ValueError:
            raise ProgramError('invalid program cell {!r}'.format(token)) from None

    logger.debug('parsed {} cells'.format(len(program)))

    return tuple(program)


def load(path):
    with open(path) as fp:
        return parse(fp.read())


def patch(program, changes):
    """Returns a copy of the program with {address: value} substituted"""
    image = list(program)
    for address, value in changes.items():
        if address < 0:
            raise ProgramError('cannot patch address {}'.format(address))

        if address >= len(image):
            image.extend([0] * (address + 1 - len(image)))

        image[address] = int(value)

    return tuple(image)
