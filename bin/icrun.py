#!/usr/bin/env python3

import argparse
import asyncio
import logging
import logging.config
import os
import sys

import intcode.core
import intcode.device
import intcode.interpreter
import intcode.program

logger = logging.getLogger('intcode')


def main(argv=sys.argv[1:]):
    parser = argparse.ArgumentParser()
    parser.add_argument("--input", "-i", type=int, action='append', default=[])
    parser.add_argument("--patch", "-p", action='append', default=[],
            help="ADDRESS=VALUE substitution applied before running")
    parser.add_argument("--ascii", "-a", action='store_true')
    parser.add_argument("--dump", "-d", action='store_true')
    parser.add_argument("--log-level", "-l", choices=('debug', 'info', 'error'), default='error')
    parser.add_argument("file")

    args = parser.parse_args(argv)

    logging_levels = {
            'debug': logging.DEBUG,
            'error': logging.ERROR,
            'info': logging.INFO,
            }

    logging.getLogger('intcode').setLevel(logging_levels[args.log_level])

    program = intcode.program.load(args.file)

    changes = dict()
    for item in args.patch:
        address, _, value = item.partition('=')
        changes[int(address)] = int(value)

    if changes:
        program = intcode.program.patch(program, changes)

    if args.ascii:
        sink = intcode.device.TerminalStdout()
    else:
        sink = print

    engine = intcode.interpreter.Engine(program, source=args.input, sink=sink)

    try:
        asyncio.run(engine.run())

    except intcode.core.IntcodeError as e:
        logger.error(e)
        return 1

    finally:
        if args.ascii:
            sink.flush()

    if args.dump:
        print()
        for index, value in enumerate(engine.memory):
            print('[{0:#06x}] {1}'.format(index, value))

    return 0


if __name__ == "__main__":
    cfg = os.path.expandvars("${XDG_CONFIG_HOME}/intcode/logging.cfg")
    if os.path.exists(cfg):
        logging.config.fileConfig(cfg)

    else:
        logging.basicConfig()

    sys.exit(main())
