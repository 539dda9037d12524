#!/usr/bin/env python3

import argparse
import logging
import logging.config
import os
import sys

import intcode.amplifier
import intcode.core
import intcode.program

logger = logging.getLogger('intcode')


def main(argv=sys.argv[1:]):
    parser = argparse.ArgumentParser()
    parser.add_argument("--feedback", "-f", action='store_true')
    parser.add_argument("--phases", "-p", default=None,
            help="comma separated phase settings (default 0-4, or 5-9 with --feedback)")
    parser.add_argument("--signal", "-s", type=int, default=0)
    parser.add_argument("--log-level", "-l", choices=('debug', 'info', 'error'), default='error')
    parser.add_argument("file")

    args = parser.parse_args(argv)

    logging_levels = {
            'debug': logging.DEBUG,
            'error': logging.ERROR,
            'info': logging.INFO,
            }

    logging.getLogger('intcode').setLevel(logging_levels[args.log_level])

    if args.phases is None:
        phases = range(5, 10) if args.feedback else range(5)
    else:
        phases = [int(phase) for phase in args.phases.split(',')]

    program = intcode.program.load(args.file)

    try:
        signal, best = intcode.amplifier.max_signal(
                program,
                phases,
                signal=args.signal,
                feedback=args.feedback,
                )

    except intcode.core.IntcodeError as e:
        logger.error(e)
        return 1

    print('{} {}'.format(signal, ','.join(map(str, best))))

    return 0


if __name__ == "__main__":
    cfg = os.path.expandvars("${XDG_CONFIG_HOME}/intcode/logging.cfg")
    if os.path.exists(cfg):
        logging.config.fileConfig(cfg)

    else:
        logging.basicConfig()

    sys.exit(main())
