#!/usr/bin/env python3

import sys
import os
import logging
import argparse
from typing import Callable, Optional

logger = logging.getLogger(__name__)

def build_parser(prog: str, description: str) -> argparse.ArgumentParser:
    # no -h/--version: every invocation must transform stdin
    parser = argparse.ArgumentParser(prog=prog, description=description,
                                     add_help=False, allow_abbrev=False, exit_on_error=False)
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable verbose output on stderr")

    return parser


def parse_args(prog: str, description: str, argv: Optional[list[str]] = None) -> tuple[argparse.Namespace, list[str]]:
    "Parse known options; anything else, malformed forms of known options included, is returned as extra."

    if argv is None:
        argv = sys.argv[1:]

    try:
        return build_parser(prog, description).parse_known_args(argv)
    except argparse.ArgumentError:
        return argparse.Namespace(verbose=False), list(argv)


def setup_logging(verbose: bool):
    if verbose:
        logging.basicConfig(level=logging.DEBUG)
    else:
        logging.basicConfig(level=logging.INFO)


def read_stdin() -> bytes:
    return sys.stdin.buffer.read()


def write_stdout(data: bytes):
    sys.stdout.buffer.write(data)
    sys.stdout.buffer.flush()


def run(prog: str, description: str, transform: Callable[[bytes], bytes]):
    args, extra = parse_args(prog, description)
    setup_logging(args.verbose)

    if extra:
        logger.debug('ignoring arguments: %s', ' '.join(extra))

    try:
        data = read_stdin()
        logger.debug('read %d bytes from stdin', len(data))

        out = transform(data)

        write_stdout(out)
        logger.debug('wrote %d bytes to stdout', len(out))
    except BrokenPipeError:
        # the interpreter flushes stdout again on exit
        devnull = os.open(os.devnull, os.O_WRONLY)
        os.dup2(devnull, sys.stdout.fileno())

        logger.error('%s: output closed before all data was written', prog)
        sys.exit(1)
    except OSError as e:
        logger.error('%s: I/O error: %s', prog, e)
        sys.exit(1)
    except ValueError as e:
        logger.error('%s: invalid input: %s', prog, e)
        sys.exit(1)
