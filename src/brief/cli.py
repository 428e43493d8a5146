from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

from .api import compile_file
from .config import Config, Mode
from .dump import format_dump
from .engine import Engine
from .errors import BriefError

_log = logging.getLogger("brief")

EXIT_OK = 0
EXIT_ERROR = 1

EPILOG = """\
EOF behaviours (-e):
  0  store a zero in the cell (default)
  a  store the minimum cell value in the cell
  b  store the maximum cell value in the cell
  n  store a negative one in the cell
  x  do not change the cell's contents

Modes (-m):
  d  dump parsed code
  r  run normally (default)

Overflow/underflow behaviours (-v, -w):
  e  throw an error and quit upon over/underflow (pointer default)
  i  do nothing when attempting to over/underflow
  w  wrap-around to other end upon over/underflow (value default)

Cells are 64-bit signed integers; -a and -b must fit in that range.
"""


def _configure_logging(verbosity: int) -> None:
    level = logging.WARNING
    if verbosity == 1:
        level = logging.INFO
    elif verbosity >= 2:
        level = logging.DEBUG

    root = logging.getLogger("brief")
    root.setLevel(level)
    if not root.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter("%(name)s: %(levelname)s: %(message)s"))
        root.addHandler(handler)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="brief",
        description="brief: a flexible brainfuck interpreter",
        epilog=EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("-a", dest="min_value", type=int, default=0, help="minimum cell value (default: 0)")
    parser.add_argument("-b", dest="max_value", type=int, default=255, help="maximum cell value (default: 255)")
    parser.add_argument("-c", dest="cell_count", type=int, default=30000,
                        help="number of cells to allocate (default: 30000)")
    parser.add_argument("-e", dest="eof", default="0", help="value to store upon EOF (default: 0)")
    parser.add_argument("-f", dest="file", help="source file name (required)")
    parser.add_argument("-m", dest="mode", default="r", help="runtime mode (default: r)")
    parser.add_argument("-d", dest="dump", action="store_true", help="shorthand for -m d")
    parser.add_argument("-v", dest="value_policy", default="w", help="value overflow/underflow behaviour")
    parser.add_argument("-w", dest="cursor_policy", default="e", help="cell pointer overflow/underflow behaviour")
    parser.add_argument("--verbose", action="count", default=0, help="log progress to stderr (repeat for debug)")
    return parser


def _error(message: str) -> int:
    sys.stderr.write(f"brief: error: {message}\n")
    return EXIT_ERROR


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    if argv is None:
        argv = sys.argv[1:]
    if not argv:
        parser.print_help(sys.stderr)
        return EXIT_ERROR
    args = parser.parse_args(argv)
    _configure_logging(args.verbose)

    if not args.file:
        return _error("no source file specified; use -f")

    try:
        config = Config.from_selectors(
            min_value=args.min_value,
            max_value=args.max_value,
            cell_count=args.cell_count,
            eof=args.eof,
            value_policy=args.value_policy,
            cursor_policy=args.cursor_policy,
            mode="d" if args.dump else args.mode,
        )
        try:
            program = compile_file(args.file)
        except OSError as e:
            return _error(f"{args.file}: {e.strerror or e}")
        _log.info("compiled %s: %d instruction(s)", args.file, len(program))

        if config.mode is Mode.DUMP:
            sys.stdout.write(format_dump(program))
            sys.stdout.flush()
        else:
            state = Engine(program, config, sys.stdin, sys.stdout).run()
            _log.info("finished after %d step(s)", state.steps)
    except BriefError as e:
        return _error(str(e))
    return EXIT_OK


if __name__ == "__main__":
    raise SystemExit(main())
