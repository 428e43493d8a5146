from __future__ import annotations

from typing import List, Tuple

from .compiler import compile_pairs
from .errors import DumpFormatError
from .ops import Op, Program

PAIRS_PER_LINE = 8


def format_dump(program: Program) -> str:
    """
    Render a Program as ``<op> <count>`` pairs, eight to a line.

    Pairs on a line are tab separated, every line ends with a newline and
    one extra newline closes the dump.
    """
    pairs = [f"{ins.op.char} {ins.count}" for ins in program]
    lines = [
        '\t'.join(pairs[i:i + PAIRS_PER_LINE]) + '\n'
        for i in range(0, len(pairs), PAIRS_PER_LINE)
    ]
    return ''.join(lines) + '\n'


def _read_pairs(text: str) -> List[Tuple[Op, int]]:
    pairs: List[Tuple[Op, int]] = []
    for line_no, line in enumerate(text.split('\n'), start=1):
        tokens = line.split()
        if len(tokens) % 2:
            raise DumpFormatError(
                message=f"dump line {line_no}: odd number of fields",
                line=line_no,
            )
        for ch, count in zip(tokens[::2], tokens[1::2]):
            op = Op.from_char(ch) if len(ch) == 1 else None
            if op is None:
                raise DumpFormatError(
                    message=f"dump line {line_no}: unknown operation {ch!r}",
                    line=line_no,
                )
            try:
                n = int(count)
            except ValueError:
                raise DumpFormatError(
                    message=f"dump line {line_no}: bad count {count!r}",
                    line=line_no,
                ) from None
            if n < 1 or (not op.foldable and n != 1):
                raise DumpFormatError(
                    message=f"dump line {line_no}: invalid count {n} for {ch!r}",
                    line=line_no,
                )
            pairs.append((op, n))
    return pairs


def parse_dump(text: str) -> Program:
    """Rebuild a Program from the output of format_dump."""
    return compile_pairs(_read_pairs(text))
