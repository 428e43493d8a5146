from __future__ import annotations

import logging
from dataclasses import replace
from typing import Iterable, List, Tuple, Union

from .errors import UnbalancedLoopError, make_unbalanced_error
from .ops import Instruction, Op, Program

logger = logging.getLogger(__name__)

Source = Union[str, bytes, Iterable[Union[str, int]]]


class Compiler:
    """
    Brainfuck compiler.

    Turns source text into a Program in a single pass:
    - Inert characters are dropped before run detection, so ``+ +`` folds
      into one ``+ x2`` instruction
    - Runs of identical non-loop operations collapse into one instruction
      with a repeat count
    - Brackets never fold; each one gets the index of its partner
    """

    def __init__(self):
        self.instructions: List[Instruction] = []
        self.loop_stack: List[Tuple[int, int]] = []  # (instruction index, source offset)

    def reset(self) -> None:
        self.instructions.clear()
        self.loop_stack.clear()

    # ===== Main Compilation Pipeline =====

    def compile(self, source: Source) -> Program:
        """
        Compile source characters into a Program.

        Raises:
            UnbalancedLoopError: on a ']' with no open '[', or a '[' still
                open at the end of the source.
        """
        self.reset()
        for offset, ch in enumerate(source):
            op = Op.from_char(ch)
            if op is not None:
                self._append(op, 1, offset)
        program = self._finish()
        logger.debug("compiled %d instruction(s)", len(program))
        return program

    def compile_pairs(self, pairs: Iterable[Tuple[Op, int]]) -> Program:
        """
        Build a Program from already-folded (op, count) pairs.

        Adjacent pairs of the same foldable op are merged. Loop pairs must
        carry a count of 1. Positions in errors are pair indices.
        """
        self.reset()
        for index, (op, count) in enumerate(pairs):
            if count < 1:
                raise ValueError(f"Repeat count must be positive, got {count} for {op.char!r}")
            if not op.foldable and count != 1:
                raise ValueError(f"Loop instruction {op.char!r} cannot repeat ({count})")
            self._append(op, count, index)
        return self._finish()

    # ===== Emission =====

    def _append(self, op: Op, count: int, position: int) -> None:
        code = self.instructions
        if op.foldable:
            if code and code[-1].op is op:
                code[-1] = replace(code[-1], count=code[-1].count + count)
            else:
                code.append(Instruction(op, count))
        elif op is Op.LOOP_START:
            self.loop_stack.append((len(code), position))
            code.append(Instruction(op))
        else:
            if not self.loop_stack:
                raise make_unbalanced_error(position=position, opening=False)
            start, _ = self.loop_stack.pop()
            end = len(code)
            code[start] = replace(code[start], partner=end)
            code.append(Instruction(op, partner=start))

    def _finish(self) -> Program:
        if self.loop_stack:
            _, position = self.loop_stack[-1]
            raise make_unbalanced_error(position=position, opening=True)
        return Program(self.instructions)


def compile_source(source: Source) -> Program:
    return Compiler().compile(source)


def compile_pairs(pairs: Iterable[Tuple[Op, int]]) -> Program:
    return Compiler().compile_pairs(pairs)


__all__ = ['Compiler', 'compile_source', 'compile_pairs', 'UnbalancedLoopError']
