from __future__ import annotations

import logging
import sys
from typing import BinaryIO, Optional

from .config import Config, EofPolicy, Policy
from .errors import (
    InvalidConfigurationError,
    PointerOverflowError,
    PointerUnderflowError,
    ValueOverflowError,
    ValueUnderflowError,
    make_runtime_error,
)
from .ops import Op, Program
from .state import MachineState

logger = logging.getLogger(__name__)


def wrap(value: int, low: int, high: int) -> int:
    """Reduce *value* into [low, high] by floored modular wraparound."""
    return (value - low) % (high - low + 1) + low


def _binary(stream, fallback):
    if stream is None:
        stream = fallback
    # Text streams such as sys.stdin carry the raw byte stream underneath.
    return getattr(stream, 'buffer', stream)


class Engine:
    """
    Runs a compiled Program against a fresh tape.

    Boundary handling for cell values and for the cursor is chosen
    independently through the Config:
    - ERROR: raise the matching overflow/underflow error
    - IGNORE: clamp to the violated bound
    - WRAP: wrap around to the other end of the domain
    """

    def __init__(
        self,
        program: Program,
        config: Optional[Config] = None,
        stdin: Optional[BinaryIO] = None,
        stdout: Optional[BinaryIO] = None,
    ):
        self.program = program
        self.config = config if config is not None else Config()
        self.stdin = _binary(stdin, sys.stdin)
        self.stdout = _binary(stdout, sys.stdout)
        self.state = MachineState.allocate(self.config.cell_count)

    def run(self) -> MachineState:
        program = self.program
        state = self.state
        length = len(program)
        logger.debug("running %d instruction(s) on %d cell(s)", length, self.config.cell_count)

        while state.ip < length:
            ins = program[state.ip]
            op = ins.op
            jump = None

            if op is Op.INC:
                self._add_value(ins.count)
            elif op is Op.DEC:
                self._add_value(-ins.count)
            elif op is Op.RIGHT:
                self._move(ins.count)
            elif op is Op.LEFT:
                self._move(-ins.count)
            elif op is Op.IN:
                self._read(ins.count)
            elif op is Op.OUT:
                self._write(ins.count)
            elif op is Op.LOOP_START:
                if state.cell == 0:
                    jump = ins.partner
            elif op is Op.LOOP_END:
                if state.cell != 0:
                    jump = ins.partner
            else:
                raise AssertionError(f"unhandled op {op!r}")

            state.steps += 1
            # A jump lands on the partner bracket, which re-tests the cell.
            state.ip = state.ip + 1 if jump is None else jump

        self.stdout.flush()
        logger.debug("halted after %d step(s)", state.steps)
        return state

    # ===== Boundary Policies =====

    def _bounded(self, result: int, low: int, high: int, policy: Policy, errors, names) -> int:
        if low <= result <= high:
            return result
        over = result > high
        if policy is Policy.ERROR:
            cls = errors[0] if over else errors[1]
            raise make_runtime_error(
                cls,
                what=names[0] if over else names[1],
                ip=self.state.ip,
                cursor=self.state.cursor,
            )
        if policy is Policy.IGNORE:
            return high if over else low
        if policy is Policy.WRAP:
            return wrap(result, low, high)
        raise InvalidConfigurationError(message=f"invalid boundary behaviour: {policy!r}")

    def _add_value(self, delta: int) -> None:
        cfg = self.config
        self.state.cell = self._bounded(
            self.state.cell + delta,
            cfg.min_value,
            cfg.max_value,
            cfg.value_policy,
            (ValueOverflowError, ValueUnderflowError),
            ("value overflow", "value underflow"),
        )

    def _move(self, delta: int) -> None:
        cfg = self.config
        self.state.cursor = self._bounded(
            self.state.cursor + delta,
            0,
            cfg.last_cell,
            cfg.cursor_policy,
            (PointerOverflowError, PointerUnderflowError),
            ("cell index overflow", "cell index underflow"),
        )

    # ===== I/O =====

    def _eof_value(self) -> Optional[int]:
        cfg = self.config
        eof = cfg.eof
        if eof is EofPolicy.ZERO:
            return 0
        if eof is EofPolicy.MIN:
            return cfg.min_value
        if eof is EofPolicy.MAX:
            return cfg.max_value
        if eof is EofPolicy.NEG_ONE:
            return -1
        if eof is EofPolicy.UNCHANGED:
            return None
        raise InvalidConfigurationError(message=f"invalid EOF behaviour: {eof!r}")

    def _read(self, count: int) -> None:
        for _ in range(count):
            data = self.stdin.read(1)
            if data:
                self.state.cell = data[0]
                continue
            value = self._eof_value()
            if value is not None:
                self.state.cell = value

    def _write(self, count: int) -> None:
        byte = bytes((self.state.cell % 256,))
        for _ in range(count):
            self.stdout.write(byte)
        self.stdout.flush()


def execute(
    program: Program,
    config: Optional[Config] = None,
    stdin: Optional[BinaryIO] = None,
    stdout: Optional[BinaryIO] = None,
) -> MachineState:
    return Engine(program, config, stdin, stdout).run()
