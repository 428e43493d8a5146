from __future__ import annotations

from dataclasses import dataclass

import numpy as np


@dataclass
class MachineState:
    tape: np.ndarray
    cursor: int = 0
    ip: int = 0
    steps: int = 0

    @classmethod
    def allocate(cls, cell_count: int) -> "MachineState":
        return cls(tape=np.zeros(cell_count, dtype=np.int64))

    @property
    def cell(self) -> int:
        return int(self.tape[self.cursor])

    @cell.setter
    def cell(self, value: int) -> None:
        self.tape[self.cursor] = value

    def cells(self, start: int = 0, stop: int | None = None) -> list:
        """Plain int copy of a slice of the tape, for display and tests."""
        return [int(v) for v in self.tape[start:stop]]
