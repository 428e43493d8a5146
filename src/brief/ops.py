from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Iterator, Optional, Tuple, Union, overload


class Op(Enum):
    INC = '+'
    DEC = '-'
    RIGHT = '>'
    LEFT = '<'
    IN = ','
    OUT = '.'
    LOOP_START = '['
    LOOP_END = ']'

    @property
    def char(self) -> str:
        return self.value

    @property
    def foldable(self) -> bool:
        return self not in (Op.LOOP_START, Op.LOOP_END)

    @classmethod
    def from_char(cls, ch: Union[str, int]) -> Optional["Op"]:
        """Return the operation for a source character, or None if it is inert."""
        if isinstance(ch, int):
            ch = chr(ch)
        return _BY_CHAR.get(ch)


_BY_CHAR = {op.value: op for op in Op}


@dataclass(frozen=True)
class Instruction:
    op: Op
    count: int = 1  # run length; always 1 for loops
    partner: Optional[int] = None  # index of the matching bracket

    def __repr__(self) -> str:
        if self.partner is not None:
            return f"{self.op.char} (target: {self.partner})"
        if self.count > 1:
            return f"{self.op.char} x{self.count}"
        return self.op.char


class Program:
    """
    Compiled instruction sequence.

    Read-only once built. Loop instructions carry the index of their
    matching bracket, so the engine can jump without searching.
    """

    __slots__ = ('_instructions',)

    def __init__(self, instructions: Iterable[Instruction] = ()):
        self._instructions: Tuple[Instruction, ...] = tuple(instructions)

    def __len__(self) -> int:
        return len(self._instructions)

    @overload
    def __getitem__(self, index: int) -> Instruction: ...

    @overload
    def __getitem__(self, index: slice) -> Tuple[Instruction, ...]: ...

    def __getitem__(self, index):
        return self._instructions[index]

    def __iter__(self) -> Iterator[Instruction]:
        return iter(self._instructions)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Program):
            return NotImplemented
        return self._instructions == other._instructions

    def __hash__(self) -> int:
        return hash(self._instructions)

    def __repr__(self) -> str:
        return f"Program({list(self._instructions)!r})"

    def pairs(self) -> Iterator[Tuple[Op, int]]:
        for ins in self._instructions:
            yield ins.op, ins.count

    def loop_partners(self) -> dict:
        return {i: ins.partner for i, ins in enumerate(self._instructions) if ins.partner is not None}
