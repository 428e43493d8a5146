from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass
class BriefError(Exception):
    message: str

    def __str__(self) -> str:
        return self.message


@dataclass
class CompileError(BriefError):
    pass


@dataclass
class UnbalancedLoopError(CompileError):
    position: int


@dataclass
class DumpFormatError(CompileError):
    line: int


@dataclass
class BriefRuntimeError(BriefError):
    ip: int
    cursor: int


@dataclass
class ValueOverflowError(BriefRuntimeError):
    pass


@dataclass
class ValueUnderflowError(BriefRuntimeError):
    pass


@dataclass
class PointerOverflowError(BriefRuntimeError):
    pass


@dataclass
class PointerUnderflowError(BriefRuntimeError):
    pass


@dataclass
class InvalidConfigurationError(BriefError):
    option: Optional[str] = None


def make_unbalanced_error(*, position: int, opening: bool) -> UnbalancedLoopError:
    if opening:
        message = f"unmatched '[' at offset {position}"
    else:
        message = f"unmatched ']' at offset {position}"
    return UnbalancedLoopError(message=message, position=position)


def make_runtime_error(cls, *, what: str, ip: int, cursor: int) -> BriefRuntimeError:
    return cls(
        message=f"{what} (instruction {ip}, cell {cursor})",
        ip=ip,
        cursor=cursor,
    )
