from __future__ import annotations

import io
from dataclasses import dataclass
from pathlib import Path
from typing import BinaryIO, Optional

from .compiler import compile_source
from .config import Config
from .engine import Engine
from .ops import Program
from .state import MachineState


@dataclass(frozen=True)
class RunResult:
    output: bytes
    state: MachineState


def compile_string(source: str | bytes) -> Program:
    return compile_source(source)


def compile_file(path: str | Path) -> Program:
    # Read as bytes: every non-operation byte is inert, whatever the encoding.
    return compile_source(Path(path).read_bytes())


def run_string(source: str | bytes, config: Optional[Config] = None, *, input: bytes = b"") -> RunResult:
    stdout = io.BytesIO()
    state = Engine(compile_string(source), config, io.BytesIO(input), stdout).run()
    return RunResult(output=stdout.getvalue(), state=state)


def run_file(
    path: str | Path,
    config: Optional[Config] = None,
    stdin: Optional[BinaryIO] = None,
    stdout: Optional[BinaryIO] = None,
) -> MachineState:
    return Engine(compile_file(path), config, stdin, stdout).run()
