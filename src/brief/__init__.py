from .api import RunResult, compile_file, compile_string, run_file, run_string
from .compiler import Compiler, compile_pairs, compile_source
from .config import Config, EofPolicy, Mode, Policy
from .dump import format_dump, parse_dump
from .engine import Engine, execute, wrap
from .errors import (
    BriefError,
    BriefRuntimeError,
    CompileError,
    DumpFormatError,
    InvalidConfigurationError,
    PointerOverflowError,
    PointerUnderflowError,
    UnbalancedLoopError,
    ValueOverflowError,
    ValueUnderflowError,
)
from .ops import Instruction, Op, Program
from .state import MachineState

__version__ = "0.1.0"

__all__ = [
    'Compiler',
    'compile_source',
    'compile_pairs',
    'Engine',
    'execute',
    'wrap',
    'Config',
    'EofPolicy',
    'Mode',
    'Policy',
    'Instruction',
    'Op',
    'Program',
    'MachineState',
    'format_dump',
    'parse_dump',
    'RunResult',
    'compile_string',
    'compile_file',
    'run_string',
    'run_file',
    'BriefError',
    'BriefRuntimeError',
    'CompileError',
    'DumpFormatError',
    'InvalidConfigurationError',
    'PointerOverflowError',
    'PointerUnderflowError',
    'UnbalancedLoopError',
    'ValueOverflowError',
    'ValueUnderflowError',
]
