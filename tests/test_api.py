#!/usr/bin/env python3
"""
Tests for the string/file convenience API.
"""

import io
import os
import sys
sys.path.append(os.path.join(os.path.dirname(__file__), '..', 'src'))

import pytest

from brief import Config, Policy, UnbalancedLoopError, compile_file, compile_string, run_file, run_string


def test_run_string_collects_output():
    result = run_string("+++.")
    assert result.output == b"\x03"
    assert result.state.cell == 3


def test_run_string_with_input():
    result = run_string(",+.", input=b"a")
    assert result.output == b"b"


def test_run_string_uses_config():
    result = run_string(">" * 4 + "+", Config(cell_count=4, cursor_policy=Policy.WRAP))
    assert result.state.cursor == 0
    assert result.state.cells() == [1, 0, 0, 0]


def test_compile_string_rejects_unbalanced():
    with pytest.raises(UnbalancedLoopError):
        compile_string("[[]")


def test_compile_file_reads_bytes(tmp_path):
    path = tmp_path / "prog.b"
    path.write_bytes("++ comment é ++ [-]".encode("utf-8"))
    program = compile_file(path)
    assert program == compile_string("++++[-]")


def test_run_file(tmp_path):
    path = tmp_path / "prog.b"
    path.write_text("++[>++<-]>.")
    stdout = io.BytesIO()
    state = run_file(str(path), Config(), io.BytesIO(), stdout)
    assert stdout.getvalue() == b"\x04"
    assert state.cursor == 1


def test_compile_file_missing(tmp_path):
    with pytest.raises(FileNotFoundError):
        compile_file(tmp_path / "missing.b")
