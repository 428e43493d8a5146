#!/usr/bin/env python3
"""
Tests for dumping compiled programs and reading dumps back.
"""

import os
import sys
sys.path.append(os.path.join(os.path.dirname(__file__), '..', 'src'))

import pytest

from brief import DumpFormatError, Op, UnbalancedLoopError, compile_source, format_dump, parse_dump


def test_dump_single_line():
    assert format_dump(compile_source("+++.")) == "+ 3\t. 1\n\n"


def test_dump_empty_program():
    assert format_dump(compile_source("")) == "\n"


def test_dump_eight_pairs_per_line():
    program = compile_source("+-" * 5)
    dump = format_dump(program)
    lines = dump.split("\n")
    assert lines[0].split("\t") == ["+ 1", "- 1"] * 4
    assert lines[1].split("\t") == ["+ 1", "- 1"]
    assert dump.endswith("\n\n")


def test_dump_loops_have_count_one():
    assert format_dump(compile_source("[-]")) == "[ 1\t- 1\t] 1\n\n"


@pytest.mark.parametrize("source", [
    "",
    "+++.",
    "++[>++<-]>.",
    "++++++++[>++++[>++>+++>+++>+<<<<-]>+>+>->>+[<]<-]>>.>---.+++++++..+++.>>.<-.<.+++.",
    ",[.,]  comments [are] inert",
    "[[[[[[[[]]]]]]]]" * 3,
])
def test_dump_then_reload_is_identity(source):
    program = compile_source(source)
    reloaded = parse_dump(format_dump(program))
    assert reloaded == program
    assert format_dump(reloaded) == format_dump(program)


def test_parse_dump_accepts_loose_whitespace():
    program = parse_dump("+ 2   > 1\n\n[ 1 - 1 ] 1")
    assert list(program.pairs()) == [
        (Op.INC, 2), (Op.RIGHT, 1), (Op.LOOP_START, 1), (Op.DEC, 1), (Op.LOOP_END, 1),
    ]
    assert program[2].partner == 4


@pytest.mark.parametrize("text", [
    "+",
    "q 1",
    "+ x",
    "+ 0",
    "[ 2\t] 1",
    "++ 1",
])
def test_parse_dump_rejects_malformed(text):
    with pytest.raises(DumpFormatError):
        parse_dump(text)


def test_parse_dump_reports_line():
    with pytest.raises(DumpFormatError) as excinfo:
        parse_dump("+ 1\n- 1\n? 1\n")
    assert excinfo.value.line == 3


def test_parse_dump_checks_balance():
    with pytest.raises(UnbalancedLoopError):
        parse_dump("[ 1\n")
