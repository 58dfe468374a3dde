## bfl — Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘

from bfl import parser
from bfl.types import Instruction, SYMBOLS


def test_every_symbol_maps_to_its_instruction():
    assert parser.tokenize("+-><.,[]") == [
        Instruction.INCREMENT, Instruction.DECREMENT, Instruction.MOVE_RIGHT, Instruction.MOVE_LEFT,
        Instruction.OUTPUT, Instruction.INPUT, Instruction.LOOP_START, Instruction.LOOP_END,
    ]


def test_unknown_characters_become_noops_one_per_character():
    source = "a +\n\t#é]"
    instructions = parser.tokenize(source)
    assert len(instructions) == len(source)
    assert instructions[2] is Instruction.INCREMENT
    assert instructions[-1] is Instruction.LOOP_END
    assert all(i is Instruction.NOOP for n, i in enumerate(instructions) if n not in (2, len(source) - 1))


def test_empty_source_is_empty_program():
    assert parser.tokenize("") == []


def test_iter_tokens_reports_line_and_column():
    tokens = list(parser.iter_tokens("+\n-", filename="<test>"))
    assert [i for i, _ in tokens] == [Instruction.INCREMENT, Instruction.NOOP, Instruction.DECREMENT]
    _, meta = tokens[2]
    assert meta == {'filename': "<test>", 'line': 2, 'column': 1}


def test_source_position_matches_character_offset():
    source = "++\n+]\n"
    assert parser.source_position(source, 0) == (1, 1)
    assert parser.source_position(source, 4) == (2, 2)


def test_format_error_context_points_at_line():
    context = parser.format_error_context("prog.b", "+\n+]\n", 3)
    assert 'File "prog.b", line 2, column 2' in context
    assert "    2 |" in context


def test_from_symbol_is_total():
    assert Instruction.from_symbol('[') is Instruction.LOOP_START
    assert Instruction.from_symbol('x') is Instruction.NOOP
    assert Instruction.from_symbol('') is Instruction.NOOP


def test_symbols_are_the_eight_commands():
    assert SYMBOLS == set("+-><.,[]")
    assert all(i is not Instruction.NOOP for i in parser.tokenize("".join(sorted(SYMBOLS))))
