## Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘

import lark

from .types import Instruction


# Every character is exactly one token; the catch-all makes the mapping total.
GRAMMAR = r"""?start: instruction*
instruction: INCREMENT | DECREMENT | MOVE_RIGHT | MOVE_LEFT
           | LOOP_START | LOOP_END | OUTPUT | INPUT | NOOP

INCREMENT: "+"
DECREMENT: "-"
MOVE_RIGHT: ">"
MOVE_LEFT: "<"
LOOP_START: "["
LOOP_END: "]"
OUTPUT: "."
INPUT: ","
NOOP: /[^+\-<>.,\[\]]/
"""

_LEXER = None


def _lexer() -> lark.Lark:
    global _LEXER
    if _LEXER is None:
        _LEXER = lark.Lark(GRAMMAR, parser="lalr", lexer="basic")
    return _LEXER


def iter_tokens(source: str, filename=None):
    """Yield `(instruction, meta)` for each character of the source, in order."""
    for token in _lexer().lex(source):
        meta = {'filename': filename, 'line': token.line, 'column': token.column}
        yield Instruction[token.type], meta


def tokenize(source: str) -> list[Instruction]:
    return [instruction for instruction, _ in iter_tokens(source)]


def source_position(source: str, index: int) -> tuple[int, int]:
    # Instruction index and character offset are the same thing.
    line = source.count('\n', 0, index) + 1
    column = index - source.rfind('\n', 0, index)
    return line, column


def format_error_context(filename, source: str, index: int) -> str:
    line, column = source_position(source, index)
    lines = source.splitlines(keepends=True)
    start_line, end_line = max(0, line - 3), min(len(lines), line + 2)
    result = [f"\033[97m  File \"{filename}\", line {line}, column {column}\033[0m"]

    for i in range(start_line, end_line):
        line_content = lines[i].rstrip('\r\n')
        line_color = '\033[90m'
        if i+1 == line:
            line_color = '\033[97m'
            if 0 < column <= len(line_content):
                line_content = (
                    line_content[:column-1] +
                    f"\033[48;5;30m\033[1;97m{line_content[column-1]}\033[0m" +
                    line_content[column:]
                )
        result.append(f"{line_color}{i+1:>5} |\033[0m {line_content}")
    return '\n' + '\n'.join(result) + '\n'
