## Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘

import re
import sys

from typing import Callable, Iterable

from .types import Instruction, CELL_MIN, CELL_MAX, wrap_cell
from .errors import BfBranchError, BfInputError
from .formatting import format_tape


_CELL_RE = re.compile(r'[+-]?[0-9]+')


def parse_cell(text: str) -> int:
    """Parse one line of input as a signed 8-bit cell value, surrounding whitespace ignored."""
    stripped = text.strip()
    if not _CELL_RE.fullmatch(stripped):
        raise BfInputError(f"Input `{stripped}` is not an integer.", line=text)
    if not (CELL_MIN <= (value := int(stripped)) <= CELL_MAX):
        raise BfInputError(f"Input `{stripped}` is outside the cell range [{CELL_MIN}, {CELL_MAX}].", line=text)
    return value


class Tape:
    """Execution state of one program run: sparse cells, head position, open loops, and code."""

    def __init__(self, instructions: Iterable[Instruction], stdin=None, stdout=None):
        self.storage: dict[int, int] = {}
        self.position = 0
        self.branches: list[int] = []
        self.instructions: tuple[Instruction, ...] = tuple(instructions)
        self.instruction_pointer = 0
        self.steps = 0
        self._stdin, self._stdout = stdin, stdout

    @property
    def stdin(self):
        return self._stdin if self._stdin is not None else sys.stdin

    @property
    def stdout(self):
        return self._stdout if self._stdout is not None else sys.stdout

    @property
    def cell(self) -> int:
        return self.storage.get(self.position, 0)

    @property
    def finished(self) -> bool:
        return self.instruction_pointer >= len(self.instructions)

    def __repr__(self):
        return format_tape(self)

    def _store(self, value: int) -> None:
        # Zero cells are never stored, absent means zero.
        if value == 0: self.storage.pop(self.position, None)
        else: self.storage[self.position] = value

    def _add(self, delta: int) -> None:
        self._store(wrap_cell(self.cell + delta))

    def _read_input(self) -> None:
        line = self.stdin.readline()
        if line == '':
            raise BfInputError("Input channel is exhausted.", line=None)
        self._store(parse_cell(line))

    def _close_loop(self) -> None:
        if not self.branches:
            raise BfBranchError(f"Loop exit at instruction {self.instruction_pointer} has no matching loop entry.")
        entry = self.branches.pop()
        # Jumping back lands on the entry itself, which records itself again.
        self.instruction_pointer = entry if self.cell != 0 else self.instruction_pointer + 1

    def advance(self) -> bool:
        """Execute the instruction under the pointer; False once the program has run off its end."""
        if self.finished: return False

        op = self.instructions[self.instruction_pointer]
        try:
            match op:
                case Instruction.INCREMENT:
                    self._add(+1)
                case Instruction.DECREMENT:
                    self._add(-1)
                case Instruction.MOVE_RIGHT:
                    self.position += 1
                case Instruction.MOVE_LEFT:
                    if self.position >= 1: self.position -= 1
                case Instruction.OUTPUT:
                    self.stdout.write(f"{self.cell}\n")
                case Instruction.INPUT:
                    self._read_input()
                case Instruction.LOOP_START:
                    self.branches.append(self.instruction_pointer)
                case Instruction.LOOP_END:
                    self._close_loop()
        except (BfBranchError, BfInputError) as exc:
            exc.bf_ip = self.instruction_pointer
            exc.bf_instruction = op
            exc.bf_position = self.position
            raise

        if op is not Instruction.LOOP_END: self.instruction_pointer += 1
        self.steps += 1
        return True

    def run(self, observer: Callable[["Tape"], None] | None = None, stats: dict | None = None) -> None:
        start = self.steps
        try:
            while self.advance():
                if observer is not None: observer(self)
        finally:
            if stats is not None:
                stats['steps'] = stats.get('steps', 0) + self.steps - start
