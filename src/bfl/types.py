## bfl — Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘

from enum import Enum


CELL_MIN, CELL_MAX = -128, 127


def wrap_cell(value: int) -> int:
    """Fold an integer into the signed 8-bit range, wrapping like two's complement."""
    return (value - CELL_MIN) % (CELL_MAX - CELL_MIN + 1) + CELL_MIN


class Instruction(Enum):
    INCREMENT = '+'
    DECREMENT = '-'
    MOVE_RIGHT = '>'
    MOVE_LEFT = '<'
    LOOP_START = '['
    LOOP_END = ']'
    OUTPUT = '.'
    INPUT = ','
    NOOP = ''

    @classmethod
    def from_symbol(cls, symbol: str) -> "Instruction":
        # Anything outside the eight symbols is inert, including the empty string.
        return _BY_SYMBOL.get(symbol, cls.NOOP)

    def __repr__(self):
        return self.value or '·'


_BY_SYMBOL = {i.value: i for i in Instruction if i is not Instruction.NOOP}

SYMBOLS = frozenset(_BY_SYMBOL)
