## bfl — Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘

from typing import Callable

from .types import Instruction
from .parser import tokenize
from .interpreter import Tape
from .formatting import show_tape


class Runtime:
    """Minimal runtime facade focused on embedding: one fresh tape per program run."""

    def __init__(self, stdin=None, stdout=None):
        self.stdin = stdin
        self.stdout = stdout

    # Assembly ────────────────────────────────────────────────────────────────────────────────
    def tokenize(self, source: str) -> list[Instruction]:
        return tokenize(source)

    def load(self, source: str) -> Tape:
        return Tape(tokenize(source), stdin=self.stdin, stdout=self.stdout)

    # Execution ───────────────────────────────────────────────────────────────────────────────
    def run(self, source: str, verbosity: int = 0, stats: dict | None = None,
            observer: Callable[[Tape], None] | None = None) -> Tape:
        tape = self.load(source)
        tape.run(observer=observer or self._tracer(verbosity, tape), stats=stats)
        return tape

    def step(self, tape: Tape) -> bool:
        return tape.advance()

    def _tracer(self, verbosity: int, tape: Tape) -> Callable[[Tape], None] | None:
        if verbosity <= 0: return None
        out = tape.stdout
        if verbosity == 1:
            return lambda t: print(repr(t), file=out)
        return lambda t: show_tape(t, file=out)
