## bfl — Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘

from .types import Instruction, SYMBOLS, CELL_MIN, CELL_MAX
from .errors import *
from .interpreter import Tape
from .runtime import Runtime

_RUNTIME = Runtime()

def __getattr__(name):
    return getattr(_RUNTIME, name)
