## Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘

import re


def write_without_ansi(write_fn):
    """Wrapper function that strips ANSI codes before calling the original writer."""
    ansi_re = re.compile(r'\033\[[0-9;]*m')
    return lambda text: write_fn(ansi_re.sub('', text))


def format_instructions(instructions) -> str:
    return ''.join(repr(i) for i in instructions)

def format_tape(tape) -> str:
    cells = ', '.join(f"{addr}: {value}" for addr, value in sorted(tape.storage.items()))
    return (f"Tape(position={tape.position}, instruction_pointer={tape.instruction_pointer}/{len(tape.instructions)}, "
            f"storage={{{cells}}}, branches={tape.branches})")

def _format_cells(tape, width: int) -> str:
    # Window of cells ending at the head, or at the furthest written cell if it fits.
    last = max([tape.position, *tape.storage.keys()])
    first = max(0, last - width // 5 + 1)
    if tape.position < first:
        first, last = tape.position, tape.position + width // 5 - 1
    items = []
    for addr in range(first, last + 1):
        value = f"{tape.storage.get(addr, 0):>4}"
        items.append(f"\033[48;5;30m\033[1;97m{value}\033[0m" if addr == tape.position else value)
    return ('…' if first > 0 else ' ') + ''.join(items)

def show_tape(tape, width=72, end='\n', file=None):
    ip = tape.instruction_pointer
    prog_str = format_instructions(tape.instructions[ip:ip+width]) if not tape.finished else '∅'
    if len(prog_str) >= width:
        prog_str = prog_str[:width-2] + ' …'
    print(f"\033[90m{tape.steps:>5} :\033[0m {_format_cells(tape, width)}"
          f" \033[36m <=> \033[0m {prog_str}", end=end, file=file)
