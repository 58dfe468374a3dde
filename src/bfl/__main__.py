## Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘
#
# bfl — A minimal interpreter for the eight-symbol tape language, on a sparse tape.
#

import os
import sys
import time
import traceback
from pathlib import Path
from dataclasses import dataclass

import click

from .errors import BfError, BfBranchError, BfInputError
from .parser import format_error_context
from .formatting import write_without_ansi

from . import api


DEFAULT_FILENAME = 'test.b'


@dataclass(frozen=True)
class RuntimeConfig:
    verbose: int
    stats: bool
    plain: bool


class BfRunner:
    def __init__(self, config: RuntimeConfig):
        self.verbose = config.verbose
        self.stats_enabled = config.stats
        self.plain = config.plain

        if self.plain:
            writer = write_without_ansi(sys.stdout.write)
            sys.stdout.write, sys.stderr.write = writer, writer

        self.runtime = api._RUNTIME
        self.total_stats = {'steps': 0, 'start': time.time()} if self.stats_enabled else None
        self.failure = False

    def _fatal_error(self, message: str, detail: str, exc_type: str = None, context: str = '') -> None:
        header = detail if not exc_type else f"{detail} (Exception: \033[33m{exc_type}\033[0m)"
        print(f'\033[30;43m {message} \033[0m {header}\n{context}', file=sys.stderr)
        self.failure = True

    def _handle_exception(self, exc, filename: str, source: str) -> None:
        if isinstance(exc, BfBranchError):
            detail = f"Loop exit `\033[1;97m]\033[0m` at instruction {exc.bf_ip} of `\033[97m{filename}\033[0m` has no open loop!"
            self._fatal_error("BRANCH ERROR.", detail, type(exc).__name__, format_error_context(filename, source, exc.bf_ip))
        elif isinstance(exc, BfInputError):
            detail = f"Reading input at instruction {exc.bf_ip} of `\033[97m{filename}\033[0m` failed: {exc}"
            self._fatal_error("INPUT ERROR.", detail, type(exc).__name__, format_error_context(filename, source, exc.bf_ip))
        else:
            print(f'\033[30;43m RUNTIME ERROR. \033[0m Running `\033[97m{filename}\033[0m` caused an error! (Exception: \033[33m{type(exc).__name__}\033[0m)', file=sys.stderr)
            traceback.print_exc()
            self.failure = True

    def execute(self, source: str, filename: str) -> None:
        try:
            self.runtime.run(source, verbosity=self.verbose, stats=self.total_stats)
        except (BfError, Exception) as exc:
            self._handle_exception(exc, filename, source)

    def finalize(self) -> int:
        if self.total_stats:
            elapsed_time = time.time() - self.total_stats['start']
            print(f"\n\033[97m\033[48;5;30m STATISTICS. \033[0m")
            print(f"step\t\033[97m{self.total_stats['steps']:,}\033[0m")
            print(f"time\t\033[97m{elapsed_time:.3f}s\033[0m")
        return 1 if self.failure else 0


def read_program(path: Path) -> str:
    # Any byte sequence is a program; undecodable bytes become inert characters.
    return path.read_bytes().decode('utf-8', errors='replace')


@click.command(context_settings={'help_option_names': ['-h', '--help']})
@click.argument('filename', required=False, type=click.Path(dir_okay=False, path_type=Path))
@click.option('--command', '-c', default=None, help='Run the given program text instead of a file.')
@click.option('--verbose', '-v', default=0, count=True, help='Trace the tape after every instruction.')
@click.option('--stats', is_flag=True, help='Display execution statistics (e.g., number of steps).')
@click.option('--plain', '-p', is_flag=True, help='Strip ANSI color codes and redirect stderr to stdout.')
@click.pass_context
def cli(ctx: click.Context, filename: Path | None, command: str | None, verbose: int, stats: bool, plain: bool) -> None:
    config = RuntimeConfig(verbose=verbose, stats=stats, plain=plain)

    if command is not None:
        source, name = command, '<COMMAND>'
    else:
        path = filename or Path(os.environ.get('BFL_FILE', DEFAULT_FILENAME))
        try:
            source, name = read_program(path), str(path)
        except OSError as exc:
            raise click.FileError(str(path), hint=exc.strerror or str(exc))

    runner = BfRunner(config)
    runner.execute(source, name)
    ctx.exit(runner.finalize())


def main(argv: list[str] | None = None) -> None:
    cli.main(args=list(sys.argv[1:] if argv is None else argv), prog_name='bfl')


if __name__ == "__main__":
    main()
