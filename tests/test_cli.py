## bfl — CLI integration tests

import os, sys
import subprocess
from pathlib import Path


def run_cli(*cli_args: str | Path, stdin: str = "", cwd: Path | None = None, env: dict | None = None) -> subprocess.CompletedProcess:
    args = [sys.executable, "-m", "bfl", "--plain"]
    args.extend(str(arg) for arg in cli_args)
    merged_env = os.environ.copy()
    if env:
        merged_env.update(env)
    return subprocess.run(args, input=stdin, capture_output=True, text=True, cwd=cwd, env=merged_env)


def test_cli_runs_program_file(tmp_path: Path):
    program = tmp_path / "three.b"
    program.write_text("three: +++ .\n", encoding="utf-8")
    result = run_cli(program)
    assert result.returncode == 0
    assert result.stdout == "3\n"


def test_cli_defaults_to_test_file_in_working_directory(tmp_path: Path):
    (tmp_path / "test.b").write_text(">>>.", encoding="utf-8")
    result = run_cli(cwd=tmp_path)
    assert result.returncode == 0
    assert result.stdout == "0\n"


def test_cli_default_file_from_environment(tmp_path: Path):
    program = tmp_path / "other.b"
    program.write_text("++.", encoding="utf-8")
    result = run_cli(cwd=tmp_path, env={"BFL_FILE": str(program)})
    assert result.returncode == 0
    assert result.stdout == "2\n"


def test_cli_missing_file_fails(tmp_path: Path):
    result = run_cli(cwd=tmp_path)
    assert result.returncode != 0
    assert "test.b" in result.stderr


def test_cli_accepts_arbitrary_bytes(tmp_path: Path):
    program = tmp_path / "binary.b"
    program.write_bytes(b"\xff\xfe+\x00+.")
    result = run_cli(program)
    assert result.returncode == 0
    assert result.stdout == "2\n"


def test_cli_inline_command_reads_input():
    result = run_cli("-c", ",+.", stdin="41\n")
    assert result.returncode == 0
    assert result.stdout == "42\n"


def test_cli_branch_error_shows_context(tmp_path: Path):
    program = tmp_path / "broken.b"
    program.write_text("+\n-]\n", encoding="utf-8")
    result = run_cli(program)
    assert result.returncode == 1
    out = result.stdout
    assert "BRANCH ERROR." in out
    assert "instruction 3" in out
    assert "line 2, column 2" in out


def test_cli_input_error_is_reported():
    result = run_cli("-c", ",.", stdin="banana\n")
    assert result.returncode == 1
    assert "INPUT ERROR." in result.stdout
    assert "banana" in result.stdout


def test_cli_verbose_traces_tape():
    result = run_cli("-v", "-c", "+.")
    assert result.returncode == 0
    lines = result.stdout.splitlines()
    assert lines[0].startswith("Tape(position=0")
    assert "1" in lines


def test_cli_stats_reports_steps():
    result = run_cli("--stats", "-c", "+[-]")
    assert result.returncode == 0
    assert "STATISTICS." in result.stdout
    assert "step\t4" in result.stdout
