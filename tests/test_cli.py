# =============================================================================
# test_cli.py - Command-Line Interface Tests
# =============================================================================
# Tests for the asm2table command and its error handling.
# =============================================================================

import csv
from pathlib import Path

import click
import pytest
from click.testing import CliRunner

from asm2table import __version__
from asm2table.cli.asm2table import main
from asm2table.cli.errors import ExitCode, describe_error, exit_code_for, handle_cli_exception
from asm2table.errors import UnknownInstruction


VALID_SOURCE = """\
        ORG 0000H
START:  MOV DPTR, #200H
WAIT:   JNB TI, WAIT
HERE:   SJMP HERE
        END
"""

INVALID_SOURCE = """\
        MOV A, #1
        FOO R1
        RET A
"""


@pytest.fixture
def runner():
    return CliRunner()


class TestTableOutput:
    """Default mode prints a text table."""

    def test_prints_table(self, runner):
        with runner.isolated_filesystem():
            Path("prog.asm").write_text(VALID_SOURCE)
            result = runner.invoke(main, ["prog.asm"])
            assert result.exit_code == 0
            assert "Instruction" in result.output
            assert "HERE:   SJMP HERE" in result.output

    def test_unresolved_lines_do_not_fail(self, runner):
        with runner.isolated_filesystem():
            Path("prog.asm").write_text(INVALID_SOURCE)
            result = runner.invoke(main, ["prog.asm"])
            assert result.exit_code == 0
            assert "-1" in result.output

    def test_verbose_summary(self, runner):
        with runner.isolated_filesystem():
            Path("prog.asm").write_text(INVALID_SOURCE)
            result = runner.invoke(main, ["-v", "prog.asm"])
            assert result.exit_code == 0
            assert "3 lines, 2 unresolved" in result.output

    def test_pause_without_terminal(self, runner):
        with runner.isolated_filesystem():
            Path("prog.asm").write_text(VALID_SOURCE)
            result = runner.invoke(main, ["--pause", "prog.asm"])
            assert result.exit_code == 0


class TestCsvOutput:
    """-o writes CSV instead of printing."""

    def test_writes_csv(self, runner):
        with runner.isolated_filesystem():
            Path("prog.asm").write_text(VALID_SOURCE)
            result = runner.invoke(main, ["prog.asm", "-o", "prog.csv"])
            assert result.exit_code == 0
            with open("prog.csv", newline="") as f:
                rows = list(csv.reader(f))
            assert len(rows) == 5
            assert rows[1] == ["START:  MOV DPTR, #200H", "Register, Immediate", "2", "3"]
            assert "Instruction" not in result.output

    def test_csv_header(self, runner):
        with runner.isolated_filesystem():
            Path("prog.asm").write_text(VALID_SOURCE)
            result = runner.invoke(main, ["prog.asm", "-o", "prog.csv", "--header"])
            assert result.exit_code == 0
            with open("prog.csv", newline="") as f:
                rows = list(csv.reader(f))
            assert rows[0] == ["Instruction", "Modes", "Cycles", "Memory"]


class TestCheck:
    """--check validates without producing a report."""

    def test_valid_source(self, runner):
        with runner.isolated_filesystem():
            Path("prog.asm").write_text(VALID_SOURCE)
            result = runner.invoke(main, ["--check", "prog.asm"])
            assert result.exit_code == 0
            assert "OK" in result.output

    def test_invalid_source(self, runner):
        with runner.isolated_filesystem():
            Path("prog.asm").write_text(INVALID_SOURCE)
            result = runner.invoke(main, ["--check", "prog.asm"])
            assert result.exit_code == ExitCode.BUILD_ERROR
            assert "line 2: error: unknown instruction 'FOO'" in result.output
            assert "line 3: error:" in result.output
            assert "2 invalid line(s)" in result.output


class TestArguments:
    """Argument handling."""

    def test_missing_file(self, runner):
        result = runner.invoke(main, ["missing.asm"])
        assert result.exit_code == ExitCode.INVALID_ARGS

    def test_version(self, runner):
        result = runner.invoke(main, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output


class TestErrorHandler:
    """Exception to exit-code mapping."""

    @pytest.mark.parametrize("error,code", [
        (UnknownInstruction("FOO"), ExitCode.BUILD_ERROR),
        (FileNotFoundError("x.asm"), ExitCode.INVALID_ARGS),
        (click.BadParameter("bad"), ExitCode.INVALID_ARGS),
        (RuntimeError("boom"), ExitCode.INTERNAL_ERROR),
    ])
    def test_exit_codes(self, error, code, capsys):
        with pytest.raises(SystemExit) as exc_info:
            handle_cli_exception(error)
        assert exc_info.value.code == code
        assert capsys.readouterr().err

    def test_undecodable_input(self):
        error = UnicodeDecodeError("utf-8", b"\xff", 0, 1, "invalid start byte")
        assert exit_code_for(error) is ExitCode.INVALID_ARGS
        assert describe_error(error) == "Error: cannot decode input as utf-8: invalid start byte"

    def test_prefix_only_for_asm2table_errors(self):
        assert describe_error(UnknownInstruction("FOO"), "Analysis").startswith("Analysis error: ")
        assert describe_error(RuntimeError("boom"), "Analysis") == "Internal error: boom"
