# =============================================================================
# test_report.py - Line Report Tests
# =============================================================================
# Tests for whole-source analysis and its CSV and text renderings.
#
# Test coverage includes:
#   - Per-line results and failure markers
#   - CSV output with and without header
#   - Text table layout
#   - File input and environment configuration
# =============================================================================

import csv
import io

import pytest

from asm2table.config import ReportConfig
from asm2table.cpu import AddressingMode, REGISTER_DIRECT
from asm2table.errors import UnknownInstruction
from asm2table.report import (
    HEADERS,
    analyze_file,
    analyze_line,
    analyze_source,
    format_table,
    validate_source,
    write_csv,
)


SAMPLE = """\
        ORG 0000H        ; reset vector
START:  MOV DPTR, #200H  ; table base
        MOV A, R1
HERE:   SJMP HERE
        FOO R1
        END
"""


# =============================================================================
# Analysis
# =============================================================================

class TestAnalyze:
    """Per-line analysis results."""

    def test_line_count_and_order(self):
        reports = analyze_source(SAMPLE)
        assert [r.line_number for r in reports] == [1, 2, 3, 4, 5, 6]

    def test_resolved_line(self):
        report = analyze_line("START:  MOV DPTR, #200H  ; table base", 2)
        assert report.ok
        assert report.source == "START:  MOV DPTR, #200H"
        assert report.modes == (REGISTER_DIRECT, AddressingMode.immediate(2))
        assert report.byte_length == 3
        assert report.cycles == 2

    def test_directive_line(self):
        report = analyze_line("ORG 0000H ; reset")
        assert report.ok
        assert report.modes == ()
        assert report.byte_length == 0
        assert report.cycles == 0

    def test_failed_line(self):
        report = analyze_line("FOO R1", 5)
        assert not report.ok
        assert isinstance(report.error, UnknownInstruction)
        assert report.error.line_number == 5
        assert report.modes is None
        assert report.byte_length is None
        assert report.cycles is None

    def test_rows(self):
        reports = analyze_source(SAMPLE)
        assert reports[1].as_row() == ["START:  MOV DPTR, #200H", "Register, Immediate", "2", "3"]
        assert reports[3].as_row() == ["HERE:   SJMP HERE", "Direct", "2", "2"]
        assert reports[4].as_row() == ["FOO R1", "", "-1", "-1"]

    def test_custom_failure_marker(self):
        config = ReportConfig(failure_marker="?", mode_separator="/")
        assert analyze_line("FOO R1").as_row(config) == ["FOO R1", "", "?", "?"]
        assert analyze_line("MOV A, R1").as_row(config)[1] == "Register/Register"

    def test_validate_source(self):
        failures = validate_source(SAMPLE)
        assert [line_number for line_number, _ in failures] == [5]
        line_number, failure = failures[0]
        assert isinstance(failure, UnknownInstruction)
        assert failure.line_number == line_number


# =============================================================================
# CSV Output
# =============================================================================

class TestCsv:
    """CSV rendering."""

    def read_rows(self, text):
        return list(csv.reader(io.StringIO(text)))

    def test_rows_without_header(self):
        out = io.StringIO()
        write_csv(analyze_source(SAMPLE), out)
        rows = self.read_rows(out.getvalue())
        assert len(rows) == 6
        assert rows[2] == ["MOV A, R1", "Register, Register", "1", "1"]

    def test_header(self):
        out = io.StringIO()
        write_csv(analyze_source("NOP"), out, ReportConfig(csv_header=True))
        rows = self.read_rows(out.getvalue())
        assert rows[0] == list(HEADERS)
        assert rows[1] == ["NOP", "", "1", "1"]

    def test_write_to_path(self, tmp_path):
        path = tmp_path / "out.csv"
        write_csv(analyze_source(SAMPLE), path)
        with open(path, newline="") as f:
            rows = list(csv.reader(f))
        assert rows[3] == ["HERE:   SJMP HERE", "Direct", "2", "2"]


# =============================================================================
# Text Table
# =============================================================================

class TestTable:
    """Fixed-width text table."""

    def test_header_line(self):
        table = format_table(analyze_source(SAMPLE))
        header = table.splitlines()[0]
        for name in HEADERS:
            assert name in header

    def test_rows_are_aligned(self):
        reports = analyze_source(SAMPLE)
        lines = format_table(reports).splitlines()[1:]
        assert len(lines) == len(reports)
        width = max(len(r.source) for r in reports)
        for line, report in zip(lines, reports):
            assert line.startswith(report.source)
            assert line[width:width + 2] == ": "

    def test_failed_row(self):
        lines = format_table(analyze_source("FOO R1")).splitlines()
        assert lines[1].replace(" ", "").endswith(":,-1,-1")

    def test_empty_source(self):
        table = format_table([])
        assert table.splitlines() == [table]


# =============================================================================
# Files and Configuration
# =============================================================================

class TestFilesAndConfig:
    """File input and environment configuration."""

    def test_analyze_file(self, tmp_path):
        path = tmp_path / "prog.asm"
        path.write_text(SAMPLE)
        reports = analyze_file(path)
        assert len(reports) == 6
        assert reports[2].byte_length == 1

    def test_analyze_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            analyze_file(tmp_path / "missing.asm")

    def test_config_defaults(self, monkeypatch):
        for name in ("ASM2TABLE_FAILURE_MARKER", "ASM2TABLE_MODE_SEPARATOR",
                     "ASM2TABLE_ENCODING", "ASM2TABLE_CSV_HEADER"):
            monkeypatch.delenv(name, raising=False)
        assert ReportConfig.from_env() == ReportConfig()

    def test_config_from_env(self, monkeypatch):
        monkeypatch.setenv("ASM2TABLE_FAILURE_MARKER", "ERR")
        monkeypatch.setenv("ASM2TABLE_ENCODING", "latin-1")
        monkeypatch.setenv("ASM2TABLE_CSV_HEADER", "yes")
        config = ReportConfig.from_env()
        assert config.failure_marker == "ERR"
        assert config.encoding == "latin-1"
        assert config.csv_header is True
