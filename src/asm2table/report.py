"""
Line Reports
============

Runs every line of an assembly source through the resolver and renders the
results as a CSV file or a fixed-width text table.

Each line is resolved through the three independent entry points (modes,
byte length, cycle cost). A failure in one of them leaves that cell empty
(modes) or shows the failure marker (numbers); it never stops the report.

Example
-------
    from asm2table.report import analyze_file, format_table, write_csv

    reports = analyze_file("blink.asm")
    print(format_table(reports))
    write_csv(reports, "blink.csv")

produces rows such as:

    MOV A, #30H    : Register, Immediate,      1,      2
    HERE: SJMP HERE:               Direct,      2,      2

Copyright (c) 2026 asm2table Contributors
"""

import csv
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import IO, Iterable, Optional, Sequence, Union

from asm2table.config import ReportConfig
from asm2table.cpu import AddressingMode
from asm2table.errors import ParseFailure, ResolutionError
from asm2table.resolver import LineResolver, strip_line, validate_lines

logger = logging.getLogger(__name__)

HEADERS = ("Instruction", "Modes", "Cycles", "Memory")


@dataclass(frozen=True)
class LineReport:
    """
    Resolution results for one source line.

    Attributes:
        line_number: 1-indexed line number
        source: The line without its comment
        modes: Operand addressing modes, or None if resolution failed
        byte_length: Encoded length, or None if resolution failed
        cycles: Machine cycles, or None if resolution failed
        error: The first failure seen for this line, if any
    """
    line_number: int
    source: str
    modes: Optional[tuple[AddressingMode, ...]]
    byte_length: Optional[int]
    cycles: Optional[int]
    error: Optional[ResolutionError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def as_row(self, config: Optional[ReportConfig] = None) -> list[str]:
        """Render as [source, modes, cycles, memory] cells."""
        config = config or ReportConfig()
        modes = config.mode_separator.join(str(mode) for mode in self.modes or ())
        cycles = str(self.cycles) if self.cycles is not None else config.failure_marker
        memory = str(self.byte_length) if self.byte_length is not None else config.failure_marker
        return [self.source, modes, cycles, memory]


# =============================================================================
# Analysis
# =============================================================================

def analyze_line(
    line: str, line_number: int = 1, resolver: Optional[LineResolver] = None
) -> LineReport:
    """Resolve one line through each entry point, collecting failures."""
    resolver = resolver or LineResolver()
    error: Optional[ResolutionError] = None

    modes: Optional[tuple[AddressingMode, ...]] = None
    byte_length: Optional[int] = None
    cycles: Optional[int] = None

    try:
        modes = tuple(resolver.addressing_modes(line))
        byte_length = resolver.byte_length(line)
    except ParseFailure as e:
        error = e.at_line(line_number)

    try:
        cycles = resolver.cycle_cost(line)
    except ResolutionError as e:
        error = error or e.at_line(line_number)

    if error is not None:
        logger.debug(f"Line {line_number} not resolved: {error.message}")

    return LineReport(
        line_number=line_number,
        source=strip_line(line).code,
        modes=modes,
        byte_length=byte_length,
        cycles=cycles,
        error=error,
    )


def analyze_lines(
    lines: Iterable[str], resolver: Optional[LineResolver] = None
) -> list[LineReport]:
    resolver = resolver or LineResolver()
    return [
        analyze_line(line, line_number, resolver)
        for line_number, line in enumerate(lines, start=1)
    ]


def analyze_source(text: str, resolver: Optional[LineResolver] = None) -> list[LineReport]:
    """Analyze every line of an assembly source string, in order."""
    return analyze_lines(text.splitlines(), resolver)


def analyze_file(
    path: Union[str, Path],
    config: Optional[ReportConfig] = None,
    resolver: Optional[LineResolver] = None,
) -> list[LineReport]:
    """
    Analyze an assembly source file.

    Raises:
        FileNotFoundError: if the file does not exist
    """
    config = config or ReportConfig()
    path = Path(path)
    text = path.read_text(encoding=config.encoding)
    reports = analyze_source(text, resolver)
    failed = sum(1 for report in reports if not report.ok)
    logger.debug(f"Analyzed {path}: {len(reports)} lines, {failed} unresolved")
    return reports


def validate_source(
    text: str, resolver: Optional[LineResolver] = None
) -> list[tuple[int, ParseFailure]]:
    """Structural check of every line, as (line_number, failure) pairs in source order."""
    return [
        (failure.line_number, failure)
        for failure in validate_lines(text.splitlines(), resolver)
    ]


# =============================================================================
# Rendering
# =============================================================================

def write_csv(
    reports: Sequence[LineReport],
    output: Union[str, Path, IO[str]],
    config: Optional[ReportConfig] = None,
) -> None:
    """
    Write one CSV record per line: source, modes, cycles, memory.

    ``output`` is a path or an open text stream.
    """
    config = config or ReportConfig()

    def _write(stream: IO[str]) -> None:
        writer = csv.writer(stream)
        if config.csv_header:
            writer.writerow(HEADERS)
        for report in reports:
            writer.writerow(report.as_row(config))

    if isinstance(output, (str, Path)):
        with open(output, "w", newline="", encoding="utf-8") as f:
            _write(f)
    else:
        _write(output)


def format_table(reports: Sequence[LineReport], config: Optional[ReportConfig] = None) -> str:
    """
    Format reports as a fixed-width text table.

    Headers are centred over their columns; each row reads
    ``source: modes, cycles, memory`` with the source left-aligned and the
    other cells right-aligned.
    """
    rows = [report.as_row(config) for report in reports]
    widths = [len(header) for header in HEADERS]
    for row in rows:
        widths = [max(width, len(cell)) for width, cell in zip(widths, row)]

    lines = ["  ".join(f"{header:^{width}}" for header, width in zip(HEADERS, widths))]
    for source, modes, cycles, memory in rows:
        lines.append(
            f"{source:<{widths[0]}}: {modes:>{widths[1]}}, "
            f"{cycles:>{widths[2]}}, {memory:>{widths[3]}}"
        )
    return "\n".join(lines)
