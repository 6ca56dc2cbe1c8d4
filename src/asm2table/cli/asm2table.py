"""
asm2table - Command-Line Interface
==================================

Prints the addressing modes, machine cycles and memory bytes of every line
of an MCS-51 assembly file.

Usage Examples
--------------
Print a table to the terminal:
    $ asm2table blink.asm

Write CSV instead:
    $ asm2table blink.asm -o blink.csv

Only check that every line is a valid instruction or directive:
    $ asm2table --check blink.asm

Copyright (c) 2026 asm2table Contributors
"""

import logging
import sys
from pathlib import Path
from typing import Optional

import click

from asm2table import __version__
from asm2table.cli.errors import ExitCode, handle_cli_exception
from asm2table.config import ReportConfig
from asm2table.report import analyze_file, format_table, validate_source, write_csv


def setup_logging(verbose: bool) -> None:
    """Configure logging based on verbosity."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(levelname)s: %(message)s" if verbose else "%(message)s",
    )


# =============================================================================
# CLI Definition
# =============================================================================

@click.command()
@click.argument(
    "input_file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
)
@click.option(
    "-o", "--output",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Write CSV to this file instead of printing a table",
)
@click.option(
    "--header/--no-header",
    default=None,
    help="Write a header row to CSV output",
)
@click.option(
    "--check",
    is_flag=True,
    help="Only validate the source; exit with status 1 if any line is invalid",
)
@click.option(
    "--encoding",
    default=None,
    help="Source file encoding (default: utf-8)",
)
@click.option(
    "--pause",
    is_flag=True,
    help="Wait for a key press before exiting",
)
@click.option(
    "-v", "--verbose",
    is_flag=True,
    help="Verbose output",
)
@click.version_option(version=__version__, prog_name="asm2table")
def main(
    input_file: Path,
    output: Optional[Path],
    header: Optional[bool],
    check: bool,
    encoding: Optional[str],
    pause: bool,
    verbose: bool,
) -> None:
    """
    Tabulate addressing modes, cycles and bytes of MCS-51 assembly.

    INPUT_FILE is the assembly source file (.asm) to analyze.

    Lines that cannot be resolved show an empty modes cell and -1 for
    cycles and memory.

    \b
    Examples:
        asm2table blink.asm               # Print table
        asm2table blink.asm -o out.csv    # Write CSV
        asm2table --check blink.asm       # Validate only
    """
    setup_logging(verbose)

    config = ReportConfig.from_env()
    if header is not None:
        config.csv_header = header
    if encoding is not None:
        config.encoding = encoding

    try:
        if verbose:
            click.echo(f"Analyzing {input_file}...")

        if check:
            failures = validate_source(input_file.read_text(encoding=config.encoding))
            for _, failure in failures:
                click.echo(str(failure), err=True)
            if failures:
                click.echo(f"{len(failures)} invalid line(s) in {input_file}", err=True)
                sys.exit(ExitCode.BUILD_ERROR)
            click.echo(f"{input_file}: OK")
        else:
            reports = analyze_file(input_file, config)
            if output is not None:
                write_csv(reports, output, config)
                if verbose:
                    click.echo(f"Wrote {len(reports)} rows to {output}")
            else:
                click.echo(format_table(reports, config))

            if verbose:
                failed = [report for report in reports if not report.ok]
                click.echo(f"{len(reports)} lines, {len(failed)} unresolved")

    except Exception as e:
        handle_cli_exception(e, verbose=verbose, error_type="Analysis")

    if pause:
        click.pause("Press any key to quit...")


if __name__ == "__main__":
    main()
