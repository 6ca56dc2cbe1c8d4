"""
CLI Error Handling
==================

Turns an exception escaping the asm2table command into one line on stderr
and a process exit status:

    0  every line resolved (or --check passed)
    1  the source had unresolvable lines, or the tables are inconsistent
    2  the input could not be opened or decoded, or an option was bad
    3  anything else; pass -v to get the traceback
"""

import sys
import traceback
from enum import IntEnum
from typing import NoReturn, Optional

import click

from asm2table.errors import Asm2TableError


class ExitCode(IntEnum):
    """Process exit statuses of the asm2table command."""
    SUCCESS = 0
    BUILD_ERROR = 1
    INVALID_ARGS = 2
    INTERNAL_ERROR = 3


# Checked in order; the first matching type decides the exit status
_EXIT_CODES: tuple[tuple[type[BaseException], ExitCode], ...] = (
    (Asm2TableError, ExitCode.BUILD_ERROR),
    (click.BadParameter, ExitCode.INVALID_ARGS),
    (UnicodeDecodeError, ExitCode.INVALID_ARGS),
    (FileNotFoundError, ExitCode.INVALID_ARGS),
    (PermissionError, ExitCode.INVALID_ARGS),
)


def exit_code_for(error: BaseException) -> ExitCode:
    for error_class, code in _EXIT_CODES:
        if isinstance(error, error_class):
            return code
    return ExitCode.INTERNAL_ERROR


def describe_error(error: BaseException, error_type: Optional[str] = None) -> str:
    """One-line (or, for resolution errors, multi-line) stderr message."""
    if isinstance(error, Asm2TableError):
        prefix = f"{error_type} error" if error_type else "Error"
        return f"{prefix}: {error}"
    if isinstance(error, UnicodeDecodeError):
        return f"Error: cannot decode input as {error.encoding}: {error.reason}"
    if exit_code_for(error) is ExitCode.INVALID_ARGS:
        return f"Error: {error}"
    return f"Internal error: {error}"


def handle_cli_exception(
    error: Exception,
    verbose: bool = False,
    error_type: Optional[str] = None,
) -> NoReturn:
    """
    Report ``error`` on stderr and exit with its status.

    Args:
        error: The exception that was raised
        verbose: Print the traceback for internal errors
        error_type: Prefix for asm2table errors (e.g. "Analysis")

    Raises:
        SystemExit: always
    """
    code = exit_code_for(error)
    click.echo(describe_error(error, error_type), err=True)
    if code is ExitCode.INTERNAL_ERROR and verbose:
        traceback.print_exc()
    sys.exit(code)
