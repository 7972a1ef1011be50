"""
Unified CLI Error Handling
==========================

Provides consistent error handling and exit codes across all commands.
"""

import sys
import traceback
from enum import IntEnum
from typing import NoReturn

import click

from hp35s_sdk.errors import HP35sError


class ExitCode(IntEnum):
    """Standard exit codes for the command-line tool."""
    SUCCESS = 0
    PROGRAM_ERROR = 1    # Label, addressing or conversion error
    INVALID_ARGS = 2     # Invalid arguments or missing files
    INTERNAL_ERROR = 3   # Unexpected internal error


def handle_cli_exception(
    error: Exception,
    verbose: bool = False,
    error_type: str | None = None
) -> NoReturn:
    """
    Unified exception handler for all commands.

    Formats the error message, optionally prints a traceback in verbose
    mode, and exits with the matching exit code.

    Args:
        error: The exception that was raised
        verbose: If True, print full traceback for internal errors
        error_type: Optional prefix for the error message (e.g., "Export")

    Raises:
        SystemExit: Always exits with an appropriate exit code
    """
    if isinstance(error, HP35sError):
        # Program errors carry their own "error:" prefix and location
        if error_type:
            click.echo(f"{error_type} failed:", err=True)
        click.echo(str(error), err=True)
        sys.exit(ExitCode.PROGRAM_ERROR)

    elif isinstance(error, click.BadParameter):
        click.echo(f"Error: {error}", err=True)
        sys.exit(ExitCode.INVALID_ARGS)

    elif isinstance(error, (FileNotFoundError, PermissionError, IsADirectoryError)):
        click.echo(f"Error: {error}", err=True)
        sys.exit(ExitCode.INVALID_ARGS)

    elif isinstance(error, UnicodeDecodeError):
        click.echo(f"Error: file is not valid text: {error.reason}", err=True)
        sys.exit(ExitCode.INVALID_ARGS)

    else:
        click.echo(f"Internal error: {error}", err=True)
        if verbose:
            traceback.print_exc()
        sys.exit(ExitCode.INTERNAL_ERROR)
