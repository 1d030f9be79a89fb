"""
Unified CLI Error Handling
==========================

Provides consistent error handling and exit codes across the CLI tools.
"""

import sys
import traceback
from enum import IntEnum
from typing import NoReturn

import click


class ExitCode(IntEnum):
    """Standard exit codes for CLI tools."""
    SUCCESS = 0
    USAGE_ERROR = 1      # No source file given, or it cannot be opened
    LEX_ERROR = 2        # Source could not be tokenized
    INTERNAL_ERROR = 3   # Unexpected internal error


def usage_error(prog_name: str, message: str) -> NoReturn:
    """
    Print the usage line and a message to stdout, then exit.

    Args:
        prog_name: Name the tool was invoked as
        message: Explanation printed under the usage line

    Raises:
        SystemExit: Always, with ExitCode.USAGE_ERROR
    """
    click.echo(f"Usage: {prog_name} <source.vcl>")
    click.echo(message)
    sys.exit(ExitCode.USAGE_ERROR)


def handle_cli_exception(error: Exception, verbose: bool = False) -> NoReturn:
    """
    Unified exception handler for the CLI tools.

    Formats the error message appropriately, optionally prints traceback
    in verbose mode, and exits with the correct exit code.

    Args:
        error: The exception that was raised
        verbose: If True, print full traceback for internal errors

    Raises:
        SystemExit: Always exits with an appropriate exit code
    """
    from vcl_lexer.errors import LexerError

    if isinstance(error, LexerError):
        # Lexer errors are already formatted with location and "error:" prefix
        click.echo(str(error), err=True)
        sys.exit(ExitCode.LEX_ERROR)

    # Unexpected internal error
    click.echo(f"Internal error: {error}", err=True)
    if verbose:
        traceback.print_exc()
    sys.exit(ExitCode.INTERNAL_ERROR)
