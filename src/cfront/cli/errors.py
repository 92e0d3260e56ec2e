"""
CLI Error Handling
==================

Provides consistent error reporting and exit codes for the CLI tools.
"""

import sys
import traceback
from enum import IntEnum
from typing import NoReturn

import click


class ExitCode(IntEnum):
    """Exit codes for CLI tools."""
    SUCCESS = 0
    USAGE_ERROR = 1      # Missing or invalid arguments
    READ_ERROR = 2       # Input file missing, unreadable or not UTF-8
    SOURCE_ERROR = 3     # Lexical or syntax error in the input
    INTERNAL_ERROR = 4   # Unexpected internal error


def handle_cli_exception(error: Exception, verbose: bool = False) -> NoReturn:
    """
    Report an exception on stderr and exit with the matching code.

    Args:
        error: The exception that was raised or captured
        verbose: If True, print full traceback for internal errors

    Raises:
        SystemExit: Always
    """
    from cfront.errors import CFrontError
    from cfront.frontend.errors import FrontendError, SourceReadError

    if isinstance(error, SourceReadError):
        click.echo(str(error), err=True)
        sys.exit(ExitCode.READ_ERROR)

    elif isinstance(error, FrontendError):
        # Already formatted with location and "error:" prefix
        click.echo(str(error), err=True)
        sys.exit(ExitCode.SOURCE_ERROR)

    elif isinstance(error, CFrontError):
        click.echo(f"Error: {error}", err=True)
        sys.exit(ExitCode.SOURCE_ERROR)

    elif isinstance(error, click.BadParameter):
        click.echo(f"Error: {error}", err=True)
        sys.exit(ExitCode.USAGE_ERROR)

    else:
        click.echo(f"Internal error: {error}", err=True)
        if verbose:
            traceback.print_exc()
        sys.exit(ExitCode.INTERNAL_ERROR)
