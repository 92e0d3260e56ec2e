"""
cfc - C Front-End Command-Line Interface
========================================

Runs the lexer and parser over one C source file and prints the result.

Usage Examples
--------------
Parse a file and dump its AST:
    $ cfc main.c
    Parsing OK. Parsed 1 declaration.
    Program
      Function: int main()
        Block
          Return 0

Show the token sequence too:
    $ cfc --tokens main.c

Verbose mode (debug logging):
    $ cfc -v main.c
"""

import logging
from pathlib import Path
from typing import Optional

import click

from cfront import __version__
from cfront.cli.errors import ExitCode, handle_cli_exception
from cfront.frontend.ast import ASTPrinter
from cfront.frontend.pipeline import Frontend, FrontendOptions

logger = logging.getLogger(__name__)


def setup_logging(verbose: bool) -> None:
    """Configure logging based on verbosity."""
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(levelname)s: %(name)s: %(message)s" if verbose else "%(message)s",
    )


# =============================================================================
# CLI Definition
# =============================================================================

@click.command()
@click.argument(
    "input_file",
    required=False,
    type=click.Path(path_type=Path),
)
@click.option(
    "--ast/--no-ast",
    "show_ast",
    default=True,
    help="Print the AST after a successful parse (default: on)",
)
@click.option(
    "--tokens",
    "show_tokens",
    is_flag=True,
    help="Print the token sequence",
)
@click.option(
    "--legacy-separators",
    is_flag=True,
    help="Discard exactly one token between declarations, whatever it is",
)
@click.option(
    "-v", "--verbose",
    is_flag=True,
    help="Verbose output",
)
@click.version_option(version=__version__, prog_name="cfc")
@click.pass_context
def main(
    ctx: click.Context,
    input_file: Optional[Path],
    show_ast: bool,
    show_tokens: bool,
    legacy_separators: bool,
    verbose: bool,
) -> None:
    """
    Parse a C source file and print its syntax tree.

    INPUT_FILE is the C source file to parse.

    \b
    Supported C subset:
        - int functions without parameters
        - return statements with a decimal number
    """
    if input_file is None:
        click.echo(ctx.get_usage(), err=True)
        click.echo("Error: missing argument 'INPUT_FILE'.", err=True)
        ctx.exit(ExitCode.USAGE_ERROR)

    setup_logging(verbose)

    options = FrontendOptions.from_env()
    if legacy_separators:
        options.legacy_separators = True
    logger.debug(f"Front-end options: {options}")

    try:
        if verbose:
            click.echo(f"Parsing {input_file}...")

        result = Frontend(options).process_file(input_file)

        if show_tokens:
            for token in result.tokens:
                click.echo(repr(token))

        if not result.success:
            handle_cli_exception(result.error, verbose)

        count = result.declaration_count
        noun = "declaration" if count == 1 else "declarations"
        click.echo(f"Parsing OK. Parsed {count} {noun}.")

        if verbose:
            click.echo(f"Tokenized: {result.token_count} tokens")

        if show_ast:
            click.echo(ASTPrinter().print(result.program))

    except Exception as e:
        handle_cli_exception(e, verbose)


if __name__ == "__main__":
    main()
