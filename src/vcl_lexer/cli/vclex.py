"""
vclex - VCL Lexer Command-Line Interface
========================================

This module implements the command-line driver for the VCL lexer. It
tokenizes one source file and prints every token on its own line:

    <file>:<row>:<col> (<TYPE>[, <payload>])

Rows and columns are printed 1-based.

Usage Examples
--------------
Tokenize a file:
    $ vclex server.vcl
    server.vcl:1:1 (IDENTITY, server)
    server.vcl:1:8 (OPEN_CURLY)

Decode string payloads as Latin-1:
    $ vclex --encoding latin-1 legacy.vcl

Show debug logging on stderr:
    $ vclex -v server.vcl

Exit Codes
----------
0 - all tokens printed
1 - no source file given, or it cannot be opened
2 - the source contains input the lexer cannot tokenize
3 - internal error
"""

import logging
from typing import Optional

import click

from vcl_lexer import __version__
from vcl_lexer.cli.errors import handle_cli_exception, usage_error
from vcl_lexer.config import LexerConfig, is_known_encoding
from vcl_lexer.lexer import Lexer
from vcl_lexer.tokens import format_token

logger = logging.getLogger(__name__)


def setup_logging(config: LexerConfig, verbose: bool) -> None:
    """Configure logging on stderr based on verbosity."""
    level = logging.DEBUG if verbose else config.logging_level
    logging.basicConfig(
        level=level,
        format="%(levelname)s: %(message)s" if verbose else "%(message)s",
        force=True,
    )


def validate_encoding(ctx: click.Context, param: click.Parameter, value: Optional[str]) -> Optional[str]:
    """Reject codec names Python does not know."""
    if value is not None and not is_known_encoding(value):
        raise click.BadParameter(f"unknown encoding '{value}'")
    return value


# =============================================================================
# CLI Definition
# =============================================================================

@click.command(name="vclex")
@click.argument("source_file", required=False, type=click.Path())
@click.option(
    "--encoding",
    default=None,
    callback=validate_encoding,
    help="Encoding of identifier and string text (default: utf-8, or $VCL_ENCODING)",
)
@click.option(
    "-v", "--verbose",
    is_flag=True,
    help="Verbose output",
)
@click.version_option(version=__version__, prog_name="vclex")
@click.pass_context
def main(
    ctx: click.Context,
    source_file: Optional[str],
    encoding: Optional[str],
    verbose: bool,
) -> None:
    """
    Tokenize a VCL source file.

    SOURCE_FILE is the .vcl file to scan. Each token is printed as
    file:row:column followed by its type and payload.

    \b
    Examples:
        vclex main.vcl               # Print all tokens
        vclex -v main.vcl            # With debug logging
    """
    config = LexerConfig.from_env()
    if encoding:
        config.encoding = encoding
    setup_logging(config, verbose)

    prog_name = ctx.info_name or "vclex"

    if source_file is None:
        usage_error(prog_name, "No source file is provided.")

    with Lexer(source_file, config) as lexer:
        if not lexer.good():
            usage_error(prog_name, f"Source file {source_file} may not exist.")

        try:
            for token in lexer:
                click.echo(format_token(token))
        except Exception as e:
            handle_cli_exception(e, verbose)

        logger.debug(f"Tokenized {source_file}: {lexer.token_count} tokens")


if __name__ == "__main__":
    main()
