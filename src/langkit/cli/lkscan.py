"""
lkscan - Scanner Command-Line Interface
=======================================

This module implements the command-line interface for the scanner. It
prints the token stream of a source file or an expression, which is
handy when checking how a piece of source will be seen by the parser.

Usage Examples
--------------
Scan a file:
    $ lkscan hello.lang

Scan an expression:
    $ lkscan -e "thing/=18;"

With token positions:
    $ lkscan -p hello.lang

As JSON:
    $ lkscan -f json hello.lang

From standard input:
    $ cat hello.lang | lkscan -
"""

import json
import logging
from pathlib import Path
from typing import Optional

import click

from langkit import __version__
from langkit.cli.errors import handle_cli_exception
from langkit.scan import LocatedToken, decode_source, read_source, scan_located


logger = logging.getLogger(__name__)


def setup_logging(verbose: bool) -> None:
    """Configure logging based on verbosity."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(levelname)s: %(message)s" if verbose else "%(message)s",
    )


def format_token(located: LocatedToken, positions: bool = False) -> str:
    """Format one token as a line of text output, e.g. NUMBER '13'."""
    token = located.token
    text = token.type.name
    if token.text is not None:
        text = f"{text} {token.text!r}"
    if positions:
        text = f"{located.location.line}:{located.location.column}\t{text}"
    return text


def token_to_dict(located: LocatedToken) -> dict:
    """Convert a token to a JSON-serializable dictionary."""
    return {
        "type": located.token.type.name,
        "text": located.token.text,
        "line": located.location.line,
        "column": located.location.column,
    }


# =============================================================================
# CLI Definition
# =============================================================================

@click.command()
@click.argument(
    "input_file",
    required=False,
    type=click.Path(dir_okay=False, allow_dash=True, path_type=Path),
)
@click.option(
    "-e", "--expr",
    type=str,
    default=None,
    help="Scan this text instead of a file",
)
@click.option(
    "-p", "--positions",
    is_flag=True,
    help="Print line:column with each token",
)
@click.option(
    "-f", "--format", "output_format",
    type=click.Choice(["text", "json"], case_sensitive=False),
    default="text",
    help="Output format (default: text)",
)
@click.option(
    "-v", "--verbose",
    is_flag=True,
    help="Verbose output",
)
@click.version_option(version=__version__, prog_name="lkscan")
def main(
    input_file: Optional[Path],
    expr: Optional[str],
    positions: bool,
    output_format: str,
    verbose: bool,
) -> None:
    """
    Print the tokens of a source file.

    INPUT_FILE is the source file to scan, or '-' for standard input.

    \b
    Examples:
        lkscan hello.lang            # One token per line
        lkscan -p hello.lang         # With line:column
        lkscan -e "a += 1;"          # Scan an expression
        lkscan -f json hello.lang    # JSON array of tokens
    """
    if input_file is None and expr is None:
        raise click.UsageError("provide INPUT_FILE or --expr")
    if input_file is not None and expr is not None:
        raise click.UsageError("INPUT_FILE and --expr are mutually exclusive")

    setup_logging(verbose)

    try:
        if expr is not None:
            source, filename = expr, "<expr>"
        elif str(input_file) == "-":
            filename = "<stdin>"
            source = decode_source(click.get_binary_stream("stdin").read(), filename)
        else:
            source, filename = read_source(input_file), str(input_file)

        logger.debug(f"Read {len(source)} characters from {filename}")
        tokens = scan_located(source, filename)

        if output_format.lower() == "json":
            click.echo(json.dumps([token_to_dict(t) for t in tokens], indent=2))
        else:
            for located in tokens:
                click.echo(format_token(located, positions))

    except Exception as e:
        handle_cli_exception(e, verbose)


if __name__ == "__main__":
    main()
