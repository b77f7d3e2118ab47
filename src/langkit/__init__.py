"""
Langkit - Front-End Toolkit for a Small C-like Language
=======================================================

This package provides the front end of a toolchain for a small C-like
language. At present it contains the lexical scanner; a parser will
consume the token stream it produces.

Main Components
---------------
- **scan**: Lexical scanner
    Converts source text into a sequence of tokens ending with END

- **cli**: Command-line tools (lkscan)
    Prints the token stream of a file or expression

Quick Start
-----------
    >>> from langkit import scan
    >>> scan("78+12;")
    [Token(NUMBER, '78'), Token(PLUS), Token(NUMBER, '12'), Token(SEMICOLON), Token(END)]

Or use the command-line tool:
    $ lkscan hello.lang
    $ lkscan -e "thing = 64;"
"""

__version__ = "0.1.0"

# =============================================================================
# Public API Exports
# =============================================================================

from langkit.errors import LangkitError, SourceLocation
from langkit.scan import (
    Token,
    TokenType,
    LocatedToken,
    scan,
    scan_located,
    scan_file,
    ErrorKind,
    ScanError,
    InputUnavailableError,
    UnrecognizedCharacterError,
    UnexpectedEndOfInputError,
)

__all__ = [
    # Version info
    "__version__",
    # Scanner
    "Token",
    "TokenType",
    "LocatedToken",
    "scan",
    "scan_located",
    "scan_file",
    # Exception hierarchy
    "LangkitError",
    "SourceLocation",
    "ErrorKind",
    "ScanError",
    "InputUnavailableError",
    "UnrecognizedCharacterError",
    "UnexpectedEndOfInputError",
]
