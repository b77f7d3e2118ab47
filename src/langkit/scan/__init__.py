"""
Langkit Scanner
===============

This package implements the lexical scanner for the language: it turns
source text into an ordered sequence of tokens for a parser.

Pipeline
--------
    Source text → Cursor → classify() → accumulator / resolver → Token

The scanner is a pure function of its input. It performs no I/O except
through the optional file loader (scan_file), never prints, and keeps no
state between calls, so separate scans may run in parallel.

Usage
-----
>>> from langkit.scan import scan, Token, TokenType
>>> scan("thing/=18;")[1] == Token(TokenType.SLASH_EQUAL)
True

Not handled here: comments, escape sequences in strings, keyword
recognition and non-ASCII identifiers.
"""

from langkit.scan.cursor import Cursor
from langkit.scan.errors import (
    ErrorKind,
    ScanError,
    InputUnavailableError,
    UnrecognizedCharacterError,
    UnexpectedEndOfInputError,
)
from langkit.scan.scanner import (
    SOURCE_EXTENSION,
    CharClass,
    Scanner,
    classify,
    accumulate_number,
    accumulate_identifier,
    resolve_compound,
    decode_source,
    read_source,
    scan,
    scan_located,
    scan_file,
)
from langkit.scan.tokens import LocatedToken, Token, TokenType

__all__ = [
    # Entry points
    "scan",
    "scan_located",
    "scan_file",
    "decode_source",
    "read_source",
    "SOURCE_EXTENSION",
    # Tokens
    "Token",
    "TokenType",
    "LocatedToken",
    # Building blocks
    "Cursor",
    "CharClass",
    "Scanner",
    "classify",
    "accumulate_number",
    "accumulate_identifier",
    "resolve_compound",
    # Errors
    "ErrorKind",
    "ScanError",
    "InputUnavailableError",
    "UnrecognizedCharacterError",
    "UnexpectedEndOfInputError",
]
