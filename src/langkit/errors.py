"""
Langkit Error Hierarchy
=======================

This module defines the root of the exception hierarchy for the toolkit.
All exceptions inherit from LangkitError, allowing callers to catch every
toolkit error with a single except clause if desired.

Exception Hierarchy
-------------------
LangkitError (base)
└── ScanError (scanner-related, see langkit.scan.errors)
    ├── InputUnavailableError - source text could not be read
    ├── UnrecognizedCharacterError - character starts no known token
    └── UnexpectedEndOfInputError - construct needs more input

Error messages follow this format:
    filename:line:column: error: description
        source_line_text
        ^ (pointer to error location)
    hint: suggestion for fixing (when available)
"""

from dataclasses import dataclass


# =============================================================================
# Base Exception Class
# =============================================================================

class LangkitError(Exception):
    """
    Base exception for all toolkit errors.

        try:
            tokens = scan_file("program.lang")
        except LangkitError as e:
            print(f"Error: {e}")
    """
    pass


# =============================================================================
# Source Location Tracking
# =============================================================================

@dataclass(frozen=True)
class SourceLocation:
    """
    Represents a location in source text for error reporting.

    Attributes:
        filename: Name of the source file (or "<input>" for string input)
        line: Line number (1-indexed)
        column: Column number (1-indexed)
    """
    filename: str
    line: int
    column: int

    def __str__(self) -> str:
        """Format as 'filename:line:column' for error messages."""
        return f"{self.filename}:{self.line}:{self.column}"
