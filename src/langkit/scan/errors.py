"""
Scanner Error Hierarchy
=======================

This module defines the exceptions raised while turning source text into
tokens. All of them inherit from ScanError, which itself inherits from
the base LangkitError.

Exception Hierarchy
-------------------
ScanError (base for all scanner errors)
├── InputUnavailableError - the source text could not be obtained
├── UnrecognizedCharacterError - a character starts no known token
└── UnexpectedEndOfInputError - input ended inside a construct

Every error carries an ErrorKind so that callers (a parser, a CLI driver)
can dispatch on the kind of failure without inspecting the message text.
Only the file loader raises InputUnavailableError; scan() itself raises
the other two.
"""

from enum import Enum
from typing import Optional

from langkit.errors import LangkitError, SourceLocation


class ErrorKind(Enum):
    """Structural classification of a scanner failure."""

    INPUT_UNAVAILABLE = "input-unavailable"
    UNRECOGNIZED_CHARACTER = "unrecognized-character"
    UNEXPECTED_END_OF_INPUT = "unexpected-end-of-input"


# =============================================================================
# Base Scanner Exception
# =============================================================================

class ScanError(LangkitError):
    """
    Base exception for all scanner errors.

    Attributes:
        kind: The ErrorKind of this failure
        message: The error description
        location: Where in the source the error occurred
        hint: A suggestion for fixing the error
        source_line: The actual source text at the error location
    """

    kind: ErrorKind

    def __init__(
        self,
        message: str,
        location: Optional[SourceLocation] = None,
        hint: Optional[str] = None,
        source_line: Optional[str] = None,
    ):
        self.message = message
        self.location = location
        self.hint = hint
        self.source_line = source_line
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """
        Format the error message with location, source context, and hint.

            demo.lang:1:4: error: unrecognized character '&' (0x26)
                a & b;
                  ^
            hint: use '&&' for logical and
        """
        parts = []

        if self.location:
            parts.append(f"{self.location}: error: {self.message}")
        else:
            parts.append(f"error: {self.message}")

        if self.source_line is not None and self.location is not None:
            parts.append(f"    {self.source_line.expandtabs()}")
            if self.location.column > 0:
                # Column counts characters; measure the tab-expanded prefix
                prefix = self.source_line[:self.location.column - 1].expandtabs()
                padding = " " * (4 + len(prefix))
                parts.append(f"{padding}^")

        if self.hint:
            parts.append(f"hint: {self.hint}")

        return "\n".join(parts)


class InputUnavailableError(ScanError):
    """
    The source text could not be read.

    Raised by the file loader, never by scan(). The underlying OSError or
    UnicodeDecodeError is chained as __cause__.
    """

    kind = ErrorKind.INPUT_UNAVAILABLE

    def __init__(self, path: str, reason: Optional[str] = None):
        self.path = path
        self.reason = reason
        message = f"cannot read '{path}'"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class UnrecognizedCharacterError(ScanError):
    """
    A character that does not start any token and is not whitespace.

    Fatal to the current scan: no partial token sequence is returned.
    """

    kind = ErrorKind.UNRECOGNIZED_CHARACTER

    def __init__(
        self,
        char: str,
        location: Optional[SourceLocation] = None,
        source_line: Optional[str] = None,
        hint: Optional[str] = None,
    ):
        self.char = char
        super().__init__(
            f"unrecognized character {char!r} (0x{ord(char):02X})",
            location=location,
            hint=hint,
            source_line=source_line,
        )


class UnexpectedEndOfInputError(ScanError):
    """
    Input ended while a construct still needed more characters.

    Example:
        name = "unterminated
    """

    kind = ErrorKind.UNEXPECTED_END_OF_INPUT

    def __init__(
        self,
        expected: str,
        location: Optional[SourceLocation] = None,
        source_line: Optional[str] = None,
        hint: Optional[str] = None,
    ):
        self.expected = expected
        super().__init__(
            f"unexpected end of input, expected {expected}",
            location=location,
            hint=hint,
            source_line=source_line,
        )
