"""
Scanner Cursor
==============

The read position of one scan over one input string.

A Cursor is owned by exactly one Scanner, so concurrent scans of
different inputs never share position state. It offers one character of
lookahead: peek() and match_char() never move the position unless the
character actually matches.

Line and column numbers are tracked as characters are consumed so that
tokens and errors can be located in the source.
"""

from typing import Optional

from langkit.errors import SourceLocation


class Cursor:
    """
    Forward-only position over an input string with one-character lookahead.

    Usage:
        cursor = Cursor("a+=1")
        cursor.advance()        # 'a'
        cursor.peek("+")        # True, position unchanged
        cursor.match_char("=")  # False, position unchanged
        cursor.match_char("+")  # True, '+' consumed

    Attributes:
        source: The text being scanned
        filename: Name used in locations (for error reporting)
    """

    def __init__(self, source: str, filename: str = "<input>"):
        self.source = source
        self.filename = filename

        self._pos = 0
        self._line = 1
        self._column = 1
        self._line_start_pos = 0

    @property
    def position(self) -> int:
        """Index of the next character to be consumed."""
        return self._pos

    @property
    def location(self) -> SourceLocation:
        """Location of the next character to be consumed."""
        return SourceLocation(self.filename, self._line, self._column)

    def at_end(self) -> bool:
        """Check if every character has been consumed."""
        return self._pos >= len(self.source)

    def current(self) -> str:
        """
        Return the next character without consuming it.

        Returns empty string if past end of source.
        """
        if self.at_end():
            return ""
        return self.source[self._pos]

    def advance(self) -> Optional[str]:
        """
        Consume and return the next character.

        Returns None once the input is exhausted.
        """
        if self.at_end():
            return None

        char = self.source[self._pos]
        self._pos += 1

        if char == "\n":
            self._line += 1
            self._column = 1
            self._line_start_pos = self._pos
        else:
            self._column += 1

        return char

    def peek(self, expected: str) -> bool:
        """Report whether the next character equals expected, without consuming."""
        return not self.at_end() and self.source[self._pos] == expected

    def match_char(self, expected: str) -> bool:
        """
        Consume the next character only if it equals expected.

        Returns:
            True if matched and consumed, False otherwise. A failed match
            leaves the cursor exactly where it was.
        """
        if self.peek(expected):
            self.advance()
            return True
        return False

    def line_text(self) -> str:
        """Get the text of the line holding the cursor, for error reporting."""
        line_end = self.source.find("\n", self._line_start_pos)
        if line_end == -1:
            line_end = len(self.source)
        return self.source[self._line_start_pos:line_end]
