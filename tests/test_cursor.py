"""
Scanner Cursor Tests
====================

Tests for the one-character-lookahead cursor: consuming, peeking,
conditional matching and line/column bookkeeping.
"""

from langkit.scan import Cursor


class TestAdvance:
    """Tests for consuming characters."""

    def test_advance_returns_characters_in_order(self):
        cursor = Cursor("ab")
        assert cursor.advance() == "a"
        assert cursor.advance() == "b"

    def test_advance_signals_exhaustion(self):
        """advance() returns None once nothing remains, repeatedly."""
        cursor = Cursor("a")
        cursor.advance()
        assert cursor.advance() is None
        assert cursor.advance() is None
        assert cursor.at_end()

    def test_empty_source(self):
        cursor = Cursor("")
        assert cursor.at_end()
        assert cursor.current() == ""
        assert cursor.advance() is None


class TestPeek:
    """Tests for lookahead without consumption."""

    def test_peek_does_not_advance(self):
        cursor = Cursor("+=")
        cursor.advance()
        assert cursor.peek("=") is True
        assert cursor.peek("=") is True
        assert cursor.position == 1

    def test_peek_mismatch_does_not_advance(self):
        cursor = Cursor("+1")
        cursor.advance()
        assert cursor.peek("=") is False
        assert cursor.peek("=") is False
        assert cursor.current() == "1"

    def test_peek_at_end(self):
        cursor = Cursor("")
        assert cursor.peek("x") is False

    def test_peek_empty_string_never_matches(self):
        cursor = Cursor("a")
        assert cursor.peek("") is False


class TestMatchChar:
    """Tests for conditional consumption."""

    def test_match_consumes(self):
        cursor = Cursor("==")
        cursor.advance()
        assert cursor.match_char("=") is True
        assert cursor.at_end()

    def test_failed_match_leaves_cursor_in_place(self):
        """A failed match never drops a character."""
        cursor = Cursor("=;")
        cursor.advance()
        before = cursor.position
        assert cursor.match_char("=") is False
        assert cursor.position == before
        assert cursor.advance() == ";"

    def test_match_at_end(self):
        cursor = Cursor("=")
        cursor.advance()
        assert cursor.match_char("=") is False
        assert cursor.at_end()


class TestLocation:
    """Tests for line and column tracking."""

    def test_initial_location(self):
        location = Cursor("x", "demo.lang").location
        assert (location.filename, location.line, location.column) == ("demo.lang", 1, 1)

    def test_column_advances(self):
        cursor = Cursor("abc")
        cursor.advance()
        cursor.advance()
        assert cursor.location.column == 3

    def test_newline_resets_column(self):
        cursor = Cursor("a\nb")
        cursor.advance()
        cursor.advance()
        assert (cursor.location.line, cursor.location.column) == (2, 1)

    def test_line_text(self):
        cursor = Cursor("first\nsecond\nthird")
        for _ in range(8):
            cursor.advance()
        assert cursor.line_text() == "second"
