"""
Lexical Scanner
===============

This module converts source text of the language into an ordered
sequence of tokens for a parser.

Scanning is a single forward pass. Each character is classified once,
then dispatched:

| Class          | Characters                  | Result                        |
|----------------|-----------------------------|-------------------------------|
| DIGIT_START    | 0-9, or '.' before a digit  | NUMBER (digits and '.')       |
| ALPHA_START    | a-z A-Z                     | IDENTIFIER (letters, digits, _) |
| STRING_START   | "                           | STRING (raw text to next ")   |
| SINGLE_PUNCT   | ( ) { } [ ] , . : ; %       | fixed one-character token     |
| COMPOUND_START | = ! * - / + & < >           | one- or two-character operator |
| WHITESPACE     | space, tab, CR, LF          | skipped                       |
| INVALID        | anything else               | UnrecognizedCharacterError    |

Compound Operators
------------------
Operators are recognized by maximal munch: the second character is
always tried before falling back to the one-character form.

| Starter | Two-character forms | Fallback |
|---------|---------------------|----------|
| =       | ==                  | =        |
| !       | !=                  | !        |
| *       | *=                  | *        |
| /       | /=                  | /        |
| +       | ++ +=               | +        |
| -       | -- -=               | -        |
| <       | <=                  | <        |
| >       | >=                  | >        |
| &       | &&                  | (error)  |

Example Usage
-------------
>>> from langkit.scan import scan
>>> scan("13*5;")
[Token(NUMBER, '13'), Token(STAR), Token(NUMBER, '5'), Token(SEMICOLON), Token(END)]
"""

import logging
import string
from enum import Enum, auto
from pathlib import Path
from typing import Iterator, Optional, Union

from langkit.errors import SourceLocation
from langkit.scan.cursor import Cursor
from langkit.scan.errors import (
    InputUnavailableError,
    UnexpectedEndOfInputError,
    UnrecognizedCharacterError,
)
from langkit.scan.tokens import LocatedToken, Token, TokenType


logger = logging.getLogger(__name__)

# Default extension for source files of the language
SOURCE_EXTENSION = ".lang"


# =============================================================================
# Character Classes
# =============================================================================

DIGITS = string.digits
LETTERS = string.ascii_letters
NUMBER_CHARS = DIGITS + "."
IDENT_CHARS = LETTERS + DIGITS + "_"
WHITESPACE = " \t\r\n"
STRING_QUOTE = '"'

SINGLE_TOKENS: dict[str, TokenType] = {
    "(": TokenType.LEFT_PAREN,
    ")": TokenType.RIGHT_PAREN,
    "{": TokenType.LEFT_BRACE,
    "}": TokenType.RIGHT_BRACE,
    "[": TokenType.LEFT_BRACKET,
    "]": TokenType.RIGHT_BRACKET,
    ",": TokenType.COMMA,
    ".": TokenType.DOT,
    ":": TokenType.COLON,
    ";": TokenType.SEMICOLON,
    "%": TokenType.MOD,
}

# Starter -> (ordered (follow-up, type) pairs, fallback type or None)
COMPOUND_TOKENS: dict[str, tuple[tuple[tuple[str, TokenType], ...], Optional[TokenType]]] = {
    "=": ((("=", TokenType.EQUAL_EQUAL),), TokenType.EQUAL),
    "!": ((("=", TokenType.BANG_EQUAL),), TokenType.BANG),
    "*": ((("=", TokenType.STAR_EQUAL),), TokenType.STAR),
    "/": ((("=", TokenType.SLASH_EQUAL),), TokenType.SLASH),
    "+": ((("+", TokenType.PLUS_PLUS), ("=", TokenType.PLUS_EQUAL)), TokenType.PLUS),
    "-": ((("-", TokenType.MINUS_MINUS), ("=", TokenType.MINUS_EQUAL)), TokenType.MINUS),
    "<": ((("=", TokenType.LESS_EQUAL),), TokenType.LESS),
    ">": ((("=", TokenType.GREATER_EQUAL),), TokenType.GREATER),
    "&": ((("&", TokenType.AND),), None),
}


class CharClass(Enum):
    """What a character starts, decided once per character."""

    DIGIT_START = auto()
    ALPHA_START = auto()
    STRING_START = auto()
    SINGLE_PUNCT = auto()
    COMPOUND_START = auto()
    WHITESPACE = auto()
    INVALID = auto()


def _in(char: str, charset: str) -> bool:
    """Membership test that never matches the empty end-of-input marker."""
    return bool(char) and char in charset


def classify(char: str, lookahead: str = "") -> CharClass:
    """
    Classify the character that starts the next token.

    Whitespace is wider than just space and newline: tab and carriage
    return are skipped too, so tab-indented and CRLF files scan the same
    as their space and LF equivalents.

    Args:
        char: The character just consumed
        lookahead: The character after it, or "" at end of input. Only
            consulted for '.', which starts a number when a digit follows.
    """
    if _in(char, DIGITS):
        return CharClass.DIGIT_START
    if char == "." and _in(lookahead, DIGITS):
        return CharClass.DIGIT_START
    if _in(char, LETTERS):
        return CharClass.ALPHA_START
    if char == STRING_QUOTE:
        return CharClass.STRING_START
    if char in SINGLE_TOKENS:
        return CharClass.SINGLE_PUNCT
    if char in COMPOUND_TOKENS:
        return CharClass.COMPOUND_START
    if _in(char, WHITESPACE):
        return CharClass.WHITESPACE
    return CharClass.INVALID


# =============================================================================
# Accumulators
# =============================================================================

def _accumulate(cursor: Cursor, init: str, charset: str) -> str:
    """Extend init with the run of following characters drawn from charset."""
    chars = [init]
    while _in(cursor.current(), charset):
        chars.append(cursor.advance())
    return "".join(chars)


def accumulate_number(cursor: Cursor, init: str) -> Token:
    """
    Scan the rest of a numeric literal.

    The text is the maximal run of digits and '.' starting at init. The
    first character that does not belong is left unconsumed.
    """
    return Token(TokenType.NUMBER, _accumulate(cursor, init, NUMBER_CHARS))


def accumulate_identifier(cursor: Cursor, init: str) -> Token:
    """
    Scan the rest of an identifier.

    Identifiers start with a letter and continue with letters, digits
    and underscores. No keyword lookup happens here.
    """
    return Token(TokenType.IDENTIFIER, _accumulate(cursor, init, IDENT_CHARS))


# =============================================================================
# Compound Operator Resolution
# =============================================================================

def resolve_compound(
    cursor: Cursor,
    starter: str,
    start: Optional[SourceLocation] = None,
) -> TokenType:
    """
    Resolve an operator whose first character has already been consumed.

    Each two-character form is tried in table order before the
    one-character fallback. A failed attempt consumes nothing.

    Args:
        cursor: Cursor positioned just after the starter
        starter: The consumed starter character (a COMPOUND_TOKENS key)
        start: Location of the starter, for error reporting

    Raises:
        UnrecognizedCharacterError: If the starter has no one-character
            form and no follow-up matched (a bare '&')
    """
    follow_ups, fallback = COMPOUND_TOKENS[starter]

    for follow_up, token_type in follow_ups:
        if cursor.match_char(follow_up):
            return token_type

    if fallback is None:
        forms = " or ".join(f"'{t.lexeme}'" for _, t in follow_ups)
        raise UnrecognizedCharacterError(
            starter,
            start,
            cursor.line_text(),
            hint=f"'{starter}' is only valid as part of {forms}",
        )

    return fallback


# =============================================================================
# Scanner Implementation
# =============================================================================

class Scanner:
    """
    Tokenizes one source string.

    A Scanner owns its Cursor and is meant to be used once, for the
    duration of a single scan. Use scan() or scan_located() rather than
    constructing one directly unless tokens are wanted lazily.

    Usage:
        scanner = Scanner(source_text, filename)
        for located in scanner.tokenize():
            print(located)
    """

    def __init__(self, source: str, filename: str = "<input>"):
        self._cursor = Cursor(source, filename)

    def tokenize(self) -> Iterator[LocatedToken]:
        """
        Generate located tokens from the source.

        Yields:
            LocatedToken for each token, ending with exactly one END

        Raises:
            UnrecognizedCharacterError: On a character that starts no token
            UnexpectedEndOfInputError: On an unterminated string literal
        """
        cursor = self._cursor

        while True:
            start = cursor.location
            char = cursor.advance()

            if char is None:
                yield LocatedToken(Token(TokenType.END), start)
                return

            char_class = classify(char, cursor.current())
            if char_class is CharClass.WHITESPACE:
                continue

            yield LocatedToken(self._dispatch(char_class, char, start), start)

    def _dispatch(self, char_class: CharClass, char: str, start: SourceLocation) -> Token:
        """Build the token that begins with char."""
        cursor = self._cursor

        if char_class is CharClass.DIGIT_START:
            return accumulate_number(cursor, char)

        if char_class is CharClass.ALPHA_START:
            return accumulate_identifier(cursor, char)

        if char_class is CharClass.STRING_START:
            return self._scan_string(start)

        if char_class is CharClass.SINGLE_PUNCT:
            return Token(SINGLE_TOKENS[char])

        if char_class is CharClass.COMPOUND_START:
            return Token(resolve_compound(cursor, char, start))

        hint = None
        if char == "_":
            hint = "identifiers must start with a letter"
        raise UnrecognizedCharacterError(char, start, cursor.line_text(), hint=hint)

    def _scan_string(self, start: SourceLocation) -> Token:
        """
        Scan a double-quoted string literal after its opening quote.

        The payload is the raw text up to the closing quote. Escape
        sequences are not processed and newlines are allowed.
        """
        cursor = self._cursor
        start_line = cursor.line_text()

        chars = []
        while not cursor.at_end():
            char = cursor.advance()
            if char == STRING_QUOTE:
                return Token(TokenType.STRING, "".join(chars))
            chars.append(char)

        raise UnexpectedEndOfInputError(
            "closing '\"'",
            start,
            start_line,
            hint="add closing '\"' to complete the string",
        )


# =============================================================================
# Public Entry Points
# =============================================================================

def scan_located(source: str, filename: str = "<input>") -> list[LocatedToken]:
    """
    Scan source text into tokens paired with their locations.

    Args:
        source: The text to tokenize
        filename: Name used in locations and error messages

    Returns:
        Every token in source order, the last being the only END

    Raises:
        UnrecognizedCharacterError: On a character that starts no token
        UnexpectedEndOfInputError: On an unterminated string literal
    """
    logger.debug(f"Scanning {filename} ({len(source)} characters)")
    try:
        tokens = list(Scanner(source, filename).tokenize())
    except UnrecognizedCharacterError as e:
        logger.debug(f"Scan of {filename} failed at {e.location}: {e.char!r}")
        raise
    except UnexpectedEndOfInputError as e:
        logger.debug(f"Scan of {filename} failed at {e.location}: expected {e.expected}")
        raise
    logger.debug(f"Scanned {filename}: {len(tokens)} tokens")
    return tokens


def scan(source: str) -> list[Token]:
    """
    Scan source text into a token sequence.

    This is the sole entry point on in-memory text. It either returns the
    complete sequence, ending with exactly one END token, or raises; no
    partial sequence is ever returned.

    >>> scan("24-12;")
    [Token(NUMBER, '24'), Token(MINUS), Token(NUMBER, '12'), Token(SEMICOLON), Token(END)]
    """
    return [located.token for located in scan_located(source)]


def decode_source(data: bytes, name: str) -> str:
    """
    Decode raw source bytes as UTF-8 text.

    Args:
        data: The bytes read from a file or stream
        name: Name of the input, for the error message

    Raises:
        InputUnavailableError: If the bytes are not valid UTF-8
    """
    try:
        return data.decode("utf-8")
    except UnicodeDecodeError as e:
        raise InputUnavailableError(name, "not valid UTF-8 text") from e


def read_source(path: Union[str, Path]) -> str:
    """
    Read a source file as text.

    Raises:
        InputUnavailableError: If the file cannot be read or decoded
    """
    path = Path(path)
    try:
        data = path.read_bytes()
    except FileNotFoundError as e:
        raise InputUnavailableError(str(path), "file not found") from e
    except OSError as e:
        raise InputUnavailableError(str(path), e.strerror or str(e)) from e
    return decode_source(data, str(path))


def scan_file(path: Union[str, Path], located: bool = False) -> Union[list[Token], list[LocatedToken]]:
    """
    Read a source file and scan its contents.

    Args:
        path: The file to scan
        located: Return LocatedToken values instead of bare tokens

    Raises:
        InputUnavailableError: If the file cannot be read
        UnrecognizedCharacterError: On a character that starts no token
        UnexpectedEndOfInputError: On an unterminated string literal
    """
    source = read_source(path)
    tokens = scan_located(source, str(path))
    if located:
        return tokens
    return [t.token for t in tokens]
