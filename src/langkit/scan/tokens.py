"""
Token Definitions
=================

Token types and token values produced by the scanner.

A Token is an immutable (type, text) pair. Punctuation and operator
tokens carry no text; IDENTIFIER, STRING and NUMBER tokens carry the
exact source text they were accumulated from. Numbers are not converted
to a numeric type and identifiers are not checked against a keyword
table at this stage.

>>> Token(TokenType.NUMBER, "13")
Token(NUMBER, '13')
>>> Token(TokenType.STAR)
Token(STAR)
"""

from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional

from langkit.errors import SourceLocation


# =============================================================================
# Token Type Enumeration
# =============================================================================

class TokenType(Enum):
    """One member per lexical category the scanner can emit."""

    # === Punctuation ===
    LEFT_PAREN = auto()     # (
    RIGHT_PAREN = auto()    # )
    LEFT_BRACE = auto()     # {
    RIGHT_BRACE = auto()    # }
    LEFT_BRACKET = auto()   # [
    RIGHT_BRACKET = auto()  # ]
    COMMA = auto()          # ,
    DOT = auto()            # .
    COLON = auto()          # :
    SEMICOLON = auto()      # ;

    # === Operators ===
    SLASH = auto()          # /
    SLASH_EQUAL = auto()    # /=
    STAR = auto()           # *
    STAR_EQUAL = auto()     # *=
    MOD = auto()            # %
    PLUS = auto()           # +
    PLUS_PLUS = auto()      # ++
    PLUS_EQUAL = auto()     # +=
    MINUS = auto()          # -
    MINUS_MINUS = auto()    # --
    MINUS_EQUAL = auto()    # -=
    BANG = auto()           # !
    BANG_EQUAL = auto()     # !=
    EQUAL = auto()          # =
    EQUAL_EQUAL = auto()    # ==
    GREATER = auto()        # >
    GREATER_EQUAL = auto()  # >=
    LESS = auto()           # <
    LESS_EQUAL = auto()     # <=
    AND = auto()            # &&

    # === Payload-bearing ===
    IDENTIFIER = auto()
    STRING = auto()
    NUMBER = auto()

    # === Structural ===
    END = auto()            # End of input, always last

    @property
    def has_payload(self) -> bool:
        """Return True if tokens of this type carry source text."""
        return self in PAYLOAD_TYPES

    @property
    def lexeme(self) -> Optional[str]:
        """Fixed source spelling of a payload-free type, None otherwise."""
        return LEXEMES.get(self)


PAYLOAD_TYPES = frozenset({
    TokenType.IDENTIFIER,
    TokenType.STRING,
    TokenType.NUMBER,
})

LEXEMES: dict[TokenType, str] = {
    TokenType.LEFT_PAREN: "(",
    TokenType.RIGHT_PAREN: ")",
    TokenType.LEFT_BRACE: "{",
    TokenType.RIGHT_BRACE: "}",
    TokenType.LEFT_BRACKET: "[",
    TokenType.RIGHT_BRACKET: "]",
    TokenType.COMMA: ",",
    TokenType.DOT: ".",
    TokenType.COLON: ":",
    TokenType.SEMICOLON: ";",
    TokenType.SLASH: "/",
    TokenType.SLASH_EQUAL: "/=",
    TokenType.STAR: "*",
    TokenType.STAR_EQUAL: "*=",
    TokenType.MOD: "%",
    TokenType.PLUS: "+",
    TokenType.PLUS_PLUS: "++",
    TokenType.PLUS_EQUAL: "+=",
    TokenType.MINUS: "-",
    TokenType.MINUS_MINUS: "--",
    TokenType.MINUS_EQUAL: "-=",
    TokenType.BANG: "!",
    TokenType.BANG_EQUAL: "!=",
    TokenType.EQUAL: "=",
    TokenType.EQUAL_EQUAL: "==",
    TokenType.GREATER: ">",
    TokenType.GREATER_EQUAL: ">=",
    TokenType.LESS: "<",
    TokenType.LESS_EQUAL: "<=",
    TokenType.AND: "&&",
}


# =============================================================================
# Token Data Classes
# =============================================================================

@dataclass(frozen=True)
class Token:
    """
    A single classified unit of source text.

    Attributes:
        type: The TokenType classification
        text: The accumulated source text for IDENTIFIER, STRING and
            NUMBER tokens; None for every other type
    """
    type: TokenType
    text: Optional[str] = None

    def __post_init__(self) -> None:
        if self.type.has_payload and self.text is None:
            raise ValueError(f"{self.type.name} token requires text")
        if not self.type.has_payload and self.text is not None:
            raise ValueError(f"{self.type.name} token carries no text")

    def __repr__(self) -> str:
        if self.text is not None:
            return f"Token({self.type.name}, {self.text!r})"
        return f"Token({self.type.name})"

    @property
    def source_text(self) -> str:
        """
        The characters of source this token stands for.

        STRING tokens include their quotes; END stands for nothing.
        """
        if self.type is TokenType.STRING:
            return f'"{self.text}"'
        if self.text is not None:
            return self.text
        return self.type.lexeme or ""


@dataclass(frozen=True)
class LocatedToken:
    """
    A token paired with the location of its first character.

    Position is an explicit augmentation of the token stream; Token
    itself stays position-free so that equal source spellings compare
    equal wherever they appear.
    """
    token: Token
    location: SourceLocation

    @property
    def type(self) -> TokenType:
        return self.token.type

    @property
    def text(self) -> Optional[str]:
        return self.token.text

    def __repr__(self) -> str:
        return f"{self.token!r}@{self.location.line}:{self.location.column}"
