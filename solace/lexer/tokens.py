"""
Token definitions for the Solace lexer.

This module defines every token type the lexer can produce:
- Literals (strings, integers, floats)
- Identifiers (reserved words are left to later stages)
- Single-character punctuation and operators
- Line markers and the error tag used for malformed input
"""

from enum import Enum, auto
from dataclasses import dataclass
from typing import Dict


class TokenType(Enum):
    """
    Enumeration of all token types in Solace.

    Organized by category for clarity and maintainability.
    """

    # ========================================================================
    # Literals
    # ========================================================================
    STRING_LITERAL = auto()         # "hello"
    INT_LITERAL = auto()            # 42
    FLOAT_LITERAL = auto()          # 3.14

    # ========================================================================
    # Identifiers
    # ========================================================================
    IDENTIFIER = auto()             # variable_name, _tmp1

    # ========================================================================
    # Punctuation and Delimiters
    # ========================================================================
    LEFT_PAREN = auto()             # (
    RIGHT_PAREN = auto()            # )
    LEFT_BRACKET = auto()           # [
    RIGHT_BRACKET = auto()          # ]
    LEFT_BRACE = auto()             # {
    RIGHT_BRACE = auto()            # }
    TILDE = auto()                  # ~
    PIPE = auto()                   # |

    COMMA = auto()                  # ,
    SEMICOLON = auto()              # ;
    COLON = auto()                  # :
    DOT = auto()                    # .

    # ========================================================================
    # Operators
    # ========================================================================
    PLUS = auto()                   # +
    MINUS = auto()                  # -
    STAR = auto()                   # *
    SLASH = auto()                  # /
    PERCENT = auto()                # %
    EQUALS = auto()                 # =
    LESS = auto()                   # <
    GREATER = auto()                # >
    BANG = auto()                   # !
    AMPERSAND = auto()              # &
    CARET = auto()                  # ^
    QUESTION = auto()               # ?
    AT = auto()                     # @
    HASH = auto()                   # #

    # ========================================================================
    # Special Tokens
    # ========================================================================
    END_OF_LINE = auto()            # Newline, only when the config asks for it
    INVALID = auto()                # Malformed literal (e.g. 1.2.3)


@dataclass(frozen=True)
class SourceLocation:
    """
    Represents a location in the source code.

    Used for error reporting and diagnostics.
    """
    filename: str
    line: int
    column: int = 1

    def __str__(self) -> str:
        return f"{self.filename}:{self.line}:{self.column}"

    def __repr__(self) -> str:
        return f"SourceLocation({self.filename!r}, {self.line}, {self.column})"


@dataclass(frozen=True)
class Token:
    """
    Represents a lexical token in the Solace language.

    The lexeme is the exact captured text; for string literals the
    surrounding quotes are not part of it. ``line`` and ``column`` point
    at the first character of the token (the opening quote for strings).
    """
    kind: TokenType
    lexeme: str
    line: int
    source_name: str
    column: int = 1

    def __str__(self) -> str:
        return f"{self.kind.name}({self.lexeme!r})"

    def __repr__(self) -> str:
        return (f"Token({self.kind.name}, {self.lexeme!r}, "
                f"{self.source_name!r}, L{self.line}:{self.column})")

    @property
    def location(self) -> SourceLocation:
        """Source location where this token starts."""
        return SourceLocation(self.source_name, self.line, self.column)

    @property
    def is_literal(self) -> bool:
        """Check if this token is a literal value."""
        return self.kind in LITERAL_TYPES

    @property
    def is_punctuation(self) -> bool:
        """Check if this token is a punctuation or operator symbol."""
        return self.kind in PUNCTUATION_TYPES

    @property
    def is_identifier(self) -> bool:
        """Check if this token is an identifier."""
        return self.kind == TokenType.IDENTIFIER

    @property
    def is_error(self) -> bool:
        """Check if this token marks malformed input."""
        return self.kind == TokenType.INVALID


LITERAL_TYPES = frozenset({
    TokenType.STRING_LITERAL,
    TokenType.INT_LITERAL,
    TokenType.FLOAT_LITERAL,
})

# Single-character punctuation lookup used by the punctuation classifier
PUNCTUATION: Dict[str, TokenType] = {
    # Grouping
    "(": TokenType.LEFT_PAREN,
    ")": TokenType.RIGHT_PAREN,
    "[": TokenType.LEFT_BRACKET,
    "]": TokenType.RIGHT_BRACKET,
    "{": TokenType.LEFT_BRACE,
    "}": TokenType.RIGHT_BRACE,
    "~": TokenType.TILDE,
    "|": TokenType.PIPE,

    # Delimiters
    ",": TokenType.COMMA,
    ";": TokenType.SEMICOLON,
    ":": TokenType.COLON,
    ".": TokenType.DOT,

    # Operators
    "+": TokenType.PLUS,
    "-": TokenType.MINUS,
    "*": TokenType.STAR,
    "/": TokenType.SLASH,
    "%": TokenType.PERCENT,
    "=": TokenType.EQUALS,
    "<": TokenType.LESS,
    ">": TokenType.GREATER,
    "!": TokenType.BANG,
    "&": TokenType.AMPERSAND,
    "^": TokenType.CARET,
    "?": TokenType.QUESTION,
    "@": TokenType.AT,
    "#": TokenType.HASH,
}

PUNCTUATION_TYPES = frozenset(PUNCTUATION.values())
