"""
Solace Lexer Package

Implements the lexical analyzer (tokenizer) for the Solace language.

Key Features:
- Single forward pass with one character of pushback
- String, integer, float and identifier literals
- Single-character punctuation and operators
- Fatal errors for unreadable sources and unterminated strings
- Non-fatal diagnostics for malformed numbers and stray characters
- Line and column tracking for every token
"""

from .tokens import Token, TokenType, SourceLocation, PUNCTUATION
from .cursor import Cursor
from .sequence import TokenSequence
from .lexer import (
    Lexer, CharClass, classify_char, tokenize_string, tokenize_file,
    lex_source_file, read_source
)
from .errors import (
    Diagnostic, LexerError, LexerWarning, SourceUnavailableError,
    UnterminatedLiteralError, ERROR_CODES
)

__all__ = [
    "Lexer",
    "CharClass",
    "classify_char",
    "tokenize_string",
    "tokenize_file",
    "lex_source_file",
    "read_source",
    "Cursor",
    "Token",
    "TokenType",
    "TokenSequence",
    "SourceLocation",
    "PUNCTUATION",
    "Diagnostic",
    "LexerError",
    "LexerWarning",
    "SourceUnavailableError",
    "UnterminatedLiteralError",
    "ERROR_CODES",
]
