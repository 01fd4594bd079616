"""
Solace Lexer - turns source text into a TokenSequence

A single forward pass over the source. The main loop takes one character
from the cursor, classifies it and hands it to the matching scanner:

    newline      -> line bookkeeping (optionally an END_OF_LINE token)
    whitespace   -> skipped
    '"'          -> string scanner
    0-9          -> number scanner
    A-Z a-z _    -> word scanner
    anything else -> punctuation classifier

Unterminated strings abort the pass. Malformed numbers and unknown
characters are recorded on the sequence and scanning carries on.
"""

import io
import string
from enum import Enum, auto
from pathlib import Path
from typing import Callable, Dict, List, Optional, Union

from ..config import LexerConfig, get_lexer_config
from ..utils.logger import get_logger
from .cursor import Cursor
from .sequence import TokenSequence
from .tokens import Token, TokenType, SourceLocation, PUNCTUATION
from .errors import (
    LexerWarning, create_unterminated_string_error, create_malformed_number_warning,
    create_unrecognized_character_warning, create_source_unavailable_error
)

logger = get_logger(__name__)

DIGITS = frozenset(string.digits)
WHITESPACE = frozenset(" \t\r\f\v")
WORD_START = frozenset(string.ascii_letters + "_")
WORD_CHARS = WORD_START | DIGITS


class CharClass(Enum):
    """Category of the character that starts the next lexical unit."""
    NEWLINE = auto()
    WHITESPACE = auto()
    QUOTE = auto()
    DIGIT = auto()
    WORD_START = auto()
    OTHER = auto()


def classify_char(char: str) -> CharClass:
    """Map a character to the scanner category that handles it."""
    if char == "\n":
        return CharClass.NEWLINE
    if char in WHITESPACE:
        return CharClass.WHITESPACE
    if char == '"':
        return CharClass.QUOTE
    if char in DIGITS:
        return CharClass.DIGIT
    if char in WORD_START:
        return CharClass.WORD_START
    return CharClass.OTHER


class Lexer:
    """
    Solace lexical analyzer.

    Holds the per-pass scanning state (cursor, output sequence, active
    config) so every scanner sees the same source name and line counter.
    ``tokenize()`` can be called any number of times; each call starts
    from the beginning of the source.
    """

    def __init__(self, source: str, filename: str = "<unknown>",
                 config: Optional[LexerConfig] = None):
        """
        Initialize the lexer with source code.

        Args:
            source: Source code text
            filename: Name of source unit for error reporting
            config: Explicit configuration; defaults to the context config
        """
        self.source = source
        self.filename = filename
        self.config = config

        self._cursor: Optional[Cursor] = None
        self._tokens: Optional[TokenSequence] = None
        self._active_config: LexerConfig = config or get_lexer_config()

        self._handlers: Dict[CharClass, Callable[[str, int, int], None]] = {
            CharClass.NEWLINE: self._handle_newline,
            CharClass.WHITESPACE: self._skip_whitespace,
            CharClass.QUOTE: self._scan_string,
            CharClass.DIGIT: self._scan_number,
            CharClass.WORD_START: self._scan_word,
            CharClass.OTHER: self._classify_punctuation,
        }

    def tokenize(self) -> TokenSequence:
        """
        Tokenize the entire source.

        Returns:
            Sealed TokenSequence with any non-fatal diagnostics attached

        Raises:
            UnterminatedLiteralError: If a string literal never closes
        """
        self._active_config = self.config or get_lexer_config()
        cursor = Cursor(io.StringIO(self.source))
        tokens = TokenSequence(self.filename)
        self._cursor = cursor
        self._tokens = tokens

        logger.debug("Lexing %s (%d characters)", self.filename, len(self.source))
        try:
            while True:
                line, column = cursor.line, cursor.column
                char = cursor.advance()
                if char is None:
                    break
                self._handlers[classify_char(char)](char, line, column)
        finally:
            self._cursor = None
            self._tokens = None

        logger.debug("Lexed %s: %d tokens, %d diagnostics",
                     self.filename, len(tokens), len(tokens.diagnostics))
        return tokens.seal()

    # ------------------------------------------------------------------
    # Main loop handlers
    # ------------------------------------------------------------------

    def _handle_newline(self, char: str, line: int, column: int) -> None:
        # The cursor already moved the line counter past this newline
        if self._active_config.emit_end_of_line:
            self._emit(TokenType.END_OF_LINE, char, line, column)

    def _skip_whitespace(self, char: str, line: int, column: int) -> None:
        pass

    def _scan_string(self, char: str, line: int, column: int) -> None:
        """Scan a string literal; the opening quote is already consumed."""
        buffer: List[str] = []

        while True:
            next_char = self._cursor.advance()
            if next_char is None:
                raise create_unterminated_string_error(
                    "".join(buffer),
                    SourceLocation(self.filename, line, column),
                    self._active_config.preview_length
                )
            if next_char == '"':
                break
            buffer.append(next_char)

        self._emit(TokenType.STRING_LITERAL, "".join(buffer), line, column)

    def _scan_number(self, first_digit: str, line: int, column: int) -> None:
        """
        Scan an integer or float literal.

        Takes the longest run of digits and dots. The character that ends
        the run goes back to the cursor for the main loop.
        """
        buffer = [first_digit]
        dots = 0

        while True:
            next_char = self._cursor.advance()
            if next_char is None:
                break
            if next_char in DIGITS:
                buffer.append(next_char)
            elif next_char == ".":
                dots += 1
                buffer.append(next_char)
            else:
                self._cursor.pushback(next_char)
                break

        lexeme = "".join(buffer)

        if dots == 0:
            self._emit(TokenType.INT_LITERAL, lexeme, line, column)
        elif dots == 1 and lexeme[-1] in DIGITS:
            self._emit(TokenType.FLOAT_LITERAL, lexeme, line, column)
        else:
            if dots > 1:
                reason = "A numeric literal may contain at most one decimal point."
            else:
                reason = "A decimal point must be followed by at least one digit."
            self._emit(TokenType.INVALID, lexeme, line, column)
            self._report(create_malformed_number_warning(
                lexeme, SourceLocation(self.filename, line, column), reason
            ))

    def _scan_word(self, first_char: str, line: int, column: int) -> None:
        """Scan an identifier made of letters, digits and underscores."""
        buffer = [first_char]

        while self._cursor.peek() in WORD_CHARS:
            buffer.append(self._cursor.advance())

        self._emit(TokenType.IDENTIFIER, "".join(buffer), line, column)

    def _classify_punctuation(self, char: str, line: int, column: int) -> None:
        """Emit a single-character punctuation token, or report the character."""
        kind = PUNCTUATION.get(char)
        if kind is None:
            self._report(create_unrecognized_character_warning(
                char, SourceLocation(self.filename, line, column)
            ))
            return
        self._emit(kind, char, line, column)

    # ------------------------------------------------------------------
    # Output
    # ------------------------------------------------------------------

    def _emit(self, kind: TokenType, lexeme: str, line: int, column: int) -> None:
        self._tokens.append(Token(kind, lexeme, line, self.filename, column))

    def _report(self, warning: LexerWarning) -> None:
        logger.debug("%s: %s", warning.location, warning.message)
        self._tokens.report(warning)


def tokenize_string(source: str, filename: str = "<string>",
                    config: Optional[LexerConfig] = None) -> TokenSequence:
    """
    Convenience function to tokenize a source string.

    Raises:
        UnterminatedLiteralError: If a string literal never closes
    """
    return Lexer(source, filename, config).tokenize()


def read_source(filepath: Union[str, Path]) -> str:
    """
    Read a source unit as UTF-8 text, dropping a leading byte-order mark.

    Raises:
        SourceUnavailableError: If the file cannot be opened or decoded
    """
    try:
        return Path(filepath).read_text(encoding="utf-8-sig")
    except (OSError, UnicodeDecodeError) as e:
        raise create_source_unavailable_error(str(filepath), str(e)) from e


def tokenize_file(filepath: Union[str, Path],
                  config: Optional[LexerConfig] = None) -> TokenSequence:
    """
    Convenience function to tokenize a source file.

    Raises:
        SourceUnavailableError: If the file cannot be read
        UnterminatedLiteralError: If a string literal never closes
    """
    source = read_source(filepath)
    return tokenize_string(source, str(filepath), config)


lex_source_file = tokenize_file
