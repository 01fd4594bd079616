"""
Error handling for the Solace lexer.

Two kinds of problems are reported:

- Fatal errors (``LexerError`` subclasses) abort the whole pass. They are
  raised for sources that cannot be read and for string literals that
  never close, since an unbalanced quote poisons everything after it.
- Non-fatal diagnostics (``LexerWarning``) are attached to the token
  sequence so one pass can surface every malformed number and stray
  character in the file.

Every diagnostic carries the source name and line number.
"""

from typing import Optional
from dataclasses import dataclass

from .tokens import SourceLocation


@dataclass
class Diagnostic:
    """Base class for lexer diagnostics (errors, warnings)."""
    message: str
    location: SourceLocation
    severity: str  # "error" or "warning"
    code: Optional[str] = None
    help_text: Optional[str] = None
    preview: Optional[str] = None

    def __str__(self) -> str:
        severity_prefix = self.severity.upper()
        if self.code:
            severity_prefix += f"[{self.code}]"
        result = f"{severity_prefix}: {self.message}\n"
        result += f"  --> {self.location}\n"

        if self.preview is not None:
            result += f"  near: {self.preview!r}\n"

        if self.help_text:
            result += f"  help: {self.help_text}\n"

        return result


class LexerError(Exception):
    """
    Exception raised when the lexer encounters a fatal error.

    Contains detailed diagnostic information for error reporting. The
    surrounding driver decides how to terminate the process.
    """

    def __init__(
        self,
        message: str,
        location: SourceLocation,
        code: Optional[str] = None,
        help_text: Optional[str] = None,
        preview: Optional[str] = None
    ):
        super().__init__(message)
        self.diagnostic = Diagnostic(
            message=message,
            location=location,
            severity="error",
            code=code,
            help_text=help_text,
            preview=preview
        )

    @property
    def location(self) -> SourceLocation:
        return self.diagnostic.location

    @property
    def code(self) -> Optional[str]:
        return self.diagnostic.code

    def __str__(self) -> str:
        return str(self.diagnostic)


class SourceUnavailableError(LexerError):
    """The named source unit could not be opened or decoded."""


class UnterminatedLiteralError(LexerError):
    """A string literal reached end of input without its closing quote."""

    @property
    def preview(self) -> Optional[str]:
        return self.diagnostic.preview


class LexerWarning:
    """
    Represents a lexer diagnostic that doesn't stop the pass.
    """

    def __init__(
        self,
        message: str,
        location: SourceLocation,
        code: Optional[str] = None,
        help_text: Optional[str] = None,
        lexeme: Optional[str] = None
    ):
        self.diagnostic = Diagnostic(
            message=message,
            location=location,
            severity="warning",
            code=code,
            help_text=help_text
        )
        self.lexeme = lexeme

    @property
    def message(self) -> str:
        return self.diagnostic.message

    @property
    def location(self) -> SourceLocation:
        return self.diagnostic.location

    @property
    def code(self) -> Optional[str]:
        return self.diagnostic.code

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, LexerWarning):
            return NotImplemented
        return self.diagnostic == other.diagnostic and self.lexeme == other.lexeme

    def __repr__(self) -> str:
        return f"LexerWarning({self.code}, {self.message!r}, {self.location!r})"

    def __str__(self) -> str:
        return str(self.diagnostic)


# Error codes for categorization
ERROR_CODES = {
    "L001": "Source unavailable",
    "L002": "Unterminated string literal",
    "L003": "Malformed numeric literal",
    "L004": "Unrecognized character",
}


def describe_char(char: str) -> str:
    """Printable rendering of a single character for messages."""
    if char.isprintable() and not char.isspace():
        return f"'{char}'"
    return f"U+{ord(char):04X}"


# Helper functions for creating common errors
def create_source_unavailable_error(filename: str, reason: str) -> SourceUnavailableError:
    """Create an error for a source file that cannot be read."""
    return SourceUnavailableError(
        message=f"Cannot read source file '{filename}'",
        location=SourceLocation(filename, 1, 1),
        code="L001",
        help_text=reason
    )


def create_unterminated_string_error(
    partial: str,
    location: SourceLocation,
    preview_length: int = 15
) -> UnterminatedLiteralError:
    """Create an error for an unterminated string literal."""
    return UnterminatedLiteralError(
        message="Unterminated string literal",
        location=location,
        code="L002",
        help_text='String literals must be closed with a matching " quote.',
        preview=partial[:preview_length]
    )


def create_malformed_number_warning(lexeme: str, location: SourceLocation, reason: str) -> LexerWarning:
    """Create a diagnostic for a structurally invalid numeric literal."""
    return LexerWarning(
        message=f"Malformed numeric literal: '{lexeme}'",
        location=location,
        code="L003",
        help_text=reason,
        lexeme=lexeme
    )


def create_unrecognized_character_warning(char: str, location: SourceLocation) -> LexerWarning:
    """Create a diagnostic for a character no scanning rule accepts."""
    return LexerWarning(
        message=f"Unrecognized character: {describe_char(char)}",
        location=location,
        code="L004",
        help_text="The character was skipped.",
        lexeme=char
    )
