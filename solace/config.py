"""ContextVar-based lexer configuration for Solace.

Config is set once per compile (or per test) and read by every Lexer
created in that context that is not given an explicit config.

Usage:
    from solace.config import LexerConfig, lexer_config_context

    with lexer_config_context(LexerConfig(emit_end_of_line=True)):
        tokens = tokenize_string(source)
"""

from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass, fields
from typing import Any, Dict, Iterator


@dataclass(frozen=True, slots=True)
class LexerConfig:
    """Immutable lexer configuration.

    Attributes:
        emit_end_of_line: Emit an END_OF_LINE token for every newline outside
            a string literal. The choice holds for the whole pass.
        preview_length: Maximum number of characters of partial content
            shown when a string literal is never closed.
        source_extension: File extension the command-line driver accepts.
    """

    emit_end_of_line: bool = False
    preview_length: int = 15
    source_extension: str = ".solace"

    def __post_init__(self) -> None:
        if self.preview_length < 0:
            raise ValueError("preview_length must be non-negative")

    @classmethod
    def from_dict(cls, config_dict: Dict[str, Any]) -> "LexerConfig":
        """Create LexerConfig from a dictionary; unknown keys are ignored.

        Example:
            >>> LexerConfig.from_dict({"emit_end_of_line": True, "x": 1}).emit_end_of_line
            True
        """
        valid_fields = {f.name for f in fields(cls)}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        return cls(**filtered)


_DEFAULT_CONFIG: LexerConfig = LexerConfig()

_lexer_config: ContextVar[LexerConfig] = ContextVar(
    "lexer_config",
    default=_DEFAULT_CONFIG,
)


def get_lexer_config() -> LexerConfig:
    """Get the lexer configuration active in the current context."""
    return _lexer_config.get()


def set_lexer_config(config: LexerConfig) -> None:
    """Set the lexer configuration for the current context."""
    _lexer_config.set(config)


def reset_lexer_config() -> None:
    """Reset the current context to the default configuration."""
    _lexer_config.set(_DEFAULT_CONFIG)


@contextmanager
def lexer_config_context(config: LexerConfig) -> Iterator[None]:
    """Use ``config`` inside the block, restoring the previous one afterwards."""
    previous = _lexer_config.get()
    _lexer_config.set(config)
    try:
        yield
    finally:
        _lexer_config.set(previous)


__all__ = [
    "LexerConfig",
    "get_lexer_config",
    "set_lexer_config",
    "reset_lexer_config",
    "lexer_config_context",
]
