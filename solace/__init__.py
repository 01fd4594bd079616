"""
Solace Compiler Package

Front end of the compiler for the Solace programming language.

Architecture:
    solace/
    ├── lexer/           # Tokenization and lexical analysis
    ├── config.py        # Lexer configuration
    └── cli.py           # Command-line driver

License: MIT
"""

__version__ = "0.0.1"
__license__ = "MIT"

from .config import LexerConfig, lexer_config_context
from .lexer import Lexer, Token, TokenType, TokenSequence, tokenize_file, tokenize_string

__all__ = [
    # Core classes
    "Lexer",
    "Token",
    "TokenType",
    "TokenSequence",
    "LexerConfig",
    "lexer_config_context",
    "tokenize_file",
    "tokenize_string",

    # Version info
    "__version__",
    "__license__",
]
