"""
The ordered token output of one lexing pass.
"""

from typing import Iterator, List, Tuple, overload

from .tokens import Token, TokenType
from .errors import LexerWarning


class TokenSequence:
    """
    Append-only list of tokens plus the non-fatal diagnostics found
    while producing them.

    The lexer is the single writer. Once it calls ``seal()`` the sequence
    is handed to the parser and can no longer grow.
    """

    def __init__(self, source_name: str = "<unknown>"):
        self.source_name = source_name
        self._tokens: List[Token] = []
        self._diagnostics: List[LexerWarning] = []
        self._sealed = False

    def append(self, token: Token) -> None:
        """Add a token at the end of the sequence."""
        if not isinstance(token, Token):
            raise TypeError(f"Expected Token, got {type(token).__name__}")
        self._check_open()
        self._tokens.append(token)

    def report(self, warning: LexerWarning) -> None:
        """Record a non-fatal diagnostic."""
        self._check_open()
        self._diagnostics.append(warning)

    def seal(self) -> "TokenSequence":
        self._sealed = True
        return self

    @property
    def sealed(self) -> bool:
        return self._sealed

    def _check_open(self) -> None:
        if self._sealed:
            raise RuntimeError("Token sequence is sealed and cannot be modified")

    @property
    def tokens(self) -> Tuple[Token, ...]:
        return tuple(self._tokens)

    @property
    def diagnostics(self) -> Tuple[LexerWarning, ...]:
        return tuple(self._diagnostics)

    def has_diagnostics(self) -> bool:
        """Check if the pass reported any non-fatal problems."""
        return len(self._diagnostics) > 0

    def kinds(self) -> List[TokenType]:
        return [token.kind for token in self._tokens]

    def lexemes(self) -> List[str]:
        return [token.lexeme for token in self._tokens]

    def __len__(self) -> int:
        return len(self._tokens)

    def __iter__(self) -> Iterator[Token]:
        return iter(self._tokens)

    @overload
    def __getitem__(self, index: int) -> Token: ...

    @overload
    def __getitem__(self, index: slice) -> List[Token]: ...

    def __getitem__(self, index):
        return self._tokens[index]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TokenSequence):
            return NotImplemented
        return (self.source_name == other.source_name
                and self._tokens == other._tokens
                and self._diagnostics == other._diagnostics)

    def __repr__(self) -> str:
        return (f"TokenSequence({self.source_name!r}, {len(self._tokens)} tokens, "
                f"{len(self._diagnostics)} diagnostics)")
