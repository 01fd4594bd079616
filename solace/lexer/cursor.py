"""
Forward-only cursor over a source stream.

The cursor owns the scanning position: it hands out one character at a
time, keeps the line and column counters current, and can take back a
single character so a scanner that read one character too far can return
it to the main loop.
"""

from typing import Optional, TextIO


class Cursor:
    """
    One-character-at-a-time reader with a single pushback slot.

    ``line`` and ``column`` always describe the position of the next
    character ``advance()`` will return.
    """

    def __init__(self, stream: TextIO):
        self._stream = stream
        self._pushback: Optional[str] = None
        self.line = 1
        self.column = 1
        # Position before the most recent advance(), restored by pushback()
        self._previous = (1, 1)
        # Character returned by the most recent advance(), if it can still be pushed back
        self._last: Optional[str] = None

    def advance(self) -> Optional[str]:
        """Consume and return the next character, or None at end of input."""
        if self._pushback is not None:
            char = self._pushback
            self._pushback = None
        else:
            char = self._stream.read(1)
            if not char:
                return None

        self._previous = (self.line, self.column)
        self._last = char
        if char == "\n":
            self.line += 1
            self.column = 1
        else:
            self.column += 1
        return char

    def peek(self) -> Optional[str]:
        """Return the next character without consuming it."""
        char = self.advance()
        self.pushback(char)
        return char

    def pushback(self, char: Optional[str]) -> None:
        """
        Return the most recently consumed character to the cursor.

        Only the character the last ``advance()`` returned can be pushed
        back, and only once. Pushing back None (end of input) is a no-op so
        scanners can hand back whatever terminated them without checking
        first.
        """
        if char is None:
            return
        if self._pushback is not None:
            raise RuntimeError("Cursor supports only one character of pushback")
        if char != self._last:
            raise RuntimeError(
                f"Cannot push back {char!r}; the last consumed character was {self._last!r}"
            )
        self._pushback = char
        self._last = None
        self.line, self.column = self._previous

    @property
    def at_end(self) -> bool:
        """True once every character has been consumed."""
        return self.peek() is None
