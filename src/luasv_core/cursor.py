"""Cursor over the source text: offset tracking and trivia skipping."""

from __future__ import annotations

from dataclasses import dataclass

_WHITESPACE = frozenset(" \t\n\r")
_COMMENT = "--"


@dataclass
class Cursor:
    """Source text plus the current scan offset.

    One cursor belongs to one parse; it is never shared between calls.
    """

    text: str
    offset: int = 0

    def at_end(self) -> bool:
        return self.offset >= len(self.text)

    def peek(self) -> str | None:
        """Return the character at the offset, or ``None`` at end of input."""
        if self.offset < len(self.text):
            return self.text[self.offset]
        return None

    def startswith(self, s: str) -> bool:
        return self.text.startswith(s, self.offset)

    def advance(self, n: int = 1) -> None:
        self.offset = min(self.offset + n, len(self.text))

    # -- Backtracking ---------------------------------------------------

    def mark(self) -> int:
        return self.offset

    def reset(self, mark: int) -> None:
        self.offset = mark

    # -- Trivia ---------------------------------------------------------

    def skip_trivia(self) -> None:
        """Skip whitespace and ``--`` line comments."""
        text = self.text
        n = len(text)
        while self.offset < n:
            c = text[self.offset]
            if c in _WHITESPACE:
                self.offset += 1
            elif text.startswith(_COMMENT, self.offset):
                end = text.find("\n", self.offset)
                self.offset = n if end == -1 else end
            else:
                break
