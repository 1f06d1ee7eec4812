"""A small cursor-style scanner over puzzle input text."""

from __future__ import annotations

import re

# Leading C whitespace, optional sign, then at least one decimal digit.
_INT = re.compile(r"[ \t\n\r\f\v]*[+-]?[0-9]+")


class ParseError(ValueError):
    """Raised when the input does not hold what the parser expected."""


class Scanner:
    """Consumes a piece of text from the front, one token at a time."""

    def __init__(self, text: str) -> None:
        self._text = text
        self._pos = 0

    @property
    def rest(self) -> str:
        """The part of the text that has not been consumed yet."""
        return self._text[self._pos:]

    def at_end(self) -> bool:
        return self._pos >= len(self._text)

    def advance(self, n: int = 1) -> str:
        """Skip ``n`` characters and return them."""
        if n < 0 or self._pos + n > len(self._text):
            raise ParseError(f"cannot advance {n} characters past end of input")
        chunk = self._text[self._pos:self._pos + n]
        self._pos += n
        return chunk

    def try_consume(self, prefix: str) -> bool:
        """Consume ``prefix`` if the remaining text starts with it."""
        if self._text.startswith(prefix, self._pos):
            self._pos += len(prefix)
            return True
        return False

    def consume(self, prefix: str) -> None:
        """Consume ``prefix`` or raise :class:`ParseError`."""
        if not self.try_consume(prefix):
            raise ParseError(f"failed to consume prefix {prefix!r}")

    def try_consume_newline(self) -> bool:
        return self.try_consume("\n")

    def consume_newline(self) -> None:
        self.consume("\n")

    def try_consume_int(self) -> int | None:
        """Read a decimal integer, skipping leading whitespace.

        Returns ``None`` and leaves the position unchanged when no digits follow.
        """
        match = _INT.match(self._text, self._pos)
        if match is None:
            return None
        self._pos = match.end()
        return int(match.group())

    def consume_int(self) -> int:
        """Read a decimal integer or raise :class:`ParseError`."""
        value = self.try_consume_int()
        if value is None:
            raise ParseError(f"failed to read int at {self.rest[:20]!r}")
        return value