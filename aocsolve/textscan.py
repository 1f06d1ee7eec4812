"""Cursor-based line scanning, input reading and environment-driven logging."""

from __future__ import annotations

import os
import re
import sys
from typing import Iterable

_INT64_MAX = 2**63 - 1
_WHITESPACE = " \t\n\v\f\r"
_ATOI = re.compile(r"[ \t\n\v\f\r]*([+-]?[0-9]+)")


class ScanError(ValueError):
    """Raised when a line does not hold what the scanner expected."""


class Cursor:
    """Reads a line of text from the front, token by token."""

    def __init__(self, text: str) -> None:
        self._text = text
        self._pos = 0

    @property
    def rest(self) -> str:
        """The part of the text not consumed yet."""
        return self._text[self._pos:]

    def at_end(self) -> bool:
        return self._pos >= len(self._text)

    def peek(self) -> str:
        """The next character, or an empty string at the end."""
        return "" if self.at_end() else self._text[self._pos]

    def advance(self) -> bool:
        """Step over one character; False when already at the end."""
        if self.at_end():
            return False
        self._pos += 1
        return True

    def read_int(self) -> int | None:
        """Read an optionally negative decimal integer.

        Returns ``None`` when nothing was consumed. A lone ``-`` is consumed
        and reads as 0.
        """
        start = self._pos
        sign = 1
        if self.peek() == "-":
            sign = -1
            self._pos += 1
        digits_start = self._pos
        while not self.at_end() and self._text[self._pos] in "0123456789":
            self._pos += 1
        digits = self._text[digits_start:self._pos]
        if self._pos == start:
            return None
        value = int(digits) if digits else 0
        if value > _INT64_MAX:
            raise ScanError(f"overflow parsing {digits!r}")
        return sign * value

    def expect_int(self) -> int:
        """Read an integer or raise :class:`ScanError`."""
        value = self.read_int()
        if value is None:
            raise ScanError(f"failed to parse int: {self.rest!r}")
        return value

    def read_ints(self) -> list[int]:
        """Read whitespace-separated integers until none follows."""
        values: list[int] = []
        while True:
            self.skip_whitespace()
            value = self.read_int()
            if value is None:
                return values
            values.append(value)

    def skip_until(self, char: str) -> int:
        """Skip up to and including ``char``; return characters consumed."""
        start = self._pos
        index = self._text.find(char, self._pos)
        self._pos = len(self._text) if index < 0 else index + 1
        return self._pos - start

    def skip_whitespace(self) -> int:
        """Skip whitespace; return characters consumed."""
        start = self._pos
        while not self.at_end() and self._text[self._pos] in _WHITESPACE:
            self._pos += 1
        return self._pos - start

    def take(self, n: int) -> str:
        """Consume and return up to ``n`` characters."""
        chunk = self._text[self._pos:self._pos + max(n, 0)]
        self._pos += len(chunk)
        return chunk

    def try_char(self, char: str) -> bool:
        """Consume ``char`` if it is next."""
        if char and self.peek() == char:
            self._pos += 1
            return True
        return False

    def try_str(self, prefix: str) -> bool:
        """Consume ``prefix`` if the rest starts with it."""
        if prefix and self._text.startswith(prefix, self._pos):
            self._pos += len(prefix)
            return True
        return False

    def expect_str(self, prefix: str) -> None:
        """Consume ``prefix`` or raise :class:`ScanError`."""
        if not self.try_str(prefix):
            raise ScanError(f"failed to read prefix {prefix!r}: {self.rest!r}")


def read_lines(path: str | os.PathLike) -> list[str]:
    """The lines of a file, each without its trailing newline."""
    with open(path, encoding="utf-8", newline="") as handle:
        return [line[:-1] if line.endswith("\n") else line for line in handle]


def split_at_empty_lines(lines: Iterable[str]) -> list[list[str]]:
    """Group lines into sections separated by empty lines."""
    sections: list[list[str]] = [[]]
    for line in lines:
        if line:
            sections[-1].append(line)
        else:
            sections.append([])
    return sections


def env_flag(name: str) -> bool:
    """True when the variable is set to anything but ``0`` or ``false``."""
    value = os.environ.get(name)
    return value is not None and value not in ("0", "false")


def env_int(name: str) -> int:
    """The leading integer of the variable, 0 when unset or not numeric."""
    value = os.environ.get(name)
    if value is None:
        return 0
    match = _ATOI.match(value)
    return int(match.group(1)) if match else 0


def _emit(prefix: str, message: str) -> None:
    sys.stdout.write(f"{prefix} {message}\n")


def debug(message: str) -> None:
    """Print a debug line when DEBUG is at least 1."""
    if env_int("DEBUG") >= 1:
        _emit("D", message)


def debug2(message: str) -> None:
    """Print a verbose debug line when DEBUG is at least 2."""
    if env_int("DEBUG") >= 2:
        _emit("DD", message)


def debug_ints(prefix: str, values: Iterable[int]) -> None:
    """Print a prefix followed by integers when DEBUG is at least 1."""
    if env_int("DEBUG") >= 1:
        _emit("D", prefix + "".join(f" {v}" for v in values))


def info(message: str) -> None:
    """Print an informational line."""
    _emit("I", message)