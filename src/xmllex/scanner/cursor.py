# Copyright 2026 xmllex Contributors
# SPDX-License-Identifier: Apache-2.0

"""One-character-lookahead reader over in-memory XML text."""

# ###############
# Public Interface
# ###############


class Cursor:
    """Reads a string one character at a time.

    The cursor starts before the first character: call :meth:`advance` once to
    load it. After that, :meth:`current` always returns the character most
    recently returned by :meth:`advance`, or ``None`` once the input is exhausted.
    """

    def __init__(self, text: str) -> None:
        self._text = text
        self._pos = -1
        self._current: str | None = None

    def advance(self) -> str | None:
        """Consume the next character and return it, or ``None`` at end of input."""
        if self._pos < len(self._text):
            self._pos += 1
        self._current = self._text[self._pos] if self._pos < len(self._text) else None
        return self._current

    def current(self) -> str | None:
        """Return the last character returned by :meth:`advance`."""
        return self._current

    @property
    def offset(self) -> int:
        """Zero-based index of the current character (the input length at end of input)."""
        return max(self._pos, 0)

    def location(self, offset: int) -> tuple[int, int]:
        """Return the 1-based ``(line, column)`` of *offset* in the input."""
        line = self._text.count("\n", 0, offset) + 1
        column = offset - (self._text.rfind("\n", 0, offset) + 1) + 1
        return line, column
