# Copyright 2026 AdaLex Contributors
# SPDX-License-Identifier: Apache-2.0

"""Character source with one-character lookahead and push-back.

The scanner reads its input one character at a time and occasionally needs to
look at the next character or give back the one it just consumed.
"""

from __future__ import annotations

from typing import TextIO

# ###############
# Public Interface
# ###############


class StreamError(Exception):
    """Raised when the stream is used in a way it does not support."""


class CharStream:
    """A character reader over a string or a text file object.

    Attributes:
        position: Number of characters consumed so far, net of push-backs.
    """

    def __init__(self, source: str | TextIO) -> None:
        self._text: str | None = source if isinstance(source, str) else None
        self._file: TextIO | None = None if isinstance(source, str) else source
        self._index = 0
        self._pending: list[str] = []
        self.position = 0

    def read(self) -> str:
        """Consume and return the next character, or '' at end of input."""
        ch = self._pending.pop() if self._pending else self._read_raw()
        if ch:
            self.position += 1
        return ch

    def peek(self) -> str:
        """Return the next character without consuming it, or '' at end of input."""
        if not self._pending:
            ch = self._read_raw()
            if not ch:
                return ""
            self._pending.append(ch)
        return self._pending[-1]

    def unread(self, ch: str) -> None:
        """Push back a character that was just read.

        Pushing back the end-of-input marker '' is a no-op.

        Raises:
            StreamError: If *ch* is not a single character, or if the
                push-back buffer is already full.
        """
        if not ch:
            return
        if len(ch) != 1:
            raise StreamError(f"Can only push back a single character, got {ch!r}")
        if len(self._pending) >= _MAX_PENDING:
            raise StreamError("Push-back buffer is full")
        self._pending.append(ch)
        self.position -= 1

    # ------------------------------------------------------------------
    # Raw access
    # ------------------------------------------------------------------

    def _read_raw(self) -> str:
        """Read one character from the underlying source, bypassing push-back."""
        if self._file is not None:
            return self._file.read(1)
        assert self._text is not None
        if self._index >= len(self._text):
            return ""
        ch = self._text[self._index]
        self._index += 1
        return ch


# ################
# Implementation
# ################

# A pushed-back character in front of at most two looked-ahead ones.
_MAX_PENDING = 3
