# -*- coding: utf-8 -*-
"""Sequential line access over a decoded text stream."""

from __future__ import annotations

from collections.abc import Iterable
from collections.abc import Iterator

from vtopo_lib.errors import SourceLocation
from vtopo_lib.errors import UnexpectedEndOfStreamError


def is_blank(line: str) -> bool:
    """Check if a line is empty or whitespace only."""
    return not line.strip()


class LineCursor:
    """Forward-only cursor over the lines of a text stream.

    Line terminators are stripped. The cursor never rewinds.

    Attributes:
        source: Source identifier for error messages
        line_number: 0-based number of the last line read (-1 before any read)
    """

    def __init__(self, lines: Iterable[str], source: str = "<string>") -> None:
        self._lines: Iterator[str] = iter(lines)
        self._pending: str | None = None
        self._exhausted = False
        self.source = source
        self.line_number = -1
        self.current_line = ""

    @property
    def at_eof(self) -> bool:
        """Check if no line is left to read."""
        if self._pending is None and not self._exhausted:
            self._pending = self._next_raw()
        return self._pending is None

    def _next_raw(self) -> str | None:
        try:
            return next(self._lines)
        except StopIteration:
            self._exhausted = True
            return None

    def read_line(self) -> str | None:
        """Read the next line without its terminator, None at end of stream."""
        if self._pending is not None:
            raw, self._pending = self._pending, None
        elif self._exhausted:
            return None
        else:
            raw = self._next_raw()
            if raw is None:
                return None

        self.line_number += 1
        self.current_line = raw.rstrip("\r\n")
        return self.current_line

    def require_line(self, context: str) -> str:
        """Read the next line, failing if the stream has ended.

        Raises:
            UnexpectedEndOfStreamError: At end of stream
        """
        line = self.read_line()
        if line is None:
            raise UnexpectedEndOfStreamError(
                f"unexpected end of stream in {context}",
                self.location(),
            )
        return line

    def read_until_blank(self, context: str) -> list[str]:
        """Read the run of lines up to the next blank line.

        The blank line (empty or whitespace only) is consumed and not
        returned.

        Raises:
            UnexpectedEndOfStreamError: If the stream ends before a blank line
        """
        lines: list[str] = []
        while not is_blank(line := self.require_line(context)):
            lines.append(line)
        return lines

    def skip(self, count: int, context: str) -> None:
        """Consume ``count`` lines unconditionally.

        Raises:
            UnexpectedEndOfStreamError: If fewer than ``count`` lines are left
        """
        for _ in range(count):
            self.require_line(context)

    def drain(self) -> int:
        """Consume every remaining line, return how many were dropped."""
        count = 0
        while self.read_line() is not None:
            count += 1
        return count

    def location(self, column: int = 0) -> SourceLocation:
        """Get the location of the last line read."""
        return SourceLocation(
            source=self.source,
            line=max(self.line_number, 0),
            column=column,
            text=self.current_line,
        )
