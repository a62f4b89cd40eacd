# -*- coding: utf-8 -*-
"""Error handling for VisualTopo file parsing.

Every error is fatal to the parse that raised it: there is no partial
model and no error collection. Exceptions carry the source location of
the offending line when the parser knows it.
"""

from __future__ import annotations

from dataclasses import dataclass
from dataclasses import replace


@dataclass(frozen=True)
class SourceLocation:
    """Tracks the source location of text for error reporting.

    Attributes:
        source: The source file name or identifier
        line: Line number (0-based)
        column: Column number (0-based)
        text: The text at this location
    """

    source: str
    line: int
    column: int = 0
    text: str = ""

    def __str__(self) -> str:
        """Format as human-readable location string."""
        return f"(in {self.source}, line {self.line + 1}, column {self.column + 1})"


class VisualTopoParseError(Exception):
    """Base exception for malformed VisualTopo input.

    Attributes:
        message: Error message
        location: Source location where error occurred
    """

    def __init__(self, message: str, location: SourceLocation | None = None):
        self.message = message
        self.location = location
        super().__init__(self.message)

    def __str__(self) -> str:
        """Format as human-readable exception string."""
        if self.location:
            base = f"{self.message} {self.location}"
            if self.location.text:
                base += f"\n  {self.location.text}"
            return base
        return self.message

    def with_location(self, location: SourceLocation) -> VisualTopoParseError:
        """Attach a location unless one is already known, return self."""
        if self.location is None:
            self.location = location
        elif not self.location.text and location.text:
            self.location = replace(self.location, text=location.text)
        return self


class UnsupportedProjectionError(VisualTopoParseError):
    """The ``Trou`` projection code is not one of the supported codes."""

    def __init__(self, code: str, location: SourceLocation | None = None):
        self.code = code
        super().__init__(f"unsupported projection: `{code}`", location)


class MalformedNumberError(VisualTopoParseError):
    """A token that must be a number could not be parsed."""

    def __init__(
        self,
        field: str,
        token: str,
        location: SourceLocation | None = None,
    ):
        self.field = field
        self.token = token
        super().__init__(f"invalid {field}: `{token}`", location)


class MalformedColorError(VisualTopoParseError):
    """A color literal is neither `Std` nor three comma separated bytes."""

    def __init__(
        self,
        token: str,
        reason: str = "",
        location: SourceLocation | None = None,
    ):
        self.token = token
        message = f"invalid color: `{token}`"
        if reason:
            message += f" ({reason})"
        super().__init__(message, location)


class MalformedDataLineError(VisualTopoParseError):
    """A data line does not hold the fixed number of fields."""

    def __init__(
        self,
        field_count: int,
        expected: int,
        location: SourceLocation | None = None,
    ):
        self.field_count = field_count
        self.expected = expected
        super().__init__(
            f"data line must have {expected} fields, got {field_count}", location
        )


class MalformedEntryError(VisualTopoParseError):
    """The ``Trou`` header value does not hold the fixed number of fields."""


class MalformedSetHeaderError(VisualTopoParseError):
    """A set header line is too short to carry a color token."""


class UnexpectedEndOfStreamError(VisualTopoParseError):
    """The stream ended inside a block before its terminating line."""
