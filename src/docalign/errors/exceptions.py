"""Custom exception hierarchy for docalign."""

from __future__ import annotations

from typing import Any


class DocAlignError(Exception):
    """Base exception for all docalign errors."""

    def __init__(self, message: str = "", **kwargs: Any) -> None:
        super().__init__(message)
        self.message = message


class CommentParseError(DocAlignError):
    """The text holds no complete ``/** ... */`` block, or a tag line is malformed.

    Fail-fast for the comment at hand; the host skips it and moves on.
    """

    def __init__(
        self,
        message: str = "",
        line: int | None = None,
    ) -> None:
        super().__init__(message)
        self.line = line


class ConfigError(DocAlignError):
    """Invalid rule or lint configuration."""

    def __init__(
        self,
        message: str = "",
        field: str | None = None,
        original: Exception | None = None,
    ) -> None:
        super().__init__(message)
        self.field = field
        self.original = original


class FixConflictError(DocAlignError):
    """A line edit no longer matches the text it is applied to."""

    def __init__(
        self,
        message: str = "",
        line: int = 0,
        expected: str = "",
        found: str = "",
    ) -> None:
        super().__init__(message)
        self.line = line
        self.expected = expected
        self.found = found
