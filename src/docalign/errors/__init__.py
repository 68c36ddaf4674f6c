"""Error handling — exception hierarchy for parsing, configuration and fixing."""

from docalign.errors.exceptions import (
    CommentParseError,
    ConfigError,
    DocAlignError,
    FixConflictError,
)

__all__ = [
    "DocAlignError",
    "CommentParseError",
    "ConfigError",
    "FixConflictError",
]
