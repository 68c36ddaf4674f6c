"""Pydantic models for rule and lint configuration."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from docalign.config.defaults import (
    DEFAULT_EXCLUDE,
    DEFAULT_INCLUDE,
    DEFAULT_LOG_LEVEL,
    DEFAULT_MAX_FIX_PASSES,
)
from docalign.errors import ConfigError
from docalign.tags import DEFAULT_APPLICABLE_TAGS
from docalign.types import AlignMode

_RULE_KEYS = ("mode", "tags", "indent")
_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


class RuleOptions(BaseModel):
    """Options of the line-alignment rule itself."""

    model_config = ConfigDict(extra="forbid")

    mode: AlignMode = AlignMode.ALWAYS
    tags: list[str] | None = None
    indent: str | None = None

    @field_validator("tags")
    @classmethod
    def _strip_at(cls, value: list[str] | None) -> list[str] | None:
        if value is None:
            return None
        return [tag.strip().removeprefix("@") for tag in value if tag.strip()]

    @field_validator("indent")
    @classmethod
    def _whitespace_only(cls, value: str | None) -> str | None:
        if value is not None and value.strip():
            raise ValueError("indent must contain only whitespace")
        return value

    @property
    def applicable_tags(self) -> tuple[str, ...]:
        """Configured tags, or the defaults when none are configured.

        An explicitly empty list selects nothing.
        """
        if self.tags is None:
            return DEFAULT_APPLICABLE_TAGS
        return tuple(self.tags)


class LintConfig(BaseModel):
    """Everything the host needs: rule options plus file selection."""

    model_config = ConfigDict(extra="forbid")

    rule: RuleOptions = Field(default_factory=RuleOptions)
    include: list[str] = Field(default_factory=lambda: list(DEFAULT_INCLUDE))
    exclude: list[str] = Field(default_factory=lambda: list(DEFAULT_EXCLUDE))
    max_fix_passes: int = Field(default=DEFAULT_MAX_FIX_PASSES, ge=1)
    log_level: str = DEFAULT_LOG_LEVEL

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"unknown log level '{value}'")
        return level

    @classmethod
    def from_mapping(cls, data: dict[str, Any]) -> LintConfig:
        """Build from a flat mapping (``mode``, ``tags``, ``include``, ...).

        Raises ConfigError on unknown keys or invalid values.
        """
        flat = dict(data)
        rule = {key: flat.pop(key) for key in _RULE_KEYS if key in flat}
        try:
            return cls(rule=RuleOptions(**rule), **flat)
        except ValidationError as e:
            errors = e.errors()
            field = ".".join(str(part) for part in errors[0]["loc"]) if errors else None
            raise ConfigError(f"Invalid configuration: {e}", field=field, original=e) from e
