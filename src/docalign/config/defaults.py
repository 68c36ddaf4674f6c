"""Package-level default configuration values."""

from __future__ import annotations

from typing import Any

# Rule settings
DEFAULT_MODE = "always"
DEFAULT_TAGS: list[str] | None = None  # None -> DEFAULT_APPLICABLE_TAGS
DEFAULT_INDENT: str | None = None  # None -> taken from each comment

# File selection
DEFAULT_INCLUDE = ["**/*.js", "**/*.jsx", "**/*.mjs", "**/*.cjs", "**/*.ts", "**/*.tsx"]
DEFAULT_EXCLUDE = ["**/node_modules/**"]

# Fixing
DEFAULT_MAX_FIX_PASSES = 10

# Log level
DEFAULT_LOG_LEVEL = "WARNING"


def get_defaults() -> dict[str, Any]:
    """Return all defaults as a flat dictionary for merging."""
    return {
        "mode": DEFAULT_MODE,
        "tags": DEFAULT_TAGS,
        "indent": DEFAULT_INDENT,
        "include": list(DEFAULT_INCLUDE),
        "exclude": list(DEFAULT_EXCLUDE),
        "max_fix_passes": DEFAULT_MAX_FIX_PASSES,
        "log_level": DEFAULT_LOG_LEVEL,
    }
