"""Configuration hierarchy — merges sources in priority order.

Precedence (later overrides earlier):
  1. Package defaults
  2. Global config   (~/.docalign/config.yaml)
  3. Project config   (./docalign.yaml, searched upward from the cwd)
  4. Environment variables (DOCALIGN_*)
  5. Runtime arguments

Values are merged as a flat mapping and only validated once, by
``LintConfig.from_mapping``; numbers from the environment stay strings until
then.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any

import yaml

from docalign.config.defaults import get_defaults
from docalign.config.schema import LintConfig

logger = logging.getLogger(__name__)

_GLOBAL_CONFIG_PATH = Path.home() / ".docalign" / "config.yaml"
_PROJECT_CONFIG_NAME = "docalign.yaml"

_ENV_PREFIX = "DOCALIGN_"
_ENV_KEYS = ("mode", "tags", "indent", "include", "exclude", "max_fix_passes", "log_level")

# Comma-separated in the environment
_LIST_KEYS = {"tags", "include", "exclude"}


def load_config_hierarchy(**runtime_overrides: Any) -> dict[str, Any]:
    """Merge every configuration source into one flat dict."""
    config = get_defaults()
    for layer in (
        _load_yaml_config(_GLOBAL_CONFIG_PATH),
        _load_yaml_config(_find_project_config()),
        _load_env_vars(),
        {key: value for key, value in runtime_overrides.items() if value is not None},
    ):
        config.update(layer)
    return config


def load_lint_config(**runtime_overrides: Any) -> LintConfig:
    """Resolve the hierarchy and validate it into a LintConfig."""
    return LintConfig.from_mapping(load_config_hierarchy(**runtime_overrides))


def _load_yaml_config(path: Path | None) -> dict[str, Any]:
    """Read a YAML mapping; a missing, unreadable or non-mapping file gives {}."""
    if path is None or not path.is_file():
        return {}
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
    except (OSError, yaml.YAMLError) as e:
        logger.warning("Failed to load config %s: %s", path, e)
        return {}
    if data is None:
        return {}
    if not isinstance(data, dict):
        logger.warning("Config file %s is not a mapping, ignoring", path)
        return {}
    logger.debug("Loaded config from %s", path)
    return data


def _find_project_config() -> Path | None:
    """Nearest docalign.yaml in the cwd or one of its parents."""
    cwd = Path.cwd()
    for parent in (cwd, *cwd.parents):
        candidate = parent / _PROJECT_CONFIG_NAME
        if candidate.is_file():
            return candidate
    return None


def _load_env_vars() -> dict[str, Any]:
    """Read DOCALIGN_<KEY> environment variables."""
    result: dict[str, Any] = {}
    for key in _ENV_KEYS:
        value = os.environ.get(_ENV_PREFIX + key.upper())
        if value is not None:
            result[key] = _split_list(value) if key in _LIST_KEYS else value
    return result


def _split_list(value: str) -> list[str]:
    return [item.strip() for item in value.split(",") if item.strip()]
