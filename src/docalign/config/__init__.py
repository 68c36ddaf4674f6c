"""Configuration — defaults, validated schema and the YAML/env hierarchy."""

from docalign.config.hierarchy import load_config_hierarchy, load_lint_config
from docalign.config.schema import LintConfig, RuleOptions

__all__ = [
    "LintConfig",
    "RuleOptions",
    "load_config_hierarchy",
    "load_lint_config",
]
