"""Tests for the rule and lint configuration models."""

import pytest
from pydantic import ValidationError

from docalign.config.schema import LintConfig, RuleOptions
from docalign.errors import ConfigError
from docalign.tags import DEFAULT_APPLICABLE_TAGS
from docalign.types import AlignMode


class TestRuleOptions:
    def test_defaults(self):
        options = RuleOptions()
        assert options.mode == AlignMode.ALWAYS
        assert options.applicable_tags == DEFAULT_APPLICABLE_TAGS
        assert options.indent is None

    def test_mode_from_string(self):
        assert RuleOptions(mode="never").mode == AlignMode.NEVER

    def test_invalid_mode(self):
        with pytest.raises(ValidationError):
            RuleOptions(mode="sometimes")

    def test_tags_lose_at_sign(self):
        assert RuleOptions(tags=["@param", " returns ", ""]).tags == ["param", "returns"]

    def test_empty_tags_select_nothing(self):
        assert RuleOptions(tags=[]).applicable_tags == ()

    def test_indent_must_be_whitespace(self):
        assert RuleOptions(indent="\t ").indent == "\t "
        with pytest.raises(ValidationError):
            RuleOptions(indent="  x")

    def test_unknown_field(self):
        with pytest.raises(ValidationError):
            RuleOptions(align=True)


class TestLintConfig:
    def test_defaults(self):
        config = LintConfig()
        assert "**/*.js" in config.include
        assert config.exclude == ["**/node_modules/**"]
        assert config.max_fix_passes == 10
        assert config.log_level == "WARNING"

    def test_log_level_normalised(self):
        assert LintConfig(log_level="debug").log_level == "DEBUG"

    def test_unknown_log_level(self):
        with pytest.raises(ValidationError):
            LintConfig(log_level="chatty")

    def test_max_fix_passes_positive(self):
        with pytest.raises(ValidationError):
            LintConfig(max_fix_passes=0)


class TestFromMapping:
    def test_splits_rule_keys(self):
        config = LintConfig.from_mapping(
            {"mode": "never", "tags": ["param"], "indent": None, "max_fix_passes": 2}
        )
        assert config.rule.mode == AlignMode.NEVER
        assert config.rule.tags == ["param"]
        assert config.max_fix_passes == 2

    def test_invalid_rule_value(self):
        with pytest.raises(ConfigError) as excinfo:
            LintConfig.from_mapping({"mode": "sometimes"})
        assert excinfo.value.field == "mode"
        assert isinstance(excinfo.value.original, ValidationError)

    def test_does_not_modify_input(self):
        data = {"mode": "never"}
        LintConfig.from_mapping(data)
        assert data == {"mode": "never"}
