"""Tests for the tag vocabulary."""

import pytest
from conftest import WITH_EXAMPLE, WITH_RETURNS

from docalign.comment import parse
from docalign.tags import DEFAULT_APPLICABLE_TAGS, get_present_tags, slot_layout, tag_might_have_namepath


class TestTagMightHaveNamepath:
    @pytest.mark.parametrize("kind", ["param", "arg", "property", "typedef", "callback", "memberof!"])
    def test_namepath_tags(self, kind):
        assert tag_might_have_namepath(kind) is True

    @pytest.mark.parametrize("kind", ["returns", "return", "example", "throws", "see", "", "PARAM"])
    def test_other_tags(self, kind):
        assert tag_might_have_namepath(kind) is False


class TestSlotLayout:
    def test_namepath_layout(self):
        spacers, contents = slot_layout("param")
        assert spacers == ("post_delimiter", "post_tag", "post_type", "post_name")
        assert contents == ("tag", "type", "name", "description")

    def test_plain_layout(self):
        spacers, contents = slot_layout("returns")
        assert len(spacers) == len(contents) == 3
        assert "name" not in contents


class TestGetPresentTags:
    def test_default_set(self):
        assert set(DEFAULT_APPLICABLE_TAGS) == {"param", "arg", "argument", "property", "prop", "returns", "return"}

    def test_filters_and_keeps_order(self):
        tags = get_present_tags(parse(WITH_EXAMPLE), DEFAULT_APPLICABLE_TAGS)
        assert [(t.tag, t.name) for t in tags] == [("param", "a"), ("param", "longname")]

    def test_custom_set(self):
        tags = get_present_tags(parse(WITH_RETURNS), ["returns"])
        assert [t.tag for t in tags] == ["returns"]

    def test_empty_set(self):
        assert get_present_tags(parse(WITH_RETURNS), []) == []
