"""Tests for the JSDoc comment parser and renderer."""

import pytest
from conftest import DOCUMENTED, SAMPLE_COMMENTS, UNALIGNED

from docalign.comment import parse, stringify
from docalign.errors import CommentParseError


class TestParseLines:
    def test_line_count_and_numbers(self):
        block = parse(UNALIGNED)
        assert [line.number for line in block.source] == [0, 1, 2, 3]

    def test_start_line_offset(self):
        block = parse(UNALIGNED, start_line=10)
        assert block.source[0].number == 10
        assert block.tags[1].source[-1].number == 13

    def test_opening_line(self):
        tokens = parse(UNALIGNED).source[0].tokens
        assert tokens.start == ""
        assert tokens.delimiter == "/**"
        assert tokens.description == ""

    def test_closing_line(self):
        tokens = parse(UNALIGNED).source[3].tokens
        assert tokens.start == " "
        assert tokens.delimiter == ""
        assert tokens.end == "*/"

    def test_tag_line_tokens(self):
        tokens = parse(UNALIGNED).source[1].tokens
        assert tokens.start == " "
        assert tokens.delimiter == "*"
        assert tokens.post_delimiter == " "
        assert tokens.tag == "@param"
        assert tokens.post_tag == " "
        assert tokens.type == "{string}"
        assert tokens.post_type == " "
        assert tokens.name == "a"
        assert tokens.post_name == " "
        assert tokens.description == "desc1"
        assert tokens.end == ""

    def test_single_line_comment(self):
        block = parse("/** single */")
        assert len(block.source) == 1
        tokens = block.source[0].tokens
        assert tokens.delimiter == "/**"
        assert tokens.post_delimiter == " "
        assert tokens.description == "single "
        assert tokens.end == "*/"
        assert block.description == "single"

    def test_text_before_block_is_skipped(self):
        block = parse("const x = 1;\n/**\n * @param {a} b c\n */")
        assert block.source[0].number == 1
        assert block.tags[0].name == "b"


class TestParseTags:
    def test_tags_and_sections(self):
        block = parse(UNALIGNED)
        assert [spec.tag for spec in block.tags] == ["param", "param"]
        assert [line.number for line in block.tags[0].source] == [1]
        # The closing line belongs to the last tag
        assert [line.number for line in block.tags[1].source] == [2, 3]

    def test_spec_fields(self):
        spec = parse(UNALIGNED).tags[1]
        assert spec.type == "number"
        assert spec.name == "longname"
        assert spec.description == "desc2"
        assert spec.optional is False

    def test_returns_has_no_name(self):
        block = parse("/**\n * @returns {number} the sum\n */")
        spec = block.tags[0]
        assert spec.name == ""
        assert spec.source[0].tokens.name == ""
        assert spec.description == "the sum"

    def test_optional_name_with_default(self):
        block = parse("/**\n * @param {string} [name=foo] the name\n */")
        spec = block.tags[0]
        assert spec.optional is True
        assert spec.name == "name"
        assert spec.default == "foo"
        assert spec.source[0].tokens.name == "[name=foo]"

    def test_unpaired_brackets_recorded(self):
        spec = parse("/**\n * @param {string} [name the name\n */").tags[0]
        assert spec.problems
        assert spec.source[0].tokens.name == ""

    def test_multiline_type(self):
        text = "/**\n * @param {{\n *   a: string\n * }} opts the options\n */"
        spec = parse(text).tags[0]
        assert spec.type == "{a: string}"
        assert spec.name == "opts"
        assert spec.description == "the options"
        assert spec.source[1].tokens.type == "a: string"
        assert spec.source[1].tokens.post_delimiter == "   "

    def test_unpaired_curlies_recorded(self):
        spec = parse("/**\n * @param {string a\n */").tags[0]
        assert "unpaired curly braces in type" in spec.problems
        assert spec.source[0].tokens.type == ""

    def test_block_description(self):
        block = parse(DOCUMENTED)
        assert block.description == "Sums numbers."
        assert [spec.tag for spec in block.tags] == ["param", "param", "returns"]

    def test_continuation_joins_description(self):
        spec = parse(DOCUMENTED).tags[0]
        assert spec.description == "first operand"
        assert len(spec.source) == 2

    def test_fenced_at_sign_is_not_a_tag(self):
        text = (
            "/**\n"
            " * Example:\n"
            " * ```\n"
            " * @param not a tag\n"
            " * ```\n"
            " * @param {string} a real\n"
            " */"
        )
        block = parse(text)
        assert len(block.tags) == 1
        assert block.tags[0].name == "a"


class TestParseErrors:
    def test_no_block(self):
        with pytest.raises(CommentParseError):
            parse("// just a line comment")

    def test_banner_comment_is_not_jsdoc(self):
        with pytest.raises(CommentParseError):
            parse("/*** banner ***/")

    def test_unterminated_block(self):
        with pytest.raises(CommentParseError) as exc_info:
            parse("/**\n * @param {string} a\n")
        assert exc_info.value.line == 0


class TestRoundTrip:
    @pytest.mark.parametrize("text", SAMPLE_COMMENTS)
    def test_stringify_reproduces_text(self, text):
        assert stringify(parse(text)) == text

    @pytest.mark.parametrize("text", SAMPLE_COMMENTS)
    def test_each_line_renders_to_its_source(self, text):
        block = parse(text)
        for line, raw in zip(block.source, text.split("\n"), strict=True):
            assert line.source == raw

    def test_irregular_spacing_round_trips(self):
        text = "/**\n *    @param   {Object<string, number>}   [opts={}]    the  options   \n   */"
        assert stringify(parse(text)) == text

    def test_tag_and_block_lines_are_shared(self):
        block = parse(UNALIGNED)
        assert block.tags[0].source[0] is block.source[1]
