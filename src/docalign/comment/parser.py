"""Parse a JSDoc comment into token lines and tag specs, and render it back."""

from __future__ import annotations

import logging
import re

from docalign.comment.tokenizers import (
    DEFAULT_TOKENIZERS,
    Tokenizer,
    join_description,
    split_space,
)
from docalign.errors import CommentParseError
from docalign.types import Block, Line, Spec, Tokens

logger = logging.getLogger(__name__)

OPENER = "/**"
DELIMITER = "*"
CLOSER = "*/"
FENCE = "```"

_TAG_START_RE = re.compile(r"^@\S")


def parse(
    text: str,
    start_line: int = 0,
    tokenizers: tuple[Tokenizer, ...] = DEFAULT_TOKENIZERS,
) -> Block:
    """Parse the first ``/** ... */`` block found in ``text``.

    Line numbers count from ``start_line`` at the first line of ``text``.
    Raises CommentParseError if no complete block is present.
    """
    lines = _parse_lines(text, start_line)
    description_lines, sections = _split_sections(lines)

    tags: list[Spec] = []
    for section in sections:
        spec = Spec(tag="", source=section)
        for tokenizer in tokenizers:
            spec = tokenizer(spec)
        tags.append(spec)

    return Block(
        description=join_description(line.tokens.description for line in description_lines),
        tags=tags,
        source=lines,
    )


def stringify(block: Block) -> str:
    """Render a block back to text, one physical line per source line."""
    return "\n".join(line.tokens.render() for line in block.source)


def _parse_lines(text: str, start_line: int) -> list[Line]:
    lines: list[Line] | None = None

    for offset, raw in enumerate(text.split("\n")):
        number = start_line + offset
        start, rest = split_space(raw)
        delimiter = post_delimiter = end = ""

        if lines is None:
            if not rest.startswith(OPENER) or rest.startswith("/***"):
                continue
            lines = []
            delimiter, rest = OPENER, rest[len(OPENER):]
            post_delimiter, rest = split_space(rest)

        trimmed = rest.rstrip()
        closed = trimmed.endswith(CLOSER)

        if not delimiter and rest.startswith(DELIMITER) and not closed:
            delimiter, rest = DELIMITER, rest[len(DELIMITER):]
            post_delimiter, rest = split_space(rest)

        if closed:
            end = rest[len(trimmed) - len(CLOSER):]
            rest = trimmed[: -len(CLOSER)]

        lines.append(
            Line(
                number=number,
                tokens=Tokens(
                    start=start,
                    delimiter=delimiter,
                    post_delimiter=post_delimiter,
                    description=rest,
                    end=end,
                ),
            )
        )
        if closed:
            return lines

    if lines is None:
        raise CommentParseError("No /** comment block found")
    raise CommentParseError("Unterminated comment block", line=lines[0].number)


def _split_sections(lines: list[Line]) -> tuple[list[Line], list[list[Line]]]:
    """Group lines into the leading description and one section per tag."""
    description: list[Line] = []
    sections: list[list[Line]] = []
    current = description
    fenced = False

    for line in lines:
        text = line.tokens.description
        if not fenced and _TAG_START_RE.match(text):
            current = [line]
            sections.append(current)
        else:
            current.append(line)
        if text.count(FENCE) % 2:
            fenced = not fenced

    return description, sections
