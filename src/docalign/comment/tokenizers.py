"""Spec tokenizers: split a tag section's text into tag, type, name and description.

Each tokenizer takes a freshly parsed :class:`Spec` whose first-line
description still holds the raw tag text, moves its part of that text into
the matching token slots, and returns the spec. Problems that leave a part
untokenized are recorded on ``spec.problems`` instead of raising.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Callable, Iterable

from docalign.errors import CommentParseError
from docalign.tags import tag_might_have_namepath
from docalign.types import Spec

logger = logging.getLogger(__name__)

Tokenizer = Callable[[Spec], Spec]

_TAG_RE = re.compile(r"\s*(@(\S+))(\s*)")
_UNQUOTED_DEFAULT_RE = re.compile(r"=(?!>)")


def split_space(text: str) -> tuple[str, str]:
    """Split leading whitespace off ``text``."""
    rest = text.lstrip()
    return text[: len(text) - len(rest)], rest


def tokenize_tag(spec: Spec) -> Spec:
    tokens = spec.source[0].tokens
    match = _TAG_RE.match(tokens.description)
    if match is None:
        raise CommentParseError(
            f"Tag line has no @tag: {tokens.description!r}",
            line=spec.source[0].number,
        )
    tokens.tag = match.group(1)
    tokens.post_tag = match.group(3)
    tokens.description = tokens.description[match.end():]
    spec.tag = match.group(2)
    return spec


def tokenize_type(spec: Spec) -> Spec:
    """Move a ``{...}`` type, possibly spanning several lines, into ``type``."""
    if not spec.source[0].tokens.description.startswith("{"):
        return spec

    curlies = 0
    pieces: list[tuple[int, str]] = []
    for index, line in enumerate(spec.source):
        piece = ""
        for ch in line.tokens.description:
            if ch == "{":
                curlies += 1
            elif ch == "}":
                curlies -= 1
            piece += ch
            if curlies == 0:
                break
        pieces.append((index, piece))
        if curlies == 0:
            break

    if curlies != 0:
        spec.problems.append("unpaired curly braces in type")
        logger.debug("Unpaired curlies in @%s type, leaving it untokenized", spec.tag)
        return spec

    # Padding in front of a continuation piece stays in post_delimiter, so
    # the piece is re-columned by align instead of growing the type width.
    parts: list[str] = []
    for index, piece in pieces:
        tokens = spec.source[index].tokens
        remainder = tokens.description[len(piece):]
        tokens.type = piece
        tokens.post_type, tokens.description = split_space(remainder)
        parts.append(tokens.type)

    parts[0] = parts[0][1:]
    parts[-1] = parts[-1][:-1]
    spec.type = "".join(part.strip() for part in parts)
    return spec


def tokenize_name(spec: Spec) -> Spec:
    """Move the name (or ``[name=default]``) following the type into ``name``."""
    if not tag_might_have_namepath(spec.tag):
        return spec

    # The name follows the last line that carried part of the type.
    line_index = 0
    for index, line in enumerate(spec.source):
        if line.tokens.type:
            line_index = index
    tokens = spec.source[line_index].tokens
    source = tokens.description.lstrip()

    quoted = source.split('"')
    if len(quoted) > 1 and quoted[0] == "" and len(quoted) % 2 == 1:
        spec.name = quoted[1]
        tokens.name = f'"{quoted[1]}"'
        tokens.post_name, tokens.description = split_space(source[len(tokens.name):])
        return spec

    brackets = 0
    name = ""
    for ch in source:
        if brackets == 0 and ch.isspace():
            break
        if ch == "[":
            brackets += 1
        elif ch == "]":
            brackets -= 1
        name += ch

    if brackets != 0:
        spec.problems.append("unpaired brackets in name")
        return spec

    token = name
    optional = False
    default: str | None = None
    if name.startswith("[") and name.endswith("]"):
        optional = True
        inner, sep, value = name[1:-1].partition("=")
        name = inner.strip()
        if sep:
            default = value.strip()
        if not name:
            spec.problems.append("empty name")
            return spec
        if default == "":
            spec.problems.append("empty default value")
            return spec
        if default is not None and not _is_quoted(default) and _UNQUOTED_DEFAULT_RE.search(default):
            spec.problems.append("invalid default value syntax")
            return spec

    spec.optional = optional
    spec.name = name
    spec.default = default
    tokens.name = token
    tokens.post_name, tokens.description = split_space(source[len(token):])
    return spec


def tokenize_description(spec: Spec) -> Spec:
    spec.description = join_description(line.tokens.description for line in spec.source)
    return spec


def join_description(parts: Iterable[str]) -> str:
    """Compact join: trim every line, drop empty ones, join with spaces."""
    return " ".join(stripped for part in parts if (stripped := part.strip()))


def _is_quoted(value: str) -> bool:
    return len(value) >= 2 and value.startswith('"') and value.endswith('"')


DEFAULT_TOKENIZERS: tuple[Tokenizer, ...] = (
    tokenize_tag,
    tokenize_type,
    tokenize_name,
    tokenize_description,
)
