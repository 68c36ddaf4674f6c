"""Block transforms — pure ``Block -> Block`` rewrites of token spacing.

Every transform returns a new block; the input block and its lines are
never mutated.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from functools import reduce

from docalign.comment.parser import CLOSER, DELIMITER, OPENER
from docalign.types import Block, Line, Tokens

Transform = Callable[[Block], Block]


@dataclass(frozen=True)
class ColumnWidths:
    start: str = ""  # indentation of the opening line
    tag: int = 0
    type: int = 0
    name: int = 0


def measure(lines: list[Line]) -> ColumnWidths:
    """Widest tag/type/name across ``lines`` and the opening line's indent."""
    widths = ColumnWidths()
    for line in lines:
        tokens = line.tokens
        widths = ColumnWidths(
            start=tokens.start if tokens.delimiter == OPENER else widths.start,
            tag=max(widths.tag, len(tokens.tag)),
            type=max(widths.type, len(tokens.type)),
            name=max(widths.name, len(tokens.name)),
        )
    return widths


def _space(width: int) -> str:
    return " " * max(width, 0)


def _align_tokens(tokens: Tokens, widths: ColumnWidths, into_tags: bool) -> Tokens:
    is_empty = not (tokens.tag or tokens.type or tokens.name or tokens.description)

    # Dangling "*/" line
    if tokens.end == CLOSER and is_empty:
        return tokens.replace(start=widths.start + " ")

    updates: dict[str, str] = {}
    if tokens.delimiter == OPENER:
        updates["start"] = widths.start
    elif tokens.delimiter == DELIMITER:
        updates["start"] = widths.start + " "
    else:
        # No delimiter: indent past where it would sit
        updates["delimiter"] = ""
        updates["start"] = widths.start + "  "

    if not into_tags:
        updates["post_delimiter"] = " " if tokens.description else ""
        return tokens.replace(**updates)

    nothing_after_delimiter = nothing_after_tag = nothing_after_type = nothing_after_name = False
    if not tokens.description:
        nothing_after_name = True
        updates["post_name"] = ""
        if not tokens.name:
            nothing_after_type = True
            updates["post_type"] = ""
            if not tokens.type:
                nothing_after_tag = True
                updates["post_tag"] = ""
                if not tokens.tag:
                    nothing_after_delimiter = True

    updates["post_delimiter"] = "" if nothing_after_delimiter else " "
    if not nothing_after_tag:
        updates["post_tag"] = _space(widths.tag - len(tokens.tag) + 1)
    # A column no line fills takes no space at all.
    if not nothing_after_type:
        updates["post_type"] = _space(widths.type - len(tokens.type) + 1) if widths.type else ""
    if not nothing_after_name:
        updates["post_name"] = _space(widths.name - len(tokens.name) + 1) if widths.name else ""
    return tokens.replace(**updates)


def align() -> Transform:
    """Pad spacers so tag, type, name and description columns line up."""

    def transform(block: Block) -> Block:
        widths = measure(block.source)
        into_tags = False
        lines: list[Line] = []
        for line in block.source:
            if line.tokens.tag:
                into_tags = True
            lines.append(line.with_tokens(_align_tokens(line.tokens, widths, into_tags)))
        return rewire_specs(block.model_copy(update={"source": lines}))

    return transform


def indent(indentation: str | int) -> Transform:
    """Re-indent every line so the opening line starts with ``indentation``.

    An int means that many spaces. The opening line's current indentation is
    swapped for the new one on every line that begins with it; other lines
    get the new indentation prepended.
    """
    if isinstance(indentation, int):
        indentation = _space(indentation)

    def transform(block: Block) -> Block:
        if not block.source:
            return block
        current = block.source[0].tokens.start

        def shift(start: str) -> str:
            return indentation + start.removeprefix(current)

        lines = [
            line.with_tokens(line.tokens.replace(start=shift(line.tokens.start)))
            for line in block.source
        ]
        return rewire_specs(block.model_copy(update={"source": lines}))

    return transform


def flow(*transforms: Transform) -> Transform:
    """Compose transforms left to right."""

    def transform(block: Block) -> Block:
        return reduce(lambda current, step: step(current), transforms, block)

    return transform


def rewire_specs(block: Block) -> Block:
    """Point every tag's ``source`` at the block's current lines, by line number."""
    by_number = {line.number: line for line in block.source}
    tags = [
        spec.model_copy(
            update={"source": [by_number[line.number] for line in spec.source if line.number in by_number]}
        )
        for spec in block.tags
    ]
    return block.model_copy(update={"tags": tags})
