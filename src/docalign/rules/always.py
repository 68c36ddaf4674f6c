"""Mode ``always``: report tags whose columns do not line up with their siblings.

The block is reduced to the applicable tags, aligned and re-indented on a
deep copy, rendered to text, parsed again and aligned once more. Each
original tag is then compared line by line with its counterpart in that
result. The second align pass runs on freshly parsed lines so the
comparison is against the renderer's own normal form, not against
artifacts of the first pass.
"""

from __future__ import annotations

import logging
from collections.abc import Collection, Sequence

from docalign.comment import align, flow, indent, parse, rewire_specs, stringify
from docalign.comment.parser import OPENER
from docalign.rules.reconcile import reconcile, renumber
from docalign.types import Block, Diagnostic, Line, Spec, Tokens

logger = logging.getLogger(__name__)

ALIGNED_MESSAGE = "Expected JSDoc block lines to be aligned."


def filter_applicable_tags(block: Block, applicable: Collection[str]) -> Block:
    """Drop tag lines and tags whose kind is not applicable.

    Lines without a tag are kept verbatim. A dropped tag's line that also
    opens the comment is kept as a bare ``/**`` line so the block still
    renders and parses as a comment.
    """
    lines: list[Line] = []
    for line in block.source:
        tokens = line.tokens
        if not tokens.tag or tokens.tag.removeprefix("@") in applicable:
            lines.append(line)
        elif tokens.delimiter == OPENER:
            lines.append(
                line.with_tokens(Tokens(start=tokens.start, delimiter=tokens.delimiter, end=tokens.end))
            )

    tags = [spec for spec in block.tags if spec.tag in applicable]
    return rewire_specs(block.model_copy(update={"source": lines, "tags": tags}))


def format_block(block: Block, applicable: Collection[str], indentation: str) -> Block:
    """Return the aligned rendering of ``block``'s applicable tags.

    ``block`` itself is left untouched.
    """
    working = filter_applicable_tags(block.model_copy(deep=True), applicable)
    first_pass = flow(align(), indent(indentation))(working)
    return align()(parse(stringify(first_pass)))


def check_alignment(
    block: Block,
    found_tags: Sequence[Spec],
    applicable: Collection[str],
    indentation: str = "",
) -> list[Diagnostic]:
    formatted = format_block(block, applicable, indentation)

    if len(formatted.tags) != len(found_tags):
        logger.warning(
            "Aligned block has %d tags, expected %d; skipping comment",
            len(formatted.tags),
            len(found_tags),
        )
        return []

    diagnostics: list[Diagnostic] = []
    for tag, formatted_tag in zip(found_tags, formatted.tags, strict=True):
        desired = renumber(tag.source, formatted_tag.source)
        fix = reconcile(tag.source, desired)
        if fix is None:
            continue
        logger.debug("@%s on line %d is not aligned", tag.tag, tag.source[0].number)
        diagnostics.append(Diagnostic(message=ALIGNED_MESSAGE, tag=tag, fix=fix))
    return diagnostics
