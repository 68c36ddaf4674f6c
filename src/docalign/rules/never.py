"""Mode ``never``: report tags whose first line was padded into columns.

Only the ``@tag`` line of each tag is inspected; continuation lines are
exempt. The line is padded when any spacer holds more than one character,
or when the whitespace between two filled fields adds up to more than one
character across the empty fields between them.
"""

from __future__ import annotations

import logging

from docalign.rules.reconcile import reconcile
from docalign.tags import slot_layout
from docalign.types import Diagnostic, Spec, Tokens

logger = logging.getLogger(__name__)

NOT_ALIGNED_MESSAGE = "Expected JSDoc block lines to not be aligned."


def is_manually_aligned(tag: Spec) -> bool:
    """Return True if the tag's first line carries alignment padding."""
    tokens = tag.source[0].tokens
    spacers, contents = slot_layout(tag.tag)

    gap = 0
    after_content = False
    for spacer, content in zip(spacers, contents):
        spacing = getattr(tokens, spacer)
        if len(spacing) > 1:
            return True
        gap += len(spacing)
        if getattr(tokens, content):
            if after_content and gap > 1:
                return True
            after_content = True
            gap = 0
    return False


def collapse_spacing(tokens: Tokens, kind: str) -> Tokens:
    """Return the first-line tokens with every alignment gap collapsed.

    A spacer becomes a single space when the field it precedes is filled
    and the empty string otherwise, so filled fields end up one space apart.
    Field text is never changed.
    """
    spacers, contents = slot_layout(kind)
    updates = {
        spacer: " " if getattr(tokens, content) else ""
        for spacer, content in zip(spacers, contents)
    }

    # Keep "*/" on a single-line comment apart from the last field.
    if tokens.end:
        filled = [i for i, content in enumerate(contents) if getattr(tokens, content)]
        if filled and filled[-1] + 1 < len(spacers):
            updates[spacers[filled[-1] + 1]] = " "

    return tokens.replace(**updates)


def check_not_aligned(tag: Spec) -> Diagnostic | None:
    """Check one tag; return a diagnostic with its fix, or None."""
    if not tag.source or not is_manually_aligned(tag):
        return None

    first = tag.source[0]
    desired = [first.with_tokens(collapse_spacing(first.tokens, tag.tag)), *tag.source[1:]]
    fix = reconcile(tag.source, desired)
    if fix is None:
        # Nothing to collapse, so there is nothing to report either.
        return None
    logger.debug("@%s on line %d is aligned", tag.tag, first.number)
    return Diagnostic(message=NOT_ALIGNED_MESSAGE, tag=tag, fix=fix)
