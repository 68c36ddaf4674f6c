"""Top-level entry points: check_line_alignment() and LineAlignmentChecker."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from pydantic import ValidationError

from docalign.comment import parse, stringify
from docalign.config.schema import RuleOptions
from docalign.errors import ConfigError
from docalign.rules.always import check_alignment
from docalign.rules.never import check_not_aligned
from docalign.rules.reconcile import apply_edits
from docalign.tags import DEFAULT_APPLICABLE_TAGS, get_present_tags
from docalign.types import AlignMode, Block, Diagnostic

logger = logging.getLogger(__name__)


def check_line_alignment(
    block: Block,
    *,
    mode: AlignMode = AlignMode.ALWAYS,
    tags: Iterable[str] | None = None,
    indent: str = "",
    source_text: str | None = None,
) -> list[Diagnostic]:
    """Run the line-alignment rule over one parsed comment.

    Args:
        block: The parsed comment.
        mode: ``always`` to require aligned columns, ``never`` to forbid them.
        tags: Applicable tag kinds; None selects the defaults, an empty
            collection selects nothing.
        indent: Whitespace the comment's opening line is indented by.
        source_text: The comment's original text, used for the single-line
            check; rendered from ``block`` when omitted.

    Returns:
        One diagnostic per offending tag, each with its fix.
    """
    applicable = tuple(tags) if tags is not None else DEFAULT_APPLICABLE_TAGS
    found_tags = get_present_tags(block, applicable)

    if mode == AlignMode.ALWAYS:
        text = source_text if source_text is not None else stringify(block)
        # Alignment across a single line is vacuous.
        if "\n" not in text:
            return []
        return check_alignment(block, found_tags, applicable, indent)

    diagnostics: list[Diagnostic] = []
    for tag in found_tags:
        diagnostic = check_not_aligned(tag)
        if diagnostic is not None:
            diagnostics.append(diagnostic)
    return diagnostics


class LineAlignmentChecker:
    """Checks and fixes standalone comment text with fixed rule options."""

    def __init__(self, options: RuleOptions | None = None, **overrides: object) -> None:
        base = options or RuleOptions()
        if overrides:
            try:
                base = RuleOptions.model_validate({**base.model_dump(), **overrides})
            except ValidationError as e:
                raise ConfigError(f"Invalid rule options: {e}", original=e) from e
        self._options = base

    @property
    def options(self) -> RuleOptions:
        return self._options

    def check(self, text: str) -> list[Diagnostic]:
        """Parse ``text`` as one comment and return its diagnostics."""
        block = parse(text)
        indent = self._options.indent
        if indent is None:
            indent = block.source[0].tokens.start if block.source else ""
        return check_line_alignment(
            block,
            mode=self._options.mode,
            tags=self._options.applicable_tags,
            indent=indent,
            source_text=text,
        )

    def fix(self, text: str) -> str:
        """Return ``text`` with every reported problem fixed (one pass)."""
        diagnostics = self.check(text)
        edits = [edit for d in diagnostics if d.fix is not None for edit in d.fix.edits]
        if not edits:
            return text
        logger.debug("Fixing %d tag(s)", len(diagnostics))
        return apply_edits(text, edits)
