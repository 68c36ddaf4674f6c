"""Locate JSDoc comments in JavaScript/TypeScript source and run the rule on each.

Comment positions are found with a best-effort lexer that skips line
comments and string/template literals; regular-expression literals are not
recognised.
"""

from __future__ import annotations

import logging
import re

from pydantic import BaseModel

from docalign.comment import parse
from docalign.config.schema import RuleOptions
from docalign.core import check_line_alignment
from docalign.errors import CommentParseError
from docalign.rules.reconcile import apply_edits
from docalign.types import Diagnostic, FileDiagnostic, LineEdit

logger = logging.getLogger(__name__)

_LEXER_RE = re.compile(
    r"""
      (?P<line_comment>//[^\n]*)
    | (?P<block_comment>/\*.*?\*/)
    | (?P<string>"(?:\\.|[^"\\\n])*"|'(?:\\.|[^'\\\n])*'|`(?:\\.|[^`\\])*`)
    """,
    re.DOTALL | re.VERBOSE,
)


class CommentSpan(BaseModel):
    """One ``/** ... */`` comment and where it sits in its file."""

    start_line: int  # 0-based line of "/**"
    column: int
    text: str
    prefix: str = ""  # file text before "/**" on its line
    suffix: str = ""  # file text after "*/" on its line

    @property
    def indent(self) -> str:
        """Whitespace standing in for everything before ``/**`` on its line."""
        if not self.prefix or self.prefix.isspace():
            return self.prefix
        return " " * self.column

    @property
    def last_line(self) -> int:
        """Block-relative number of the ``*/`` line."""
        return self.text.count("\n")

    @property
    def is_multiline(self) -> bool:
        return "\n" in self.text

    def file_line(self, number: int, text: str) -> str:
        """Turn block-relative line ``number`` back into the full file line."""
        if number == 0 and self.prefix != self.indent:
            text = self.prefix + text[len(self.indent):]
        if number == self.last_line:
            text += self.suffix
        return text


def find_comments(source: str) -> list[CommentSpan]:
    """Return every JSDoc comment in ``source``, in order."""
    spans: list[CommentSpan] = []
    for match in _LEXER_RE.finditer(source):
        text = match.group("block_comment")
        if text is None or not text.startswith("/**") or text.startswith(("/***", "/**/")):
            continue

        start = match.start()
        line_start = source.rfind("\n", 0, start) + 1
        line_end = source.find("\n", match.end())
        if line_end == -1:
            line_end = len(source)
        spans.append(
            CommentSpan(
                start_line=source.count("\n", 0, start),
                column=start - line_start,
                text=text,
                prefix=source[line_start:start],
                suffix=source[match.end():line_end],
            )
        )
    return spans


def check_comment(span: CommentSpan, options: RuleOptions) -> list[Diagnostic]:
    """Run the rule on one comment; diagnostics carry block-relative lines."""
    block = parse(span.indent + span.text)
    indent = options.indent if options.indent is not None else span.indent
    return check_line_alignment(
        block,
        mode=options.mode,
        tags=options.applicable_tags,
        indent=indent,
        source_text=span.text,
    )


def _checked_comments(source: str, options: RuleOptions) -> list[tuple[CommentSpan, Diagnostic]]:
    results: list[tuple[CommentSpan, Diagnostic]] = []
    for span in find_comments(source):
        try:
            diagnostics = check_comment(span, options)
        except CommentParseError as e:
            logger.warning("Skipping comment on line %d: %s", span.start_line + 1, e.message)
            continue
        results.extend((span, diagnostic) for diagnostic in diagnostics)
    return results


def lint_source(
    source: str,
    options: RuleOptions | None = None,
    path: str = "<text>",
) -> list[FileDiagnostic]:
    """Check every JSDoc comment in ``source``; lines in the result are 1-based."""
    options = options or RuleOptions()
    return [
        FileDiagnostic(
            path=path,
            line=span.start_line + diagnostic.line + 1,
            message=diagnostic.message,
            tag=diagnostic.tag.tag,
            fixable=diagnostic.fix is not None,
        )
        for span, diagnostic in _checked_comments(source, options)
    ]


def source_edits(source: str, options: RuleOptions) -> list[LineEdit]:
    """Collect file-level edits for one fix pass.

    When two comments share a line only the first one's edit is kept; the
    other is picked up by the next pass.
    """
    edits: list[LineEdit] = []
    touched: set[int] = set()
    for span, diagnostic in _checked_comments(source, options):
        if diagnostic.fix is None:
            continue
        file_edits = [
            LineEdit(
                number=span.start_line + edit.number,
                old=span.file_line(edit.number, edit.old),
                new=span.file_line(edit.number, edit.new),
            )
            for edit in diagnostic.fix.edits
        ]
        if touched.intersection(edit.number for edit in file_edits):
            continue
        touched.update(edit.number for edit in file_edits)
        edits.extend(file_edits)
    return edits


def fix_source(source: str, options: RuleOptions | None = None, max_passes: int = 10) -> str:
    """Apply fixes until nothing is left to fix or ``max_passes`` is reached."""
    options = options or RuleOptions()
    current = source
    for pass_number in range(1, max_passes + 1):
        edits = source_edits(current, options)
        if not edits:
            return current
        logger.debug("Fix pass %d: %d line edit(s)", pass_number, len(edits))
        current = apply_edits(current, edits)
    if source_edits(current, options):
        logger.warning("Fixes did not settle after %d passes", max_passes)
    return current
