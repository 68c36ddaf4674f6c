"""Turn an original/desired pair of tag lines into a minimal line edit."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from docalign.errors import FixConflictError
from docalign.types import FixEdit, Line, LineEdit

logger = logging.getLogger(__name__)


def reconcile(original: Sequence[Line], desired: Sequence[Line]) -> FixEdit | None:
    """Diff two equally long line sequences.

    Returns an edit keyed by the original line numbers, holding only lines
    whose text differs, or None if nothing differs.
    """
    if len(original) != len(desired):
        raise ValueError(
            f"Cannot reconcile {len(original)} original lines with {len(desired)} desired lines"
        )

    edits = [
        LineEdit(number=before.number, old=before.source, new=after.source)
        for before, after in zip(original, desired, strict=True)
        if before.source != after.source
    ]
    if not edits:
        return None
    return FixEdit(edits=edits)


def renumber(original: Sequence[Line], formatted: Sequence[Line]) -> list[Line]:
    """Give ``formatted`` lines the numbers of ``original``, one for one.

    Missing formatted lines are filled from ``original`` so the result always
    spans exactly the original lines.
    """
    lines = [
        after.model_copy(update={"number": before.number})
        for before, after in zip(original, formatted)
    ]
    lines.extend(original[len(lines):])
    return lines


def apply_edits(text: str, edits: Sequence[LineEdit], offset: int = 0) -> str:
    """Apply line edits to ``text``; line ``n`` of an edit is line ``n + offset``.

    Lines that already hold the new text are left alone, so applying the same
    edits twice is a no-op. Raises FixConflictError if a line holds neither
    the old nor the new text.
    """
    lines = text.split("\n")
    for edit in edits:
        index = edit.number + offset
        current = lines[index] if 0 <= index < len(lines) else None
        if current == edit.new:
            continue
        if current != edit.old:
            raise FixConflictError(
                f"Line {index + 1} changed since it was checked",
                line=index,
                expected=edit.old,
                found=current or "",
            )
        lines[index] = edit.new
    logger.debug("Applied %d line edit(s)", len(edits))
    return "\n".join(lines)
