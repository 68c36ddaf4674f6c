"""The line-alignment rule: ``always`` and ``never`` checks plus the fix reconciler."""

from docalign.rules.always import ALIGNED_MESSAGE, check_alignment, format_block
from docalign.rules.never import NOT_ALIGNED_MESSAGE, check_not_aligned
from docalign.rules.reconcile import apply_edits, reconcile

__all__ = [
    "ALIGNED_MESSAGE",
    "NOT_ALIGNED_MESSAGE",
    "check_alignment",
    "check_not_aligned",
    "format_block",
    "reconcile",
    "apply_edits",
]
