"""docalign — check and fix the column alignment of JSDoc tag lines.

``always`` mode requires the type, name and description columns of the
configured tags to line up; ``never`` mode forbids padding them into columns.
Both report one diagnostic per offending tag with a line-preserving fix.
"""

__version__ = "0.1.0"

from docalign.comment import parse, stringify
from docalign.config.schema import LintConfig, RuleOptions
from docalign.core import LineAlignmentChecker, check_line_alignment
from docalign.rules.reconcile import apply_edits
from docalign.scanner import fix_source, lint_source
from docalign.tags import DEFAULT_APPLICABLE_TAGS, tag_might_have_namepath
from docalign.types import AlignMode, Block, Diagnostic, FixEdit, Line, LineEdit, Spec, Tokens

__all__ = [
    "__version__",
    "parse",
    "stringify",
    "check_line_alignment",
    "LineAlignmentChecker",
    "lint_source",
    "fix_source",
    "apply_edits",
    "tag_might_have_namepath",
    "DEFAULT_APPLICABLE_TAGS",
    "AlignMode",
    "RuleOptions",
    "LintConfig",
    "Block",
    "Spec",
    "Line",
    "Tokens",
    "Diagnostic",
    "FixEdit",
    "LineEdit",
]
