"""JSDoc tag vocabulary: which tags carry a namepath, and the default tag set."""

from __future__ import annotations

from collections.abc import Iterable

from docalign.types import Block, Spec

# Tags whose content may include a name/namepath after the type.
_NAMEPATH_TAGS: frozenset[str] = frozenset(
    {
        "alias",
        "arg",
        "argument",
        "augments",
        "borrows",
        "callback",
        "class",
        "const",
        "constant",
        "constructor",
        "emits",
        "event",
        "extends",
        "external",
        "fires",
        "func",
        "function",
        "host",
        "interface",
        "lends",
        "listens",
        "member",
        "memberof",
        "memberof!",
        "method",
        "mixes",
        "mixin",
        "module",
        "name",
        "namespace",
        "param",
        "prop",
        "property",
        "requires",
        "this",
        "typedef",
        "var",
    }
)

DEFAULT_APPLICABLE_TAGS: tuple[str, ...] = (
    "param",
    "arg",
    "argument",
    "property",
    "prop",
    "returns",
    "return",
)

_NAMEPATH_SPACERS = ("post_delimiter", "post_tag", "post_type", "post_name")
_NAMEPATH_CONTENTS = ("tag", "type", "name", "description")
_PLAIN_SPACERS = ("post_delimiter", "post_tag", "post_type")
_PLAIN_CONTENTS = ("tag", "type", "description")


def tag_might_have_namepath(kind: str) -> bool:
    """Return True if tags of this kind may carry a name slot.

    Unknown kinds never do.
    """
    return kind in _NAMEPATH_TAGS


def slot_layout(kind: str) -> tuple[tuple[str, ...], tuple[str, ...]]:
    """Return ``(spacers, contents)`` for a tag kind.

    Spacer ``i`` is the whitespace that precedes content ``i`` on the tag's
    first line.
    """
    if tag_might_have_namepath(kind):
        return _NAMEPATH_SPACERS, _NAMEPATH_CONTENTS
    return _PLAIN_SPACERS, _PLAIN_CONTENTS


def get_present_tags(block: Block, applicable: Iterable[str]) -> list[Spec]:
    """Return the block's tags whose kind is in ``applicable``, in source order."""
    wanted = set(applicable)
    return [spec for spec in block.tags if spec.tag in wanted]
