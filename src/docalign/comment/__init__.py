"""JSDoc comment tokenizer, renderer and spacing transforms."""

from docalign.comment.parser import parse, stringify
from docalign.comment.transforms import align, flow, indent, rewire_specs

__all__ = [
    "parse",
    "stringify",
    "align",
    "indent",
    "flow",
    "rewire_specs",
]
