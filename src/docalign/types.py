"""Shared Pydantic models for docalign."""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, Field

# ── Enums ──


class AlignMode(StrEnum):
    ALWAYS = "always"
    NEVER = "never"


# ── Token line model ──

# Slot order of one physical comment line; concatenating them in this order
# reproduces the line.
SLOT_ORDER: tuple[str, ...] = (
    "start",
    "delimiter",
    "post_delimiter",
    "tag",
    "post_tag",
    "type",
    "post_type",
    "name",
    "post_name",
    "description",
    "end",
)


class Tokens(BaseModel):
    start: str = ""
    delimiter: str = ""
    post_delimiter: str = ""
    tag: str = ""
    post_tag: str = ""
    type: str = ""
    post_type: str = ""
    name: str = ""
    post_name: str = ""
    description: str = ""
    end: str = ""

    def render(self) -> str:
        """Concatenate all slots back into the line text."""
        return "".join(getattr(self, slot) for slot in SLOT_ORDER)

    def replace(self, **slots: str) -> Tokens:
        """Return a copy with the given slots replaced."""
        return self.model_copy(update=slots)


class Line(BaseModel):
    number: int
    tokens: Tokens = Field(default_factory=Tokens)

    @property
    def source(self) -> str:
        return self.tokens.render()

    def with_tokens(self, tokens: Tokens) -> Line:
        return self.model_copy(update={"tokens": tokens})


class Spec(BaseModel):
    """One tag of a comment block and the lines it spans."""

    tag: str
    name: str = ""
    type: str = ""
    optional: bool = False
    default: str | None = None
    description: str = ""
    problems: list[str] = Field(default_factory=list)
    source: list[Line] = Field(default_factory=list)


class Block(BaseModel):
    """A parsed ``/** ... */`` comment.

    ``source`` holds every line of the comment; each tag's ``source`` holds
    the subset of those lines that belong to it.
    """

    description: str = ""
    tags: list[Spec] = Field(default_factory=list)
    source: list[Line] = Field(default_factory=list)


# ── Results ──


class LineEdit(BaseModel):
    number: int
    old: str
    new: str


class FixEdit(BaseModel):
    """Line-number keyed replacements; unchanged lines are never listed."""

    edits: list[LineEdit] = Field(default_factory=list)

    @property
    def line_numbers(self) -> list[int]:
        return [edit.number for edit in self.edits]


class Diagnostic(BaseModel):
    message: str
    tag: Spec
    fix: FixEdit | None = None

    @property
    def line(self) -> int:
        """Block-relative number of the tag's first line."""
        return self.tag.source[0].number if self.tag.source else 0


class FileDiagnostic(BaseModel):
    path: str = "<text>"
    line: int
    message: str
    tag: str
    fixable: bool = False
