"""
Diagram node types for railroad diagrams.

A rule's diagram is a small immutable expression tree built from a closed
set of node kinds:

- Leaves: Terminal (literal token), NonTerminal (named reference), Comment
- Containers: Sequence, Stack, Choice
- Repetition: Optional, OneOrMore, ZeroOrMore
- Root: Diagram (exactly one per tree, never nested)

NonTerminal labels are display text only; they are not resolved against
the rule registry.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field, model_validator


class NodeKind(StrEnum):
    """Discriminator values for diagram nodes."""

    TERMINAL = "terminal"
    NONTERMINAL = "nonterminal"
    SEQUENCE = "sequence"
    CHOICE = "choice"
    OPTIONAL = "optional"
    ONE_OR_MORE = "one_or_more"
    ZERO_OR_MORE = "zero_or_more"
    STACK = "stack"
    COMMENT = "comment"
    DIAGRAM = "diagram"


# ---------------------------------------------------------------------------
# Leaves
# ---------------------------------------------------------------------------


class Terminal(BaseModel):
    """A literal token, drawn in a rounded box."""

    kind: Literal[NodeKind.TERMINAL] = NodeKind.TERMINAL
    text: str = Field(min_length=1, description="Token text")

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return f'"{self.text}"'


class NonTerminal(BaseModel):
    """A reference to another rule by name, drawn in a square box."""

    kind: Literal[NodeKind.NONTERMINAL] = NodeKind.NONTERMINAL
    text: str = Field(min_length=1, description="Referenced rule name")

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return self.text


class Comment(BaseModel):
    """A non-syntactic annotation, e.g. a side condition on a rule."""

    kind: Literal[NodeKind.COMMENT] = NodeKind.COMMENT
    text: str = Field(min_length=1, description="Annotation text")

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return f"/* {self.text} */"


# ---------------------------------------------------------------------------
# Containers
# ---------------------------------------------------------------------------


class Sequence(BaseModel):
    """Ordered concatenation. May be empty (drawn as a plain line)."""

    kind: Literal[NodeKind.SEQUENCE] = NodeKind.SEQUENCE
    items: tuple[DiagramItem, ...] = ()

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return " ".join(str(i) for i in self.items)


class Stack(BaseModel):
    """Items stacked vertically in one frame; reads like a Sequence."""

    kind: Literal[NodeKind.STACK] = NodeKind.STACK
    items: tuple[DiagramItem, ...] = ()

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return " ".join(str(i) for i in self.items)


class Choice(BaseModel):
    """
    Ordered alternation.

    ``default_index`` selects the alternative drawn as the straight-through
    path. It must index an existing alternative.
    """

    kind: Literal[NodeKind.CHOICE] = NodeKind.CHOICE
    default_index: int = Field(ge=0, description="Straight-through alternative")
    items: tuple[DiagramItem, ...] = Field(min_length=1)

    model_config = ConfigDict(frozen=True)

    @model_validator(mode="after")
    def _default_in_range(self) -> Choice:
        if self.default_index >= len(self.items):
            raise ValueError(
                f"default_index {self.default_index} out of range for "
                f"{len(self.items)} alternative(s)"
            )
        return self

    def __str__(self) -> str:
        return "( " + " | ".join(str(i) for i in self.items) + " )"


# ---------------------------------------------------------------------------
# Repetition
# ---------------------------------------------------------------------------


class Optional(BaseModel):
    """Zero or one occurrence."""

    kind: Literal[NodeKind.OPTIONAL] = NodeKind.OPTIONAL
    item: DiagramItem

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return f"[ {self.item} ]"


class OneOrMore(BaseModel):
    """One or more occurrences."""

    kind: Literal[NodeKind.ONE_OR_MORE] = NodeKind.ONE_OR_MORE
    item: DiagramItem

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return f"{{ {self.item} }}+"


class ZeroOrMore(BaseModel):
    """Zero or more occurrences."""

    kind: Literal[NodeKind.ZERO_OR_MORE] = NodeKind.ZERO_OR_MORE
    item: DiagramItem

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return f"{{ {self.item} }}"


# ---------------------------------------------------------------------------
# Root
# ---------------------------------------------------------------------------


class Diagram(BaseModel):
    """
    Top-level wrapper turning a tree into a renderable unit.

    The root is typed as DiagramItem, which excludes Diagram, so a tree
    can never contain a second Diagram node.
    """

    kind: Literal[NodeKind.DIAGRAM] = NodeKind.DIAGRAM
    root: DiagramItem

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return str(self.root)


# ---------------------------------------------------------------------------
# Union type
# ---------------------------------------------------------------------------

DiagramItem = Annotated[
    Terminal
    | NonTerminal
    | Comment
    | Sequence
    | Stack
    | Choice
    | Optional
    | OneOrMore
    | ZeroOrMore,
    Field(discriminator="kind"),
]

# Rebuild models for recursive forward references
Sequence.model_rebuild()
Stack.model_rebuild()
Choice.model_rebuild()
Optional.model_rebuild()
OneOrMore.model_rebuild()
ZeroOrMore.model_rebuild()
Diagram.model_rebuild()
