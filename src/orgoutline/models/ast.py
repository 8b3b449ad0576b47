"""AST models for parsed outline documents.

These describe the output of an org parser: heading entries in document order,
plus the document-wide options and named blocks. The models are read-mostly;
the only thing this package ever writes to them is the cached back-reference
from an entry to its ``OutlineNode`` wrapper.
"""

from __future__ import annotations

import weakref
from typing import TYPE_CHECKING, Any

from pydantic import BaseModel, ConfigDict, Field, PrivateAttr

if TYPE_CHECKING:
    from orgoutline.outline import OutlineNode


class Heading(BaseModel):
    """Heading line of an outline entry."""

    title: str
    level: int = Field(ge=1)
    tags: list[str] = Field(default_factory=list)


class SectionElement(BaseModel):
    """One element of a section body (paragraph, table, list, ...).

    Only ``type`` is interpreted; the remaining parser payload is kept as-is.
    """

    model_config = ConfigDict(extra="allow")

    type: str


class Section(BaseModel):
    """Body of an outline entry."""

    children: list[SectionElement] = Field(default_factory=list)


class OutlineEntry(BaseModel):
    """A heading together with the section it introduces."""

    heading: Heading
    section: Section = Field(default_factory=Section)

    _node_ref: weakref.ReferenceType[OutlineNode] | None = PrivateAttr(default=None)

    def cached_node(self) -> OutlineNode | None:
        """Return the wrapper most recently built for this entry, if it is still alive."""

        if self._node_ref is None:
            return None
        return self._node_ref()

    def cache_node(self, node: OutlineNode) -> None:
        self._node_ref = weakref.ref(node)


class Option(BaseModel):
    """Document-level ``#+NAME: value`` option."""

    name: str
    value: str = ""


class Block(BaseModel):
    """Named content block; the body is opaque to this package."""

    model_config = ConfigDict(extra="allow")

    name: str

    def payload(self) -> dict[str, Any]:
        """Return everything the parser attached to the block besides its name."""

        return dict(self.model_extra or {})


class OrgAst(BaseModel):
    """Root of a parsed document."""

    outlines: list[OutlineEntry] = Field(default_factory=list)
    options: list[Option] = Field(default_factory=list)
    blocks: list[Block] = Field(default_factory=list)
