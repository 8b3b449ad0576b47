"""Outline nodes and collections.

The document keeps its headings as one flat, ordered sequence. Nesting is never
stored: ``OutlineNode.children()`` and ``OutlineNode.parent()`` derive it from
the ``level`` of neighbouring entries.
"""

from __future__ import annotations

import weakref
from abc import ABC, abstractmethod
from typing import Any, Iterable, Iterator, Sequence

from orgoutline.errors import IndexOutOfRange
from orgoutline.models.ast import OutlineEntry, SectionElement

TABLE_TYPE = "table"


class OutlineArena:
    """Heading entries of one document and the canonical node for each position.

    Nodes are held weakly; the owning document keeps them alive. A position whose
    node has been released gets a new one on the next lookup.
    """

    def __init__(self, entries: Sequence[OutlineEntry]) -> None:
        self.entries: tuple[OutlineEntry, ...] = tuple(entries)
        self._nodes: list[weakref.ReferenceType[OutlineNode] | None] = [None] * len(self.entries)

    def __len__(self) -> int:
        return len(self.entries)

    def node_at(self, index: int) -> OutlineNode:
        ref = self._nodes[index]
        node = ref() if ref is not None else None
        if node is None:
            entry = self.entries[index]
            node = OutlineNode(entry, position=index, arena=self)
            self._nodes[index] = weakref.ref(node)
            entry.cache_node(node)
        return node


class OutlineQueries(ABC):
    """Read-only query interface shared by collections and documents."""

    @property
    @abstractmethod
    def length(self) -> int:
        """Number of outlines."""

    @abstractmethod
    def __iter__(self) -> Iterator[OutlineNode]:
        """Iterate outlines in document order."""

    @abstractmethod
    def item(self, n: int) -> OutlineNode:
        """Return the outline at ``n`` or raise ``IndexOutOfRange``."""

    @abstractmethod
    def find_by_level(self, level: int) -> OutlineCollection:
        """Outlines whose level equals ``level``."""

    @abstractmethod
    def find_by_tags(self, tag: str) -> OutlineCollection:
        """Outlines tagged with ``tag``."""

    @abstractmethod
    def find_by_title(self, title: str) -> OutlineCollection:
        """Outlines whose title equals ``title``."""

    @property
    @abstractmethod
    def tables(self) -> list[SectionElement]:
        """Tables of every outline, in outline order."""

    def __len__(self) -> int:
        return self.length

    def __getitem__(self, n: int) -> OutlineNode:
        return self.item(n)

    def __bool__(self) -> bool:
        return self.length > 0

    def first(self) -> OutlineNode | None:
        """First outline, or ``None`` when empty."""

        return self.item(0) if self.length else None

    def last(self) -> OutlineNode | None:
        """Last outline, or ``None`` when empty."""

        return self.item(self.length - 1) if self.length else None


class OutlineCollection(OutlineQueries):
    """Ordered, index-addressable list of outline nodes."""

    def __init__(self, outlines: Iterable[OutlineNode] | None = None) -> None:
        self._outlines: tuple[OutlineNode, ...] = tuple(outlines or ())

    @property
    def length(self) -> int:
        return len(self._outlines)

    def __iter__(self) -> Iterator[OutlineNode]:
        return iter(self._outlines)

    def __repr__(self) -> str:
        return f"OutlineCollection({[node.title for node in self._outlines]!r})"

    def item(self, n: int) -> OutlineNode:
        if not 0 <= n < len(self._outlines):
            raise IndexOutOfRange(n, len(self._outlines))
        return self._outlines[n]

    def find_by_level(self, level: int) -> OutlineCollection:
        return OutlineCollection(node for node in self._outlines if node.level == level)

    def find_by_tags(self, tag: str) -> OutlineCollection:
        return OutlineCollection(node for node in self._outlines if tag in node.tags)

    def find_by_title(self, title: str) -> OutlineCollection:
        return OutlineCollection(node for node in self._outlines if node.title == title)

    @property
    def tables(self) -> list[SectionElement]:
        return [table for node in self._outlines for table in node.tables]


class OutlineNode:
    """A single heading entry with index-based navigation.

    ``title``, ``level`` and ``tags`` are copied from the heading when the node
    is built. ``position`` is the entry's index in the document's ``OutlineArena``,
    which is shared by every node of that document.
    """

    def __init__(
        self,
        entry: OutlineEntry,
        *,
        position: int,
        arena: OutlineArena,
    ) -> None:
        self._entry = entry
        self._arena = arena
        self.position = position

        self.title: str = entry.heading.title
        self.level: int = entry.heading.level
        self.tags: tuple[str, ...] = tuple(entry.heading.tags)

    def __repr__(self) -> str:
        return f"OutlineNode(position={self.position}, level={self.level}, title={self.title!r})"

    @property
    def entry(self) -> OutlineEntry:
        """The wrapped AST entry. Read it, do not mutate it."""

        return self._entry

    @property
    def tables(self) -> list[SectionElement]:
        return [child for child in self._entry.section.children if child.type == TABLE_TYPE]

    def next(self) -> OutlineNode | None:
        """Node right after this one, or ``None`` for the last node."""

        if self.position >= len(self._arena) - 1:
            return None
        return self._arena.node_at(self.position + 1)

    def prev(self) -> OutlineNode | None:
        """Node right before this one, or ``None`` for the first node.

        A negative position also yields ``None``.
        """

        if self.position <= 0:
            return None
        return self._arena.node_at(self.position - 1)

    def children(self) -> OutlineCollection:
        """Every following node nested below this one.

        Walks forward while the level stays strictly greater than this node's
        level, so level gaps (1 then 3) still count as nesting.
        """

        found: list[OutlineNode] = []
        curr = self.next()
        while curr is not None and curr.level > self.level:
            found.append(curr)
            curr = curr.next()
        return OutlineCollection(found)

    def parent(self) -> OutlineNode | None:
        """Nearest preceding node with a lower level, or ``None`` at top level."""

        curr = self.prev()
        while curr is not None and curr.level >= self.level:
            curr = curr.prev()
        return curr

    def to_dict(self) -> dict[str, Any]:
        """Structured data of the wrapped entry (heading and section)."""

        return self._entry.model_dump(mode="json")
