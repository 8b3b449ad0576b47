"""The outline document: one parsed source, fully wrapped and queryable.

Example:
    >>> from orgoutline.document import Document
    >>> doc = Document.load("notes.json")
    >>> doc.overview.get("title")
    >>> [node.title for node in doc.find_by_level(1)]
"""

from __future__ import annotations

from pathlib import Path
from typing import Iterator

from orgoutline.config import Settings, load_settings
from orgoutline.loader import read_source
from orgoutline.logging import document_context, get_logger
from orgoutline.models.ast import Block, OrgAst, SectionElement
from orgoutline.outline import OutlineArena, OutlineCollection, OutlineNode, OutlineQueries
from orgoutline.parser import JsonAstParser, OutlineParser

logger = get_logger(__name__)


class Document(OutlineQueries):
    """Root of the outline model.

    Every heading entry of the AST is wrapped exactly once, at construction,
    and the resulting nodes never change afterwards. Outline queries are
    answered by the owned ``OutlineCollection``.
    """

    def __init__(self, ast: OrgAst, *, source: str | Path | None = None) -> None:
        self._ast = ast
        self._source = str(source) if source is not None else None

        arena = OutlineArena(ast.outlines)
        self._outlines = OutlineCollection(arena.node_at(index) for index in range(len(arena)))

        logger.debug("Built document with %d outlines", self._outlines.length)

    @classmethod
    def load(
        cls,
        path: str | Path,
        *,
        parser: OutlineParser | None = None,
        settings: Settings | None = None,
    ) -> Document:
        """Read, parse and build a document from ``path``.

        Raises:
            SourceUnavailable: The file could not be read.
            ParseError: The parser rejected its content.
        """

        settings = settings or load_settings()
        parser = parser or JsonAstParser()

        with document_context(source=path):
            text = read_source(
                path,
                encoding=settings.source_encoding,
                max_bytes=settings.max_source_bytes,
            )
            doc = cls(parser.parse(text), source=path)
            logger.info("Loaded document with %d outlines", doc.length)
        return doc

    def __repr__(self) -> str:
        return f"Document(source={self._source!r}, outlines={self.length})"

    @property
    def ast(self) -> OrgAst:
        return self._ast

    @property
    def source(self) -> str | None:
        return self._source

    @property
    def outlines(self) -> OutlineCollection:
        return self._outlines

    @property
    def overview(self) -> dict[str, str]:
        """Document options keyed by lower-cased name; the last duplicate wins."""

        overview: dict[str, str] = {}
        for option in self._ast.options:
            overview[option.name.lower()] = option.value
        return overview

    def find_block_by_name(self, name: str) -> list[Block]:
        return [block for block in self._ast.blocks if block.name == name]

    # OutlineQueries, delegated to the owned collection

    @property
    def length(self) -> int:
        return self._outlines.length

    def __iter__(self) -> Iterator[OutlineNode]:
        return iter(self._outlines)

    def item(self, n: int) -> OutlineNode:
        return self._outlines.item(n)

    def find_by_level(self, level: int) -> OutlineCollection:
        return self._outlines.find_by_level(level)

    def find_by_tags(self, tag: str) -> OutlineCollection:
        return self._outlines.find_by_tags(tag)

    def find_by_title(self, title: str) -> OutlineCollection:
        return self._outlines.find_by_title(title)

    @property
    def tables(self) -> list[SectionElement]:
        return self._outlines.tables
