"""Boundary with the external org parser.

Turning org text into an AST is someone else's job. This module defines the
contract a parser must satisfy and ships an adapter for parser output that was
serialized to JSON.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from pydantic import ValidationError

from orgoutline.errors import ParseError
from orgoutline.logging import get_logger
from orgoutline.models.ast import OrgAst

logger = get_logger(__name__)


class OutlineParser(ABC):
    """Turns document source text into an ``OrgAst``."""

    @abstractmethod
    def parse(self, source: str) -> OrgAst:
        """Parse ``source``.

        Raises:
            ParseError: The source is not well-formed.
        """


class JsonAstParser(OutlineParser):
    """Reads an AST that an org parser already produced and dumped as JSON.

    The expected document is an object with ``outlines``, ``options`` and
    ``blocks`` arrays, shaped like ``orgoutline.models.ast.OrgAst``.
    """

    def parse(self, source: str) -> OrgAst:
        try:
            ast = OrgAst.model_validate_json(source)
        except ValidationError as exc:
            raise ParseError(f"malformed AST: {exc}") from exc

        logger.debug(
            "Parsed AST with %d outlines, %d options, %d blocks",
            len(ast.outlines),
            len(ast.options),
            len(ast.blocks),
        )
        return ast
