"""Pydantic models used across the project."""

from __future__ import annotations

from orgoutline.models.ast import (
    Block,
    Heading,
    Option,
    OrgAst,
    OutlineEntry,
    Section,
    SectionElement,
)

__all__ = [
    "Block",
    "Heading",
    "Option",
    "OrgAst",
    "OutlineEntry",
    "Section",
    "SectionElement",
]
