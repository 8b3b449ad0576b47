"""Tests for source loading, the JSON AST parser and Document.load."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from orgoutline.config import Settings
from orgoutline.document import Document
from orgoutline.errors import ParseError, SourceUnavailable
from orgoutline.loader import read_source
from orgoutline.models.ast import OrgAst
from orgoutline.parser import JsonAstParser, OutlineParser


def _write_ast(path: Path, data: dict) -> Path:
    path.write_text(json.dumps(data), encoding="utf-8")
    return path


def test_read_source_returns_text(tmp_path: Path) -> None:
    """It should return the whole file content."""

    path = tmp_path / "doc.json"
    path.write_text("héllo", encoding="utf-8")

    assert read_source(path) == "héllo"


def test_read_source_missing_file(tmp_path: Path) -> None:
    """A missing file is SourceUnavailable, not an empty document."""

    with pytest.raises(SourceUnavailable) as info:
        read_source(tmp_path / "missing.json")
    assert info.value.locator.endswith("missing.json")


def test_read_source_rejects_directories(tmp_path: Path) -> None:
    """It should refuse a directory as a source."""

    with pytest.raises(SourceUnavailable):
        read_source(tmp_path)


def test_read_source_bad_encoding(tmp_path: Path) -> None:
    """Undecodable bytes are SourceUnavailable."""

    path = tmp_path / "doc.json"
    path.write_bytes(b"\xff\xfe\xfa")

    with pytest.raises(SourceUnavailable):
        read_source(path, encoding="utf-8")


def test_read_source_size_limit(tmp_path: Path) -> None:
    """It should refuse files above max_bytes."""

    path = tmp_path / "doc.json"
    path.write_text("x" * 20, encoding="utf-8")

    with pytest.raises(SourceUnavailable):
        read_source(path, max_bytes=10)


def test_json_parser_reads_ast() -> None:
    """It should validate parser output into an OrgAst."""

    ast = JsonAstParser().parse(
        json.dumps({"outlines": [{"heading": {"title": "a", "level": 1}}], "options": []})
    )

    assert isinstance(ast, OrgAst)
    assert ast.outlines[0].heading.tags == []
    assert ast.outlines[0].section.children == []
    assert ast.blocks == []


@pytest.mark.parametrize(
    "source",
    [
        "not json",
        json.dumps({"outlines": [{"heading": {"title": "a", "level": 0}}]}),
        json.dumps({"outlines": [{"section": {"children": []}}]}),
        json.dumps({"options": [{"value": "no name"}]}),
    ],
)
def test_json_parser_rejects_malformed_ast(source: str) -> None:
    """Shape violations surface as ParseError."""

    with pytest.raises(ParseError):
        JsonAstParser().parse(source)


def test_document_load(tmp_path: Path) -> None:
    """It should read, parse and build a document from a file."""

    path = _write_ast(
        tmp_path / "doc.json",
        {
            "outlines": [
                {"heading": {"title": "a", "level": 1}},
                {"heading": {"title": "b", "level": 2}},
            ],
            "options": [{"name": "Title", "value": "Doc"}],
        },
    )

    doc = Document.load(path, settings=Settings())

    assert doc.length == 2
    assert doc.source == str(path)
    assert doc.overview == {"title": "Doc"}
    assert doc.first().children().length == 1


def test_document_load_propagates_parse_error(tmp_path: Path) -> None:
    """It should let ParseError through unchanged."""

    path = tmp_path / "doc.json"
    path.write_text("{", encoding="utf-8")

    with pytest.raises(ParseError):
        Document.load(path, settings=Settings())


def test_document_load_propagates_source_unavailable(tmp_path: Path) -> None:
    """It should let SourceUnavailable through unchanged."""

    with pytest.raises(SourceUnavailable):
        Document.load(tmp_path / "missing.json", settings=Settings())


def test_document_load_uses_given_parser(tmp_path: Path) -> None:
    """Any OutlineParser can be plugged in."""

    class LineParser(OutlineParser):
        def parse(self, source: str) -> OrgAst:
            outlines = []
            for line in source.splitlines():
                stars, _, title = line.partition(" ")
                outlines.append({"heading": {"title": title, "level": len(stars)}})
            return OrgAst.model_validate({"outlines": outlines})

    path = tmp_path / "doc.org"
    path.write_text("* One\n** Two\n* Three\n", encoding="utf-8")

    doc = Document.load(path, parser=LineParser(), settings=Settings())

    assert [n.title for n in doc.find_by_level(1)] == ["One", "Three"]
