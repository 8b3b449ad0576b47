"""Tests for logging configuration."""

from __future__ import annotations

import logging

from rich.logging import RichHandler

from orgoutline.logging import _ContextFilter, configure_logging, document_context


def _rich_handlers() -> list[RichHandler]:
    return [h for h in logging.getLogger().handlers if isinstance(h, RichHandler)]


def test_configure_logging_is_idempotent() -> None:
    """It should keep one handler with one context filter across repeated calls."""

    root = logging.getLogger()
    before = list(root.handlers)
    level = root.level
    try:
        for _ in range(3):
            configure_logging("WARNING")

        handlers = _rich_handlers()
        assert len(handlers) == 1
        assert sum(isinstance(f, _ContextFilter) for f in handlers[0].filters) == 1
    finally:
        for h in list(root.handlers):
            if h not in before:
                root.removeHandler(h)
        root.setLevel(level)


def test_document_context_tags_records() -> None:
    """It should stamp the bound source on records and reset it afterwards."""

    record = logging.LogRecord("orgoutline", logging.INFO, __file__, 1, "msg", None, None)
    context_filter = _ContextFilter()

    with document_context(source="notes.json"):
        context_filter.filter(record)
        assert record.source == "notes.json"

    context_filter.filter(record)
    assert record.source == "-"
