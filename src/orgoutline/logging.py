"""Logging utilities."""

from __future__ import annotations

import contextlib
import contextvars
import logging
from pathlib import Path
from typing import Any

from rich.logging import RichHandler


_source_var: contextvars.ContextVar[str] = contextvars.ContextVar("orgoutline_source", default="-")


class _ContextFilter(logging.Filter):
    """Inject the document being processed into log records."""

    def filter(self, record: logging.LogRecord) -> bool:  # noqa: A003
        record.source = _source_var.get()  # type: ignore[attr-defined]
        return True


@contextlib.contextmanager
def document_context(*, source: str | Path) -> Any:
    """Temporarily bind the current document locator for log records.

    Args:
        source: Path or other locator of the document being loaded.
    """

    token = _source_var.set(str(source))
    try:
        yield
    finally:
        _source_var.reset(token)


def configure_logging(level: str = "INFO") -> None:
    """Configure application logging.

    Args:
        level: Logging level name.
    """

    handler = RichHandler(rich_tracebacks=True, show_time=True, show_level=True)
    handler.addFilter(_ContextFilter())

    formatter = logging.Formatter(
        fmt="%(asctime)s %(levelname)s source=%(source)s %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    handler.setFormatter(formatter)

    root = logging.getLogger()
    root.setLevel(level)
    # Avoid duplicate handlers if configure_logging is called multiple times
    if not any(isinstance(h, RichHandler) for h in root.handlers):
        root.addHandler(handler)
    else:
        for h in root.handlers:
            if isinstance(h, RichHandler):
                if not any(isinstance(f, _ContextFilter) for f in h.filters):
                    h.addFilter(_ContextFilter())
                h.setFormatter(formatter)


def get_logger(name: str) -> logging.Logger:
    """Get a module logger."""

    return logging.getLogger(name)
