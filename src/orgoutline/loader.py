"""Reading document sources from the filesystem."""

from __future__ import annotations

from pathlib import Path

from orgoutline.errors import SourceUnavailable
from orgoutline.logging import get_logger

logger = get_logger(__name__)


def read_source(path: str | Path, *, encoding: str = "utf-8", max_bytes: int | None = None) -> str:
    """Read the full text of a document source.

    Args:
        path: Location of the source file.
        encoding: Text encoding of the file.
        max_bytes: Optional upper bound on the file size.

    Returns:
        The decoded source text.

    Raises:
        SourceUnavailable: The file is missing, not a regular file, too large,
            unreadable, or not valid text in ``encoding``.
    """

    source_path = Path(path)
    if not source_path.exists():
        raise SourceUnavailable(source_path, "file not found")
    if not source_path.is_file():
        raise SourceUnavailable(source_path, "not a regular file")

    try:
        size = source_path.stat().st_size
        if max_bytes is not None and size > max_bytes:
            raise SourceUnavailable(source_path, f"file is {size} bytes, limit is {max_bytes}")
        text = source_path.read_text(encoding=encoding)
    except UnicodeDecodeError as exc:
        raise SourceUnavailable(source_path, f"cannot decode as {encoding}: {exc.reason}") from exc
    except LookupError as exc:
        raise SourceUnavailable(source_path, f"unknown encoding {encoding!r}") from exc
    except OSError as exc:
        raise SourceUnavailable(source_path, exc.strerror or str(exc)) from exc

    logger.debug("Read %d characters from %s", len(text), source_path)
    return text
