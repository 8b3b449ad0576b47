"""Error taxonomy for loading and querying outline documents."""

from __future__ import annotations

from pathlib import Path


class OutlineError(Exception):
    """Base class for all orgoutline errors."""


class SourceUnavailable(OutlineError):
    """The document source could not be obtained."""

    def __init__(self, locator: str | Path, reason: str) -> None:
        self.locator = str(locator)
        self.reason = reason
        super().__init__(f"{self.locator}: {reason}")


class ParseError(OutlineError):
    """The document source is not a well-formed AST."""


class IndexOutOfRange(OutlineError, IndexError):
    """A positional accessor was called with an out-of-bounds index."""

    def __init__(self, index: int, length: int) -> None:
        self.index = index
        self.length = length
        super().__init__(f"index {index} out of range for {length} outlines")
