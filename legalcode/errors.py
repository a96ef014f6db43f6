"""
Exceptions raised while reading and decoding a legal-district code registry.
"""

from pathlib import Path


class LegalCodeError(Exception):
    """Base class for registry decoding errors."""


class SourceReadError(LegalCodeError):
    """The registry text could not be obtained from its source."""

    def __init__(self, path: str | Path, reason: str):
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"Cannot read registry source {self.path}: {reason}")


class MalformedRowError(LegalCodeError):
    """A data row does not follow the fixed column layout.

    `line` is the 1-based line number in the source text (the header is line 1).
    """

    def __init__(self, line: int, row: str, reason: str):
        self.line = line
        self.row = row
        self.reason = reason
        super().__init__(f"Malformed row at line {line}: {reason} ({row!r})")
