"""
Utilities for loading registry source text.
"""

import logging
from pathlib import Path

from ..errors import SourceReadError

logger = logging.getLogger(__name__)


def read_source(filepath: str | Path) -> str:
    """
    Read a registry TSV file as text.

    The registry export is UTF-8; a leading byte-order mark is dropped.

    Args:
        filepath: Path to the TSV file

    Returns:
        The decoded file content

    Raises:
        SourceReadError: if the file is missing, unreadable or not UTF-8
    """
    path = Path(filepath)

    try:
        data = path.read_bytes()
    except OSError as e:
        raise SourceReadError(path, e.strerror or str(e)) from e

    try:
        text = data.decode("utf-8-sig")
    except UnicodeDecodeError as e:
        raise SourceReadError(path, f"not valid UTF-8 ({e.reason} at byte {e.start})") from e

    logger.debug("Read %d bytes from %s", len(data), path)
    return text
