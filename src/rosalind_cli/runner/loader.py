"""Data file loading."""

from __future__ import annotations

import logging
from pathlib import Path

logger = logging.getLogger(__name__)


def read_data_file(path: Path, encoding: str = "utf-8") -> str:
    """Return the full text of `path`.

    Raises:
        OSError: If the file cannot be opened or read.
        UnicodeDecodeError: If the contents are not valid in `encoding`.
    """

    text = path.read_text(encoding=encoding)
    logger.debug("Data file loaded", extra={"path": str(path), "characters": len(text)})
    return text
