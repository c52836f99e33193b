"""Writing sample text files."""

from __future__ import annotations

import logging
from pathlib import Path

logger = logging.getLogger(__name__)


def create_test_file(filename: str | Path, content: str) -> Path:
    """Write *content* to *filename* as UTF-8, byte for byte, and return its path."""
    path = Path(filename)
    path.write_bytes(content.encode("utf-8"))
    logger.debug("Файл создан: %s", path)
    return path