"""Console helpers."""

from __future__ import annotations

import sys
from typing import TextIO

DEFAULT_MESSAGE = "Анализирую..."
BAR_WIDTH = 50


def format_progress_bar(current: int, total: int, message: str = DEFAULT_MESSAGE) -> str:
    """Render a progress bar line for *current* out of *total* steps."""
    if total <= 0:
        raise ValueError("total must be positive")
    progress = current / total
    pos = int(BAR_WIDTH * progress)
    bar = "".join(
        "=" if i < pos else ">" if i == pos else " " for i in range(BAR_WIDTH)
    )
    return f"{message} [{bar}] {progress * 100.0:.2f}%"


def show_progress_bar(
    current: int,
    total: int,
    message: str = DEFAULT_MESSAGE,
    stream: TextIO | None = None,
) -> None:
    """Redraw the progress bar in place on *stream*."""
    out = stream if stream is not None else sys.stdout
    out.write("\r" + format_progress_bar(current, total, message))
    out.flush()