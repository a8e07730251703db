"""Fixed-column field helpers shared by the record extractors."""

from __future__ import annotations

import math
from typing import Optional


def column(line: str, start: int, end: int) -> str:
    """Return ``line[start:end]`` clamped to the line length.

    Parameters
    ----------
    line
        Raw record line.
    start
        0-based inclusive start offset.
    end
        0-based exclusive end offset.

    Returns
    -------
    str
        Substring, empty when the line is shorter than ``start``.
    """

    start = max(0, min(start, len(line)))
    end = max(start, min(end, len(line)))
    return line[start:end]


def parse_int(raw: str) -> Optional[int]:
    """Parse a stripped integer field, returning ``None`` on failure."""

    text = (raw or "").strip()
    if not text:
        return None
    try:
        return int(text)
    except ValueError:
        return None


def parse_float(raw: str) -> Optional[float]:
    """Parse a stripped finite float field, returning ``None`` on failure."""

    text = (raw or "").strip()
    if not text:
        return None
    try:
        value = float(text)
    except ValueError:
        return None
    if not math.isfinite(value):
        return None
    return value
