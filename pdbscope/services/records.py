"""Record tag classification for PDB lines."""

from __future__ import annotations

from enum import Enum


class RecordKind(Enum):
    """Record kinds routed to an extractor."""

    HEADER = "HEADER"
    TITLE = "TITLE"
    EXPDTA = "EXPDTA"
    SOURCE = "SOURCE"
    RESOLUTION = "RESOLUTION"
    HELIX = "HELIX"
    SHEET = "SHEET"
    ATOM = "ATOM"
    HETATM = "HETATM"
    IGNORE = "IGNORE"


RESOLUTION_PREFIX = "REMARK   2 RESOLUTION."

# Longer prefixes first so that HETATM never reads as a shorter tag.
_PREFIXES = (
    (RESOLUTION_PREFIX, RecordKind.RESOLUTION),
    ("HETATM", RecordKind.HETATM),
    ("HEADER", RecordKind.HEADER),
    ("EXPDTA", RecordKind.EXPDTA),
    ("SOURCE", RecordKind.SOURCE),
    ("TITLE", RecordKind.TITLE),
    ("HELIX", RecordKind.HELIX),
    ("SHEET", RecordKind.SHEET),
    ("ATOM", RecordKind.ATOM),
)


def classify_record(line: str) -> RecordKind:
    """Return the record kind of a PDB line.

    Parameters
    ----------
    line
        Raw line text.

    Returns
    -------
    RecordKind
        Matching kind, or ``RecordKind.IGNORE`` for anything unrecognized.
    """

    for prefix, kind in _PREFIXES:
        if line.startswith(prefix):
            return kind
    return RecordKind.IGNORE
