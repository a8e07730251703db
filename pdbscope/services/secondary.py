"""HELIX/SHEET record decoding."""

from __future__ import annotations

import logging
from typing import Dict, Iterable, Optional, Tuple

from pdbscope.model.state import SecondaryStructure
from pdbscope.services.fields import column, parse_int
from pdbscope.services.records import RecordKind, classify_record

logger = logging.getLogger(__name__)

SECONDARY_MIN_LENGTH = 38

# (chain, start, end) column ranges per record kind.
_LAYOUTS = {
    RecordKind.HELIX: ((19, 20), (21, 25), (33, 37)),
    RecordKind.SHEET: ((21, 22), (22, 26), (33, 37)),
}
_LABELS = {
    RecordKind.HELIX: SecondaryStructure.HELIX,
    RecordKind.SHEET: SecondaryStructure.SHEET,
}


def residue_key(chain: str, residue_number: int) -> str:
    """Return the lookup key shared by secondary records and atoms."""
    return f"{chain}_{residue_number}"


def decode_secondary_line(line: str) -> Optional[Tuple[str, int, int, SecondaryStructure]]:
    """Decode one HELIX or SHEET line.

    Parameters
    ----------
    line
        Raw record line.

    Returns
    -------
    tuple or None
        ``(chain, start, end, label)`` or ``None`` when the line is not a
        usable secondary structure record.
    """

    kind = classify_record(line)
    layout = _LAYOUTS.get(kind)
    if layout is None or len(line) < SECONDARY_MIN_LENGTH:
        return None
    (chain_start, chain_end), (first_start, first_end), (last_start, last_end) = layout
    start = parse_int(column(line, first_start, first_end))
    end = parse_int(column(line, last_start, last_end))
    if start is None or end is None:
        return None
    chain = column(line, chain_start, chain_end).strip()
    return chain, start, end, _LABELS[kind]


def build_secondary_structure_map(lines: Iterable[str]) -> Dict[str, SecondaryStructure]:
    """Map ``chain_residue`` keys to HELIX or SHEET.

    Each record covers its inclusive residue range; later records overwrite
    earlier ones. Malformed records contribute nothing.

    Parameters
    ----------
    lines
        PDB lines in file order.

    Returns
    -------
    dict
        Secondary structure keyed by :func:`residue_key`.
    """

    mapping: Dict[str, SecondaryStructure] = {}
    records = 0
    skipped = 0
    for line in lines:
        if classify_record(line) not in _LAYOUTS:
            continue
        decoded = decode_secondary_line(line)
        if decoded is None:
            skipped += 1
            continue
        chain, start, end, label = decoded
        for residue_number in range(start, end + 1):
            mapping[residue_key(chain, residue_number)] = label
        records += 1
    if skipped:
        logger.debug("Skipped %d malformed HELIX/SHEET records", skipped)
    logger.debug("Secondary structure records=%d residues=%d", records, len(mapping))
    return mapping
