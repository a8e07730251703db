"""ATOM/HETATM record decoding."""

from __future__ import annotations

import logging
from typing import Iterable, List, Mapping, Optional

from pdbscope.config import (
    BACKBONE_ATOM_NAMES,
    DEFAULT_CHAIN,
    DEFAULT_ELEMENT,
    DEFAULT_OCCUPANCY,
    DEFAULT_TEMPERATURE_FACTOR,
    STANDARD_RESIDUES,
)
from pdbscope.model.state import Atom, SecondaryStructure
from pdbscope.services.fields import column, parse_float, parse_int
from pdbscope.services.records import RecordKind, classify_record
from pdbscope.services.secondary import residue_key

logger = logging.getLogger(__name__)

ATOM_MIN_LENGTH = 54


def _guess_element(atom_name: str) -> str:
    name = atom_name.strip()
    if not name:
        return DEFAULT_ELEMENT
    return name[0]


def decode_atom_line(
    line: str,
    atom_id: int,
    secondary_map: Mapping[str, SecondaryStructure],
) -> Optional[Atom]:
    """Decode one ATOM/HETATM line.

    Parameters
    ----------
    line
        Raw record line.
    atom_id
        Id to assign when the line decodes.
    secondary_map
        Secondary structure keyed by ``chain_residue``.

    Returns
    -------
    Atom or None
        Decoded atom, or ``None`` when the line is not an atom record, is
        shorter than the coordinate columns, or has an unparseable residue
        number or coordinate.
    """

    kind = classify_record(line)
    if kind not in (RecordKind.ATOM, RecordKind.HETATM):
        return None
    if len(line) < ATOM_MIN_LENGTH:
        return None

    residue_number = parse_int(column(line, 22, 26))
    if residue_number is None:
        return None
    x = parse_float(column(line, 30, 38))
    y = parse_float(column(line, 38, 46))
    z = parse_float(column(line, 46, 54))
    if x is None or y is None or z is None:
        return None

    name = column(line, 12, 16).strip()
    residue_name = column(line, 17, 20).strip()
    raw_chain = column(line, 21, 22).strip()

    occupancy = DEFAULT_OCCUPANCY
    if len(line) > 60:
        parsed = parse_float(column(line, 54, 60))
        if parsed is not None:
            occupancy = parsed
    temperature_factor = DEFAULT_TEMPERATURE_FACTOR
    if len(line) > 66:
        parsed = parse_float(column(line, 60, 66))
        if parsed is not None:
            temperature_factor = parsed
    element = ""
    if len(line) > 77:
        element = column(line, 76, 78).strip()
    if not element:
        element = _guess_element(name)

    is_backbone = name in BACKBONE_ATOM_NAMES
    is_ligand = kind is RecordKind.HETATM or residue_name not in STANDARD_RESIDUES
    # HETATM stays ligand; an ATOM backbone name in a nonstandard residue stays backbone.
    if is_backbone and is_ligand:
        is_ligand = kind is RecordKind.HETATM
        is_backbone = not is_ligand
    secondary = secondary_map.get(
        residue_key(raw_chain, residue_number), SecondaryStructure.COIL
    )

    return Atom(
        id=atom_id,
        element=element,
        name=name,
        chain=raw_chain or DEFAULT_CHAIN,
        residue_name=residue_name,
        residue_number=residue_number,
        position=(x, y, z),
        secondary_structure=secondary,
        is_backbone=is_backbone,
        is_ligand=is_ligand,
        is_pocket=not is_backbone and not is_ligand,
        occupancy=occupancy,
        temperature_factor=temperature_factor,
    )


def extract_atoms(
    lines: Iterable[str],
    secondary_map: Mapping[str, SecondaryStructure],
) -> List[Atom]:
    """Decode every usable ATOM/HETATM line.

    Ids increase by one for each decoded atom only, so skipped lines leave
    no gaps.

    Parameters
    ----------
    lines
        PDB lines in file order.
    secondary_map
        Secondary structure keyed by ``chain_residue``.

    Returns
    -------
    list
        Atoms in file order.
    """

    atoms: List[Atom] = []
    skipped = 0
    for line in lines:
        if classify_record(line) not in (RecordKind.ATOM, RecordKind.HETATM):
            continue
        atom = decode_atom_line(line, len(atoms), secondary_map)
        if atom is None:
            skipped += 1
            continue
        atoms.append(atom)
    if skipped:
        logger.warning("Skipped %d malformed atom records", skipped)
    logger.debug("Decoded %d atoms", len(atoms))
    return atoms
