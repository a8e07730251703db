"""PDB text to :class:`Structure` assembly."""

from __future__ import annotations

import logging
import time
from typing import Callable, Dict, List, Sequence

from pdbscope.config import ATOMIC_WEIGHTS, DEFAULT_ATOMIC_WEIGHT
from pdbscope.errors import CorruptedData, InvalidFormat, NoValidAtoms
from pdbscope.model.state import Annotation, AnnotationType, Atom, Bond, Structure
from pdbscope.services.annotations import extract_annotations, extract_pdb_id, extract_title
from pdbscope.services.atoms import extract_atoms
from pdbscope.services.bonds import infer_bonds
from pdbscope.services.geometry import compute_bounding_box, compute_center_of_mass
from pdbscope.services.secondary import build_secondary_structure_map

logger = logging.getLogger(__name__)


def _timed_call(fn: Callable[..., object], *args: object, **kwargs: object):
    start = time.perf_counter()
    result = fn(*args, **kwargs)
    return result, time.perf_counter() - start


def estimate_molecular_weight(atoms: Sequence[Atom]) -> float:
    """Sum approximate atomic weights (Da) over all atoms."""
    return sum(
        ATOMIC_WEIGHTS.get(atom.element.upper(), DEFAULT_ATOMIC_WEIGHT) for atom in atoms
    )


def composition_annotation(atoms: Sequence[Atom]) -> Annotation:
    """Build the derived atom-count annotation appended to every structure."""
    pocket = sum(1 for atom in atoms if atom.is_pocket)
    weight = estimate_molecular_weight(atoms)
    return Annotation(
        type=AnnotationType.MOLECULAR_WEIGHT,
        value=f"{len(atoms)} atoms, {pocket} pocket atoms",
        description=f"Estimated molecular weight {int(weight)} Da",
    )


def _check_consistency(atoms: Sequence[Atom], bonds: Sequence[Bond]) -> None:
    for index, atom in enumerate(atoms):
        if atom.id != index:
            raise CorruptedData(
                f"Atom id {atom.id} found at position {index}",
                {"position": index, "id": atom.id},
            )
        if sum((atom.is_backbone, atom.is_ligand, atom.is_pocket)) != 1:
            raise CorruptedData(f"Atom {atom.id} has an ambiguous classification")
    count = len(atoms)
    for bond in bonds:
        if not 0 <= bond.atom_a < bond.atom_b < count:
            raise CorruptedData(
                f"Bond {bond.atom_a}-{bond.atom_b} references invalid atoms",
                {"atom_count": count},
            )


def parse(pdb_text: str) -> Structure:
    """Parse PDB text into an immutable structure.

    Parameters
    ----------
    pdb_text
        Full PDB file content.

    Returns
    -------
    Structure
        Atoms, inferred bonds, annotations and spatial aggregates.

    Raises
    ------
    InvalidFormat
        If the text is empty or whitespace only.
    NoValidAtoms
        If no ATOM/HETATM line could be decoded.
    CorruptedData
        If the assembled atoms and bonds are inconsistent.
    """

    if pdb_text is None or not pdb_text.strip():
        raise InvalidFormat("Empty PDB content")

    timings: Dict[str, float] = {}
    lines: List[str] = pdb_text.split("\n")

    annotations, timings["annotations"] = _timed_call(extract_annotations, lines)
    title = extract_title(lines)
    pdb_id = extract_pdb_id(lines)
    secondary_map, timings["secondary"] = _timed_call(build_secondary_structure_map, lines)

    atoms, timings["atoms"] = _timed_call(extract_atoms, lines, secondary_map)
    if not atoms:
        logger.info("No valid atoms among %d lines", len(lines))
        raise NoValidAtoms({"line_count": len(lines)})

    bonds, timings["bonds"] = _timed_call(infer_bonds, atoms)
    start = time.perf_counter()
    bounding_box = compute_bounding_box(atoms)
    center_of_mass = compute_center_of_mass(atoms)
    timings["geometry"] = time.perf_counter() - start

    annotations.append(composition_annotation(atoms))
    _check_consistency(atoms, bonds)

    logger.debug(
        "Parsed structure atoms=%d bonds=%d annotations=%d timings=%s",
        len(atoms),
        len(bonds),
        len(annotations),
        {key: round(value, 4) for key, value in timings.items()},
    )
    return Structure(
        atoms=tuple(atoms),
        bonds=tuple(bonds),
        annotations=tuple(annotations),
        bounding_box=bounding_box,
        center_of_mass=center_of_mass,
        title=title,
        pdb_id=pdb_id,
    )
