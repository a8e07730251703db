"""Flattened structure payloads for renderers."""

from __future__ import annotations

from typing import Dict, List

from pdbscope.model.state import SecondaryStructure, Structure

_SPAN_TYPES = {
    SecondaryStructure.HELIX: "helix",
    SecondaryStructure.SHEET: "sheet",
}


def build_render_payload(structure: Structure) -> Dict[str, object]:
    """Convert a structure into plain lists for a renderer.

    Parameters
    ----------
    structure
        Parsed structure.

    Returns
    -------
    dict
        ``atoms``, ``bonds``, ``chains`` (chain to atom ids), ``secondary``
        (contiguous helix/sheet residue spans per chain) and ``ligands``
        (ligand atoms grouped by chain and residue).
    """

    atoms = [
        {
            "id": atom.id,
            "chain": atom.chain,
            "res_name": atom.residue_name,
            "x": atom.position[0],
            "y": atom.position[1],
            "z": atom.position[2],
            "element": atom.element,
        }
        for atom in structure.atoms
    ]
    bonds = [
        {"a": bond.atom_a, "b": bond.atom_b, "order": bond.order.value}
        for bond in structure.bonds
    ]

    chains: Dict[str, List[int]] = {}
    for atom in structure.atoms:
        chains.setdefault(atom.chain, []).append(atom.id)

    return {
        "atoms": atoms,
        "bonds": bonds,
        "chains": chains,
        "secondary": _secondary_spans(structure),
        "ligands": _ligand_groups(structure),
    }


def _secondary_spans(structure: Structure) -> List[Dict[str, object]]:
    labels: Dict[tuple, str] = {}
    for atom in structure.atoms:
        span_type = _SPAN_TYPES.get(atom.secondary_structure)
        if span_type is not None:
            labels.setdefault((atom.chain, atom.residue_number), span_type)

    spans: List[Dict[str, object]] = []
    current = None
    for (chain, number), span_type in sorted(labels.items()):
        if (
            current is not None
            and current["chain"] == chain
            and current["type"] == span_type
            and current["end"] + 1 == number
        ):
            current["end"] = number
            continue
        current = {"chain": chain, "start": number, "end": number, "type": span_type}
        spans.append(current)
    return spans


def _ligand_groups(structure: Structure) -> List[Dict[str, object]]:
    groups: Dict[tuple, Dict[str, object]] = {}
    for atom in structure.atoms:
        if not atom.is_ligand:
            continue
        key = (atom.chain, atom.residue_number, atom.residue_name)
        group = groups.get(key)
        if group is None:
            group = {
                "name": atom.residue_name,
                "chain": atom.chain,
                "residue_number": atom.residue_number,
                "atom_ids": [],
            }
            groups[key] = group
        group["atom_ids"].append(atom.id)
    return list(groups.values())
