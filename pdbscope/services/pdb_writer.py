"""PDB formatting utilities."""

from __future__ import annotations

from typing import Iterable, List

from pdbscope.errors import PdbWriterError


def _format_atom_name(name: str) -> str:
    name = (name or "").strip()
    if len(name) >= 4:
        return name[:4]
    # One-letter element names start in column 14.
    return f" {name}".ljust(4)


def _format_resname(resname: str) -> str:
    resname = (resname or "").strip()
    if len(resname) > 3:
        return resname[:3]
    return resname.rjust(3)


def _format_element(element: str) -> str:
    element = (element or "").strip()
    if not element:
        return "  "
    if len(element) == 1:
        return f" {element.upper()}"
    return element[0].upper() + element[1].upper()


def write_pdb(atoms: Iterable[object]) -> str:
    """Build a PDB text block for a sequence of atoms.

    Parameters
    ----------
    atoms
        Iterable of Atom-like objects with id, name, residue_name, chain,
        residue_number, position, occupancy, temperature_factor, element and
        is_ligand.

    Returns
    -------
    str
        PDB text ending in a newline. Serials are ``id + 1``.

    Raises
    ------
    PdbWriterError
        If an atom is missing required attributes.
    """

    lines: List[str] = []
    for atom in atoms:
        try:
            serial = int(atom.id) + 1
            name = _format_atom_name(atom.name)
            resname = _format_resname(atom.residue_name)
            chain = (atom.chain or " ")[:1]
            resid = int(atom.residue_number)
            x, y, z = atom.position
            occ = float(atom.occupancy)
            temp = float(atom.temperature_factor)
            element = _format_element(atom.element)
            record = "HETATM" if atom.is_ligand else "ATOM  "
        except (AttributeError, TypeError, ValueError) as exc:
            raise PdbWriterError("pdb_format_failed", "Invalid atom data", str(exc)) from exc

        line = (
            f"{record}"
            f"{serial % 100000:5d} "
            f"{name}"
            f" "
            f"{resname} "
            f"{chain}"
            f"{resid:4d}"
            f"    "
            f"{x:8.3f}{y:8.3f}{z:8.3f}"
            f"{occ:6.2f}{temp:6.2f}"
            f"          "
            f"{element:>2}"
        )
        lines.append(line)
    lines.append("END")
    return "\n".join(lines) + "\n"
