import pytest

from pdbscope import parse
from pdbscope.errors import PdbWriterError
from pdbscope.model.state import Atom, SecondaryStructure
from pdbscope.services.pdb_writer import write_pdb


def _atom(atom_id: int, name: str, element: str, coords, is_ligand: bool = False) -> Atom:
    return Atom(
        id=atom_id,
        element=element,
        name=name,
        chain="B",
        residue_name="LIG" if is_ligand else "SER",
        residue_number=12,
        position=coords,
        secondary_structure=SecondaryStructure.COIL,
        is_backbone=False,
        is_ligand=is_ligand,
        is_pocket=not is_ligand,
        occupancy=0.75,
        temperature_factor=18.5,
    )


def test_pdb_writer_serials_and_records() -> None:
    atoms = [
        _atom(0, "CB", "C", (0.0, 0.0, 0.0)),
        _atom(1, "OG", "O", (1.0, 0.0, 0.0)),
        _atom(2, "C1", "C", (2.0, 0.0, 0.0), is_ligand=True),
    ]

    pdb = write_pdb(atoms)
    lines = [line for line in pdb.splitlines() if line.startswith(("ATOM", "HETATM"))]

    assert len(lines) == 3
    assert lines[0][6:11].strip() == "1"
    assert lines[1][6:11].strip() == "2"
    assert lines[2][6:11].strip() == "3"
    assert lines[2].startswith("HETATM")
    assert lines[0][12:16] == " CB "
    assert lines[0][54:60] == "  0.75"
    assert lines[0][60:66] == " 18.50"
    assert lines[0][76:78] == " C"
    assert pdb.endswith("END\n")


def test_written_atoms_parse_back() -> None:
    atoms = [
        _atom(0, "CB", "C", (1.25, -3.5, 7.125)),
        _atom(1, "OG", "O", (2.0, -3.0, 7.0)),
    ]

    structure = parse(write_pdb(atoms))

    assert [atom.name for atom in structure.atoms] == ["CB", "OG"]
    assert structure.atoms[0].position == (1.25, -3.5, 7.125)
    assert structure.atoms[1].chain == "B"
    assert structure.atoms[1].occupancy == pytest.approx(0.75)
    assert structure.atoms[1].temperature_factor == pytest.approx(18.5)


def test_invalid_atom_raises() -> None:
    with pytest.raises(PdbWriterError):
        write_pdb([object()])
