import pytest

from pdbscope.model.state import Atom, SecondaryStructure
from pdbscope.services.geometry import compute_bounding_box, compute_center_of_mass


def _atom(atom_id: int, position) -> Atom:
    return Atom(
        id=atom_id,
        element="C",
        name="CB",
        chain="A",
        residue_name="ALA",
        residue_number=atom_id + 1,
        position=position,
        secondary_structure=SecondaryStructure.COIL,
        is_backbone=False,
        is_ligand=False,
        is_pocket=True,
    )


def test_two_atom_box_and_center() -> None:
    atoms = [_atom(0, (0.0, 0.0, 0.0)), _atom(1, (2.0, 0.0, 0.0))]

    box = compute_bounding_box(atoms)

    assert box.min == (0.0, 0.0, 0.0)
    assert box.max == (2.0, 0.0, 0.0)
    assert box.to_dict() == {"min": [0.0, 0.0, 0.0], "max": [2.0, 0.0, 0.0]}
    assert compute_center_of_mass(atoms) == (1.0, 0.0, 0.0)


def test_box_is_componentwise() -> None:
    atoms = [_atom(0, (1.0, -5.0, 3.0)), _atom(1, (-2.0, 4.0, 0.5)), _atom(2, (0.0, 0.0, 9.0))]

    box = compute_bounding_box(atoms)

    assert box.min == (-2.0, -5.0, 0.5)
    assert box.max == (1.0, 4.0, 9.0)
    assert compute_center_of_mass(atoms) == pytest.approx((-1.0 / 3.0, -1.0 / 3.0, 12.5 / 3.0))


def test_empty_atom_list_raises() -> None:
    with pytest.raises(ValueError):
        compute_bounding_box([])
    with pytest.raises(ValueError):
        compute_center_of_mass([])
