from pdb_text import atom_line, helix_line

from pdbscope import parse
from pdbscope.model.query import query_atoms


def _atoms():
    text = "\n".join(
        [
            helix_line("A", 1, 1),
            atom_line(1, "N", "ALA", "A", 1, 0.0, 0.0, 0.0, "N", bfactor=10.0),
            atom_line(2, "CB", "ALA", "A", 1, 5.0, 0.0, 0.0, "C", bfactor=20.0),
            atom_line(3, "OG", "SER", "B", 2, 10.0, 0.0, 0.0, "O", bfactor=30.0),
            atom_line(4, "O1", "SO4", "B", 50, 15.0, 0.0, 0.0, "O", record="HETATM", bfactor=40.0),
        ]
    )
    return parse(text).atoms


def test_no_filters_returns_everything() -> None:
    result = query_atoms(_atoms(), None)

    assert result == {"ok": True, "ids": [0, 1, 2, 3], "count": 4, "truncated": False}


def test_text_filters_are_case_insensitive() -> None:
    atoms = _atoms()

    assert query_atoms(atoms, {"chain_equals": "b"})["ids"] == [2, 3]
    assert query_atoms(atoms, {"resname_contains": "so"})["ids"] == [3]
    assert query_atoms(atoms, {"atomname_contains": "o"})["ids"] == [2, 3]
    assert query_atoms(atoms, {"element_equals": "o"})["ids"] == [2, 3]
    assert query_atoms(atoms, {"secondary_structure": "helix"})["ids"] == [0, 1]


def test_kind_and_bfactor_filters() -> None:
    atoms = _atoms()

    assert query_atoms(atoms, {"kind": "pocket"})["ids"] == [1, 2]
    assert query_atoms(atoms, {"kind": "ligand"})["ids"] == [3]
    assert query_atoms(atoms, {"kind": "nonsense"})["count"] == 4
    assert query_atoms(atoms, {"bfactor_min": "15", "bfactor_max": 35})["ids"] == [1, 2]
    assert query_atoms(atoms, {"bfactor_min": "abc"})["count"] == 4


def test_results_are_capped() -> None:
    result = query_atoms(_atoms(), {}, max_results=2)

    assert result["ids"] == [0, 1]
    assert result["truncated"] is True
