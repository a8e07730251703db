from pdb_text import atom_line, helix_line

from pdbscope import parse
from pdbscope.services.render import build_render_payload


def test_render_payload_groups_chains_spans_and_ligands() -> None:
    text = "\n".join(
        [
            helix_line("A", 1, 2),
            atom_line(1, "N", "ALA", "A", 1, 0.0, 0.0, 0.0, "N"),
            atom_line(2, "CA", "ALA", "A", 1, 1.458, 0.0, 0.0, "C"),
            atom_line(3, "CA", "ALA", "A", 2, 5.0, 0.0, 0.0, "C"),
            atom_line(4, "CA", "ALA", "A", 3, 9.0, 0.0, 0.0, "C"),
            atom_line(5, "CA", "ALA", "A", 4, 13.0, 0.0, 0.0, "C"),
            atom_line(6, "C1", "NAG", "B", 9, 30.0, 0.0, 0.0, "C", record="HETATM"),
            atom_line(7, "C2", "NAG", "B", 9, 31.5, 0.0, 0.0, "C", record="HETATM"),
        ]
    )
    payload = build_render_payload(parse(text))

    assert len(payload["atoms"]) == 7
    assert payload["atoms"][1] == {
        "id": 1,
        "chain": "A",
        "res_name": "ALA",
        "x": 1.458,
        "y": 0.0,
        "z": 0.0,
        "element": "C",
    }
    assert {"a": 0, "b": 1, "order": 2} in payload["bonds"]
    assert payload["chains"] == {"A": [0, 1, 2, 3, 4], "B": [5, 6]}
    assert payload["secondary"] == [{"chain": "A", "start": 1, "end": 2, "type": "helix"}]
    assert payload["ligands"] == [
        {"name": "NAG", "chain": "B", "residue_number": 9, "atom_ids": [5, 6]}
    ]
