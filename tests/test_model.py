from pathlib import Path

import pytest
from pdb_text import atom_line, header_line

from pdbscope.errors import InvalidFormat, ModelError
from pdbscope.model import Model
from pdbscope.worker import Worker


def _text() -> str:
    return "\n".join(
        [
            header_line("TRANSFERASE", "03-FEB-05", "2ABC"),
            atom_line(1, "N", "ALA", "A", 1, 0.0, 0.0, 0.0, "N"),
            atom_line(2, "CA", "ALA", "A", 1, 1.458, 0.0, 0.0, "C"),
            atom_line(3, "CB", "ALA", "A", 1, 1.988, -0.773, -1.199, "C"),
            atom_line(4, "N", "GLY", "A", 2, 9.0, 0.0, 0.0, "N"),
        ]
    )


def test_calls_before_load_raise_not_loaded() -> None:
    model = Model()

    with pytest.raises(ModelError) as excinfo:
        model.get_summary()
    assert excinfo.value.code == "not_loaded"
    with pytest.raises(ModelError):
        model.query_atoms({})


def test_load_text_and_summary() -> None:
    model = Model()

    loaded = model.load_text(_text(), source="memory")
    summary = model.get_summary()

    assert loaded["ok"] is True
    assert loaded["natoms"] == 4
    assert loaded["nresidues"] == 2
    assert summary["pdb_id"] == "2ABC"
    assert summary["chains"] == ["A"]
    assert summary["bounding_box"]["max"] == [9.0, 0.0, 0.0]
    labels = [item["label"] for item in summary["annotations"]]
    assert labels == ["Function", "Deposition Date", "Molecular Weight"]


def test_atom_and_residue_lookups() -> None:
    model = Model()
    model.load_text(_text())

    atom = model.get_atom_info(1)
    assert atom["atom"]["name"] == "CA"
    assert atom["bonded_ids"] == [0, 2]

    residue = model.get_residue_info("A", 1)
    assert residue["ids"] == [0, 1, 2]
    assert residue["residue"]["residue_name"] == "ALA"

    with pytest.raises(ModelError) as excinfo:
        model.get_atom_info(99)
    assert excinfo.value.code == "not_found"
    with pytest.raises(ModelError):
        model.get_residue_info("Z", 1)


def test_failed_parse_keeps_previous_structure() -> None:
    model = Model()
    model.load_text(_text())

    with pytest.raises(InvalidFormat):
        model.load_text("   ")
    assert model.get_summary()["natoms"] == 4


def test_background_tables_and_render_payload() -> None:
    worker = Worker()
    try:
        model = Model(cpu_submit=worker.submit)
        model.load_text(_text())

        tables = model.get_info_tables()["tables"]
        assert set(tables) == {"residues", "chains", "elements", "secondary_structure"}
        assert model.get_info_tables()["tables"] is tables

        payload = model.get_render_payload()
        assert payload["ok"] is True
        assert payload["chains"] == {"A": [0, 1, 2, 3]}
    finally:
        worker.shutdown()


def test_load_file(tmp_path: Path) -> None:
    path = tmp_path / "sample.pdb"
    path.write_text(_text(), encoding="utf-8")
    model = Model()

    assert model.load_file(str(path))["source"] == str(path)

    with pytest.raises(ModelError) as excinfo:
        model.load_file(str(tmp_path / "missing.pdb"))
    assert excinfo.value.code == "read_failed"
