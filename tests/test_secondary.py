from pdb_text import helix_line, sheet_line

from pdbscope.model.state import SecondaryStructure
from pdbscope.services.secondary import build_secondary_structure_map, decode_secondary_line


def test_helix_covers_inclusive_range() -> None:
    mapping = build_secondary_structure_map([helix_line("A", 1, 3)])

    assert mapping == {
        "A_1": SecondaryStructure.HELIX,
        "A_2": SecondaryStructure.HELIX,
        "A_3": SecondaryStructure.HELIX,
    }


def test_sheet_uses_its_own_columns() -> None:
    decoded = decode_secondary_line(sheet_line("B", 10, 12))

    assert decoded == ("B", 10, 12, SecondaryStructure.SHEET)


def test_later_records_overwrite_earlier_ones() -> None:
    mapping = build_secondary_structure_map(
        [helix_line("A", 1, 5), sheet_line("A", 4, 6)]
    )

    assert mapping["A_3"] is SecondaryStructure.HELIX
    assert mapping["A_4"] is SecondaryStructure.SHEET
    assert mapping["A_6"] is SecondaryStructure.SHEET


def test_malformed_records_are_dropped_individually() -> None:
    bad_bounds = helix_line("A", 1, 3)
    bad_bounds = bad_bounds[:21] + "  x1" + bad_bounds[25:]
    short = helix_line("C", 1, 3)[:30]
    mapping = build_secondary_structure_map([bad_bounds, short, sheet_line("B", 7, 8)])

    assert decode_secondary_line(bad_bounds) is None
    assert decode_secondary_line(short) is None
    assert mapping == {"B_7": SecondaryStructure.SHEET, "B_8": SecondaryStructure.SHEET}


def test_reversed_range_contributes_nothing() -> None:
    assert build_secondary_structure_map([helix_line("A", 5, 2)]) == {}
