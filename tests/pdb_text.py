"""Column-exact PDB record builders for tests."""


def place(tag: str, fields: dict, width: int = 80) -> str:
    """Return a line of ``width`` with ``tag`` at column 0 and fields at offsets."""
    chars = list(tag.ljust(width))
    for start, text in fields.items():
        for offset, char in enumerate(text):
            chars[start + offset] = char
    return "".join(chars).rstrip()


def atom_line(
    serial: int,
    name: str,
    resname: str,
    chain: str,
    resnum: int,
    x: float,
    y: float,
    z: float,
    element: str = "",
    record: str = "ATOM",
    occupancy: float = 1.0,
    bfactor: float = 0.0,
) -> str:
    padded = f" {name}".ljust(4) if len(name) < 4 else name[:4]
    return (
        f"{record:<6}{serial:5d} {padded} {resname:>3} {chain:1}{resnum:4d}    "
        f"{x:8.3f}{y:8.3f}{z:8.3f}{occupancy:6.2f}{bfactor:6.2f}          {element:>2}"
    )


def helix_line(chain: str, start: int, end: int) -> str:
    return place(
        "HELIX",
        {
            7: "  1",
            11: "  1",
            15: "ALA",
            19: chain,
            21: f"{start:4d}",
            27: "ALA",
            31: chain,
            33: f"{end:4d}",
            38: " 1",
            71: f"{end - start + 1:5d}",
        },
    )


def sheet_line(chain: str, start: int, end: int) -> str:
    return place(
        "SHEET",
        {
            7: "  1",
            11: "  A",
            14: " 2",
            17: "VAL",
            21: chain,
            22: f"{start:4d}",
            28: "VAL",
            32: chain,
            33: f"{end:4d}",
            38: " 0",
        },
    )


def header_line(classification: str, date: str, id_code: str) -> str:
    return place("HEADER", {10: classification[:40], 50: date, 62: id_code})
