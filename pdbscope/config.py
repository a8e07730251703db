"""Application constants."""

from __future__ import annotations

APP_NAME = "pdbscope"

DEFAULT_CHAIN = "A"
DEFAULT_OCCUPANCY = 1.0
DEFAULT_TEMPERATURE_FACTOR = 0.0
DEFAULT_ELEMENT = "C"
DEFAULT_MAX_QUERY_RESULTS = 50000

# Bond inference.
COVALENT_RADII = {
    "C": 0.77,
    "N": 0.75,
    "O": 0.73,
    "S": 1.02,
    "P": 1.06,
    "H": 0.37,
}
DEFAULT_COVALENT_RADIUS = 0.77
BOND_TOLERANCE = 1.3
BOND_AXIS_CUTOFF = 1.7
TRIPLE_BOND_FACTOR = 0.9
DOUBLE_BOND_FACTOR = 1.0

# Residue classification.
BACKBONE_ATOM_NAMES = frozenset(
    {"CA", "C", "N", "O", "P", "O5'", "C5'", "C4'", "C3'", "O3'"}
)
STANDARD_RESIDUES = frozenset(
    {
        "ALA",
        "ARG",
        "ASN",
        "ASP",
        "CYS",
        "GLN",
        "GLU",
        "GLY",
        "HIS",
        "ILE",
        "LEU",
        "LYS",
        "MET",
        "PHE",
        "PRO",
        "SER",
        "THR",
        "TRP",
        "TYR",
        "VAL",
    }
)

# Estimated molecular weight (Da).
ATOMIC_WEIGHTS = {
    "H": 1.008,
    "C": 12.01,
    "N": 14.01,
    "O": 16.00,
    "S": 32.07,
    "P": 30.97,
    "CA": 40.08,
    "MG": 24.31,
    "FE": 55.85,
    "ZN": 65.38,
    "CU": 63.55,
    "MN": 54.94,
}
DEFAULT_ATOMIC_WEIGHT = 14.0

TITLE_PREFIXES = (
    "CRYSTAL STRUCTURE OF",
    "X-RAY STRUCTURE OF",
    "NMR STRUCTURE OF",
)
