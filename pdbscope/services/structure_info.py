"""Summary table builders derived from a parsed structure."""

from __future__ import annotations

import logging
import math
import time
from typing import Dict, Iterable, Optional, Tuple

import numpy as np
import pandas as pd

from pdbscope.model.state import SecondaryStructure, Structure

logger = logging.getLogger(__name__)

_ATOM_COLUMNS = (
    "id",
    "chain",
    "residue_number",
    "residue_name",
    "element",
    "kind",
    "secondary_structure",
    "temperature_factor",
)


def atoms_frame(structure: Structure) -> pd.DataFrame:
    """Return one row per atom with the columns used by the table builders."""
    if not structure.atoms:
        return _empty_table(_ATOM_COLUMNS)
    return pd.DataFrame(
        {
            "id": [atom.id for atom in structure.atoms],
            "chain": [atom.chain for atom in structure.atoms],
            "residue_number": [atom.residue_number for atom in structure.atoms],
            "residue_name": [atom.residue_name for atom in structure.atoms],
            "element": [atom.element.upper() for atom in structure.atoms],
            "kind": [atom.kind for atom in structure.atoms],
            "secondary_structure": [
                atom.secondary_structure.value for atom in structure.atoms
            ],
            "temperature_factor": [atom.temperature_factor for atom in structure.atoms],
        }
    )


def build_structure_tables(structure: Structure) -> Dict[str, Dict[str, object]]:
    """Build summary tables for a structure.

    Parameters
    ----------
    structure
        Parsed structure.

    Returns
    -------
    dict
        Mapping of table identifiers (``residues``, ``chains``, ``elements``,
        ``secondary_structure``) to column/row payloads.
    """

    df = atoms_frame(structure)
    return {
        "residues": _df_to_table(_build_residue_table(df)),
        "chains": _df_to_table(_build_chain_table(df, structure)),
        "elements": _df_to_table(_build_element_table(df)),
        "secondary_structure": _df_to_table(_build_secondary_table(df)),
    }


def build_structure_tables_with_timing(
    structure: Structure,
) -> Tuple[Dict[str, Dict[str, object]], float]:
    """Build structure tables and return elapsed time.

    Parameters
    ----------
    structure
        Parsed structure.

    Returns
    -------
    tuple
        Tables payload and elapsed seconds.
    """

    start = time.perf_counter()
    tables = build_structure_tables(structure)
    return tables, time.perf_counter() - start


def _build_residue_table(df: pd.DataFrame) -> pd.DataFrame:
    if df.empty:
        return _empty_table(
            ("chain", "residue_number", "residue_name", "atom_count", "mean_b_factor")
        )
    grouped = df.groupby(["chain", "residue_number"], sort=True)
    table = grouped.agg(
        residue_name=("residue_name", "first"),
        atom_count=("id", "size"),
        mean_b_factor=("temperature_factor", "mean"),
        secondary_structure=("secondary_structure", "first"),
    ).reset_index()
    return table


def _build_chain_table(df: pd.DataFrame, structure: Structure) -> pd.DataFrame:
    columns = (
        "chain",
        "atom_count",
        "residue_count",
        "backbone_atoms",
        "ligand_atoms",
        "pocket_atoms",
        "bond_count",
    )
    if df.empty:
        return _empty_table(columns)
    kinds = (
        pd.crosstab(df["chain"], df["kind"])
        .reindex(columns=["backbone", "ligand", "pocket"], fill_value=0)
        .add_suffix("_atoms")
    )
    sizes = df.groupby("chain").agg(
        atom_count=("id", "size"),
        residue_count=("residue_number", "nunique"),
    )
    chain_of_atom = df["chain"].to_numpy()
    bond_chains = [
        chain_of_atom[bond.atom_a]
        for bond in structure.bonds
        if chain_of_atom[bond.atom_a] == chain_of_atom[bond.atom_b]
    ]
    bond_counts = pd.Series(bond_chains, dtype=object).value_counts().rename("bond_count")
    table = sizes.join(kinds).join(bond_counts).reset_index()
    table["bond_count"] = table["bond_count"].fillna(0).astype(int)
    return table.loc[:, list(columns)].sort_values("chain")


def _build_element_table(df: pd.DataFrame) -> pd.DataFrame:
    if df.empty:
        return _empty_table(("element", "atom_count", "fraction"))
    counts = df["element"].value_counts().rename_axis("element").reset_index(name="atom_count")
    counts["fraction"] = counts["atom_count"] / float(len(df))
    return counts.sort_values(["atom_count", "element"], ascending=[False, True])


def _build_secondary_table(df: pd.DataFrame) -> pd.DataFrame:
    labels = [label.value for label in SecondaryStructure]
    if df.empty:
        return pd.DataFrame(
            {"secondary_structure": labels, "residue_count": np.zeros(len(labels), dtype=int)}
        )
    residues = df.drop_duplicates(["chain", "residue_number"])
    counts = residues["secondary_structure"].value_counts()
    return pd.DataFrame(
        {
            "secondary_structure": labels,
            "residue_count": [int(counts.get(label, 0)) for label in labels],
        }
    )


def _empty_table(columns: Iterable[str]) -> pd.DataFrame:
    return pd.DataFrame({column: pd.Series(dtype=object) for column in columns})


def _df_to_table(df: pd.DataFrame) -> Dict[str, object]:
    safe = df.reset_index(drop=True)
    columns = [str(col) for col in safe.columns]
    rows = [[_to_native(value) for value in row] for row in safe.itertuples(index=False)]
    return {"columns": columns, "rows": rows}


def _to_native(value: object) -> Optional[object]:
    if value is None:
        return None
    if isinstance(value, np.generic):
        value = value.item()
    if isinstance(value, float) and math.isnan(value):
        return None
    return value
