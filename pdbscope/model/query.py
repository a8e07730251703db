"""Query helpers for parsed atoms."""

from __future__ import annotations

import logging
from typing import Dict, List, Optional, Sequence

from pdbscope.config import DEFAULT_MAX_QUERY_RESULTS
from pdbscope.model.state import Atom

logger = logging.getLogger(__name__)

_KINDS = ("backbone", "ligand", "pocket")


def _optional_float(value: object) -> Optional[float]:
    if value is None or value == "":
        return None
    try:
        return float(value)
    except (TypeError, ValueError):
        return None


def _text_filter(filters: Dict[str, object], key: str) -> str:
    return str(filters.get(key, "") or "").strip().lower()


def query_atoms(
    atoms: Sequence[Atom],
    filters: Optional[Dict[str, object]],
    max_results: int = DEFAULT_MAX_QUERY_RESULTS,
) -> Dict[str, object]:
    """Filter atoms by simple string/range filters.

    Parameters
    ----------
    atoms
        Atoms to filter.
    filters
        Query filters (chain_equals, resname_contains, atomname_contains,
        element_equals, secondary_structure, kind, bfactor range).
    max_results
        Cap on the number of results returned.

    Returns
    -------
    dict
        Query response payload with the matching atom ids.
    """

    if filters is None:
        filters = {}

    chain_equals = _text_filter(filters, "chain_equals")
    resname_contains = _text_filter(filters, "resname_contains")
    atomname_contains = _text_filter(filters, "atomname_contains")
    element_equals = _text_filter(filters, "element_equals")
    secondary = _text_filter(filters, "secondary_structure")
    kind = _text_filter(filters, "kind")
    if kind and kind not in _KINDS:
        logger.debug("Ignoring unknown kind filter %r", kind)
        kind = ""
    bfactor_min = _optional_float(filters.get("bfactor_min"))
    bfactor_max = _optional_float(filters.get("bfactor_max"))

    ids: List[int] = []
    for atom in atoms:
        if chain_equals and atom.chain.lower() != chain_equals:
            continue
        if resname_contains and resname_contains not in atom.residue_name.lower():
            continue
        if atomname_contains and atomname_contains not in atom.name.lower():
            continue
        if element_equals and atom.element.lower() != element_equals:
            continue
        if secondary and atom.secondary_structure.value.lower() != secondary:
            continue
        if kind and atom.kind != kind:
            continue
        if bfactor_min is not None and atom.temperature_factor < bfactor_min:
            continue
        if bfactor_max is not None and atom.temperature_factor > bfactor_max:
            continue
        ids.append(atom.id)
        if len(ids) >= max_results:
            logger.debug("Query truncated at %d results", len(ids))
            return {"ok": True, "ids": ids, "count": len(ids), "truncated": True}

    logger.debug("Query returned %d results", len(ids))
    return {"ok": True, "ids": ids, "count": len(ids), "truncated": False}
