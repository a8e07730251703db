"""Model layer for pdbscope."""

from __future__ import annotations

import logging
import threading
import time
from typing import Callable, Dict, List, Optional, Tuple

from pdbscope.config import DEFAULT_MAX_QUERY_RESULTS
from pdbscope.errors import ModelError
from pdbscope.model.query import query_atoms
from pdbscope.model.state import ModelState, Structure
from pdbscope.parser import parse
from pdbscope.services.render import build_render_payload
from pdbscope.services.structure_info import (
    build_structure_tables,
    build_structure_tables_with_timing,
)

logger = logging.getLogger(__name__)


class Model:
    """Holds the currently loaded structure.

    Attributes
    ----------
    _state
        Mutable model state.
    _cpu_submit
        Optional CPU executor submit function.
    """

    def __init__(self, cpu_submit: Optional[Callable[..., object]] = None) -> None:
        """Initialize the model.

        Parameters
        ----------
        cpu_submit
            Optional executor submission function for CPU-heavy work.

        Returns
        -------
        None
            This method does not return a value.
        """

        self._lock = threading.Lock()
        self._state = ModelState()
        self._cpu_submit = cpu_submit

    def _require_structure(self) -> Structure:
        if not self._state.loaded or self._state.structure is None:
            raise ModelError("not_loaded", "No structure loaded")
        return self._state.structure

    def load_text(self, pdb_text: str, source: Optional[str] = None) -> Dict[str, object]:
        """Parse PDB text and make it the current structure.

        Parameters
        ----------
        pdb_text
            Full PDB content.
        source
            Optional label (usually a path) recorded with the structure.

        Returns
        -------
        dict
            Payload containing load metadata.

        Raises
        ------
        ParseError
            If the text cannot be parsed. The previous structure stays loaded.
        """

        start = time.perf_counter()
        if self._cpu_submit:
            structure = self._cpu_submit(parse, pdb_text).result()
        else:
            structure = parse(pdb_text)
        info_future = None
        if self._cpu_submit:
            try:
                info_future = self._cpu_submit(build_structure_tables_with_timing, structure)
            except Exception:
                logger.exception("Failed to schedule structure table build")
        atoms_by_residue: Dict[Tuple[str, int], List[int]] = {}
        for atom in structure.atoms:
            atoms_by_residue.setdefault((atom.chain, atom.residue_number), []).append(atom.id)
        elapsed = time.perf_counter() - start
        with self._lock:
            self._state.structure = structure
            self._state.source = source
            self._state.atoms_by_residue = atoms_by_residue
            self._state.info_tables = None
            self._state.info_future = info_future
            self._state.loaded = True
        logger.info(
            "Loaded %s: %d atoms, %d bonds in %.3fs",
            source or "<text>",
            structure.atom_count,
            structure.bond_count,
            elapsed,
        )
        return {
            "ok": True,
            "source": source,
            "natoms": structure.atom_count,
            "nbonds": structure.bond_count,
            "nresidues": structure.residue_count,
            "nchains": structure.chain_count,
        }

    def load_file(self, path: str) -> Dict[str, object]:
        """Read a PDB file and load it.

        Parameters
        ----------
        path
            Path to the PDB file.

        Returns
        -------
        dict
            Payload containing load metadata.

        Raises
        ------
        ModelError
            If the file cannot be read.
        ParseError
            If the content cannot be parsed.
        """

        try:
            with open(path, "r", encoding="utf-8", errors="replace") as handle:
                text = handle.read()
        except OSError as exc:
            raise ModelError("read_failed", f"Cannot read {path}", str(exc)) from exc
        return self.load_text(text, source=path)

    def get_structure(self) -> Structure:
        """Return the current structure.

        Raises
        ------
        ModelError
            If no structure is loaded.
        """

        with self._lock:
            return self._require_structure()

    def get_summary(self) -> Dict[str, object]:
        """Return counts, annotations and spatial aggregates.

        Returns
        -------
        dict
            Summary payload.

        Raises
        ------
        ModelError
            If no structure is loaded.
        """

        with self._lock:
            structure = self._require_structure()
            source = self._state.source
        return {
            "ok": True,
            "source": source,
            "title": structure.title,
            "pdb_id": structure.pdb_id,
            "natoms": structure.atom_count,
            "nbonds": structure.bond_count,
            "nresidues": structure.residue_count,
            "chains": structure.chains,
            "annotations": [item.to_dict() for item in structure.annotations],
            "bounding_box": structure.bounding_box.to_dict(),
            "center_of_mass": list(structure.center_of_mass),
        }

    def get_atom_info(self, atom_id: int) -> Dict[str, object]:
        """Return atom data and its bonded neighbours.

        Parameters
        ----------
        atom_id
            Atom id.

        Returns
        -------
        dict
            Payload containing atom data.

        Raises
        ------
        ModelError
            If no structure is loaded or the id is missing.
        """

        with self._lock:
            structure = self._require_structure()
        atom_id = int(atom_id)
        if not 0 <= atom_id < structure.atom_count:
            raise ModelError("not_found", f"Atom id {atom_id} not found")
        neighbours = sorted(
            bond.atom_b if bond.atom_a == atom_id else bond.atom_a
            for bond in structure.bonds
            if atom_id in (bond.atom_a, bond.atom_b)
        )
        logger.debug("Atom info requested id=%s", atom_id)
        return {
            "ok": True,
            "atom": structure.atoms[atom_id].to_dict(),
            "bonded_ids": neighbours,
        }

    def get_residue_info(self, chain: str, residue_number: int) -> Dict[str, object]:
        """Return residue metadata and atom ids.

        Parameters
        ----------
        chain
            Chain identifier.
        residue_number
            Residue sequence number.

        Returns
        -------
        dict
            Payload containing residue metadata.

        Raises
        ------
        ModelError
            If no structure is loaded or the residue is missing.
        """

        with self._lock:
            structure = self._require_structure()
            ids = list(self._state.atoms_by_residue.get((chain, int(residue_number)), []))
        if not ids:
            raise ModelError("not_found", f"Residue {chain}{residue_number} not found")
        first = structure.atoms[ids[0]]
        return {
            "ok": True,
            "residue": {
                "chain": chain,
                "residue_number": int(residue_number),
                "residue_name": first.residue_name,
                "secondary_structure": first.secondary_structure.value,
            },
            "ids": ids,
        }

    def query_atoms(
        self, filters: Dict[str, object], max_results: int = DEFAULT_MAX_QUERY_RESULTS
    ) -> Dict[str, object]:
        """Query atoms by filter criteria.

        Raises
        ------
        ModelError
            If no structure is loaded.
        """

        with self._lock:
            atoms = self._require_structure().atoms
        return query_atoms(atoms, filters, max_results=max_results)

    def get_info_tables(self) -> Dict[str, object]:
        """Return structure summary tables, building them if needed.

        Raises
        ------
        ModelError
            If no structure is loaded.
        """

        with self._lock:
            structure = self._require_structure()
            tables = self._state.info_tables
            future = self._state.info_future
        if tables is None:
            elapsed = None
            if future is not None:
                try:
                    tables, elapsed = future.result()
                except Exception:
                    logger.exception("Background table build failed; rebuilding inline")
                    tables = None
            if tables is None:
                tables = build_structure_tables(structure)
            if elapsed is not None:
                logger.debug("Structure tables built in %.3fs", elapsed)
            with self._lock:
                if self._state.structure is structure:
                    self._state.info_tables = tables
                    self._state.info_future = None
        return {"ok": True, "tables": tables}

    def get_render_payload(self) -> Dict[str, object]:
        """Return the renderer payload for the current structure.

        Raises
        ------
        ModelError
            If no structure is loaded.
        """

        with self._lock:
            structure = self._require_structure()
        payload = build_render_payload(structure)
        payload["ok"] = True
        return payload
