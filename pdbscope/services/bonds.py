"""Distance-based covalent bond inference."""

from __future__ import annotations

import logging
import time
from typing import List, Sequence

import numpy as np

from pdbscope.config import (
    BOND_AXIS_CUTOFF,
    BOND_TOLERANCE,
    COVALENT_RADII,
    DEFAULT_COVALENT_RADIUS,
    DOUBLE_BOND_FACTOR,
    TRIPLE_BOND_FACTOR,
)
from pdbscope.model.state import Atom, Bond, BondOrder

logger = logging.getLogger(__name__)


def covalent_radius(element: str) -> float:
    """Return the covalent radius for an element symbol (case-insensitive)."""
    return COVALENT_RADII.get((element or "").strip().upper(), DEFAULT_COVALENT_RADIUS)


def bond_order_for(distance: float, radius_sum: float) -> BondOrder:
    """Assign a bond order from the distance relative to the radius sum.

    Parameters
    ----------
    distance
        Interatomic distance.
    radius_sum
        Unscaled sum of the two covalent radii.

    Returns
    -------
    BondOrder
        TRIPLE below 0.9 of the sum, DOUBLE below the sum, SINGLE otherwise.
    """

    if distance < TRIPLE_BOND_FACTOR * radius_sum:
        return BondOrder.TRIPLE
    if distance < DOUBLE_BOND_FACTOR * radius_sum:
        return BondOrder.DOUBLE
    return BondOrder.SINGLE


def positions_array(atoms: Sequence[Atom]) -> np.ndarray:
    """Return atom positions as a contiguous ``(n, 3)`` float array."""
    if not atoms:
        return np.zeros((0, 3), dtype=float)
    return np.ascontiguousarray([atom.position for atom in atoms], dtype=float)


def infer_bonds(atoms: Sequence[Atom]) -> List[Bond]:
    """Infer covalent bonds from pairwise distances.

    Every pair ``i < j`` is first rejected when any coordinate differs by more
    than the axis cutoff; surviving pairs bond when their distance is below
    the tolerance-scaled sum of covalent radii.

    Parameters
    ----------
    atoms
        Atoms in id order (``atoms[i].id == i``).

    Returns
    -------
    list
        Bonds sorted by ``(atom_a, atom_b)``.
    """

    count = len(atoms)
    if count < 2:
        return []
    start = time.perf_counter()
    coords = positions_array(atoms)
    radii = np.array([covalent_radius(atom.element) for atom in atoms], dtype=float)

    bonds: List[Bond] = []
    candidates = 0
    for i in range(count - 1):
        delta = coords[i + 1 :] - coords[i]
        near = np.all(np.abs(delta) <= BOND_AXIS_CUTOFF, axis=1)
        offsets = np.flatnonzero(near)
        if offsets.size == 0:
            continue
        candidates += int(offsets.size)
        near_delta = delta[offsets]
        distances = np.sqrt(np.sum(near_delta * near_delta, axis=1))
        radius_sums = radii[i] + radii[i + 1 + offsets]
        bonded = distances < BOND_TOLERANCE * radius_sums
        for offset, distance, radius_sum in zip(
            offsets[bonded].tolist(),
            distances[bonded].tolist(),
            radius_sums[bonded].tolist(),
        ):
            bonds.append(
                Bond(
                    atom_a=atoms[i].id,
                    atom_b=atoms[i + 1 + offset].id,
                    order=bond_order_for(distance, radius_sum),
                    distance=distance,
                )
            )
    logger.debug(
        "Bond inference atoms=%d candidates=%d bonds=%d in %.3fs",
        count,
        candidates,
        len(bonds),
        time.perf_counter() - start,
    )
    return bonds
