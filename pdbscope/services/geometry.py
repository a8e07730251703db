"""Spatial aggregates over atom positions."""

from __future__ import annotations

from typing import Sequence

import numpy as np

from pdbscope.model.state import Atom, BoundingBox, Vector3
from pdbscope.services.bonds import positions_array


def compute_bounding_box(atoms: Sequence[Atom]) -> BoundingBox:
    """Return the componentwise min/max of all atom positions.

    Raises
    ------
    ValueError
        If ``atoms`` is empty.
    """

    coords = positions_array(atoms)
    if coords.shape[0] == 0:
        raise ValueError("Cannot compute a bounding box without atoms")
    low = coords.min(axis=0)
    high = coords.max(axis=0)
    return BoundingBox(
        min=(float(low[0]), float(low[1]), float(low[2])),
        max=(float(high[0]), float(high[1]), float(high[2])),
    )


def compute_center_of_mass(atoms: Sequence[Atom]) -> Vector3:
    """Return the unweighted mean of all atom positions.

    Element masses are deliberately ignored.

    Raises
    ------
    ValueError
        If ``atoms`` is empty.
    """

    coords = positions_array(atoms)
    if coords.shape[0] == 0:
        raise ValueError("Cannot compute a center of mass without atoms")
    center = coords.mean(axis=0)
    return (float(center[0]), float(center[1]), float(center[2]))
