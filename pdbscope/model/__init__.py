"""Model package exports."""

from pdbscope.model.model import Model
from pdbscope.model.state import (
    Annotation,
    AnnotationType,
    Atom,
    Bond,
    BondOrder,
    BoundingBox,
    SecondaryStructure,
    Structure,
)

__all__ = [
    "Annotation",
    "AnnotationType",
    "Atom",
    "Bond",
    "BondOrder",
    "BoundingBox",
    "Model",
    "SecondaryStructure",
    "Structure",
]
