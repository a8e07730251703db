"""PDB text parsing with bond inference and structure summaries."""

from pdbscope.model import (
    Annotation,
    AnnotationType,
    Atom,
    Bond,
    BondOrder,
    BoundingBox,
    Model,
    SecondaryStructure,
    Structure,
)
from pdbscope.errors import CorruptedData, InvalidFormat, NoValidAtoms, ParseError
from pdbscope.parser import parse

__all__ = [
    "Annotation",
    "AnnotationType",
    "Atom",
    "Bond",
    "BondOrder",
    "BoundingBox",
    "CorruptedData",
    "InvalidFormat",
    "Model",
    "NoValidAtoms",
    "ParseError",
    "SecondaryStructure",
    "Structure",
    "parse",
]
