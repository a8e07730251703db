"""Dataclasses for parsed structures and model state."""

from __future__ import annotations

from concurrent.futures import Future
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional, Tuple

Vector3 = Tuple[float, float, float]


class SecondaryStructure(Enum):
    """Secondary structure label assigned per residue."""

    HELIX = "HELIX"
    SHEET = "SHEET"
    COIL = "COIL"
    UNKNOWN = "UNKNOWN"

    @property
    def display_name(self) -> str:
        return _SECONDARY_DISPLAY_NAMES[self]


_SECONDARY_DISPLAY_NAMES = {
    SecondaryStructure.HELIX: "α-Helix",
    SecondaryStructure.SHEET: "β-Sheet",
    SecondaryStructure.COIL: "Coil",
    SecondaryStructure.UNKNOWN: "Unknown",
}


class BondOrder(Enum):
    """Distance-tier bond order."""

    SINGLE = 1
    DOUBLE = 2
    TRIPLE = 3


class AnnotationType(Enum):
    """Category of a descriptive annotation."""

    RESOLUTION = "RESOLUTION"
    MOLECULAR_WEIGHT = "MOLECULAR_WEIGHT"
    EXPERIMENTAL_METHOD = "EXPERIMENTAL_METHOD"
    ORGANISM = "ORGANISM"
    FUNCTION = "FUNCTION"
    DEPOSITION_DATE = "DEPOSITION_DATE"
    SPACE_GROUP = "SPACE_GROUP"

    @property
    def display_name(self) -> str:
        return self.value.replace("_", " ").title()


@dataclass(frozen=True)
class Atom:
    """A decoded ATOM/HETATM record.

    Attributes
    ----------
    id
        0-based dense index in file order.
    element
        Element symbol as read (or guessed from the atom name).
    name
        Atom name.
    chain
        Chain identifier, ``"A"`` when blank in the file.
    residue_name
        Residue name.
    residue_number
        Residue sequence number.
    position
        Cartesian coordinates.
    secondary_structure
        Secondary structure of the owning residue.
    is_backbone
        Whether the atom name is a main-chain name.
    is_ligand
        Whether the record is HETATM or the residue is non-standard.
    is_pocket
        Whether the atom is neither backbone nor ligand.
    occupancy
        Occupancy, 1.0 when absent.
    temperature_factor
        B-factor, 0.0 when absent.
    """

    id: int
    element: str
    name: str
    chain: str
    residue_name: str
    residue_number: int
    position: Vector3
    secondary_structure: SecondaryStructure
    is_backbone: bool
    is_ligand: bool
    is_pocket: bool
    occupancy: float = 1.0
    temperature_factor: float = 0.0

    @property
    def kind(self) -> str:
        """Return the atom classification (backbone, ligand or pocket)."""
        if self.is_backbone:
            return "backbone"
        if self.is_ligand:
            return "ligand"
        return "pocket"

    def to_dict(self) -> Dict[str, object]:
        """Serialize atom data.

        Returns
        -------
        dict
            JSON-ready atom data.
        """
        return {
            "id": self.id,
            "element": self.element,
            "name": self.name,
            "chain": self.chain,
            "residue_name": self.residue_name,
            "residue_number": self.residue_number,
            "position": {"x": self.position[0], "y": self.position[1], "z": self.position[2]},
            "secondary_structure": self.secondary_structure.value,
            "kind": self.kind,
            "occupancy": self.occupancy,
            "temperature_factor": self.temperature_factor,
        }


@dataclass(frozen=True)
class Bond:
    """An inferred covalent bond.

    Attributes
    ----------
    atom_a
        Lower atom id.
    atom_b
        Higher atom id.
    order
        Heuristic bond order.
    distance
        Euclidean distance between the two atoms.
    """

    atom_a: int
    atom_b: int
    order: BondOrder
    distance: float

    def to_dict(self) -> Dict[str, object]:
        return {
            "atom_a": self.atom_a,
            "atom_b": self.atom_b,
            "order": self.order.value,
            "distance": self.distance,
        }


@dataclass(frozen=True)
class Annotation:
    """Descriptive metadata extracted from header records."""

    type: AnnotationType
    value: str
    description: str

    def to_dict(self) -> Dict[str, object]:
        return {
            "type": self.type.value,
            "label": self.type.display_name,
            "value": self.value,
            "description": self.description,
        }


@dataclass(frozen=True)
class BoundingBox:
    """Axis-aligned bounding box."""

    min: Vector3
    max: Vector3

    def to_dict(self) -> Dict[str, object]:
        return {"min": list(self.min), "max": list(self.max)}


@dataclass(frozen=True)
class Structure:
    """Immutable result of a successful parse.

    Attributes
    ----------
    atoms
        Atoms in file order; ``atoms[i].id == i``.
    bonds
        Inferred bonds sorted by ``(atom_a, atom_b)``.
    annotations
        Header annotations followed by derived ones.
    bounding_box
        Axis-aligned bounds of all atom positions.
    center_of_mass
        Unweighted centroid of all atom positions.
    title
        Cleaned TITLE text, if any.
    pdb_id
        HEADER id code, if any.
    """

    atoms: Tuple[Atom, ...]
    bonds: Tuple[Bond, ...]
    annotations: Tuple[Annotation, ...]
    bounding_box: BoundingBox
    center_of_mass: Vector3
    title: Optional[str] = None
    pdb_id: Optional[str] = None

    @property
    def atom_count(self) -> int:
        return len(self.atoms)

    @property
    def bond_count(self) -> int:
        return len(self.bonds)

    @property
    def chains(self) -> List[str]:
        return sorted({atom.chain for atom in self.atoms})

    @property
    def chain_count(self) -> int:
        return len(self.chains)

    @property
    def residue_count(self) -> int:
        return len({(atom.chain, atom.residue_number) for atom in self.atoms})

    def annotations_of(self, annotation_type: AnnotationType) -> List[Annotation]:
        return [item for item in self.annotations if item.type is annotation_type]

    def to_dict(self) -> Dict[str, object]:
        """Serialize the full structure.

        Returns
        -------
        dict
            JSON-ready structure payload.
        """
        return {
            "title": self.title,
            "pdb_id": self.pdb_id,
            "atoms": [atom.to_dict() for atom in self.atoms],
            "bonds": [bond.to_dict() for bond in self.bonds],
            "annotations": [item.to_dict() for item in self.annotations],
            "bounding_box": self.bounding_box.to_dict(),
            "center_of_mass": list(self.center_of_mass),
        }


@dataclass
class ModelState:
    """Mutable model state shared across calls.

    Attributes
    ----------
    structure
        Currently loaded structure.
    source
        Path or label the structure was loaded from.
    atoms_by_residue
        Mapping of ``(chain, residue_number)`` to atom ids.
    info_tables
        Cached structure tables payload.
    info_future
        Background future for table generation.
    loaded
        Whether a structure is currently loaded.
    """

    structure: Optional[Structure] = None
    source: Optional[str] = None
    atoms_by_residue: Dict[Tuple[str, int], List[int]] = field(default_factory=dict)
    info_tables: Optional[Dict[str, Dict[str, object]]] = None
    info_future: Optional[Future] = None
    loaded: bool = False
