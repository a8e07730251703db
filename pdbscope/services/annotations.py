"""Header metadata extraction."""

from __future__ import annotations

import logging
import re
from typing import Iterable, List, Optional

from pdbscope.config import TITLE_PREFIXES
from pdbscope.model.state import Annotation, AnnotationType
from pdbscope.services.fields import column
from pdbscope.services.records import RecordKind, classify_record

logger = logging.getLogger(__name__)

ORGANISM_MARKER = "ORGANISM_SCIENTIFIC:"
HEADER_MIN_LENGTH = 50

_TITLE_PREFIX_RE = re.compile(
    "|".join(re.escape(prefix) for prefix in TITLE_PREFIXES), re.IGNORECASE
)


def extract_annotations(lines: Iterable[str]) -> List[Annotation]:
    """Collect descriptive annotations from header records.

    Parameters
    ----------
    lines
        PDB lines in file order.

    Returns
    -------
    list
        Annotations in the order their records appear.
    """

    annotations: List[Annotation] = []
    for line in lines:
        kind = classify_record(line)
        if kind is RecordKind.HEADER:
            annotations.extend(_header_annotations(line))
        elif kind is RecordKind.RESOLUTION:
            item = _resolution_annotation(line)
            if item is not None:
                annotations.append(item)
        elif kind is RecordKind.EXPDTA:
            method = column(line, 10, 70).strip()
            if method:
                annotations.append(
                    Annotation(
                        AnnotationType.EXPERIMENTAL_METHOD,
                        method,
                        "Structure determination method",
                    )
                )
        elif kind is RecordKind.SOURCE and ORGANISM_MARKER in line:
            organism = line.split(ORGANISM_MARKER, 1)[1].strip().rstrip(";").strip()
            if organism:
                annotations.append(
                    Annotation(AnnotationType.ORGANISM, organism, "Source organism")
                )
    logger.debug("Extracted %d header annotations", len(annotations))
    return annotations


def _header_annotations(line: str) -> List[Annotation]:
    if len(line) < HEADER_MIN_LENGTH:
        return []
    found: List[Annotation] = []
    classification = column(line, 10, 50).strip()
    deposition_date = column(line, 50, 59).strip()
    if classification:
        found.append(
            Annotation(AnnotationType.FUNCTION, classification, "Protein classification")
        )
    if deposition_date:
        found.append(
            Annotation(
                AnnotationType.DEPOSITION_DATE,
                deposition_date,
                "Structure deposition date",
            )
        )
    return found


def _resolution_annotation(line: str) -> Optional[Annotation]:
    tokens = column(line, 23, len(line)).split()
    if not tokens:
        return None
    return Annotation(
        AnnotationType.RESOLUTION, f"{tokens[0]} Å", "X-ray diffraction resolution"
    )


def extract_title(lines: Iterable[str]) -> Optional[str]:
    """Join TITLE continuation lines into a cleaned title.

    Parameters
    ----------
    lines
        PDB lines in file order.

    Returns
    -------
    str or None
        Title without generic method prefixes, or ``None`` when absent.
    """

    fragments = []
    for line in lines:
        if classify_record(line) is not RecordKind.TITLE:
            continue
        fragment = column(line, 10, 80).strip()
        if fragment:
            fragments.append(fragment)
    if not fragments:
        return None
    title = _TITLE_PREFIX_RE.sub("", " ".join(fragments)).strip()
    return title or None


def extract_pdb_id(lines: Iterable[str]) -> Optional[str]:
    """Return the id code of the first HEADER record, if present."""

    for line in lines:
        if classify_record(line) is RecordKind.HEADER:
            code = column(line, 62, 66).strip()
            return code or None
    return None
