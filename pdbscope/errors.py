"""Error types and error payload helpers."""

from __future__ import annotations

from typing import Dict, Optional


class PdbscopeError(Exception):
    """Base exception type for pdbscope.

    Attributes
    ----------
    code
        Stable error identifier.
    message
        Human-readable error message.
    details
        Optional detail payload for debugging.
    """

    def __init__(self, code: str, message: str, details: Optional[object] = None) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.details = details

    def to_result(self) -> Dict[str, object]:
        """Return a JSON-ready error payload.

        Returns
        -------
        dict
            JSON-ready error payload.
        """
        return error_result(self.code, self.message, self.details)


class ParseError(PdbscopeError):
    """Fatal errors raised while parsing PDB text.

    Malformed single lines never raise; they are dropped by the extractors.
    """


class InvalidFormat(ParseError):
    """Input is empty or structurally unusable."""

    def __init__(self, message: str, details: Optional[object] = None) -> None:
        super().__init__("invalid_format", message, details)


class NoValidAtoms(ParseError):
    """No ATOM/HETATM record could be decoded."""

    def __init__(self, details: Optional[object] = None) -> None:
        super().__init__("no_valid_atoms", "No valid atoms found in PDB content", details)


class CorruptedData(ParseError):
    """Parsed data is internally inconsistent."""

    def __init__(self, message: str, details: Optional[object] = None) -> None:
        super().__init__("corrupted_data", message, details)


class ModelError(PdbscopeError):
    """Errors raised by the model layer.

    Attributes
    ----------
    code
        Stable error identifier.
    message
        Human-readable error message.
    details
        Optional detail payload for debugging.
    """


class PdbWriterError(PdbscopeError):
    """Errors raised when formatting PDB output.

    Attributes
    ----------
    code
        Stable error identifier.
    message
        Human-readable error message.
    details
        Optional detail payload for debugging.
    """


def error_result(code: str, message: str, details: Optional[object] = None) -> Dict[str, object]:
    """Build an error payload.

    Parameters
    ----------
    code
        Stable error identifier.
    message
        Human-readable summary.
    details
        Optional detail payload for logging or debugging.

    Returns
    -------
    dict
        JSON-ready error payload.
    """

    return {"ok": False, "error": {"code": code, "message": message, "details": details}}
