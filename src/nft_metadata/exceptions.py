"""Exceptions for NFT metadata decoding."""

from typing import Any, List, Optional


class MetadataError(Exception):
    pass


class DecodeError(MetadataError):
    """
    Raised when a metadata object can't be decoded.

    Attributes:
        path: Location of the offending field, ex. "attributes[2].value"
        expected: Shape the field should have had
        actual: JSON type of the input found there, or "missing"
        raw: Raw input value at that location
        errors: Every validation error reported for the document
    """

    def __init__(
        self,
        message: str,
        path: str = "",
        expected: Optional[str] = None,
        actual: Optional[str] = None,
        raw: Any = None,
        errors: Optional[List[dict]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.path = path
        self.expected = expected
        self.actual = actual
        self.raw = raw
        self.errors = errors or list()

    def __str__(self):
        if self.path:
            return f"{self.path}: {self.message}"
        return self.message


class StructuralError(DecodeError):
    """
    Required field is missing or a field has the wrong JSON type
    """

    pass


class ColorFormatError(DecodeError):
    """
    Color is not exactly three hex-encoded bytes
    """

    pass


class UnrecognizedAttributeShapeError(DecodeError):
    """
    Attribute entry is neither a textual nor a numerical attribute
    """

    def __init__(self, message: str, index: Optional[int] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.index = index


class UnknownEnumTokenError(DecodeError):
    """
    `display_type` is not one of the known display types
    """

    pass
