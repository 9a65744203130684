"""Error taxonomy for schema parsing."""
from typing import Optional


class DataBuilderError(Exception):
    """Base class for all databuilder failures."""


class SchemaParseError(DataBuilderError, ValueError):
    """A schema document could not be turned into entities."""


class SchemaSyntaxError(SchemaParseError):
    """The schema text is not valid JSON."""

    def __init__(self, message: str, lineno: Optional[int] = None, colno: Optional[int] = None, pos: Optional[int] = None):
        super().__init__(f"Invalid JSON: {message}")
        self.lineno = lineno
        self.colno = colno
        self.pos = pos


class SchemaShapeError(SchemaParseError):
    """The JSON is valid but not shaped as a map of entity objects.

    ``key`` names the offending top-level member, or is None when the root
    itself is not an object.
    """

    def __init__(self, message: str, key: Optional[str] = None):
        super().__init__(message)
        self.key = key
