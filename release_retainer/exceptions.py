"""Exceptions raised by the record loading layer.

The retention core itself never raises for structurally valid input;
these errors belong to the collaborators that build the data model.
"""


class ReleaseRetainerError(Exception):
    """Base class for release retainer errors."""


class DuplicateIdentifierError(ReleaseRetainerError, ValueError):
    """An identifier was inserted twice into one entity collection."""

    def __init__(self, identifier: str):
        super().__init__(f"Duplicate identifier '{identifier}'")
        self.identifier = identifier


class RecordLoadError(ReleaseRetainerError):
    """Record file or record does not match the expected shape."""

    def __init__(self, message: str, source: str | None = None):
        super().__init__(message)
        self.source = source
