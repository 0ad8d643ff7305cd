"""Error definitions for mxfinfo.

Hard failures abort a resolution pass. Every error carries the name of the
lookup that failed so callers can tell which part of the header metadata
was missing or malformed.
"""

from typing import Any


class MXFInfoError(Exception):
    """Base exception for all mxfinfo errors."""

    def __init__(self, message: str, **context: Any) -> None:
        super().__init__(message)
        self.message = message
        self.context: dict[str, Any] = context


class DataModelError(MXFInfoError):
    """The class dictionary is inconsistent or already finalised."""

    pass


class SetNotFoundError(MXFInfoError):
    """A required metadata set could not be found."""

    def __init__(self, lookup: str, **context: Any) -> None:
        self.lookup = lookup
        super().__init__(f"Could not find {lookup} set", lookup=lookup, **context)


class AmbiguousSetError(MXFInfoError):
    """More than one set was found where exactly one is required."""

    def __init__(self, lookup: str, count: int, **context: Any) -> None:
        self.lookup = lookup
        self.count = count
        super().__init__(
            f"Expected a single {lookup} set, found {count}",
            lookup=lookup,
            count=count,
            **context,
        )


class MissingItemError(MXFInfoError):
    """A required item is absent or has the wrong type."""

    def __init__(self, lookup: str, **context: Any) -> None:
        self.lookup = lookup
        super().__init__(f"Could not read {lookup}", lookup=lookup, **context)


class EditRateError(MXFInfoError):
    """An edit rate needed for time arithmetic is unknown."""

    def __init__(self, lookup: str, **context: Any) -> None:
        self.lookup = lookup
        super().__init__(f"Unknown {lookup}", lookup=lookup, **context)


class TaggedValueError(MXFInfoError):
    """A tagged value name or value is not valid UTF-16."""

    pass
