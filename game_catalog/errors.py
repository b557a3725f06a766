"""
Catalog Errors

Every failure the catalog can raise derives from ``CatalogError`` so callers
can catch the whole family at once.  Per-line problems are ``FieldError``
subclasses; the loaders wrap them in ``CatalogLoadError`` together with the
line number and the raw text of the offending line.
"""

from typing import Any, Optional


class CatalogError(Exception):
    """Base class for all game catalog errors."""


class FieldError(CatalogError):
    """A single database line could not be turned into catalog data."""


class UnrecognizedFieldKey(FieldError):
    """The line key is not part of the field schema."""

    def __init__(self, key: str) -> None:
        self.key = key
        super().__init__(f"Unknown field key {key!r}")


class OrphanField(FieldError):
    """An attribute line appeared before any ``Game`` line."""

    def __init__(self, field: Any) -> None:
        self.field = field
        key = getattr(field, "key", None)
        super().__init__(f"Field {key!r} appears before any Game line")


class InconsistentAssemblerKey(FieldError):
    """The classifier accepted a key that has no attribute slot on Game."""

    def __init__(self, key: str) -> None:
        self.key = key
        super().__init__(f"No game attribute for field key {key!r}")


class CatalogLoadError(CatalogError):
    """Loading aborted on a malformed line."""

    def __init__(self, line_number: int, raw_line: str, cause: FieldError) -> None:
        self.line_number = line_number
        self.raw_line = raw_line
        self.cause = cause
        super().__init__(f"line {line_number}: {cause} (raw line: {raw_line!r})")


class UnknownAttribute(CatalogError, KeyError):
    """A query addressed an attribute that does not exist."""

    def __init__(self, attribute: str, valid: Optional[list] = None) -> None:
        self.attribute = attribute
        msg = f"Unknown attribute {attribute!r}"
        if valid:
            msg += f" (expected one of: {', '.join(valid)})"
        super().__init__(msg)

    def __str__(self) -> str:
        return self.args[0]
