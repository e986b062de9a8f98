"""Exceptions raised while building, classifying and rendering schema trees."""

from typing import Optional, Sequence, Tuple


def format_path(path: Sequence[str]) -> str:
    """Render a field path the way error messages show it: ``[Root.Field]``."""
    return "[" + ".".join(path) + "]"


class SchemaError(Exception):
    """Base class for schema trees that cannot be rendered.

    Attributes:
        path: Go names from the root to the offending field, when known
    """

    def __init__(self, message: str, path: Optional[Sequence[str]] = None) -> None:
        self.path: Tuple[str, ...] = tuple(path or ())
        if self.path:
            message = f"{message} in field {format_path(self.path)}"
        super().__init__(message)


class TypeNotSetError(SchemaError):
    """A node has neither a physical type nor children."""

    def __init__(self, path: Optional[Sequence[str]] = None) -> None:
        super().__init__("type not set", path)


class UnknownPhysicalTypeError(SchemaError):
    """A node's physical type code is not a known Parquet type."""

    def __init__(self, code: int, path: Optional[Sequence[str]] = None) -> None:
        self.code = code
        super().__init__(f"unknown type: {code}", path)


class MalformedContainerError(SchemaError):
    """A LIST or MAP node lacks the repeated wrapper layout Parquet requires."""


class InvalidFieldNameError(SchemaError):
    """A field name is empty or cannot be written into a struct tag."""


class UnsupportedCompositeListElementError(SchemaError):
    def __init__(self, path: Optional[Sequence[str]] = None) -> None:
        super().__init__("go struct does not support composite type as list element", path)


class UnsupportedCompositeMapKeyError(SchemaError):
    def __init__(self, path: Optional[Sequence[str]] = None) -> None:
        super().__init__("go struct does not support composite type as map key", path)


class UnsupportedCompositeMapValueError(SchemaError):
    def __init__(self, path: Optional[Sequence[str]] = None) -> None:
        super().__init__("go struct does not support composite type as map value", path)


class SchemaDepthExceededError(SchemaError):
    """The tree nests deeper than the configured limit."""

    def __init__(self, max_depth: int, path: Optional[Sequence[str]] = None) -> None:
        self.max_depth = max_depth
        super().__init__(f"schema nesting exceeds maximum depth of {max_depth}", path)


class SchemaBuildError(Exception):
    """Raised when a schema tree cannot be assembled from its serialized form."""
