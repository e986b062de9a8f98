"""Schema tree node definitions for representing Parquet schema structure.

This module defines the Parquet schema enumerations (using the Thrift codes
found in file footers) and the immutable ``SchemaNode`` that every other part
of the package consumes.
"""

from enum import Enum, IntEnum
from typing import Any, List, Optional, Sequence

from pydantic import BaseModel, ConfigDict, Field, field_validator


class PhysicalType(IntEnum):
    """Parquet physical (storage) types."""

    BOOLEAN = 0
    INT32 = 1
    INT64 = 2
    INT96 = 3
    FLOAT = 4
    DOUBLE = 5
    BYTE_ARRAY = 6
    FIXED_LEN_BYTE_ARRAY = 7


class ConvertedType(IntEnum):
    """Legacy Parquet type annotations."""

    UTF8 = 0
    MAP = 1
    MAP_KEY_VALUE = 2
    LIST = 3
    ENUM = 4
    DECIMAL = 5
    DATE = 6
    TIME_MILLIS = 7
    TIME_MICROS = 8
    TIMESTAMP_MILLIS = 9
    TIMESTAMP_MICROS = 10
    UINT_8 = 11
    UINT_16 = 12
    UINT_32 = 13
    UINT_64 = 14
    INT_8 = 15
    INT_16 = 16
    INT_32 = 17
    INT_64 = 18
    JSON = 19
    BSON = 20
    INTERVAL = 21


class FieldRepetitionType(IntEnum):
    """How many times a field may occur in its parent."""

    REQUIRED = 0
    OPTIONAL = 1
    REPEATED = 2


class LogicalTypeKind(str, Enum):
    """Members of the Parquet logical type union."""

    STRING = "STRING"
    MAP = "MAP"
    LIST = "LIST"
    ENUM = "ENUM"
    DECIMAL = "DECIMAL"
    DATE = "DATE"
    TIME = "TIME"
    TIMESTAMP = "TIMESTAMP"
    INTEGER = "INTEGER"
    UNKNOWN = "UNKNOWN"
    JSON = "JSON"
    BSON = "BSON"
    UUID = "UUID"


def _coerce_enum(enum_cls, value: Any) -> Any:
    """Accept either the Thrift name or the integer code of an enum member."""
    if value is None or isinstance(value, enum_cls):
        return value
    if isinstance(value, str):
        try:
            return enum_cls[value.upper()]
        except KeyError:
            raise ValueError(f"unknown {enum_cls.__name__} name: {value}") from None
    return value


class LogicalType(BaseModel):
    """Parquet logical type annotation.

    Only the parameters relevant to ``kind`` are populated, e.g. ``precision``
    and ``scale`` for DECIMAL or ``unit`` for TIME and TIMESTAMP.
    """

    model_config = ConfigDict(frozen=True)

    kind: LogicalTypeKind = Field(..., description="Union member (STRING, DECIMAL, ...)")
    precision: Optional[int] = Field(default=None, description="DECIMAL precision")
    scale: Optional[int] = Field(default=None, description="DECIMAL scale")
    unit: Optional[str] = Field(default=None, description="TIME/TIMESTAMP unit")
    is_adjusted_to_utc: Optional[bool] = Field(
        default=None, description="TIME/TIMESTAMP UTC normalization"
    )
    bit_width: Optional[int] = Field(default=None, description="INTEGER bit width")
    is_signed: Optional[bool] = Field(default=None, description="INTEGER signedness")

    @field_validator("kind", mode="before")
    @classmethod
    def _upper_kind(cls, value: Any) -> Any:
        return value.upper() if isinstance(value, str) else value

    @field_validator("unit", mode="before")
    @classmethod
    def _upper_unit(cls, value: Any) -> Any:
        return value.upper() if isinstance(value, str) else value


class SchemaNode(BaseModel):
    """One field or group in a Parquet schema tree.

    Leaves carry a physical ``type`` and no children; groups carry children and
    no ``type``. LIST and MAP containers are groups marked through
    ``converted_type`` or ``logical_type``.

    ``type`` is kept as the raw Thrift code rather than a ``PhysicalType`` so
    that codes written by newer (or broken) writers survive loading and can be
    reported by the classifier.

    Nodes are frozen. Use ``replace_at`` to derive a modified tree.
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="Field name as stored in the Parquet file")
    type: Optional[int] = Field(default=None, description="Physical type code")
    type_length: Optional[int] = Field(
        default=None, description="Byte length of a FIXED_LEN_BYTE_ARRAY"
    )
    repetition_type: FieldRepetitionType = Field(
        default=FieldRepetitionType.REQUIRED, description="Repetition of this field"
    )
    converted_type: Optional[ConvertedType] = Field(
        default=None, description="Legacy type annotation"
    )
    logical_type: Optional[LogicalType] = Field(
        default=None, description="Logical type annotation"
    )
    scale: Optional[int] = Field(default=None, description="Legacy DECIMAL scale")
    precision: Optional[int] = Field(default=None, description="Legacy DECIMAL precision")
    field_id: Optional[int] = Field(default=None, description="Parquet field id")
    children: List["SchemaNode"] = Field(default_factory=list, description="Child nodes")

    @field_validator("type", mode="before")
    @classmethod
    def _parse_type(cls, value: Any) -> Any:
        value = _coerce_enum(PhysicalType, value)
        return int(value) if isinstance(value, PhysicalType) else value

    @field_validator("repetition_type", mode="before")
    @classmethod
    def _parse_repetition(cls, value: Any) -> Any:
        if value is None:
            return FieldRepetitionType.REQUIRED
        return _coerce_enum(FieldRepetitionType, value)

    @field_validator("converted_type", mode="before")
    @classmethod
    def _parse_converted(cls, value: Any) -> Any:
        return _coerce_enum(ConvertedType, value)

    @property
    def is_leaf(self) -> bool:
        """Whether this node is a primitive column."""
        return self.type is not None

    @property
    def is_optional(self) -> bool:
        return self.repetition_type == FieldRepetitionType.OPTIONAL

    @property
    def is_repeated(self) -> bool:
        return self.repetition_type == FieldRepetitionType.REPEATED

    def is_annotated(self, converted: ConvertedType, logical: LogicalTypeKind) -> bool:
        """Check whether either annotation marks this node as the given kind.

        Args:
            converted: The legacy annotation to look for
            logical: The logical type name to look for

        Returns:
            True if ``converted_type`` or ``logical_type`` matches
        """
        if self.converted_type == converted:
            return True
        return self.logical_type is not None and self.logical_type.kind == logical

    def replace_at(self, indices: Sequence[int], **updates: Any) -> "SchemaNode":
        """Return a copy of this tree with one descendant's fields replaced.

        The descendant is addressed by child indices from this node, so
        ``root.replace_at([1, 0, 0], type=None)`` patches the first child of the
        first child of the second top-level field. An empty sequence patches
        this node. The original tree is left untouched.
        Values in ``updates`` are not validated, so pass enum members rather
        than names.

        Args:
            indices: Child index at each level, outermost first
            **updates: Field values to set on the addressed node

        Returns:
            A new root node sharing every untouched subtree with this one

        Raises:
            IndexError: If an index does not address an existing child
        """
        if not indices:
            return self.model_copy(update=updates)

        head, rest = indices[0], indices[1:]
        children = list(self.children)
        children[head] = children[head].replace_at(rest, **updates)
        return self.model_copy(update={"children": children})
