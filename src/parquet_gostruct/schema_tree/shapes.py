"""Shapes a schema node can take once classified.

A shape wraps the ``SchemaNode`` it was derived from and is one of
``ScalarShape``, ``StructShape``, ``ListShape`` or ``MapShape``. Renderers
dispatch on it through ``accept`` instead of inspecting node fields.
"""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Sequence, Tuple

from pydantic import BaseModel, ConfigDict, Field

from parquet_gostruct.errors import MalformedContainerError
from parquet_gostruct.schema_tree.nodes import PhysicalType, SchemaNode

if TYPE_CHECKING:
    from parquet_gostruct.schema_tree.visitor import ShapeVisitor


class Shape(ABC, BaseModel):
    """Base class for classified nodes."""

    model_config = ConfigDict(frozen=True)

    node: SchemaNode = Field(..., description="The node this shape was derived from")

    @property
    def is_composite(self) -> bool:
        """Whether this shape is a struct, list or map."""
        return True

    @abstractmethod
    def accept(self, visitor: "ShapeVisitor") -> str:
        """Accept a visitor for the visitor pattern.

        Args:
            visitor: The visitor to accept

        Returns:
            Result of the visitor's visit operation
        """
        pass


class ScalarShape(Shape):
    """A primitive column with a known physical type."""

    physical_type: PhysicalType = Field(..., description="Validated physical type")

    @property
    def is_composite(self) -> bool:
        return False

    def accept(self, visitor: "ShapeVisitor") -> str:
        return visitor.visit_scalar(self)


class StructShape(Shape):
    """A group whose children become named fields."""

    def accept(self, visitor: "ShapeVisitor") -> str:
        return visitor.visit_struct(self)


class ListShape(Shape):
    """A LIST-annotated group.

    Parquet writes lists as ``<list> LIST { repeated group list { element } }``.
    Older writers omit the inner group or repeat a primitive directly, so the
    element is resolved following the backward-compatibility rules of the
    format.
    """

    def element(self, path: Sequence[str] = ()) -> SchemaNode:
        """Resolve the element node below the repeated wrapper.

        Args:
            path: Go-name path of the list field, used in error messages

        Returns:
            The node describing a single list element

        Raises:
            MalformedContainerError: If the LIST node has no wrapper child
        """
        if len(self.node.children) != 1:
            raise MalformedContainerError(
                f"list must have exactly one repeated child, found {len(self.node.children)}",
                path,
            )

        wrapper = self.node.children[0]
        if wrapper.is_leaf or len(wrapper.children) != 1:
            # two-level list: the repeated field is the element
            return wrapper
        return wrapper.children[0]

    def accept(self, visitor: "ShapeVisitor") -> str:
        return visitor.visit_list(self)


class MapShape(Shape):
    """A MAP-annotated group: ``<map> MAP { repeated group key_value { key; value } }``."""

    def key_value(self, path: Sequence[str] = ()) -> Tuple[SchemaNode, SchemaNode]:
        """Resolve the key and value nodes below the repeated key_value group.

        Args:
            path: Go-name path of the map field, used in error messages

        Returns:
            Tuple of (key node, value node)

        Raises:
            MalformedContainerError: If the wrapper layout is missing
        """
        if len(self.node.children) != 1:
            raise MalformedContainerError(
                f"map must have exactly one repeated child, found {len(self.node.children)}",
                path,
            )

        key_value = self.node.children[0]
        if len(key_value.children) != 2:
            raise MalformedContainerError(
                f"map key_value group must have key and value, found "
                f"{len(key_value.children)} children",
                path,
            )
        return key_value.children[0], key_value.children[1]

    def accept(self, visitor: "ShapeVisitor") -> str:
        return visitor.visit_map(self)
