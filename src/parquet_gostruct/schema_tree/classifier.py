"""Classification of schema nodes into scalar, struct, list and map shapes."""

from typing import Sequence

from parquet_gostruct.errors import TypeNotSetError, UnknownPhysicalTypeError
from parquet_gostruct.schema_tree.nodes import ConvertedType, LogicalTypeKind, PhysicalType, SchemaNode
from parquet_gostruct.schema_tree.shapes import (
    ListShape,
    MapShape,
    ScalarShape,
    Shape,
    StructShape,
)


def physical_type_of(node: SchemaNode, path: Sequence[str] = ()) -> PhysicalType:
    """Validate and return the physical type of a leaf node.

    Args:
        node: A node with ``type`` set
        path: Go-name path of the node, used in error messages

    Returns:
        The node's physical type

    Raises:
        UnknownPhysicalTypeError: If the code is not a Parquet physical type
    """
    try:
        return PhysicalType(node.type)
    except ValueError:
        raise UnknownPhysicalTypeError(node.type, path) from None


def classify(node: SchemaNode, path: Sequence[str] = ()) -> Shape:
    """Determine the shape of a schema node.

    Container annotations take precedence over the physical layout, so a leaf
    marked LIST or MAP is still reported as a container. Resolving the
    container's element or key/value is left to the returned shape.

    Args:
        node: The node to classify
        path: Go-name path of the node, used in error messages

    Returns:
        One of ScalarShape, StructShape, ListShape or MapShape

    Raises:
        TypeNotSetError: If the node has neither a type nor children
        UnknownPhysicalTypeError: If the node's type code is not known
    """
    if node.type is None and not node.children:
        raise TypeNotSetError(path)

    physical_type = None
    if node.type is not None:
        physical_type = physical_type_of(node, path)

    if node.is_annotated(ConvertedType.LIST, LogicalTypeKind.LIST):
        return ListShape(node=node)

    if node.is_annotated(ConvertedType.MAP, LogicalTypeKind.MAP):
        return MapShape(node=node)

    if node.children:
        return StructShape(node=node)

    return ScalarShape(node=node, physical_type=physical_type)
