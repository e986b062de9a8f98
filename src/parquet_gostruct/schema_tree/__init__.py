"""Schema tree module for representing Parquet schemas as a tree structure.

This module provides the schema node model, the classifier that turns nodes
into shapes, and the visitor interface renderers implement.
"""

from parquet_gostruct.schema_tree.builder import SchemaElement, SchemaTreeBuilder
from parquet_gostruct.schema_tree.classifier import classify
from parquet_gostruct.schema_tree.nodes import (
    ConvertedType,
    FieldRepetitionType,
    LogicalType,
    LogicalTypeKind,
    PhysicalType,
    SchemaNode,
)
from parquet_gostruct.schema_tree.shapes import (
    ListShape,
    MapShape,
    ScalarShape,
    Shape,
    StructShape,
)
from parquet_gostruct.schema_tree.visitor import ShapeVisitor

__all__ = [
    "SchemaElement",
    "SchemaTreeBuilder",
    "classify",
    "ConvertedType",
    "FieldRepetitionType",
    "LogicalType",
    "LogicalTypeKind",
    "PhysicalType",
    "SchemaNode",
    "Shape",
    "ScalarShape",
    "StructShape",
    "ListShape",
    "MapShape",
    "ShapeVisitor",
]
