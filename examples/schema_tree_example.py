#!/usr/bin/env python3
"""Example rendering a Parquet schema tree as a Go struct.

This example builds a schema from footer elements, prints the Go declaration,
and walks the tree with a custom visitor that counts each shape.
"""

from parquet_gostruct.config import Settings
from parquet_gostruct.errors import SchemaError
from parquet_gostruct.generator.go_struct import render_go_struct
from parquet_gostruct.schema_tree.builder import SchemaTreeBuilder
from parquet_gostruct.schema_tree.classifier import classify
from parquet_gostruct.schema_tree.visitor import ShapeVisitor


def create_example_schema():
    """Create an example schema from a flat footer element list."""
    return SchemaTreeBuilder.build_from_elements(
        [
            {"name": "parquet_go_root", "num_children": 4},
            {"name": "id", "type": "INT64", "repetition_type": "REQUIRED"},
            {"name": "profile", "repetition_type": "OPTIONAL", "num_children": 2},
            {"name": "name", "type": "BYTE_ARRAY", "converted_type": "UTF8", "repetition_type": "REQUIRED"},
            {"name": "age", "type": "INT32", "repetition_type": "OPTIONAL"},
            {"name": "tags", "converted_type": "LIST", "repetition_type": "OPTIONAL", "num_children": 1},
            {"name": "list", "repetition_type": "REPEATED", "num_children": 1},
            {"name": "element", "type": "BYTE_ARRAY", "converted_type": "UTF8", "repetition_type": "REQUIRED"},
            {"name": "counters", "converted_type": "MAP", "repetition_type": "REQUIRED", "num_children": 1},
            {"name": "key_value", "repetition_type": "REPEATED", "num_children": 2},
            {"name": "key", "type": "BYTE_ARRAY", "converted_type": "UTF8", "repetition_type": "REQUIRED"},
            {"name": "value", "type": "INT64", "repetition_type": "REQUIRED"},
        ]
    )


class SchemaAnalyzerVisitor(ShapeVisitor):
    """Custom visitor that counts shapes in a schema."""

    def __init__(self):
        self.scalar_count = 0
        self.struct_count = 0
        self.list_count = 0
        self.map_count = 0

    def visit_scalar(self, shape):
        self.scalar_count += 1
        return f"Scalar: {shape.node.name} ({shape.physical_type.name})"

    def visit_struct(self, shape):
        self.struct_count += 1
        for child in shape.node.children:
            classify(child).accept(self)
        return f"Struct: {shape.node.name} with {len(shape.node.children)} fields"

    def visit_list(self, shape):
        self.list_count += 1
        classify(shape.element()).accept(self)
        return f"List: {shape.node.name}"

    def visit_map(self, shape):
        self.map_count += 1
        key, value = shape.key_value()
        classify(key).accept(self)
        classify(value).accept(self)
        return f"Map: {shape.node.name}"

    def get_summary(self):
        return {
            "scalars": self.scalar_count,
            "structs": self.struct_count,
            "lists": self.list_count,
            "maps": self.map_count,
        }


def main():
    """Demonstrate rendering and analysis of a schema tree."""
    print("=" * 70)
    print("Parquet schema to Go struct")
    print("=" * 70)
    print()

    root = create_example_schema()

    print("1. Go struct declaration:")
    print("-" * 70)
    try:
        print(render_go_struct(root, Settings(pretty=True)))
    except SchemaError as e:
        print(f"Cannot render: {e}")
    print()

    print("2. Shapes found by a custom visitor:")
    print("-" * 70)
    analyzer = SchemaAnalyzerVisitor()
    for child in root.children:
        print(f"  - {classify(child).accept(analyzer)}")

    print()
    print("Summary:")
    for key, value in analyzer.get_summary().items():
        print(f"  {key}: {value}")
    print()


if __name__ == "__main__":
    main()
