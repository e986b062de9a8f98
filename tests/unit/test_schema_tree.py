"""Unit tests for the schema tree model and builder.

These tests cover the SchemaNode model (enum coercion, immutability and the
clone-and-patch helper) and the assembly of trees from footer element lists
and JSON files.
"""

import json

import pytest
from pydantic import ValidationError

from parquet_gostruct.config import MAX_DEPTH_LIMIT
from parquet_gostruct.errors import SchemaBuildError
from parquet_gostruct.schema_tree.builder import SchemaElement, SchemaTreeBuilder
from parquet_gostruct.schema_tree.nodes import (
    ConvertedType,
    FieldRepetitionType,
    LogicalType,
    LogicalTypeKind,
    PhysicalType,
    SchemaNode,
)


def test_leaf_node():
    """Test creating a primitive column node."""
    node = SchemaNode(name="id", type=PhysicalType.INT64)

    assert node.name == "id"
    assert node.type == 2
    assert node.is_leaf
    assert node.repetition_type == FieldRepetitionType.REQUIRED
    assert node.children == []


def test_enum_names_are_accepted():
    """Test that Thrift names and codes both parse into enum fields."""
    node = SchemaNode(
        name="name",
        type="byte_array",
        converted_type="UTF8",
        repetition_type="optional",
    )

    assert node.type == PhysicalType.BYTE_ARRAY
    assert node.converted_type is ConvertedType.UTF8
    assert node.is_optional

    by_code = SchemaNode(name="name", type=6, converted_type=0, repetition_type=1)
    assert by_code == node


def test_unknown_type_code_is_kept():
    """Test that out-of-range physical codes survive loading."""
    node = SchemaNode(name="future", type=999)

    assert node.type == 999


def test_unknown_enum_name_is_rejected():
    """Test that misspelled enum names fail validation."""
    with pytest.raises(ValidationError, match="unknown PhysicalType name"):
        SchemaNode(name="x", type="INT33")

    with pytest.raises(ValidationError):
        SchemaNode(name="x", type="INT32", logical_type={"kind": "NOT_A_TYPE"})


def test_missing_repetition_defaults_to_required():
    """Test that footer roots without a repetition type count as required."""
    node = SchemaNode(name="root", repetition_type=None, children=[SchemaNode(name="a", type=1)])

    assert node.repetition_type == FieldRepetitionType.REQUIRED


def test_logical_type_normalization():
    """Test that logical type names and units are case-insensitive."""
    logical = LogicalType(kind="timestamp", unit="micros", is_adjusted_to_utc=False)

    assert logical.kind is LogicalTypeKind.TIMESTAMP
    assert logical.unit == "MICROS"


def test_annotations():
    """Test container detection through either annotation."""
    legacy = SchemaNode(name="l", converted_type=ConvertedType.LIST, children=[SchemaNode(name="e", type=1)])
    logical = SchemaNode(name="l", logical_type={"kind": "LIST"}, children=[SchemaNode(name="e", type=1)])

    assert legacy.is_annotated(ConvertedType.LIST, LogicalTypeKind.LIST)
    assert logical.is_annotated(ConvertedType.LIST, LogicalTypeKind.LIST)
    assert not legacy.is_annotated(ConvertedType.MAP, LogicalTypeKind.MAP)


def test_nodes_are_frozen():
    """Test that schema nodes cannot be mutated in place."""
    node = SchemaNode(name="id", type=PhysicalType.INT32)

    with pytest.raises(ValidationError):
        node.type = None


def test_replace_at_returns_patched_copy(load_schema):
    """Test patching a nested node without touching the original tree."""
    root = load_schema("map-value-map.json")

    patched = root.replace_at([1, 0, 0], converted_type=ConvertedType.MAP)

    assert patched.children[1].children[0].children[0].converted_type is ConvertedType.MAP
    assert root.children[1].children[0].children[0].converted_type is ConvertedType.UTF8
    # untouched siblings are shared
    assert patched.children[0] is root.children[0]


def test_replace_at_root():
    """Test that an empty index path patches the node itself."""
    node = SchemaNode(name="id", type=PhysicalType.INT32)

    assert node.replace_at([], name="key").name == "key"


def test_replace_at_bad_index(load_schema):
    """Test that addressing a missing child raises IndexError."""
    root = load_schema("good.json")

    with pytest.raises(IndexError):
        root.replace_at([5], type=None)


def test_json_round_trip(load_schema):
    """Test that a dumped tree loads back into an equal tree."""
    root = load_schema("all-types.json")

    again = SchemaNode.model_validate_json(root.model_dump_json())

    assert again == root


class TestSchemaTreeBuilder:
    """Tests for folding footer element lists into trees."""

    def test_build_from_elements(self) -> None:
        """Test building a nested tree from a depth-first element list."""
        elements = [
            {"name": "root", "num_children": 2},
            {"name": "id", "type": "INT64", "repetition_type": "REQUIRED"},
            {"name": "tags", "converted_type": "LIST", "repetition_type": "OPTIONAL", "num_children": 1},
            {"name": "list", "repetition_type": "REPEATED", "num_children": 1},
            {"name": "element", "type": "BYTE_ARRAY", "converted_type": "UTF8", "repetition_type": "OPTIONAL"},
        ]

        root = SchemaTreeBuilder.build_from_elements(elements)

        assert root.name == "root"
        assert [c.name for c in root.children] == ["id", "tags"]
        tags = root.children[1]
        assert tags.converted_type is ConvertedType.LIST
        assert tags.children[0].name == "list"
        assert tags.children[0].children[0].name == "element"
        assert tags.children[0].children[0].is_optional
        assert not isinstance(tags, SchemaElement)

    def test_build_matches_nested_fixture(self, load_schema) -> None:
        """Test that the flat and nested forms of a schema agree."""
        assert load_schema("good-elements.json") == load_schema("good.json")

    def test_accepts_schema_element_models(self) -> None:
        """Test passing already validated SchemaElement objects."""
        elements = [
            SchemaElement(name="root", num_children=1),
            SchemaElement(name="flag", type=PhysicalType.BOOLEAN),
        ]

        root = SchemaTreeBuilder.build_from_elements(elements)

        assert root.children[0].type == PhysicalType.BOOLEAN

    def test_empty_elements(self) -> None:
        with pytest.raises(SchemaBuildError, match="no elements"):
            SchemaTreeBuilder.build_from_elements([])

    def test_truncated_elements(self) -> None:
        """Test a group announcing more children than are present."""
        elements = [
            {"name": "root", "num_children": 3},
            {"name": "a", "type": "INT32"},
        ]

        with pytest.raises(SchemaBuildError, match="ended early"):
            SchemaTreeBuilder.build_from_elements(elements)

    def test_deeply_nested_elements(self) -> None:
        """Test that a long chain of groups fails cleanly instead of overflowing."""
        elements = [{"name": f"g{level}", "num_children": 1} for level in range(3000)]
        elements.append({"name": "leaf", "type": "INT32"})

        with pytest.raises(SchemaBuildError, match=f"deeper than {MAX_DEPTH_LIMIT} levels"):
            SchemaTreeBuilder.build_from_elements(elements)

    def test_nesting_up_to_limit(self) -> None:
        elements = [{"name": f"g{level}", "num_children": 1} for level in range(MAX_DEPTH_LIMIT)]
        elements.append({"name": "leaf", "type": "INT32"})

        node = SchemaTreeBuilder.build_from_elements(elements)
        for _ in range(MAX_DEPTH_LIMIT):
            node = node.children[0]
        assert node.name == "leaf"

    def test_trailing_elements(self) -> None:
        """Test elements left over after the root is complete."""
        elements = [
            {"name": "root", "num_children": 1},
            {"name": "a", "type": "INT32"},
            {"name": "b", "type": "INT32"},
        ]

        with pytest.raises(SchemaBuildError, match="1 schema element"):
            SchemaTreeBuilder.build_from_elements(elements)

    def test_invalid_element(self) -> None:
        with pytest.raises(SchemaBuildError, match="invalid schema element"):
            SchemaTreeBuilder.build_from_elements([{"type": "INT32"}])

    def test_load_json_invalid(self, tmp_path) -> None:
        """Test loading files that are not JSON or not a schema."""
        not_json = tmp_path / "broken.json"
        not_json.write_text("{not json")
        with pytest.raises(SchemaBuildError, match="not valid JSON"):
            SchemaTreeBuilder.load_json(not_json)

        scalar = tmp_path / "scalar.json"
        scalar.write_text(json.dumps(42))
        with pytest.raises(SchemaBuildError, match="got int"):
            SchemaTreeBuilder.load_json(scalar)

        bad_tree = tmp_path / "bad.json"
        bad_tree.write_text(json.dumps({"children": []}))
        with pytest.raises(SchemaBuildError, match="invalid schema tree"):
            SchemaTreeBuilder.load_json(bad_tree)

    def test_load_json_not_utf8(self, tmp_path) -> None:
        latin1 = tmp_path / "latin1.json"
        latin1.write_bytes(b'{"name": "r\xff"}')

        with pytest.raises(SchemaBuildError, match="not UTF-8"):
            SchemaTreeBuilder.load_json(latin1)

    def test_load_json_missing_file(self, tmp_path) -> None:
        with pytest.raises(OSError):
            SchemaTreeBuilder.load_json(tmp_path / "missing.json")
