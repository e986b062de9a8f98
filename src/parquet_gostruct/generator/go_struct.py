"""Go struct generation using the schema tree visitor pattern.

This module renders a Parquet schema tree as a Go struct declaration whose
field tags follow the parquet-go convention. Nested groups become inline
structs, LIST containers become slices and MAP containers become Go maps.

Go slices and maps cannot hold the nested structs parquet-go would need for
composite elements, so those schemas are rejected instead of approximated.
"""

from typing import List, Optional, Sequence, Tuple

from parquet_gostruct.config import DEFAULT_MAX_DEPTH, MAX_DEPTH_LIMIT, Settings
from parquet_gostruct.errors import (
    InvalidFieldNameError,
    SchemaDepthExceededError,
    SchemaError,
    UnsupportedCompositeListElementError,
    UnsupportedCompositeMapKeyError,
    UnsupportedCompositeMapValueError,
)
from parquet_gostruct.generator.formatting import (
    go_field_name,
    indent_go_source,
    is_tag_safe,
    struct_tag,
)
from parquet_gostruct.schema_tree.classifier import classify
from parquet_gostruct.schema_tree.nodes import FieldRepetitionType, PhysicalType, SchemaNode
from parquet_gostruct.schema_tree.shapes import (
    ListShape,
    MapShape,
    ScalarShape,
    Shape,
    StructShape,
)
from parquet_gostruct.schema_tree.visitor import ShapeVisitor

# parquet-go binds every byte-array column to string, annotated or not.
GO_TYPES = {
    PhysicalType.BOOLEAN: "bool",
    PhysicalType.INT32: "int32",
    PhysicalType.INT64: "int64",
    PhysicalType.INT96: "string",
    PhysicalType.FLOAT: "float32",
    PhysicalType.DOUBLE: "float64",
    PhysicalType.BYTE_ARRAY: "string",
    PhysicalType.FIXED_LEN_BYTE_ARRAY: "string",
}

TagPairs = List[Tuple[str, str]]


def scalar_tag_pairs(shape: ScalarShape, prefix: str = "") -> TagPairs:
    """Describe a primitive column as parquet-go tag entries.

    Args:
        shape: The classified primitive column
        prefix: ``key`` or ``value`` for map keys, map values and list elements

    Returns:
        Ordered (key, value) pairs, without ``name`` and ``repetitiontype``
    """
    node = shape.node
    pairs = [(f"{prefix}type", shape.physical_type.name)]

    if node.converted_type is not None:
        pairs.append((f"{prefix}convertedtype", node.converted_type.name))
    if node.scale is not None:
        pairs.append((f"{prefix}scale", str(node.scale)))
    if node.precision is not None:
        pairs.append((f"{prefix}precision", str(node.precision)))
    if node.type_length is not None:
        pairs.append((f"{prefix}length", str(node.type_length)))

    logical = node.logical_type
    if logical is not None:
        key = f"{prefix}logicaltype"
        pairs.append((key, logical.kind.value))
        if logical.precision is not None:
            pairs.append((f"{key}.precision", str(logical.precision)))
        if logical.scale is not None:
            pairs.append((f"{key}.scale", str(logical.scale)))
        if logical.is_adjusted_to_utc is not None:
            pairs.append((f"{key}.isadjustedtoutc", str(logical.is_adjusted_to_utc).lower()))
        if logical.unit is not None:
            pairs.append((f"{key}.unit", logical.unit))
        if logical.bit_width is not None:
            pairs.append((f"{key}.bitwidth", str(logical.bit_width)))
        if logical.is_signed is not None:
            pairs.append((f"{key}.issigned", str(logical.is_signed).lower()))

    return pairs


def repetition_tag_pairs(node: SchemaNode) -> TagPairs:
    if node.repetition_type == FieldRepetitionType.REQUIRED:
        return []
    return [("repetitiontype", node.repetition_type.name)]


class GoStructVisitor(ShapeVisitor):
    """Schema tree visitor that produces Go type expressions.

    Each visit returns the Go type of the visited node, already wrapped for the
    node's repetition: ``*T`` for optional fields and ``[]T`` for bare
    repeated fields. Structs are rendered one element per line without
    indentation; see ``indent_go_source`` for the gofmt layout.
    """

    def __init__(
        self,
        path: Sequence[str] = (),
        depth: int = 0,
        max_depth: int = DEFAULT_MAX_DEPTH,
        member: bool = False,
    ):
        """Initialize the Go struct visitor.

        Args:
            path: Go-name path of the node being visited, root first
            depth: Current nesting depth
            max_depth: Depth at which rendering fails
            member: Whether the node is a list element or map key/value, whose
                own REPEATED marker belongs to the enclosing container
        """
        self.path = tuple(path)
        self.depth = depth
        self.max_depth = max_depth
        self.member = member

    def visit_scalar(self, shape: ScalarShape) -> str:
        """Map the physical type to its Go type."""
        return self._wrap(GO_TYPES[shape.physical_type], shape.node)

    def visit_struct(self, shape: StructShape) -> str:
        """Render an inline struct with one field per child."""
        return self._wrap(self.struct_body(shape), shape.node)

    def visit_list(self, shape: ListShape) -> str:
        """Render a LIST container as a slice of its element type.

        Raises:
            UnsupportedCompositeListElementError: If the element is a struct,
                list or map
        """
        element_visitor, element_shape = self._resolve_list_element(shape)
        return self._wrap("[]" + element_shape.accept(element_visitor), shape.node)

    def visit_map(self, shape: MapShape) -> str:
        """Render a MAP container as a Go map.

        The key is checked before the value, so a map whose key and value are
        both composite reports the key.

        Raises:
            UnsupportedCompositeMapKeyError: If the key is a struct, list or map
            UnsupportedCompositeMapValueError: If the value is a struct, list or map
        """
        (key_visitor, key_shape), (value_visitor, value_shape) = self._resolve_map_entries(shape)
        key_type = key_shape.accept(key_visitor)
        value_type = value_shape.accept(value_visitor)
        return self._wrap(f"map[{key_type}]{value_type}", shape.node)

    def struct_body(self, shape: StructShape) -> str:
        """Render ``struct { ... }`` for a group, ignoring its own repetition.

        Args:
            shape: The group to render

        Returns:
            Compact Go source of the struct type
        """
        lines = ["struct {"]
        for child in shape.node.children:
            lines.append(self._render_field(child))
        lines.append("}")
        return "\n".join(lines)

    def _render_field(self, child: SchemaNode) -> str:
        """Render one struct field line: name, type and tag.

        Raises:
            InvalidFieldNameError: If the name is empty or would break the tag
        """
        if not child.name:
            raise InvalidFieldNameError("struct has a field with an empty name", self.path)

        field_name = go_field_name(child.name)
        if not is_tag_safe(child.name):
            raise InvalidFieldNameError(
                f"name {child.name!r} cannot be written into a struct tag",
                self.path + (field_name,),
            )

        child_visitor = self._descend(field_name)
        child_shape = classify(child, child_visitor.path)
        type_str = child_shape.accept(child_visitor)
        tag = struct_tag(child_visitor._tag_pairs(child_shape))
        return f"{field_name} {type_str} {tag}"

    def _tag_pairs(self, shape: Shape) -> TagPairs:
        """Build the struct tag entries for the node this visitor renders."""
        node = shape.node
        pairs: TagPairs = [("name", node.name)]

        if isinstance(shape, ScalarShape):
            return pairs + scalar_tag_pairs(shape) + repetition_tag_pairs(node)

        if isinstance(shape, ListShape):
            pairs.append(("type", "LIST"))
            pairs.extend(repetition_tag_pairs(node))
            _, element_shape = self._resolve_list_element(shape)
            return pairs + scalar_tag_pairs(element_shape, prefix="value")

        if isinstance(shape, MapShape):
            pairs.append(("type", "MAP"))
            pairs.extend(repetition_tag_pairs(node))
            (_, key_shape), (_, value_shape) = self._resolve_map_entries(shape)
            pairs.extend(scalar_tag_pairs(key_shape, prefix="key"))
            return pairs + scalar_tag_pairs(value_shape, prefix="value")

        return pairs + repetition_tag_pairs(node)

    def _resolve_list_element(self, shape: ListShape) -> Tuple["GoStructVisitor", ScalarShape]:
        element = shape.element(self.path)
        element_visitor = self._descend(go_field_name(element.name), member=True)
        element_shape = classify(element, element_visitor.path)
        if element_shape.is_composite:
            raise UnsupportedCompositeListElementError(self.path)
        return element_visitor, element_shape

    def _resolve_map_entries(self, shape: MapShape):
        key, value = shape.key_value(self.path)

        key_visitor = self._descend(go_field_name(key.name), member=True)
        key_shape = classify(key, key_visitor.path)
        if key_shape.is_composite:
            raise UnsupportedCompositeMapKeyError(self.path)

        value_visitor = self._descend(go_field_name(value.name), member=True)
        value_shape = classify(value, value_visitor.path)
        if value_shape.is_composite:
            raise UnsupportedCompositeMapValueError(self.path)

        return (key_visitor, key_shape), (value_visitor, value_shape)

    def _descend(self, field_name: str, member: bool = False) -> "GoStructVisitor":
        path = self.path + (field_name,)
        if self.depth + 1 > self.max_depth:
            raise SchemaDepthExceededError(self.max_depth, path)
        return GoStructVisitor(
            path=path, depth=self.depth + 1, max_depth=self.max_depth, member=member
        )

    def _wrap(self, type_str: str, node: SchemaNode) -> str:
        if node.repetition_type == FieldRepetitionType.OPTIONAL:
            return "*" + type_str
        if node.repetition_type == FieldRepetitionType.REPEATED and not self.member:
            return "[]" + type_str
        return type_str


class GoStructRenderer:
    """Renders a Parquet schema tree as a Go struct declaration.

    This is the main interface for Go struct generation. The tree is only
    read, so one renderer (or several) may work on the same tree at once.
    """

    def __init__(self, root: SchemaNode, settings: Optional[Settings] = None):
        """Initialize the renderer.

        Args:
            root: Root group of the schema tree
            settings: Rendering settings; environment defaults when omitted
        """
        self.root = root
        self.settings = settings if settings is not None else Settings()

    @property
    def root_name(self) -> str:
        """Go name declared for the root type."""
        if self.settings.root_name:
            return self.settings.root_name
        if not self.root.name:
            raise InvalidFieldNameError("schema root has an empty name")
        return go_field_name(self.root.name)

    def render(self) -> str:
        """Render the root group as a compact ``struct { ... }`` type.

        Returns:
            Go source of the struct type, one element per line, unindented

        Raises:
            SchemaError: If the tree is malformed or cannot be expressed as a
                Go struct
        """
        path = (go_field_name(self.root.name),)
        shape = classify(self.root, path)
        if not isinstance(shape, StructShape):
            raise SchemaError("schema root must be a group", path)

        # settings from model_copy are not validated
        max_depth = min(self.settings.max_depth, MAX_DEPTH_LIMIT)
        visitor = GoStructVisitor(path=path, depth=0, max_depth=max_depth)
        return visitor.struct_body(shape)

    def render_declaration(self) -> str:
        """Render ``type <RootName> struct { ... }``, indented if configured.

        Returns:
            Go source of the type declaration
        """
        declaration = f"type {self.root_name} {self.render()}"
        if self.settings.pretty:
            return indent_go_source(declaration)
        return declaration


def render_go_struct(root: SchemaNode, settings: Optional[Settings] = None) -> str:
    """Convenience function to render a Go type declaration for a schema tree.

    Args:
        root: Root group of the schema tree
        settings: Rendering settings; environment defaults when omitted

    Returns:
        Go source of the type declaration
    """
    return GoStructRenderer(root, settings).render_declaration()
