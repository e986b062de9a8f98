"""Builder for converting serialized Parquet schemas to schema tree nodes.

Parquet footers store the schema as a flat, depth-first list of schema
elements where each group announces how many children follow it. This module
folds that list into a ``SchemaNode`` tree and loads trees that were saved as
JSON.
"""

import json
import logging
from pathlib import Path
from typing import Any, Iterator, List, Mapping, Optional, Sequence, Union

from pydantic import ConfigDict, Field, ValidationError

from parquet_gostruct.config import MAX_DEPTH_LIMIT
from parquet_gostruct.errors import SchemaBuildError
from parquet_gostruct.schema_tree.nodes import SchemaNode

logger = logging.getLogger(__name__)


class SchemaElement(SchemaNode):
    """One entry of the flat footer schema list.

    Carries the same attributes as a ``SchemaNode`` plus ``num_children``;
    its own ``children`` are never populated.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    num_children: Optional[int] = Field(
        default=None, description="Number of elements that make up this group's children"
    )


ElementInput = Union[SchemaElement, Mapping[str, Any]]


class SchemaTreeBuilder:
    """Builds schema trees from footer schema elements or JSON documents."""

    @staticmethod
    def build_from_elements(elements: Sequence[ElementInput]) -> SchemaNode:
        """Fold a flat, depth-first element list into a tree.

        Args:
            elements: Footer schema elements, root first. Dicts are validated
                into ``SchemaElement``.

        Returns:
            The root SchemaNode

        Raises:
            SchemaBuildError: If the list is empty, truncated, has trailing
                elements, nests too deeply, or an element does not validate
        """
        if not elements:
            raise SchemaBuildError("schema has no elements")

        try:
            parsed = [
                e if isinstance(e, SchemaElement) else SchemaElement.model_validate(e)
                for e in elements
            ]
        except ValidationError as e:
            raise SchemaBuildError(f"invalid schema element: {e}") from e

        stream = iter(enumerate(parsed))
        root = SchemaTreeBuilder._build_node(stream, len(parsed))

        remaining = sum(1 for _ in stream)
        if remaining:
            raise SchemaBuildError(
                f"{remaining} schema element(s) left over after root {root.name!r} was complete"
            )

        logger.debug("Built schema tree %r from %d elements", root.name, len(parsed))
        return root

    @staticmethod
    def _build_node(stream: Iterator, total: int, depth: int = 0) -> SchemaNode:
        """Consume one element and, recursively, all of its children.

        Args:
            stream: Iterator over (index, SchemaElement) pairs
            total: Number of elements in the whole list, for error messages
            depth: Nesting level of the element about to be consumed

        Returns:
            A SchemaNode for the consumed element
        """
        try:
            _, element = next(stream)
        except StopIteration:
            raise SchemaBuildError(
                f"schema ended early: a group announced more children than the "
                f"{total} element(s) provided"
            ) from None

        if depth > MAX_DEPTH_LIMIT:
            raise SchemaBuildError(
                f"schema element {element.name!r} nests deeper than {MAX_DEPTH_LIMIT} levels"
            )

        children: List[SchemaNode] = []
        for _ in range(element.num_children or 0):
            children.append(SchemaTreeBuilder._build_node(stream, total, depth + 1))

        attributes = element.model_dump(exclude={"num_children", "children"})
        return SchemaNode(**attributes, children=children)

    @staticmethod
    def build_from_dict(document: Any) -> SchemaNode:
        """Build a tree from decoded JSON.

        Args:
            document: Either a nested tree object or a list of flat footer
                elements

        Returns:
            The root SchemaNode

        Raises:
            SchemaBuildError: If the document is neither form or fails validation
        """
        if isinstance(document, list):
            return SchemaTreeBuilder.build_from_elements(document)

        if not isinstance(document, dict):
            raise SchemaBuildError(
                f"expected a schema object or element list, got {type(document).__name__}"
            )

        try:
            return SchemaNode.model_validate(document)
        except ValidationError as e:
            raise SchemaBuildError(f"invalid schema tree: {e}") from e

    @staticmethod
    def load_json(path: Union[str, Path]) -> SchemaNode:
        """Load a schema tree saved as JSON.

        Args:
            path: File holding a nested tree object or a flat element list

        Returns:
            The root SchemaNode

        Raises:
            SchemaBuildError: If the file is not UTF-8 JSON or not a valid schema
            OSError: If the file cannot be read
        """
        path = Path(path)
        logger.debug("Loading schema from %s", path)

        try:
            document = json.loads(path.read_text(encoding="utf-8"))
        except UnicodeDecodeError as e:
            raise SchemaBuildError(f"{path} is not UTF-8 text: {e}") from e
        except json.JSONDecodeError as e:
            raise SchemaBuildError(f"{path} is not valid JSON: {e}") from e
        except RecursionError as e:
            raise SchemaBuildError(f"{path} nests too deeply to decode") from e

        return SchemaTreeBuilder.build_from_dict(document)
