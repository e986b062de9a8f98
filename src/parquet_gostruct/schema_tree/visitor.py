"""Visitor pattern for traversing classified schema tree nodes.

This module provides the abstract visitor interface that renderers implement.
Dispatch happens on the shape produced by the classifier rather than on the
raw node, so every visitor sees the same four cases.
"""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from parquet_gostruct.schema_tree.shapes import (
        ListShape,
        MapShape,
        ScalarShape,
        StructShape,
    )


class ShapeVisitor(ABC):
    """Abstract base class for schema tree visitors.

    Implementations of this class receive one call per classified node and
    decide themselves whether and how to descend into children.
    """

    @abstractmethod
    def visit_scalar(self, shape: "ScalarShape") -> str:
        """Visit a primitive column.

        Args:
            shape: The scalar shape to visit

        Returns:
            String representation or processed result
        """
        pass

    @abstractmethod
    def visit_struct(self, shape: "StructShape") -> str:
        """Visit a group without container annotation.

        Args:
            shape: The struct shape to visit

        Returns:
            String representation or processed result
        """
        pass

    @abstractmethod
    def visit_list(self, shape: "ListShape") -> str:
        """Visit a LIST container.

        Args:
            shape: The list shape to visit

        Returns:
            String representation or processed result
        """
        pass

    @abstractmethod
    def visit_map(self, shape: "MapShape") -> str:
        """Visit a MAP container.

        Args:
            shape: The map shape to visit

        Returns:
            String representation or processed result
        """
        pass
