"""parquet-gostruct - Render Parquet schemas as Go struct declarations."""

from parquet_gostruct.config import Settings, load_settings
from parquet_gostruct.errors import SchemaBuildError, SchemaError
from parquet_gostruct.generator.go_struct import GoStructRenderer, render_go_struct
from parquet_gostruct.schema_tree.builder import SchemaTreeBuilder
from parquet_gostruct.schema_tree.classifier import classify
from parquet_gostruct.schema_tree.nodes import SchemaNode

__version__ = "0.1.0"

__all__ = [
    "Settings",
    "load_settings",
    "SchemaError",
    "SchemaBuildError",
    "GoStructRenderer",
    "render_go_struct",
    "SchemaTreeBuilder",
    "classify",
    "SchemaNode",
]
