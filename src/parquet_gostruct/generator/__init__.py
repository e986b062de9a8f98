"""Go source generation modules."""

from parquet_gostruct.generator.go_struct import (
    GoStructRenderer,
    GoStructVisitor,
    render_go_struct,
)

__all__ = ["GoStructRenderer", "GoStructVisitor", "render_go_struct"]
