"""Command-line interface for parquet-gostruct.

This module provides a CLI that loads a serialized Parquet schema (a nested
schema tree or the flat footer element list, as JSON) and prints the matching
Go struct declaration.
"""

import logging
from pathlib import Path
from typing import NoReturn, Optional

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from typing_extensions import Annotated

from parquet_gostruct.config import MAX_DEPTH_LIMIT, Settings, load_settings
from parquet_gostruct.errors import SchemaBuildError, SchemaError
from parquet_gostruct.generator.go_struct import GoStructRenderer
from parquet_gostruct.schema_tree.builder import SchemaTreeBuilder

app = typer.Typer(
    name="parquet-gostruct",
    help="Render Parquet schemas as Go struct declarations",
    add_completion=False,
)
console = Console(stderr=True)

logger = logging.getLogger(__name__)


def configure_logging(verbose: bool) -> None:
    """Send log records to stderr through rich, at DEBUG when verbose."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )


def get_settings(
    max_depth: Optional[int] = None,
    root_name: Optional[str] = None,
    compact: bool = False,
) -> Settings:
    """Get settings from environment, overridden by CLI options.

    Args:
        max_depth: Override the maximum nesting depth
        root_name: Override the declared type name
        compact: Disable gofmt-style indentation

    Returns:
        Settings instance
    """
    settings = load_settings()

    if max_depth is not None:
        settings.max_depth = max_depth
    if root_name:
        settings.root_name = root_name
    if compact:
        settings.pretty = False

    return settings


def fail(message: str) -> NoReturn:
    console.print(f"[red]Error:[/red] {escape(message)}", soft_wrap=True)
    raise typer.Exit(1)


@app.command(name="go-struct")
def go_struct(
    schema: Annotated[Path, typer.Argument(help="Schema JSON (nested tree or footer element list)")],
    output: Annotated[
        Optional[Path],
        typer.Option("--output", "-o", help="Output file path (stdout if not specified)"),
    ] = None,
    compact: Annotated[
        bool, typer.Option("--compact", help="One element per line, without indentation")
    ] = False,
    max_depth: Annotated[
        Optional[int],
        typer.Option("--max-depth", min=1, max=MAX_DEPTH_LIMIT, help="Maximum nesting depth"),
    ] = None,
    root_name: Annotated[
        Optional[str], typer.Option("--root-name", help="Type name to declare")
    ] = None,
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Log progress")] = False,
) -> None:
    """Print the Go struct declaration for a Parquet schema.

    Example:
        parquet-gostruct go-struct schema.json

        parquet-gostruct go-struct schema.json --compact --output schema.go
    """
    configure_logging(verbose)
    try:
        settings = get_settings(max_depth, root_name, compact)
    except ValidationError as e:
        fail(f"invalid settings: {e}")
    logger.debug("Using %r", settings)

    try:
        root = SchemaTreeBuilder.load_json(schema)
        declaration = GoStructRenderer(root, settings).render_declaration()
        if output:
            output.write_text(declaration + "\n", encoding="utf-8")
    except (SchemaBuildError, SchemaError, OSError) as e:
        fail(str(e))

    if output:
        console.print(f"[green]✓[/green] Go struct written to {escape(str(output))}")
    else:
        typer.echo(declaration)


@app.command()
def check(
    schema: Annotated[Path, typer.Argument(help="Schema JSON (nested tree or footer element list)")],
    max_depth: Annotated[
        Optional[int],
        typer.Option("--max-depth", min=1, max=MAX_DEPTH_LIMIT, help="Maximum nesting depth"),
    ] = None,
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Log progress")] = False,
) -> None:
    """Check whether a Parquet schema can be expressed as a Go struct.

    Exits with status 1 and the reason when it cannot.

    Example:
        parquet-gostruct check schema.json
    """
    configure_logging(verbose)
    try:
        settings = get_settings(max_depth)
    except ValidationError as e:
        fail(f"invalid settings: {e}")

    try:
        root = SchemaTreeBuilder.load_json(schema)
        GoStructRenderer(root, settings).render()
    except (SchemaBuildError, SchemaError, OSError) as e:
        fail(str(e))

    console.print(f"[green]✓[/green] {escape(str(schema))} can be rendered as a Go struct")


def main() -> None:
    """Main entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
