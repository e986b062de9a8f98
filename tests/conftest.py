"""Shared fixtures for loading schema trees and golden files."""

from pathlib import Path
from typing import Callable

import pytest

from parquet_gostruct.config import Settings
from parquet_gostruct.schema_tree.builder import SchemaTreeBuilder
from parquet_gostruct.schema_tree.nodes import SchemaNode

FIXTURES_DIR = Path(__file__).parent / "fixtures"


@pytest.fixture
def fixtures_dir() -> Path:
    return FIXTURES_DIR


@pytest.fixture
def load_schema() -> Callable[[str], SchemaNode]:
    """Return a loader for schema trees stored under tests/fixtures."""

    def _load(name: str) -> SchemaNode:
        return SchemaTreeBuilder.load_json(FIXTURES_DIR / name)

    return _load


@pytest.fixture
def settings() -> Settings:
    """Settings pinned to defaults so environment variables cannot leak in."""
    return Settings(max_depth=64, pretty=False, root_name=None)
