"""Configuration management for parquet-gostruct.

This module provides a pydantic-based settings object that loads rendering
options from environment variables.
"""

from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_MAX_DEPTH = 64
MAX_DEPTH_LIMIT = 128


class Settings(BaseSettings):
    """Rendering settings for parquet-gostruct.

    This class uses pydantic-settings to load configuration from environment
    variables. Every setting can be overridden by the matching variable or by
    passing it to the constructor.

    Environment Variables:
        PARQUET_GOSTRUCT_MAX_DEPTH: Deepest field nesting the renderer accepts
            (1 to MAX_DEPTH_LIMIT)
        PARQUET_GOSTRUCT_PRETTY: Indent generated source gofmt-style (true/false)
        PARQUET_GOSTRUCT_ROOT_NAME: Type name to declare instead of the schema root name

    Example:
        >>> settings = Settings(max_depth=16)
        >>> settings.pretty
        True
    """

    model_config = SettingsConfigDict(
        env_prefix="PARQUET_GOSTRUCT_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        validate_assignment=True,
    )

    max_depth: int = Field(
        default=DEFAULT_MAX_DEPTH,
        ge=1,
        le=MAX_DEPTH_LIMIT,
        description="Maximum nesting depth before rendering fails",
    )

    pretty: bool = Field(
        default=True,
        description="Indent generated Go source with tabs",
    )

    root_name: Optional[str] = Field(
        default=None,
        description="Declared type name; defaults to the Go name of the schema root",
    )

    def __repr__(self) -> str:
        return (
            f"Settings("
            f"max_depth={self.max_depth!r}, "
            f"pretty={self.pretty!r}, "
            f"root_name={self.root_name!r}"
            f")"
        )


def load_settings() -> Settings:
    """Load settings from environment variables.

    Returns:
        A Settings instance with values loaded from the environment.
    """
    return Settings()
