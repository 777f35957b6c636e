"""
Configuration management for the query tool.

Provides the configuration schema, validation and JSON loading.

Author: Vasiliy Zdanovskiy
email: vasilyvz@gmail.com
"""

import json
import logging
from pathlib import Path
from typing import Optional, Union

from pydantic import BaseModel, Field, ValidationError, field_validator

from .constants import (
    DEFAULT_ELLIPSIS,
    DEFAULT_LINE_BREAK_REPLACEMENT,
    DEFAULT_TRUNCATE_LENGTH,
    SCOPE_GLOBAL,
    SCOPE_LOCAL,
    SUPPORTED_LANGUAGES,
)
from .exceptions import ConfigurationError

logger = logging.getLogger(__name__)

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class CompilerConfig(BaseModel):
    """Defaults used when compiling queries."""

    model_config = {"extra": "forbid"}  # Reject unknown fields

    default_scope: str = Field(
        default=SCOPE_GLOBAL, description="XPath scope: global or local"
    )
    default_language: str = Field(
        default="css", description="Selector language: css or xpath"
    )

    @field_validator("default_scope")
    @classmethod
    def validate_scope(cls, v: str) -> str:
        """Validate scope name."""
        v = v.strip().lower()
        if v not in (SCOPE_GLOBAL, SCOPE_LOCAL):
            raise ValueError(f"Unknown scope: {v}")
        return v

    @field_validator("default_language")
    @classmethod
    def validate_language(cls, v: str) -> str:
        """Validate selector language."""
        v = v.strip().lower()
        if v not in SUPPORTED_LANGUAGES:
            raise ValueError(f"Unsupported selector language: {v}")
        return v


class FormatterConfig(BaseModel):
    """Diagnostic formatter settings."""

    model_config = {"extra": "forbid"}

    truncate_length: int = Field(
        default=DEFAULT_TRUNCATE_LENGTH,
        ge=1,
        description="Maximum characters kept from long text fields",
    )
    ellipsis: str = Field(
        default=DEFAULT_ELLIPSIS, description="Marker appended to truncated text"
    )
    line_break_replacement: str = Field(
        default=DEFAULT_LINE_BREAK_REPLACEMENT,
        description="Replacement for embedded line breaks",
    )


class LoggingConfig(BaseModel):
    """Logging settings."""

    model_config = {"extra": "forbid"}

    level: str = Field(default="WARNING", description="Root log level")

    @field_validator("level")
    @classmethod
    def validate_level(cls, v: str) -> str:
        """Validate log level name."""
        v = v.strip().upper()
        if v not in _LOG_LEVELS:
            raise ValueError(f"Invalid log level: {v}")
        return v


class ToolConfig(BaseModel):
    """Top-level configuration."""

    model_config = {"extra": "forbid"}

    compiler: CompilerConfig = Field(default_factory=CompilerConfig)
    formatter: FormatterConfig = Field(default_factory=FormatterConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def load_config(path: Optional[Union[str, Path]] = None) -> ToolConfig:
    """
    Load configuration from a JSON file.

    Args:
        path: Path to the JSON file; None returns the defaults

    Returns:
        Validated ToolConfig

    Raises:
        ConfigurationError: If the file is missing, is not JSON or is invalid
    """
    if path is None:
        return ToolConfig()

    config_path = Path(path)
    if not config_path.is_file():
        raise ConfigurationError(
            f"Config file not found: {config_path}", path=str(config_path)
        )

    try:
        data = json.loads(config_path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise ConfigurationError(
            f"Invalid JSON in config file {config_path}: {e}", path=str(config_path)
        ) from e

    if not isinstance(data, dict):
        raise ConfigurationError(
            f"Config file {config_path} must contain a JSON object",
            path=str(config_path),
        )

    try:
        config = ToolConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigurationError(
            f"Invalid configuration in {config_path}: {e}",
            path=str(config_path),
            details={"errors": e.errors(include_url=False)},
        ) from e

    logger.debug(f"Loaded configuration from {config_path}")
    return config
