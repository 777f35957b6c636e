"""
Core building blocks: exceptions, constants and configuration.

Author: Vasiliy Zdanovskiy
email: vasilyvz@gmail.com
"""

from .config import (
    CompilerConfig,
    FormatterConfig,
    LoggingConfig,
    ToolConfig,
    load_config,
)
from .exceptions import (
    ConfigurationError,
    IncompatibleQueryError,
    InvalidAncestryLevelError,
    InvalidQueryValueError,
    QueryParseError,
    SelectorError,
    UnsupportedPredicateError,
)

__all__ = [
    "CompilerConfig",
    "FormatterConfig",
    "LoggingConfig",
    "ToolConfig",
    "load_config",
    "ConfigurationError",
    "IncompatibleQueryError",
    "InvalidAncestryLevelError",
    "InvalidQueryValueError",
    "QueryParseError",
    "SelectorError",
    "UnsupportedPredicateError",
]
