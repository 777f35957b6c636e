"""
Base exception hierarchy for selector construction.

Every error derives from ValueError, so callers that treat a malformed query
as a bad argument keep working.

Author: Vasiliy Zdanovskiy
email: vasilyvz@gmail.com
"""


class SelectorError(ValueError):
    """Base exception for query and selector operations."""

    def __init__(self, message: str, code: str = None, details: dict = None):
        """
        Initialize exception.

        Args:
            message: Human-readable error message
            code: Optional error code for programmatic handling
            details: Optional dictionary with additional error details
        """
        super().__init__(message)
        self.message = message
        self.code = code
        self.details = details or {}


class QueryParseError(SelectorError):
    """Raised when the textual query notation cannot be parsed."""

    def __init__(self, message: str, details: dict = None):
        super().__init__(message, code="QUERY_PARSE_ERROR", details=details)


class InvalidQueryValueError(SelectorError):
    """Raised when a query entry carries a value of the wrong shape."""

    def __init__(self, message: str, field: str = None, details: dict = None):
        """
        Initialize invalid value error.

        Args:
            message: Error message
            field: Optional query key that failed validation
            details: Optional additional details
        """
        super().__init__(message, code="INVALID_QUERY_VALUE", details=details)
        self.field = field


class UnsupportedPredicateError(SelectorError):
    """Raised when a predicate cannot be expressed in the target selector language."""

    def __init__(self, message: str, predicate: str = None, details: dict = None):
        super().__init__(message, code="UNSUPPORTED_PREDICATE", details=details)
        self.predicate = predicate


class InvalidAncestryLevelError(SelectorError):
    """Raised when one level of an ancestry query is not a valid path segment."""

    def __init__(self, message: str, level: int = None, details: dict = None):
        """
        Initialize ancestry level error.

        Args:
            message: Error message
            level: 0-based position of the offending level
            details: Optional additional details
        """
        details = dict(details or {})
        if level is not None:
            details.setdefault("level", level)
        super().__init__(message, code="INVALID_ANCESTRY_LEVEL", details=details)
        self.level = level


class IncompatibleQueryError(SelectorError):
    """
    Raised when a query holds regex values and no structural selector exists.

    Builders normally signal this condition by returning None; the exception
    is used only where there is no such channel.
    """

    def __init__(self, message: str, details: dict = None):
        super().__init__(message, code="INCOMPATIBLE_QUERY", details=details)


class ConfigurationError(SelectorError):
    """Raised when the configuration file cannot be loaded or validated."""

    def __init__(self, message: str, path: str = None, details: dict = None):
        super().__init__(message, code="CONFIGURATION_ERROR", details=details)
        self.path = path
