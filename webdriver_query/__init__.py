"""
WebDriver Query Tool

Builds CSS and XPath selectors from declarative attribute-map queries such as
{"tag": "div", "id": "content"}, detects queries that need a regex scan, and
renders driver and element handles as one-line diagnostic strings.

Can be used as a library or via the `wdquery` CLI.

Author: Vasiliy Zdanovskiy
email: vasilyvz@gmail.com
"""

__version__ = "1.0.0"
__author__ = "Vasiliy Zdanovskiy"
__email__ = "vasilyvz@gmail.com"

# Errors
from .core.exceptions import (
    ConfigurationError,
    IncompatibleQueryError,
    InvalidAncestryLevelError,
    InvalidQueryValueError,
    QueryParseError,
    SelectorError,
    UnsupportedPredicateError,
)

# Selector compiler
from .selector import (
    AncestryQuery,
    AttributeQuery,
    MatchStrategy,
    QueryPlan,
    Scope,
    all_regex,
    build_css,
    build_css_attrs,
    build_css_with_ancestry,
    build_xpath,
    build_xpath_attrs,
    build_xpath_with_ancestry,
    contains_regex,
    filter_elements,
    parse_query,
    plan_query,
    query_with_ancestry_has_regex,
)

# Diagnostic formatting
from .printing import (
    Capabilities,
    DriverHandle,
    ElementHandle,
    HandleKind,
    format_driver,
    format_element,
    format_handle,
)

__all__ = [
    # Errors
    "ConfigurationError",
    "IncompatibleQueryError",
    "InvalidAncestryLevelError",
    "InvalidQueryValueError",
    "QueryParseError",
    "SelectorError",
    "UnsupportedPredicateError",
    # Selector compiler
    "AncestryQuery",
    "AttributeQuery",
    "MatchStrategy",
    "QueryPlan",
    "Scope",
    "all_regex",
    "build_css",
    "build_css_attrs",
    "build_css_with_ancestry",
    "build_xpath",
    "build_xpath_attrs",
    "build_xpath_with_ancestry",
    "contains_regex",
    "filter_elements",
    "parse_query",
    "plan_query",
    "query_with_ancestry_has_regex",
    # Formatting
    "Capabilities",
    "DriverHandle",
    "ElementHandle",
    "HandleKind",
    "format_driver",
    "format_element",
    "format_handle",
]
