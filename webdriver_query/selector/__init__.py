"""
Selector construction - attribute-map queries to CSS and XPath.

Public API:
  - build_css / build_xpath and their ancestry variants
  - contains_regex / all_regex / query_with_ancestry_has_regex
  - parse_query(text) -> AttributeQuery | AncestryQuery
  - plan_query(query, language) -> QueryPlan

Author: Vasiliy Zdanovskiy
email: vasilyvz@gmail.com
"""

from .ast import (
    AncestryQuery,
    AttributeQuery,
    Index,
    Literal,
    Pattern,
    Predicate,
    PredicateKind,
    QueryValue,
    Scope,
)
from .compiler import (
    all_regex,
    build_css,
    build_css_attrs,
    build_css_with_ancestry,
    build_xpath,
    build_xpath_attrs,
    build_xpath_with_ancestry,
    contains_regex,
    query_with_ancestry_has_regex,
)
from .parser import parse_ancestry_query, parse_attribute_query, parse_query
from .planner import MatchStrategy, QueryPlan, filter_elements, plan_query

__all__ = [
    "AncestryQuery",
    "AttributeQuery",
    "Index",
    "Literal",
    "Pattern",
    "Predicate",
    "PredicateKind",
    "QueryValue",
    "Scope",
    "all_regex",
    "build_css",
    "build_css_attrs",
    "build_css_with_ancestry",
    "build_xpath",
    "build_xpath_attrs",
    "build_xpath_with_ancestry",
    "contains_regex",
    "query_with_ancestry_has_regex",
    "parse_ancestry_query",
    "parse_attribute_query",
    "parse_query",
    "MatchStrategy",
    "QueryPlan",
    "filter_elements",
    "plan_query",
]
