"""
Selector compiler: attribute-map queries to CSS and XPath strings.

A query holding a regex value has no structural form; the builders return None
for it and callers are expected to route such queries to a regex scan (see
contains_regex, all_regex and query_with_ancestry_has_regex).

Examples:
    build_css("div", {"id": "content"})          -> "div[id='content']"
    build_xpath("a", {"text": "Click"})          -> '//a[text()="Click"]'
    build_xpath_with_ancestry([{"tag": "div", "id": "content"},
                               {"tag": "a", "class": "external"}])
        -> "//div[@id='content']//a[@class='external']"

Author: Vasiliy Zdanovskiy
email: vasilyvz@gmail.com
"""

from __future__ import annotations

import logging
import re
from typing import Any, Optional, Union

from ..core.constants import META_TAGS, WILDCARD_TAG
from ..core.exceptions import (
    IncompatibleQueryError,
    InvalidAncestryLevelError,
    UnsupportedPredicateError,
)
from .ast import (
    AncestryLike,
    AttributeQuery,
    Pattern,
    PredicateKind,
    QueryLike,
    Scope,
    as_ancestry_query,
    as_attribute_query,
    symbol_name,
)

logger = logging.getLogger(__name__)

_SINGLE_QUOTE = "'"
_DOUBLE_QUOTE = '"'

# Line breaks end a CSS string, so they become code-point escapes; NUL is
# not allowed in CSS at all.
_CSS_STRING_ESCAPES = {
    ord("\\"): "\\\\",
    ord(_SINGLE_QUOTE): "\\'",
    ord("\n"): "\\a ",
    ord("\r"): "\\d ",
    ord("\f"): "\\c ",
    ord("\0"): "\\fffd ",
}


# ---------------------------------------------------------------------------
# Quoting
# ---------------------------------------------------------------------------


def _css_string(value: str) -> str:
    return f"'{value.translate(_CSS_STRING_ESCAPES)}'"


def _xpath_literal(value: str, prefer: str = _SINGLE_QUOTE) -> str:
    """
    Quote a value as an XPath 1.0 string literal.

    XPath has no escape sequences: a value holding the preferred quote is
    wrapped in the other one, and a value holding both becomes concat().
    """
    other = _DOUBLE_QUOTE if prefer == _SINGLE_QUOTE else _SINGLE_QUOTE
    if prefer not in value:
        return f"{prefer}{value}{prefer}"
    if other not in value:
        return f"{other}{value}{other}"
    parts = []
    for chunk in re.split(r"(')", value):
        if not chunk:
            continue
        parts.append('"\'"' if chunk == "'" else f"'{chunk}'")
    return f"concat({', '.join(parts)})"


def _tag_name(tag: Any) -> str:
    if tag is None:
        return WILDCARD_TAG
    return symbol_name(tag)


def _reject_pattern(query: AttributeQuery, language: str) -> None:
    patterns = query.patterns()
    if patterns:
        predicate = patterns[0]
        raise IncompatibleQueryError(
            f"{language} cannot match {predicate.name!r} against a regex",
            details={"attribute": predicate.name, "pattern": predicate.value.value},
        )


# ---------------------------------------------------------------------------
# CSS
# ---------------------------------------------------------------------------


def build_css_attrs(attr_val: QueryLike) -> str:
    """
    Build the portion of a CSS query that follows the tag.

    Regex values are checked before any other predicate, so a query that
    holds both a regex and :text raises IncompatibleQueryError.

    Raises:
        IncompatibleQueryError: if a value is a regex
        UnsupportedPredicateError: if the query matches on element text
    """
    query = as_attribute_query(attr_val)
    _reject_pattern(query, "CSS")
    out = []
    for predicate in query:
        if predicate.kind is PredicateKind.TAG:
            continue
        if predicate.kind is PredicateKind.TEXT:
            raise UnsupportedPredicateError(
                "CSS queries do not support checking against the text of an element.",
                predicate=predicate.name,
            )
        if predicate.kind is PredicateKind.INDEX:
            # CSS positions are 1-based
            out.append(f":nth-child({predicate.value.position + 1})")
        else:
            out.append(f"[{predicate.name}={_css_string(predicate.value.value)}]")
    return "".join(out)


def build_css(tag: Any, attr_val: QueryLike) -> Optional[str]:
    """
    Build a complete CSS query for a tag and an attribute map.

    Returns:
        The selector, or None when the query contains a regex value.
    """
    query = as_attribute_query(attr_val)
    if isinstance(tag, (re.Pattern, Pattern)) or query.has_pattern:
        logger.debug("CSS not built: query contains a regex value")
        return None
    return _tag_name(tag) + build_css_attrs(query.without_tag())


def build_css_with_ancestry(v_of_attr_vals: AncestryLike) -> Optional[str]:
    """
    Build a CSS query from queries in ancestor-to-descendant order.

    [{"tag": "div", "id": "content"}, {"tag": "a", "class": "external"}]
    produces "div[id='content'] a[class='external']".
    """
    ancestry = as_ancestry_query(v_of_attr_vals)
    for position, level in enumerate(ancestry):
        _check_no_overrides(level, position)
    if ancestry.has_pattern:
        logger.debug("CSS not built: ancestry query contains a regex value")
        return None
    return " ".join(build_css(level.tag_name, level) for level in ancestry)


# ---------------------------------------------------------------------------
# XPath
# ---------------------------------------------------------------------------


def build_xpath_attrs(attr_val: QueryLike) -> str:
    """
    Build the bracketed portion of an XPath query that follows the tag.

    Raises:
        IncompatibleQueryError: if a value is a regex
    """
    query = as_attribute_query(attr_val)
    _reject_pattern(query, "XPath")
    out = []
    for predicate in query:
        if predicate.kind is PredicateKind.TAG:
            continue
        if predicate.kind is PredicateKind.TEXT:
            text = _xpath_literal(predicate.value.value, prefer=_DOUBLE_QUOTE)
            out.append(f"[text()={text}]")
        elif predicate.kind is PredicateKind.INDEX:
            # indices are 0-based here, XPath positions 1-based
            out.append(f"[{predicate.value.position + 1}]")
        else:
            out.append(f"[@{predicate.name}={_xpath_literal(predicate.value.value)}]")
    return "".join(out)


def build_xpath(
    tag: Any, attr_val: QueryLike, prefix: Union[Scope, str] = Scope.GLOBAL
) -> Optional[str]:
    """
    Build XPath for a tag and an attribute map.

    Args:
        tag: element name; None matches any element
        attr_val: attribute map
        prefix: Scope.GLOBAL for an absolute search, Scope.LOCAL for one
            relative to the context node

    Returns:
        The XPath, or None when the query contains a regex value.
    """
    scope = Scope.coerce(prefix)
    query = as_attribute_query(attr_val)
    if isinstance(tag, (re.Pattern, Pattern)) or query.has_pattern:
        logger.debug("XPath not built: query contains a regex value")
        return None
    return f"{scope.prefix}//{_tag_name(tag)}{build_xpath_attrs(query.without_tag())}"


def build_xpath_with_ancestry(
    v_of_attr_vals: AncestryLike, prefix: Union[Scope, str] = Scope.GLOBAL
) -> Optional[str]:
    """
    Build XPath from queries in ancestor-to-descendant order.

    [{"tag": "div", "id": "content"}, {"tag": "a", "class": "external"}]
    produces "//div[@id='content']//a[@class='external']".
    """
    scope = Scope.coerce(prefix)
    ancestry = as_ancestry_query(v_of_attr_vals)
    for position, level in enumerate(ancestry):
        _check_no_overrides(level, position)
        _check_no_meta_tag(level, position)
    if ancestry.has_pattern:
        logger.debug("XPath not built: ancestry query contains a regex value")
        return None
    fragments = []
    for position, level in enumerate(ancestry):
        level_scope = scope if position == 0 else Scope.GLOBAL
        fragments.append(build_xpath(level.tag_name, level, level_scope))
    return "".join(fragments)


def _check_no_overrides(level: AttributeQuery, position: int) -> None:
    keys = level.override_keys
    if keys:
        raise InvalidAncestryLevelError(
            "Hierarchical queries do not support the use of :css or :xpath entries.",
            level=position,
            details={"keys": list(keys)},
        )


def _check_no_meta_tag(level: AttributeQuery, position: int) -> None:
    tag = level.tag
    if tag is not None and not isinstance(tag, Pattern) and tag.value in META_TAGS:
        raise InvalidAncestryLevelError(
            'Hierarchical queries do not support the use of "meta" tags such as '
            + ", ".join(f":{name}" for name in META_TAGS)
            + ".",
            level=position,
            details={"tag": tag.value},
        )


# ---------------------------------------------------------------------------
# Regex detection
# ---------------------------------------------------------------------------


def contains_regex(m: QueryLike) -> bool:
    """Check if any value of a query is a regex."""
    return as_attribute_query(m).has_pattern


def all_regex(m: QueryLike) -> bool:
    """Check if a query is non-empty and all of its values are regexes."""
    return as_attribute_query(m).all_patterns


def query_with_ancestry_has_regex(v_of_ms: AncestryLike) -> bool:
    """Check if any level of an ancestry query holds a regex value."""
    return as_ancestry_query(v_of_ms).has_pattern
